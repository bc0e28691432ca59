from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType

FINDINGS_EXPERT = "You are an expert audit professional experienced in writing audit findings to IIA standards."
FINDING_LABELS = ("Finding Title", "Audit Type", "Business Unit", "Audit Scope")
FINDING_ATTRIBUTES = (
    ("severity", "Severity"),
    ("status", "Status"),
    ("control_reference", "Related Control"),
    ("risk_reference", "Related Risk"),
    ("owner", "Finding Owner"),
)

_ENTRIES: dict[FieldType, tuple[str, str, tuple[str, ...], tuple[int, int]]] = {
    FieldType.FINDING_DESCRIPTION: (
        "Generate an audit finding description",
        "finding description",
        (
            "Follow the condition, criteria, cause, effect structure",
            "State facts objectively without assigning blame",
        ),
        (150, 300),
    ),
    FieldType.FINDING_ANALYSIS: (
        "Generate an analysis of the audit finding",
        "finding analysis",
        ("Explain why the condition occurred and how widespread it is",),
        (200, 400),
    ),
    FieldType.FINDING_IMPACT: (
        "Generate an impact statement for the audit finding",
        "impact statement",
        ("Describe financial, operational, regulatory, and reputational consequences",),
        (100, 250),
    ),
    FieldType.FINDING_RECOMMENDATIONS: (
        "Generate recommendations addressing the audit finding",
        "recommendations",
        (
            "Provide specific, actionable, and cost-effective recommendations",
            "Address the root cause, not only the symptom",
        ),
        (150, 300),
    ),
    FieldType.FINDING_ACTION_PLAN: (
        "Generate a management action plan",
        "action plan",
        ("List actions with owners, target dates, and success measures",),
        (150, 300),
    ),
    FieldType.FINDING_RISK_ASSESSMENT: (
        "Generate a risk assessment of the audit finding",
        "risk assessment",
        ("Rate likelihood and impact and justify the overall rating",),
        (150, 300),
    ),
    FieldType.FINDING_ROOT_CAUSE: (
        "Generate a root cause analysis",
        "root cause analysis",
        ("Apply the five whys technique and categorize causes as people, process, or technology",),
        (150, 300),
    ),
    FieldType.FINDING_EVIDENCE: (
        "Generate a description of supporting audit evidence",
        "evidence description",
        ("Describe the evidence obtained, sampling approach, and how it supports the conclusion",),
        (100, 250),
    ),
    FieldType.FINDING_PRIORITY: (
        "Generate a priority rating justification",
        "priority justification",
        ("Assign critical, high, medium, or low priority and explain the rationale",),
        (50, 150),
    ),
    FieldType.FINDING_TIMELINE: (
        "Generate a remediation timeline",
        "remediation timeline",
        ("Propose milestones proportionate to the finding severity",),
        (100, 200),
    ),
    FieldType.FINDING_ASSIGNEE: (
        "Recommend the appropriate owner for remediating the finding",
        "owner recommendation",
        ("Identify the accountable role and supporting functions and justify the choice",),
        (50, 150),
    ),
    FieldType.FINDING_FOLLOW_UP: (
        "Generate follow-up audit procedures",
        "follow-up procedures",
        ("Define the testing needed to validate remediation and close the finding",),
        (100, 250),
    ),
}

PROMPTS = {
    field_type: PromptSpec(
        persona=FINDINGS_EXPERT,
        task=task,
        output=output,
        requirements=requirements,
        words=words,
        heading="Finding Information",
        labels=FINDING_LABELS,
        attributes=FINDING_ATTRIBUTES,
    )
    for field_type, (task, output, requirements, words) in _ENTRIES.items()
}
