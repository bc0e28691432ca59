from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType

BCP_EXPERT = (
    "You are an expert business continuity professional with deep knowledge of "
    "ISO 22301 and BCI Good Practice Guidelines."
)
BCP_LABELS = ("Plan Name", "Plan Type", "Business Unit", "Scope")
BCP_ATTRIBUTES = (
    ("global_region", "Region"),
    ("criticality_level", "Criticality"),
    ("stakeholders", "Stakeholders"),
    ("regulatory_compliance", "Regulatory Requirements"),
    ("budget_estimate", "Budget Estimate"),
)

# field type -> (task, output, requirements, word range)
_ENTRIES: dict[FieldType, tuple[str, str, tuple[str, ...], tuple[int, int]]] = {
    FieldType.BCP_PLAN: (
        "Generate a complete business continuity plan",
        "business continuity plan",
        (
            "Cover plan objectives, activation criteria, response teams, recovery procedures, and return to normal operations",
            "Reference recovery time and recovery point objectives for critical functions",
            "Include communication, testing, and maintenance arrangements",
        ),
        (600, 1200),
    ),
    FieldType.BCP_DESCRIPTION: (
        "Generate a business continuity plan description",
        "description text",
        (
            'Summarize the purpose of "{subject}" and the disruptions it addresses',
            "Identify the critical services protected by the plan",
        ),
        (100, 250),
    ),
    FieldType.BCP_SCOPE: (
        "Generate a business continuity plan scope",
        "scope text",
        (
            "Define the locations, functions, systems, and personnel covered",
            "State explicit exclusions and interdependencies with other plans",
        ),
        (100, 250),
    ),
    FieldType.BCP_BUSINESS_IMPACT_ANALYSIS: (
        "Generate a business impact analysis",
        "business impact analysis",
        (
            "Identify critical business functions and their dependencies",
            "Estimate financial, operational, regulatory, and reputational impacts over time",
            "Propose maximum tolerable downtime, RTO, and RPO for each function",
        ),
        (400, 800),
    ),
    FieldType.BCP_RISK_ASSESSMENT: (
        "Generate a continuity risk assessment",
        "risk assessment text",
        (
            "Identify threats such as natural disasters, cyber attacks, supplier failure, and pandemics",
            "Rate likelihood and impact for each threat",
            "Recommend mitigation measures for the highest risks",
        ),
        (300, 600),
    ),
    FieldType.BCP_RECOVERY_STRATEGIES: (
        "Generate recovery strategies",
        "recovery strategies",
        (
            "Describe strategies for people, premises, technology, information, and suppliers",
            "Relate each strategy to the recovery objectives of critical functions",
            "Note cost and implementation considerations",
        ),
        (300, 600),
    ),
    FieldType.BCP_RESOURCE_REQUIREMENTS: (
        "Generate resource requirements",
        "resource requirements",
        (
            "List staff, equipment, technology, facilities, and third-party resources needed for recovery",
            "Indicate when each resource is needed during the recovery timeline",
        ),
        (200, 400),
    ),
    FieldType.BCP_COMMUNICATION_PLAN: (
        "Generate a crisis communication plan",
        "communication plan",
        (
            "Identify internal and external audiences and their communication channels",
            "Define spokespersons, approval workflow, and message templates",
            "Include notification timelines for regulators and key customers",
        ),
        (250, 500),
    ),
    FieldType.BCP_TESTING_SCHEDULE: (
        "Generate a plan testing schedule",
        "testing schedule",
        (
            "Propose tabletop, walkthrough, simulation, and full interruption tests",
            "Assign frequency, participants, and success criteria to each test",
        ),
        (200, 400),
    ),
    FieldType.BCP_MAINTENANCE_SCHEDULE: (
        "Generate a plan maintenance schedule",
        "maintenance schedule",
        (
            "Define review cycles, triggers for ad hoc updates, and ownership",
            "Include version control and approval steps",
        ),
        (150, 300),
    ),
    FieldType.BCP_CRITICAL_FUNCTION_DESCRIPTION: (
        "Generate a critical business function description",
        "critical function description",
        (
            "Describe the function, its outputs, and who depends on it",
            "List upstream and downstream dependencies including systems and suppliers",
            "State the impact of its interruption over time",
        ),
        (150, 300),
    ),
    FieldType.BCP_RECOVERY_STRATEGY: (
        "Generate a recovery strategy for a single critical function",
        "recovery strategy",
        (
            "Describe step-by-step recovery actions and responsible roles",
            "Include workaround procedures and required resources",
            "State how the strategy meets the recovery time objective",
        ),
        (200, 400),
    ),
    FieldType.BCP_TESTING_SCENARIO: (
        "Generate a realistic continuity testing scenario",
        "testing scenario",
        (
            "Describe the disruption narrative and the injects that will be introduced",
            "Define exercise objectives, participants, and evaluation criteria",
        ),
        (200, 400),
    ),
}

PROMPTS = {
    field_type: PromptSpec(
        persona=BCP_EXPERT,
        task=task,
        output=output,
        requirements=requirements,
        words=words,
        heading="Business Continuity Plan Information",
        labels=BCP_LABELS,
        attributes=BCP_ATTRIBUTES,
    )
    for field_type, (task, output, requirements, words) in _ENTRIES.items()
}
