from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType

RESILIENCE_EXPERT = (
    "You are an expert operational resilience professional familiar with DORA, "
    "the Basel operational resilience principles and ISO 22316."
)
RESILIENCE_LABELS = ("Title", "Assessment Type", "Business Unit", "Scope")
RESILIENCE_ATTRIBUTES = (
    ("important_business_services", "Important Business Services"),
    ("impact_tolerance", "Impact Tolerance"),
    ("dependencies", "Key Dependencies"),
)

_ENTRIES: dict[FieldType, tuple[str, str, tuple[str, ...], tuple[int, int]]] = {
    FieldType.RESILIENCE_ASSESSMENT: (
        "Generate an operational resilience assessment",
        "resilience assessment",
        (
            "Identify important business services and their impact tolerances",
            "Assess the ability to remain within tolerance under severe but plausible scenarios",
        ),
        (400, 800),
    ),
    FieldType.RESILIENCE_STRATEGY: (
        "Generate an operational resilience strategy",
        "resilience strategy",
        ("Define strategic objectives, investment priorities, and governance",),
        (300, 600),
    ),
    FieldType.CRISIS_MANAGEMENT_PLAN: (
        "Generate a crisis management plan",
        "crisis management plan",
        ("Define crisis team structure, decision authority, escalation, and stakeholder communication",),
        (400, 800),
    ),
    FieldType.BUSINESS_IMPACT_ANALYSIS: (
        "Generate a business impact analysis",
        "business impact analysis",
        ("Quantify impacts over time for each important business service",),
        (400, 800),
    ),
    FieldType.RECOVERY_STRATEGIES: (
        "Generate recovery strategies",
        "recovery strategies",
        ("Describe recovery options per dependency type and how they meet impact tolerances",),
        (300, 600),
    ),
    FieldType.RESILIENCE_METRICS: (
        "Generate resilience metrics",
        "resilience metrics",
        ("Define key risk and performance indicators with thresholds and data sources",),
        (200, 400),
    ),
    FieldType.SCENARIO_ANALYSIS: (
        "Generate a severe but plausible scenario analysis",
        "scenario analysis",
        ("Describe the scenario, its propagation through dependencies, and the expected outcome",),
        (300, 600),
    ),
    FieldType.RESILIENCE_FRAMEWORK: (
        "Generate an operational resilience framework",
        "resilience framework",
        ("Cover governance, mapping, tolerance setting, testing, and continuous improvement",),
        (400, 800),
    ),
    FieldType.CAPACITY_ASSESSMENT: (
        "Generate a capacity assessment",
        "capacity assessment",
        ("Assess people, technology, and supplier capacity under stress conditions",),
        (200, 400),
    ),
    FieldType.ADAPTABILITY_PLAN: (
        "Generate an adaptability plan",
        "adaptability plan",
        ("Describe how the organization detects change and adapts processes, technology, and staffing",),
        (200, 400),
    ),
    FieldType.RESILIENCE_MONITORING: (
        "Generate a resilience monitoring approach",
        "monitoring approach",
        ("Define monitoring activities, reporting lines, and escalation thresholds",),
        (200, 400),
    ),
    FieldType.CONTINUOUS_IMPROVEMENT: (
        "Generate a continuous improvement plan",
        "continuous improvement plan",
        ("Describe how lessons from incidents and tests feed into improvement actions",),
        (200, 400),
    ),
}

PROMPTS = {
    field_type: PromptSpec(
        persona=RESILIENCE_EXPERT,
        task=task,
        output=output,
        requirements=requirements,
        words=words,
        heading="Resilience Information",
        labels=RESILIENCE_LABELS,
        attributes=RESILIENCE_ATTRIBUTES,
    )
    for field_type, (task, output, requirements, words) in _ENTRIES.items()
}
