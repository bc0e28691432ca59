from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType

SUPPLY_CHAIN_EXPERT = "You are an expert supply chain risk management professional."
SUPPLY_CHAIN_LABELS = ("Title", "Supplier Type", "Business Unit", "Scope")
SUPPLY_CHAIN_ATTRIBUTES = (
    ("suppliers", "Key Suppliers"),
    ("tier", "Supplier Tier"),
    ("geographies", "Geographies"),
    ("spend", "Annual Spend"),
)

_ENTRIES: dict[FieldType, tuple[str, str, tuple[str, ...], tuple[int, int]]] = {
    FieldType.SUPPLY_CHAIN_RISK: (
        "Generate a supply chain risk overview",
        "risk overview",
        ("Cover geopolitical, financial, operational, cyber, ESG, and concentration risks",),
        (300, 600),
    ),
    FieldType.SUPPLY_CHAIN_RISK_ASSESSMENT: (
        "Generate a supply chain risk assessment",
        "risk assessment",
        (
            "Rate likelihood and impact per risk category",
            "Identify critical single-source dependencies",
        ),
        (400, 800),
    ),
    FieldType.VENDOR_EVALUATION_CRITERIA: (
        "Generate supplier evaluation criteria",
        "evaluation criteria",
        ("Define weighted criteria for quality, cost, delivery, risk, and sustainability",),
        (200, 400),
    ),
    FieldType.RISK_MITIGATION_STRATEGIES: (
        "Generate supply chain risk mitigation strategies",
        "mitigation strategies",
        ("Cover dual sourcing, safety stock, contractual protections, and supplier development",),
        (300, 600),
    ),
    FieldType.SUPPLY_CHAIN_MAPPING: (
        "Generate a supply chain mapping narrative",
        "mapping narrative",
        ("Describe tiers, flows of goods and information, and critical nodes",),
        (300, 600),
    ),
    FieldType.VENDOR_TIER_CLASSIFICATION: (
        "Generate a supplier tier classification",
        "tier classification",
        ("Define classification criteria and assign suppliers to tiers with rationale",),
        (200, 400),
    ),
    FieldType.RISK_PROPAGATION_ANALYSIS: (
        "Generate a risk propagation analysis",
        "propagation analysis",
        ("Explain how a disruption at one node cascades through downstream tiers",),
        (300, 600),
    ),
    FieldType.SUPPLY_CHAIN_RESILIENCE_SCORING: (
        "Generate a supply chain resilience scoring rationale",
        "resilience scoring",
        ("Score redundancy, visibility, flexibility, and collaboration on a 1-5 scale",),
        (200, 400),
    ),
    FieldType.DISRUPTION_RESPONSE_PLAN: (
        "Generate a supply disruption response plan",
        "disruption response plan",
        ("Define detection, escalation, alternate sourcing, and customer communication steps",),
        (300, 600),
    ),
    FieldType.SUPPLIER_DEVELOPMENT_PROGRAM: (
        "Generate a supplier development program",
        "development program",
        ("Describe capability building, joint improvement projects, and performance incentives",),
        (300, 600),
    ),
    FieldType.PERFORMANCE_MONITORING_FRAMEWORK: (
        "Generate a supplier performance monitoring framework",
        "monitoring framework",
        ("Define KPIs, scorecards, review cadence, and corrective action processes",),
        (300, 600),
    ),
    FieldType.COMPLIANCE_ASSESSMENT_CRITERIA: (
        "Generate supplier compliance assessment criteria",
        "compliance criteria",
        ("Cover regulatory, contractual, ethical sourcing, and sustainability requirements",),
        (200, 400),
    ),
    FieldType.FINANCIAL_STABILITY_ANALYSIS: (
        "Generate a supplier financial stability analysis",
        "financial stability analysis",
        ("Assess financial ratios, credit ratings, and early warning indicators",),
        (250, 500),
    ),
}

PROMPTS = {
    field_type: PromptSpec(
        persona=SUPPLY_CHAIN_EXPERT,
        task=task,
        output=output,
        requirements=requirements,
        words=words,
        heading="Supply Chain Information",
        labels=SUPPLY_CHAIN_LABELS,
        attributes=SUPPLY_CHAIN_ATTRIBUTES,
    )
    for field_type, (task, output, requirements, words) in _ENTRIES.items()
}
