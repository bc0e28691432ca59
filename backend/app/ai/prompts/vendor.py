from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType

TPRM_EXPERT = "You are an expert third-party risk management (TPRM) professional."
VENDOR_LABELS = ("Vendor Name", "Vendor Type", "Business Unit", "Engagement Scope")
VENDOR_ATTRIBUTES = (
    ("criticality", "Criticality"),
    ("risk_tier", "Risk Tier"),
    ("services_provided", "Services Provided"),
    ("data_access", "Data Access"),
    ("contract_value", "Contract Value"),
)

_ENTRIES: dict[FieldType, tuple[str, str, tuple[str, ...], tuple[int, int]]] = {
    FieldType.VENDOR_ASSESSMENT: (
        "Generate a comprehensive vendor risk assessment",
        "vendor assessment",
        (
            "Assess security, privacy, financial, operational, compliance, and reputational risk",
            "Assign an overall inherent and residual risk rating with justification",
            "Recommend risk treatment and contractual safeguards",
        ),
        (400, 800),
    ),
    FieldType.VENDOR_DUE_DILIGENCE_REPORT: (
        "Generate a vendor due diligence report",
        "due diligence report",
        (
            "Summarize ownership, financial health, certifications, and references",
            "Highlight red flags and open questions requiring follow-up",
            "Conclude with an onboarding recommendation",
        ),
        (400, 800),
    ),
    FieldType.VENDOR_CONTRACT_RISK_ANALYSIS: (
        "Generate a contract risk analysis",
        "contract risk analysis",
        (
            "Review liability, indemnity, termination, data protection, and audit-right clauses",
            "Identify missing or unfavorable terms",
            "Propose negotiation points",
        ),
        (300, 600),
    ),
    FieldType.VENDOR_RISK_SCORING: (
        "Generate a vendor risk scoring rationale",
        "risk scoring",
        (
            "Score each risk domain on a 1-5 scale with a short justification",
            "Explain how domain scores roll up into an overall score and tier",
        ),
        (200, 400),
    ),
    FieldType.VENDOR_ASSESSMENT_CRITERIA: (
        "Generate vendor assessment criteria",
        "assessment criteria",
        (
            "Define criteria per risk domain with the evidence expected for each",
            "Weight criteria by vendor criticality",
        ),
        (200, 400),
    ),
    FieldType.VENDOR_MONITORING_PLAN: (
        "Generate an ongoing vendor monitoring plan",
        "monitoring plan",
        (
            "Define monitoring activities, frequency, and owners by risk tier",
            "Include triggers for reassessment and escalation",
        ),
        (250, 500),
    ),
    FieldType.VENDOR_INCIDENT_RESPONSE: (
        "Generate a vendor incident response procedure",
        "incident response procedure",
        (
            "Define notification obligations and timelines for the vendor",
            "Describe joint containment, investigation, and communication steps",
            "Include criteria for contract remedies or termination",
        ),
        (250, 500),
    ),
    FieldType.VENDOR_PERFORMANCE_EVALUATION: (
        "Generate a vendor performance evaluation",
        "performance evaluation",
        (
            "Evaluate service levels, quality, responsiveness, and relationship management",
            "Recommend improvement actions and a renewal stance",
        ),
        (250, 500),
    ),
    FieldType.VENDOR_COMPLIANCE_ASSESSMENT: (
        "Generate a vendor compliance assessment",
        "compliance assessment",
        (
            "Assess compliance with applicable regulations and contractual obligations",
            "Identify certifications and attestations to request",
        ),
        (250, 500),
    ),
    FieldType.VENDOR_FINANCIAL_ANALYSIS: (
        "Generate a vendor financial stability analysis",
        "financial analysis",
        (
            "Assess liquidity, profitability, leverage, and concentration risk",
            "State the likelihood of financial distress and its business impact",
        ),
        (250, 500),
    ),
    FieldType.VENDOR_SECURITY_ASSESSMENT: (
        "Generate a vendor information security assessment",
        "security assessment",
        (
            "Assess access control, encryption, vulnerability management, and incident response",
            "Map gaps to ISO 27001 or SOC 2 control areas",
            "Recommend compensating controls",
        ),
        (300, 600),
    ),
    FieldType.VENDOR_OPERATIONAL_ASSESSMENT: (
        "Generate a vendor operational resilience assessment",
        "operational assessment",
        (
            "Assess capacity, business continuity, subcontractor reliance, and key person risk",
            "Identify single points of failure",
        ),
        (250, 500),
    ),
}

PROMPTS = {
    field_type: PromptSpec(
        persona=TPRM_EXPERT,
        task=task,
        output=output,
        requirements=requirements,
        words=words,
        heading="Vendor Information",
        labels=VENDOR_LABELS,
        attributes=VENDOR_ATTRIBUTES,
    )
    for field_type, (task, output, requirements, words) in _ENTRIES.items()
}
