from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType

SECURITY_EXPERT = (
    "You are an expert information security professional (CISSP, CISM) familiar with "
    "ISO 27001, NIST CSF and CIS Controls."
)
SECURITY_LABELS = ("Title", "Policy Type", "Business Unit", "Scope")
SECURITY_ATTRIBUTES = (
    ("security_framework", "Security Framework"),
    ("classification", "Data Classification"),
    ("systems", "Systems in Scope"),
    ("threat_landscape", "Threat Landscape"),
)

_ENTRIES: dict[FieldType, tuple[str, str, tuple[str, ...], tuple[int, int]]] = {
    FieldType.SECURITY_POLICY: (
        "Generate a complete information security policy",
        "security policy",
        (
            "Include purpose, scope, policy statements, roles, enforcement, and review sections",
            "Write enforceable must/shall statements",
        ),
        (600, 1200),
    ),
    FieldType.VULNERABILITY_ASSESSMENT_REPORT: (
        "Generate a vulnerability assessment report",
        "vulnerability assessment report",
        (
            "Summarize methodology, tools, and coverage",
            "Group findings by severity using CVSS-style ratings",
            "Provide prioritized remediation guidance and timelines",
        ),
        (400, 800),
    ),
    FieldType.SECURITY_INCIDENT_RESPONSE_PLAN: (
        "Generate a security incident response plan",
        "incident response plan",
        (
            "Cover preparation, detection, containment, eradication, recovery, and lessons learned",
            "Define the incident response team, severity levels, and escalation matrix",
        ),
        (500, 1000),
    ),
    FieldType.SECURITY_CONTROLS_MAPPING: (
        "Generate a security controls mapping",
        "controls mapping",
        (
            "Map implemented controls to the selected framework's control identifiers",
            "Identify unmapped requirements and control gaps",
        ),
        (300, 600),
    ),
    FieldType.SECURITY_FRAMEWORK_COMPLIANCE: (
        "Generate a security framework compliance assessment",
        "compliance assessment",
        (
            "Assess maturity for each framework domain",
            "Summarize gaps and a roadmap to close them",
        ),
        (300, 600),
    ),
    FieldType.SECURITY_POLICY_DESCRIPTION: (
        "Generate a security policy description",
        "description text",
        ('Summarize the objective of "{subject}" and the threats it addresses',),
        (100, 250),
    ),
    FieldType.SECURITY_POLICY_SCOPE: (
        "Generate a security policy scope",
        "scope text",
        ("Define covered users, systems, data, and locations, with exclusions",),
        (100, 250),
    ),
    FieldType.SECURITY_POLICY_PROCEDURES: (
        "Generate security procedures supporting the policy",
        "procedures text",
        (
            "Write numbered, step-by-step procedures",
            "Identify the role responsible for each step",
        ),
        (300, 600),
    ),
    FieldType.SECURITY_POLICY_ROLES: (
        "Generate security roles and responsibilities",
        "roles and responsibilities text",
        ("Cover executive sponsor, CISO, system owners, administrators, and end users",),
        (200, 400),
    ),
    FieldType.SECURITY_POLICY_INCIDENT_RESPONSE: (
        "Generate the incident response section of a security policy",
        "incident response section",
        ("State reporting obligations, response timelines, and escalation contacts",),
        (200, 400),
    ),
    FieldType.SECURITY_POLICY_ACCESS_CONTROL: (
        "Generate the access control section of a security policy",
        "access control section",
        (
            "Cover least privilege, provisioning, reviews, privileged access, and MFA",
            "Define access review frequency",
        ),
        (200, 400),
    ),
    FieldType.SECURITY_POLICY_DATA_PROTECTION: (
        "Generate the data protection section of a security policy",
        "data protection section",
        ("Cover classification, encryption at rest and in transit, retention, and secure disposal",),
        (200, 400),
    ),
}

PROMPTS = {
    field_type: PromptSpec(
        persona=SECURITY_EXPERT,
        task=task,
        output=output,
        requirements=requirements,
        words=words,
        heading="Security Information",
        labels=SECURITY_LABELS,
        attributes=SECURITY_ATTRIBUTES,
    )
    for field_type, (task, output, requirements, words) in _ENTRIES.items()
}
