from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType

POLICY_WRITER = "You are an expert policy writer and compliance professional."
POLICY_LABELS = ("Policy Title", "Policy Type", "Business Unit", "Scope")
POLICY_ATTRIBUTES = (
    ("category", "Category"),
    ("owner", "Policy Owner"),
    ("regulatory_requirements", "Regulatory Requirements"),
    ("version", "Version"),
)


def _policy(
    task: str,
    output: str,
    requirements: tuple[str, ...],
    words: tuple[int, int] | None = None,
    output_format: str = "",
) -> PromptSpec:
    return PromptSpec(
        persona=POLICY_WRITER,
        task=task,
        output=output,
        requirements=requirements,
        words=words,
        heading="Policy Information",
        labels=POLICY_LABELS,
        attributes=POLICY_ATTRIBUTES,
        output_format=output_format,
    )


PROMPTS = {
    FieldType.POLICY_CONTENT: _policy(
        "Generate complete policy content",
        "policy content",
        (
            "Include purpose, scope, policy statements, roles and responsibilities, compliance, and review sections",
            "Write enforceable statements using must/shall language",
            "Reference applicable laws, regulations, and standards",
            "Define exceptions handling and consequences of non-compliance",
        ),
        (500, 1000),
    ),
    FieldType.POLICY_TITLE: _policy(
        "Suggest a clear, professional policy title",
        "policy title",
        (
            "Make the title concise and descriptive",
            "Follow common corporate policy naming conventions",
            "Return a single title on one line",
        ),
        (3, 12),
    ),
    FieldType.POLICY_DESCRIPTION: _policy(
        "Generate a policy description",
        "description text",
        (
            'Summarize the intent of "{subject}" and the risks it addresses',
            "Identify who the policy applies to",
            "Use plain, professional language",
        ),
        (100, 250),
    ),
    FieldType.POLICY_SCOPE: _policy(
        "Generate a policy scope statement",
        "scope text",
        (
            "Define the people, systems, locations, and activities covered",
            "State explicit exclusions where appropriate",
            "Keep it unambiguous and enforceable",
        ),
        (100, 250),
    ),
    FieldType.POLICY_VERSION_SUMMARY: _policy(
        "Generate a version change summary",
        "version summary text",
        (
            "Summarize what changed in this version and why",
            "Highlight changes that affect employee obligations",
            "Note the approval and effective dates if provided in the context",
        ),
        (50, 150),
    ),
    FieldType.COMPLIANCE_MAPPING: _policy(
        "Generate a compliance mapping",
        "compliance mapping",
        (
            "Map policy statements to specific regulatory requirements and framework controls",
            "Identify gaps where the policy does not fully address a requirement",
            "Present each mapping as requirement, policy section, and coverage status",
        ),
        (200, 500),
    ),
    FieldType.POLICY_TEMPLATE: _policy(
        "Generate a reusable policy template",
        "policy template",
        (
            "Provide section headings with short guidance for each section",
            "Use bracketed placeholders for organization-specific details",
            "Cover purpose, scope, definitions, policy statements, roles, compliance, and review",
        ),
        (300, 700),
    ),
}
