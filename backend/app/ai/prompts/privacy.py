from app.ai.prompts.common import PromptSpec, info_block
from app.ai.schemas import FieldType, GenerationRequest, PrivacyData

PRIVACY_EXPERT = (
    "You are an expert data protection officer with deep knowledge of GDPR, "
    "CCPA and international privacy regulations."
)


def privacy_block(request: GenerationRequest) -> str:
    data = request.privacy_data or PrivacyData()
    record_type = data.type.upper() if data.type else None
    return info_block(
        "Privacy Record Information",
        [
            ("Title", data.title or request.audit_data.title),
            ("Record Type", record_type),
            ("Industry", data.industry or request.industry),
            ("Data Subjects", data.data_subjects),
            ("Data Categories", data.data_categories),
            ("Risk Level", data.risk_level),
        ],
    )


def _privacy(task: str, output: str, requirements: tuple[str, ...], words: tuple[int, int]) -> PromptSpec:
    return PromptSpec(
        persona=PRIVACY_EXPERT,
        task=task,
        output=output,
        requirements=requirements
        + (
            "Reference the relevant articles or sections of applicable privacy law",
            "Use clear language understandable by both legal and business stakeholders",
        ),
        words=words,
        entity=privacy_block,
    )


PROMPTS = {
    FieldType.DPIA_DESCRIPTION: _privacy(
        "Generate a Data Protection Impact Assessment description",
        "DPIA description",
        (
            "Describe the nature, scope, context, and purposes of the processing",
            "Identify the data subjects and categories of personal data involved",
            "Explain why a DPIA is required for this processing activity",
            "Summarize the data flows and systems involved",
        ),
        (150, 350),
    ),
    FieldType.DPIA_RISK_ASSESSMENT: _privacy(
        "Generate a DPIA risk assessment",
        "risk assessment text",
        (
            "Identify risks to the rights and freedoms of data subjects",
            "Assess likelihood and severity for each risk",
            "Propose measures to address each risk, including safeguards and security measures",
            "State the residual risk after mitigation",
        ),
        (250, 500),
    ),
    FieldType.ROPA_PURPOSE: _privacy(
        "Generate the processing purpose for a Record of Processing Activities entry",
        "processing purpose text",
        (
            "State the specific, explicit, and legitimate purposes of the processing",
            "Relate the purposes to the categories of data subjects and personal data",
            "Avoid vague or open-ended purpose statements",
        ),
        (75, 200),
    ),
    FieldType.ROPA_LEGAL_BASIS: _privacy(
        "Generate the lawful basis justification for a Record of Processing Activities entry",
        "legal basis text",
        (
            "Identify the most appropriate lawful basis for the processing",
            "Justify why the chosen basis applies to this processing activity",
            "Note any additional conditions required for special category data",
        ),
        (75, 200),
    ),
}
