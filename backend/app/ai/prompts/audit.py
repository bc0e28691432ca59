from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType, GenerationRequest

AUDITOR = "You are an expert audit professional."

AUDIT_TYPE_GUIDANCE = {
    "internal": (
        "- Focus on internal controls, governance, and operational efficiency\n"
        "- Review compliance with internal policies and procedures\n"
        "- Assess risk management processes and control environment\n"
        "- Evaluate operational effectiveness and efficiency\n"
        "- Review management oversight and reporting mechanisms"
    ),
    "external": (
        "- Focus on external relationships and third-party risk management\n"
        "- Review vendor management and contract compliance\n"
        "- Assess external regulatory compliance\n"
        "- Evaluate customer-facing processes and controls\n"
        "- Review external reporting and communication controls"
    ),
    "compliance": (
        "- Focus on adherence to laws, regulations, and industry standards\n"
        "- Review compliance monitoring and reporting systems\n"
        "- Assess training and awareness programs\n"
        "- Evaluate compliance testing and validation processes\n"
        "- Review incident management and corrective action procedures"
    ),
    "operational": (
        "- Focus on business process efficiency and effectiveness\n"
        "- Review operational controls and performance metrics\n"
        "- Assess resource utilization and cost management\n"
        "- Evaluate process automation and technology usage\n"
        "- Review operational risk management and business continuity"
    ),
    "financial": (
        "- Focus on financial reporting accuracy and completeness\n"
        "- Review internal controls over financial reporting (ICFR)\n"
        "- Assess revenue recognition and expense management\n"
        "- Evaluate financial close processes and reconciliations\n"
        "- Review cash management and treasury functions"
    ),
    "it": (
        "- Focus on IT governance, security, and infrastructure\n"
        "- Review system access controls and user management\n"
        "- Assess data integrity and backup/recovery procedures\n"
        "- Evaluate cybersecurity controls and incident response\n"
        "- Review IT project management and change controls"
    ),
    "quality": (
        "- Focus on quality management systems and standards\n"
        "- Review product/service quality controls and testing\n"
        "- Assess customer satisfaction and complaint handling\n"
        "- Evaluate quality assurance and continuous improvement\n"
        "- Review supplier quality and inspection processes"
    ),
    "environmental": (
        "- Focus on environmental compliance and sustainability\n"
        "- Review environmental management systems and reporting\n"
        "- Assess waste management and pollution control\n"
        "- Evaluate energy efficiency and resource conservation\n"
        "- Review environmental risk assessment and mitigation"
    ),
}

GENERIC_AUDIT_GUIDANCE = (
    "- Focus on relevant controls and compliance requirements\n"
    "- Review applicable policies, procedures, and standards\n"
    "- Assess operational effectiveness and risk management\n"
    "- Evaluate monitoring and reporting mechanisms\n"
    "- Review continuous improvement and corrective actions"
)

OBJECTIVES_FORMAT = (
    "Format: Return only the objectives as a clean JSON array of strings.\n"
    'Example: ["Assess the effectiveness of internal controls over financial reporting processes", '
    '"Evaluate compliance with regulatory requirements for data privacy", '
    '"Review the adequacy of risk management frameworks"]'
)


def audit_type_guidance(audit_type: str | None) -> str:
    return AUDIT_TYPE_GUIDANCE.get((audit_type or "").strip().lower(), GENERIC_AUDIT_GUIDANCE)


def objectives_prompt(request: GenerationRequest) -> str:
    audit_type = request.audit_data.audit_type or "internal"
    business_unit = request.audit_data.business_unit or "the organization"
    spec = PromptSpec(
        persona=f"You are an expert audit professional with extensive experience in {audit_type} audits.",
        task="Generate specific, realistic audit objectives",
        output="JSON array of objectives",
        requirements=(
            "Create 4-6 specific, measurable audit objectives",
            f'Each objective must be directly related to "{{subject}}" and the {audit_type} audit type',
            "Objectives should be realistic, achievable, and follow professional audit standards",
            "Use action-oriented language (assess, evaluate, review, verify, test, examine, analyze)",
            "Include both compliance and operational effectiveness objectives",
            "Consider a risk-based audit approach",
            f"Make them specific to the business unit: {business_unit}",
            "Each objective should be a complete, professional statement",
        ),
        guidance=f"Audit Type Specific Focus Areas:\n{audit_type_guidance(audit_type)}",
        output_format=OBJECTIVES_FORMAT,
    )
    return spec(request)


PROMPTS = {
    FieldType.DESCRIPTION: PromptSpec(
        persona=AUDITOR,
        task="Generate a comprehensive audit description",
        output="description text",
        requirements=(
            "Create a detailed, professional audit description",
            'Ensure the description is specifically relevant to "{subject}"',
            "Include the purpose, scope overview, and key focus areas",
            "Use professional audit terminology",
            "Make it specific to the audit type and business unit",
        ),
        words=(100, 300),
    ),
    FieldType.OBJECTIVES: objectives_prompt,
    FieldType.SCOPE: PromptSpec(
        persona=AUDITOR,
        task="Generate a detailed audit scope",
        output="scope text",
        requirements=(
            "Define what will be included and excluded in the audit",
            'Be specific to "{subject}" and the business unit',
            "Include relevant systems, processes, locations, and time periods",
            "Mention key stakeholders and departments involved",
            "Keep it comprehensive but focused",
            "Use professional audit language",
        ),
    ),
    FieldType.METHODOLOGY: PromptSpec(
        persona=AUDITOR,
        task="Generate a comprehensive audit methodology",
        output="methodology text",
        requirements=(
            "Describe the audit approach and techniques to be used",
            'Include specific methods relevant to "{subject}"',
            "Mention risk assessment, testing procedures, and evaluation criteria",
            "Include data collection methods and sampling techniques",
            "Reference relevant standards or frameworks if applicable",
            "Be specific to the audit type and business unit",
        ),
    ),
    FieldType.EXECUTIVE_SUMMARY: PromptSpec(
        persona="You are an expert audit professional with extensive experience in writing executive summaries for audit reports.",
        task="Generate a comprehensive executive summary",
        output="executive summary content",
        requirements=(
            "Write a professional executive summary suitable for senior management and audit committees",
            "Start with a brief overview of the audit's purpose and scope",
            "Summarize key findings, observations, and conclusions",
            "Highlight any significant risks or control weaknesses identified",
            "Include recommendations for improvement where applicable",
            "Mention the overall audit opinion or assessment",
            "Structure it with clear paragraphs covering purpose, scope, methodology, key findings, conclusions, and recommendations",
        ),
        words=(150, 300),
    ),
}
