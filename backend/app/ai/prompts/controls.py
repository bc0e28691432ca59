from app.ai.prompts.common import PromptSpec, info_block
from app.ai.schemas import ControlSetData, FieldType, GenerationRequest

GRC_EXPERT = (
    "You are an expert in governance, risk, and compliance (GRC) "
    "with extensive knowledge of control frameworks."
)

CONTROLS_FORMAT = """Format your response as a JSON array of objects with the following structure:
[
  {
    "control_code": "CC-001",
    "title": "Control Title",
    "description": "Detailed control description explaining what needs to be done",
    "control_type": "preventive|detective|corrective",
    "frequency": "continuous|daily|weekly|monthly|quarterly|annually",
    "process_area": "Relevant process area",
    "testing_procedure": "How to test this control",
    "evidence_requirements": "What evidence is needed to verify this control"
  }
]"""


def control_set_block(request: GenerationRequest) -> str:
    data = request.control_set_data or ControlSetData()
    return info_block(
        "Control Set Information",
        [
            ("Name", data.name),
            ("Framework", data.framework),
            ("Associated Audit", data.audit_title),
            ("Audit Type", data.audit_type),
        ],
    )


PROMPTS = {
    FieldType.CONTROL_SET_DESCRIPTION: PromptSpec(
        persona=GRC_EXPERT,
        task="Generate a comprehensive control set description",
        output="description text",
        requirements=(
            'Create a detailed, professional description for the control set "{subject}"',
            "Explain the purpose and scope of this control set",
            "Include what types of controls are typically included in this framework",
            "Explain how this control set helps with compliance and risk management",
            "If associated with an audit, relate it to the audit context",
            "Use professional GRC and compliance terminology",
            "Make it informative for auditors and compliance professionals",
        ),
        words=(150, 400),
        entity=control_set_block,
    ),
    FieldType.CONTROL_GENERATION: PromptSpec(
        persona=GRC_EXPERT,
        task="Generate 5-6 specific, actionable controls",
        output="JSON array",
        requirements=(
            "Create 5-6 realistic, implementable controls",
            "Each control should be relevant to the control set framework",
            "Controls should be specific to the control set purpose",
            "Include a mix of preventive, detective, and corrective controls",
            "Each control should have a clear, actionable description",
            "Controls should address key risk areas for this framework",
            "Make them practical for real-world implementation",
        ),
        output_format=CONTROLS_FORMAT,
        entity=control_set_block,
    ),
}
