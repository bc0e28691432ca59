from collections.abc import Callable

from app.ai.prompts import (
    audit,
    bcp,
    controls,
    findings,
    incident,
    policy,
    privacy,
    reporting,
    resilience,
    security,
    supply_chain,
    training,
    vendor,
)
from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType, GenerationRequest

PromptBuilderFn = Callable[[GenerationRequest], str]

GENERIC_PROMPT = PromptSpec(
    persona="You are an expert in governance, risk, and compliance (GRC) content generation.",
    task="Generate comprehensive content",
    output="content text",
    requirements=(
        'Create detailed, professional content relevant to "{subject}"',
        "Ensure the content is specifically tailored to the GRC context and requirements",
        "Use professional terminology appropriate to the field",
        "Make it specific to the business unit and context provided",
        "Include actionable insights and recommendations where applicable",
    ),
    words=(200, 400),
)

PROMPT_BUILDERS: dict[FieldType, PromptBuilderFn] = {}
for _module in (
    audit,
    controls,
    privacy,
    policy,
    incident,
    bcp,
    vendor,
    security,
    training,
    findings,
    resilience,
    supply_chain,
    reporting,
):
    PROMPT_BUILDERS.update(_module.PROMPTS)


def build_library_prompt(request: GenerationRequest) -> str:
    try:
        field_type = FieldType(request.field_type)
    except ValueError:
        return GENERIC_PROMPT(request)
    return PROMPT_BUILDERS.get(field_type, GENERIC_PROMPT)(request)
