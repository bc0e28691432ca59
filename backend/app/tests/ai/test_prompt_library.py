from unittest.mock import MagicMock

import pytest

from app.ai.prompt_builder import PromptBuilder
from app.ai.prompts.audit import GENERIC_AUDIT_GUIDANCE, audit_type_guidance
from app.ai.prompts.library import PROMPT_BUILDERS, build_library_prompt
from app.ai.schemas import (
    AuditData,
    ControlSetData,
    FieldType,
    GenerationRequest,
    PrivacyData,
)
from app.models import AITemplate


@pytest.mark.parametrize("field_type", list(FieldType))
def test_every_field_type_has_library_prompt(field_type):
    assert field_type in PROMPT_BUILDERS


@pytest.mark.parametrize("field_type", list(FieldType))
def test_library_prompt_ends_with_content_only_instruction(field_type):
    prompt = build_library_prompt(GenerationRequest(field_type=field_type))

    last_line = prompt.strip().splitlines()[-1]
    assert last_line.startswith("Generate only the")
    assert last_line.endswith("no additional formatting or explanations.")
    # Missing entity attributes are rendered, never dropped.
    assert "Not specified" in prompt


def test_description_prompt_uses_audit_information():
    request = GenerationRequest(
        field_type=FieldType.DESCRIPTION,
        context="Annual review",
        audit_data=AuditData(title="Payroll Audit", audit_type="financial", business_unit="Finance"),
        industry="Banking",
    )

    prompt = build_library_prompt(request)

    assert 'for "Payroll Audit"' in prompt
    assert "- Business Unit: Finance" in prompt
    assert "- Existing Scope: Not specified" in prompt
    assert "Context: Annual review" in prompt
    assert "- Tailor the content to the Banking industry" in prompt
    assert "- Keep it between 100-300 words" in prompt


def test_objectives_prompt_asks_for_json_array_and_type_guidance():
    request = GenerationRequest(
        field_type=FieldType.OBJECTIVES,
        audit_data=AuditData(title="Access Review", audit_type="it"),
    )

    prompt = build_library_prompt(request)

    assert "JSON array of strings" in prompt
    assert "IT governance" in prompt
    assert prompt.strip().endswith(
        "Generate only the JSON array of objectives, no additional formatting or explanations."
    )


def test_unknown_audit_type_uses_generic_guidance():
    assert audit_type_guidance("forensic") == GENERIC_AUDIT_GUIDANCE
    assert audit_type_guidance(None) == GENERIC_AUDIT_GUIDANCE
    assert "IT governance" in audit_type_guidance(" IT ")


def test_control_generation_uses_control_set_block():
    request = GenerationRequest(
        field_type=FieldType.CONTROL_GENERATION,
        control_set_data=ControlSetData(name="Access Controls", framework="ISO 27001"),
    )

    prompt = build_library_prompt(request)

    assert "Control Set Information:" in prompt
    assert "- Framework: ISO 27001" in prompt
    assert "- Associated Audit: Not specified" in prompt
    assert '"control_code"' in prompt


def test_privacy_prompt_lists_subjects_and_categories():
    request = GenerationRequest(
        field_type=FieldType.DPIA_RISK_ASSESSMENT,
        privacy_data=PrivacyData(
            title="CRM rollout",
            type="dpia",
            data_subjects=["customers", "prospects"],
        ),
    )

    prompt = build_library_prompt(request)

    assert "- Record Type: DPIA" in prompt
    assert "- Data Subjects: customers, prospects" in prompt
    assert "- Data Categories: Not specified" in prompt


def test_user_values_with_braces_do_not_break_rendering():
    request = GenerationRequest(
        field_type=FieldType.SCOPE,
        audit_data=AuditData(title="Review of {legacy} systems"),
    )

    assert "Review of {legacy} systems" in build_library_prompt(request)


def test_builder_without_resolver_uses_library():
    request = GenerationRequest(field_type=FieldType.SCOPE)

    assert PromptBuilder().build(request) == build_library_prompt(request)


def test_builder_prefers_resolved_template():
    resolver = MagicMock()
    resolver.for_request.return_value = AITemplate(
        name="Scope", field_type="scope", template_content="Custom scope for {{title}}"
    )
    request = GenerationRequest(field_type=FieldType.SCOPE, audit_data=AuditData(title="Vendors"))

    assert PromptBuilder(resolver).build(request) == "Custom scope for Vendors"
    resolver.for_request.assert_called_once_with(request)


def test_builder_falls_back_when_template_path_fails():
    resolver = MagicMock()
    resolver.for_request.side_effect = RuntimeError("boom")
    request = GenerationRequest(field_type=FieldType.SCOPE)

    assert PromptBuilder(resolver).build(request) == build_library_prompt(request)


def test_builder_falls_back_when_no_template_matches():
    resolver = MagicMock()
    resolver.for_request.return_value = None
    request = GenerationRequest(field_type=FieldType.METHODOLOGY)

    assert PromptBuilder(resolver).build(request) == build_library_prompt(request)
