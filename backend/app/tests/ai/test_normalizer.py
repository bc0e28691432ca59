import pytest

from app.ai.normalizer import normalize_content, parse_string_list
from app.ai.schemas import FieldType


def test_objectives_json_array_becomes_list():
    raw = '["Assess access controls", "Evaluate change management"]'

    assert normalize_content(FieldType.OBJECTIVES, raw) == [
        "Assess access controls",
        "Evaluate change management",
    ]


def test_learning_objectives_are_list_shaped_too():
    assert normalize_content("learning_objectives", '  ["Identify risks"]\n') == ["Identify risks"]


@pytest.mark.parametrize(
    "raw",
    [
        '[ "unterminated',
        "[1, 2, 3]",
        '["ok", {"nested": true}]',
        "1. Assess controls\n2. Review policies",
    ],
)
def test_objectives_keep_raw_text_when_not_a_string_array(raw):
    assert normalize_content(FieldType.OBJECTIVES, raw) == raw


def test_non_list_field_types_pass_through():
    raw = '["looks", "like", "json"]'

    assert normalize_content(FieldType.DESCRIPTION, raw) == raw


def test_unknown_field_type_passes_through():
    assert normalize_content("not_a_field", "[]") == "[]"


def test_parse_string_list_requires_leading_bracket():
    assert parse_string_list('prefix ["a"]') is None
    assert parse_string_list("[]") == []
