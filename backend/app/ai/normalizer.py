import json
import logging

from app.ai.schemas import LIST_FIELD_TYPES, FieldType

logger = logging.getLogger(__name__)


def parse_string_list(text: str) -> list[str] | None:
    """Return the JSON array of strings encoded in `text`, or None."""
    stripped = (text or "").strip()
    if not stripped.startswith("["):
        return None
    try:
        parsed = json.loads(stripped)
    except (json.JSONDecodeError, ValueError):
        return None
    if not isinstance(parsed, list) or not all(isinstance(item, str) for item in parsed):
        return None
    return parsed


def normalize_content(field_type: FieldType | str, raw: str) -> str | list[str]:
    """
    Post-process a raw model answer.

    List-shaped field types whose text opens a JSON array are parsed into a
    list of strings; any other outcome returns `raw` untouched. Never raises.
    """
    try:
        field_type = FieldType(field_type)
    except ValueError:
        return raw
    if field_type not in LIST_FIELD_TYPES or not isinstance(raw, str):
        return raw
    items = parse_string_list(raw)
    if items is None:
        logger.debug("Keeping raw %s response; not a JSON string array.", field_type)
        return raw
    return items
