from typing import Any, Dict, Tuple

from flask import request

INVALID_BODY = "Invalid request body"
CREATE_FIELDS_REQUIRED = "Title and description are required"
UPDATE_FIELD_REQUIRED = "At least one field (title or description) is required"

TASK_FIELDS = ("title", "description")


class ValidationError(Exception):
    """Request body is malformed or misses a required field. Maps to 400."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def parse_json_body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError(INVALID_BODY)
    return payload


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def validate_new_task(payload: Dict[str, Any]) -> Tuple[str, str]:
    title = payload.get("title")
    description = payload.get("description")
    if not _is_filled(title) or not _is_filled(description):
        raise ValidationError(CREATE_FIELDS_REQUIRED)
    return title, description


def validate_task_update(payload: Dict[str, Any]) -> Dict[str, str]:
    """Collect the fields to overwrite.

    Any string value counts as supplied and is written as-is, empty or not.
    Nulls are skipped; other non-string values make the body invalid. At
    least one supplied field must be non-empty.
    """
    updates = {}
    for name in TASK_FIELDS:
        value = payload.get(name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValidationError(INVALID_BODY)
        updates[name] = value
    if not any(_is_filled(v) for v in updates.values()):
        raise ValidationError(UPDATE_FIELD_REQUIRED)
    return updates
