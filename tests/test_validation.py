# tests/test_validation.py

from __future__ import annotations

import pytest

from tasks_api.utils.validation import (
    CREATE_FIELDS_REQUIRED,
    INVALID_BODY,
    UPDATE_FIELD_REQUIRED,
    ValidationError,
    parse_json_body,
    validate_new_task,
    validate_task_update,
)


def test_parse_json_body_accepts_object(app) -> None:
    with app.test_request_context(json={"title": "A"}):
        assert parse_json_body() == {"title": "A"}


@pytest.mark.parametrize("data", ["{not json", "[1, 2]", '"text"', ""])
def test_parse_json_body_rejects_non_objects(app, data: str) -> None:
    with app.test_request_context(data=data, content_type="application/json"):
        with pytest.raises(ValidationError) as exc:
            parse_json_body()
    assert exc.value.message == INVALID_BODY


def test_validate_new_task_returns_fields() -> None:
    assert validate_new_task({"title": "A", "description": "B"}) == ("A", "B")


@pytest.mark.parametrize(
    "payload",
    [
        {"title": "A"},
        {"description": "B"},
        {"title": "", "description": "B"},
        {"title": 1, "description": "B"},
        {},
    ],
)
def test_validate_new_task_requires_both_fields(payload: dict) -> None:
    with pytest.raises(ValidationError) as exc:
        validate_new_task(payload)
    assert exc.value.message == CREATE_FIELDS_REQUIRED


def test_validate_new_task_accepts_whitespace_values() -> None:
    assert validate_new_task({"title": " ", "description": "B"}) == (" ", "B")


def test_validate_task_update_keeps_supplied_fields_only() -> None:
    assert validate_task_update({"title": "A"}) == {"title": "A"}
    assert validate_task_update({"title": "", "description": "B"}) == {
        "title": "",
        "description": "B",
    }
    assert validate_task_update({"title": "new", "description": "   "}) == {
        "title": "new",
        "description": "   ",
    }
    assert validate_task_update({"description": "  "}) == {"description": "  "}
    assert validate_task_update({"title": "A", "description": "B", "id": "9"}) == {
        "title": "A",
        "description": "B",
    }


@pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": None, "description": ""}])
def test_validate_task_update_requires_one_field(payload: dict) -> None:
    with pytest.raises(ValidationError) as exc:
        validate_task_update(payload)
    assert exc.value.message == UPDATE_FIELD_REQUIRED


def test_validate_task_update_rejects_non_string_values() -> None:
    with pytest.raises(ValidationError) as exc:
        validate_task_update({"title": 42})
    assert exc.value.message == INVALID_BODY
