import json

import pytest

from app.errors import MalformedBody, ValidationFailed
from app.observability.request_logger import render_body
from app.validation import parse_todo, validate_todo

VALID = {
    "task": "Buy milk and eggs",
    "description": "Get groceries for the week",
    "priority": "medium",
    "dueDate": "2024-02-01",
    "tags": ["errand"],
}


def test_valid_without_completed():
    assert validate_todo(VALID) == []


@pytest.mark.parametrize("completed", [True, False])
def test_valid_with_completed(completed):
    assert validate_todo({**VALID, "completed": completed}) == []


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("task", "ab", "Task must be at least 3 characters long"),
        ("task", 12345, "Task must be at least 3 characters long"),
        ("description", "too short", "Description must be at least 10 characters long"),
        ("priority", "urgent", "Priority must be low, medium, or high"),
        ("priority", "HIGH", "Priority must be low, medium, or high"),
        ("dueDate", "2024-13-01", "Due date must be a valid date (YYYY-MM-DD)"),
        ("dueDate", "tomorrow", "Due date must be a valid date (YYYY-MM-DD)"),
        ("dueDate", "", "Due date must be a valid date (YYYY-MM-DD)"),
        ("tags", [], "Tags must be an array with at least one tag"),
        ("tags", "errand", "Tags must be an array with at least one tag"),
        ("completed", "true", "Completed must be true or false"),
        ("completed", None, "Completed must be true or false"),
        ("completed", 1, "Completed must be true or false"),
    ],
)
def test_single_violation(field, value, message):
    assert validate_todo({**VALID, field: value}) == [message]


@pytest.mark.parametrize("field", ["task", "description", "priority", "dueDate", "tags"])
def test_missing_required_field(field):
    body = {k: v for k, v in VALID.items() if k != field}
    assert len(validate_todo(body)) == 1


def test_iso_datetime_accepted():
    assert validate_todo({**VALID, "dueDate": "2024-02-01T09:30:00Z"}) == []


def test_boundary_lengths():
    assert validate_todo({**VALID, "task": "abc", "description": "0123456789"}) == []


def test_render_body_pretty_prints_json():
    assert render_body(b'{"a":1}') == '{\n  "a": 1\n}'
    assert render_body(b"{oops") == "{oops"


def test_tags_must_be_strings():
    assert validate_todo({**VALID, "tags": ["errand", 3]}) == ["Tags must be an array with at least one tag"]


def test_parse_todo_defaults_completed_and_drops_unknown_fields():
    todo = parse_todo(json.dumps({**VALID, "id": 42, "owner": "x"}).encode())
    assert todo.record_fields() == {**VALID, "completed": False}


def test_parse_todo_empty_body_is_validated_as_empty_object():
    with pytest.raises(ValidationFailed) as exc:
        parse_todo(b"  ")
    assert exc.value.messages == [
        "Task must be at least 3 characters long",
        "Description must be at least 10 characters long",
        "Priority must be low, medium, or high",
        "Due date must be a valid date (YYYY-MM-DD)",
        "Tags must be an array with at least one tag",
    ]


@pytest.mark.parametrize("raw", [b"{oops", b'["a", "list"]', b"42"])
def test_parse_todo_rejects_non_object_bodies(raw):
    with pytest.raises(MalformedBody):
        parse_todo(raw)


def test_parse_todo_json_bool_is_strict():
    with pytest.raises(ValidationFailed) as exc:
        parse_todo(json.dumps({**VALID, "completed": "false"}).encode())
    assert exc.value.messages == ["Completed must be true or false"]
