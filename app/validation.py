"""
Todo write payloads: the TodoIn schema plus the mapping from pydantic errors to
the per-field messages returned to callers. Each field contributes at most one
message, in the order the fields are declared on TodoIn.
"""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator

from app.errors import MalformedBody, ValidationFailed

MESSAGES = {
    "task": "Task must be at least 3 characters long",
    "description": "Description must be at least 10 characters long",
    "priority": "Priority must be low, medium, or high",
    "dueDate": "Due date must be a valid date (YYYY-MM-DD)",
    "tags": "Tags must be an array with at least one tag",
    "completed": "Completed must be true or false",
}


class TodoIn(BaseModel):
    """Body of POST/PUT /todos. Unknown fields (including id) are dropped."""

    model_config = ConfigDict(strict=True, extra="ignore")

    task: str = Field(min_length=3)
    description: str = Field(min_length=10)
    priority: Literal["low", "medium", "high"]
    due_date: str = Field(alias="dueDate")
    tags: list[str] = Field(min_length=1)
    completed: StrictBool = False

    @field_validator("due_date")
    @classmethod
    def check_iso_date(cls, v: str) -> str:
        try:
            date.fromisoformat(v)
        except ValueError:
            # date-times like 2024-01-15T09:00:00Z are ISO 8601 too
            datetime.fromisoformat(v.replace("Z", "+00:00"))
        return v

    def record_fields(self) -> dict:
        return self.model_dump(by_alias=True)


def violations(exc: ValidationError) -> list[str]:
    failed = {err["loc"][0] for err in exc.errors() if err["loc"]}
    return [message for field, message in MESSAGES.items() if field in failed]


def validate_todo(body: dict) -> list[str]:
    try:
        TodoIn.model_validate(body)
    except ValidationError as e:
        return violations(e)
    return []


def parse_todo(raw: bytes) -> TodoIn:
    """Parse and validate a raw request body. An empty body counts as {}."""
    try:
        return TodoIn.model_validate_json(raw if raw.strip() else b"{}")
    except ValidationError as e:
        # errors without a field location mean the body itself is unusable:
        # invalid JSON, or JSON that isn't an object
        if any(not err["loc"] for err in e.errors()):
            raise MalformedBody(str(e)) from e
        raise ValidationFailed(violations(e)) from e
