"""
Tasks module data models.

Field names are shared by the JSON wire format and the stored documents:
title, description, completed, createdAt, updatedAt. The identifier is
``id`` on the wire and ``_id`` (an ObjectId) in MongoDB.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

TITLE_MAX_LENGTH = 500
DESCRIPTION_MAX_LENGTH = 10000


def _check_title(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("title must not be blank")
    return value


class Task(BaseModel):
    """A stored task."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Task ID (ObjectId hex string)")
    title: str = Field(..., description="Short task title")
    description: str = Field(default="", description="Free-form details")
    completed: bool = Field(default=False, description="Whether the task is done")
    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="When the task was created",
    )
    updated_at: datetime = Field(
        ...,
        alias="updatedAt",
        description="When the task was last modified",
    )


class CreateTaskRequest(BaseModel):
    """Request to create a new task."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Short task title",
    )
    description: str = Field(
        default="",
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Free-form details",
    )
    completed: bool = Field(default=False, description="Initial completion state")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return _check_title(value)


class TaskUpdate(BaseModel):
    """
    Partial update of a task.

    Each mutable field has its own optional slot. Only the fields present
    in the request body (``model_fields_set``) are applied, so leaving a
    field out is different from sending it as an empty string. Explicit
    nulls are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(
        None,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="New title",
    )
    description: Optional[str] = Field(
        None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="New description",
    )
    completed: Optional[bool] = Field(None, description="New completion state")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return _check_title(value)

    @model_validator(mode="after")
    def reject_nulls(self) -> "TaskUpdate":
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} must not be null")
        return self

    def is_empty(self) -> bool:
        """True if the request did not name any field."""
        return not self.model_fields_set

    def changes(self) -> dict[str, Any]:
        """Fields supplied by the client, keyed by their stored names."""
        return self.model_dump(include=self.model_fields_set)
