# todo_api/schemas/todo.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TodoCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    text: str = Field(min_length=1)


class TodoUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    text: Optional[str] = Field(default=None, min_length=1)
    completed: Optional[bool] = None

    @field_validator("text", "completed")
    @classmethod
    def reject_explicit_null(cls, value):
        # only runs for fields present in the body; omitted fields keep their default
        if value is None:
            raise ValueError("field may be omitted but not null")
        return value


class TodoRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    text: str
    completed: bool
    created_at: datetime


class ErrorResponse(BaseModel):
    error: str
