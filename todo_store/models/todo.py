"""Todo data models using Pydantic."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

TEXT_MIN_LENGTH = 1
TEXT_MAX_LENGTH = 100


class CreateTodo(BaseModel):
    """Payload for creating new todos."""

    text: str = Field(..., min_length=TEXT_MIN_LENGTH, max_length=TEXT_MAX_LENGTH)


class UpdateTodo(BaseModel):
    """Partial update payload; unset fields keep their stored value."""

    text: Optional[str] = Field(None, min_length=TEXT_MIN_LENGTH, max_length=TEXT_MAX_LENGTH)
    completed: Optional[bool] = None


class Todo(BaseModel):
    """Stored todo record."""

    id: int
    text: str
    completed: bool = False

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @classmethod
    def new(cls, todo_id: int, text: str) -> Todo:
        """Build a fresh, not yet completed record."""
        return cls(id=todo_id, text=text, completed=False)

    def merge(self, payload: UpdateTodo) -> Todo:
        """Return a copy with the payload's set fields applied."""
        text = payload.text if payload.text is not None else self.text
        completed = payload.completed if payload.completed is not None else self.completed
        return Todo(id=self.id, text=text, completed=completed)
