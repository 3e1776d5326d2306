from typing import Optional
from pydantic import BaseModel, Field

from todoapi.models.entities.todo import Todo

class TodoItemView(BaseModel):
    """External shape of a todo item. Carries no secret."""

    id: int = Field(0)
    name: Optional[str] = Field(None)
    is_complete: bool = Field(False, alias="isComplete")


def to_view(todo: Todo) -> TodoItemView:
    """Project a stored record onto its external view, dropping the secret."""
    return TodoItemView(id=todo.id, name=todo.name, isComplete=bool(todo.is_complete))
