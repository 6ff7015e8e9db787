"""Todo service - business logic layer."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from todo_store.models.todo import CreateTodo, Todo, UpdateTodo
from todo_store.repositories import NotFound, TodoRepository, TodoRepositoryForMemory

logger = logging.getLogger(__name__)


class TodoService:
    """Service for todo business logic."""

    def __init__(self, repository: Optional[TodoRepository] = None) -> None:
        self.repository = repository or TodoRepositoryForMemory()

    def list_todos(self) -> List[Todo]:
        """Get all todo items."""
        return self.repository.all()

    def get_todo(self, todo_id: int) -> Optional[Todo]:
        """Get a specific todo by ID."""
        return self.repository.find(todo_id)

    def create_todo(self, payload: CreateTodo) -> Todo:
        """Create a new todo item."""
        todo = self.repository.create(payload)
        logger.info("Created todo id=%s", todo.id)
        return todo

    def update_todo(self, todo_id: int, payload: UpdateTodo) -> Union[Todo, NotFound]:
        """Update an existing todo item."""
        result = self.repository.update(todo_id, payload)
        if isinstance(result, NotFound):
            logger.warning("Update rejected: %s", result)
        else:
            logger.info(
                "Updated todo id=%s fields=%s",
                todo_id,
                sorted(payload.model_dump(exclude_none=True)),
            )
        return result

    def delete_todo(self, todo_id: int) -> Optional[NotFound]:
        """Delete a todo item."""
        error = self.repository.delete(todo_id)
        if error is not None:
            logger.warning("Delete rejected: %s", error)
        else:
            logger.info("Deleted todo id=%s", todo_id)
        return error
