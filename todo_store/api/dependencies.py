"""API dependencies for todo management."""

from fastapi import Depends, Request

from todo_store.repositories import TodoRepository
from todo_store.services import TodoService


def get_todo_repository(request: Request) -> TodoRepository:
    """Hand each request its own handle over the application's store."""
    return request.app.state.todo_repository.clone()


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(repository)
