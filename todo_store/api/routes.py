"""API routes for todo management."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from todo_store.api.dependencies import get_todo_service
from todo_store.models.todo import CreateTodo, Todo, UpdateTodo
from todo_store.repositories import NotFound
from todo_store.services import TodoService

router = APIRouter()


@router.get("/todos", response_model=List[Todo])
def list_todos(service: TodoService = Depends(get_todo_service)) -> List[Todo]:
    """Get all todo items."""
    return service.list_todos()


@router.get("/todos/{todo_id}", response_model=Todo)
def get_todo(
    todo_id: int,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Get a specific todo item by ID."""
    todo = service.get_todo(todo_id)
    if todo is None:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


@router.post("/todos", response_model=Todo, status_code=status.HTTP_201_CREATED)
def create_todo(
    payload: CreateTodo,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Create a new todo item."""
    return service.create_todo(payload)


@router.patch("/todos/{todo_id}", response_model=Todo)
def update_todo(
    todo_id: int,
    payload: UpdateTodo,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Apply a partial update to a todo item."""
    result = service.update_todo(todo_id, payload)
    if isinstance(result, NotFound):
        raise HTTPException(status_code=404, detail=str(result))
    return result


@router.delete("/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(
    todo_id: int,
    service: TodoService = Depends(get_todo_service),
) -> Response:
    """Delete a todo item."""
    error = service.delete_todo(todo_id)
    if error is not None:
        raise HTTPException(status_code=404, detail=str(error))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
