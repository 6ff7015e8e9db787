"""In-memory todo repository."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from todo_store.models.todo import CreateTodo, Todo, UpdateTodo

from .errors import NotFound
from .rwlock import ReadWriteLock
from .todo_repository import TodoRepository

logger = logging.getLogger(__name__)


@dataclass
class TodoDatastore:
    """Backing state shared by every handle cloned from one repository."""

    todos: Dict[int, Todo] = field(default_factory=dict)
    lock: ReadWriteLock = field(default_factory=ReadWriteLock)
    next_id: int = 1


class TodoRepositoryForMemory(TodoRepository):
    """Todo repository backed by a dict behind one reader/writer lock.

    Ids come from a monotonic counter advanced under the write lock, so an
    id is never handed out twice even after the record it named is deleted.
    """

    def __init__(self, datastore: Optional[TodoDatastore] = None) -> None:
        self._db = datastore if datastore is not None else TodoDatastore()

    @property
    def datastore(self) -> TodoDatastore:
        return self._db

    def clone(self) -> TodoRepositoryForMemory:
        return TodoRepositoryForMemory(self._db)

    def create(self, payload: CreateTodo) -> Todo:
        with self._db.lock.write():
            todo_id = self._db.next_id
            todo = Todo.new(todo_id, payload.text)
            self._db.todos[todo_id] = todo
            self._db.next_id += 1
        logger.debug("Stored todo id=%s", todo_id)
        return todo

    def find(self, todo_id: int) -> Optional[Todo]:
        with self._db.lock.read():
            return self._db.todos.get(todo_id)

    def all(self) -> List[Todo]:
        with self._db.lock.read():
            return list(self._db.todos.values())

    def update(self, todo_id: int, payload: UpdateTodo) -> Union[Todo, NotFound]:
        with self._db.lock.write():
            todo = self._db.todos.get(todo_id)
            if todo is None:
                return NotFound(todo_id)
            updated = todo.merge(payload)
            self._db.todos[todo_id] = updated
        return updated

    def delete(self, todo_id: int) -> Optional[NotFound]:
        with self._db.lock.write():
            if self._db.todos.pop(todo_id, None) is None:
                return NotFound(todo_id)
        return None

    def clear(self) -> None:
        """Clear all stored todos (testing helper)."""
        with self._db.lock.write():
            self._db.todos.clear()
            self._db.next_id = 1
