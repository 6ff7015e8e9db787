"""Todo repository contract.

Callers depend on ``TodoRepository`` only; the concrete backend is chosen
where the application is assembled (see ``todo_store.main.create_app``).
"""

from __future__ import annotations

import abc
from typing import List, Optional, Union

from todo_store.models.todo import CreateTodo, Todo, UpdateTodo

from .errors import NotFound


class TodoRepository(abc.ABC):
    """Operations every todo storage backend provides.

    Implementations must be safe to share between threads.
    """

    @abc.abstractmethod
    def create(self, payload: CreateTodo) -> Todo:
        """Store a new todo and return it. Never fails."""
        raise NotImplementedError

    @abc.abstractmethod
    def find(self, todo_id: int) -> Optional[Todo]:
        """Return the todo with ``todo_id`` or ``None``."""
        raise NotImplementedError

    @abc.abstractmethod
    def all(self) -> List[Todo]:
        """Return every stored todo, in no particular order."""
        raise NotImplementedError

    @abc.abstractmethod
    def update(self, todo_id: int, payload: UpdateTodo) -> Union[Todo, NotFound]:
        """Merge ``payload`` into the stored todo and return the new value."""
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, todo_id: int) -> Optional[NotFound]:
        """Remove the todo; returns ``None`` on success."""
        raise NotImplementedError

    @abc.abstractmethod
    def clone(self) -> TodoRepository:
        """Return another handle over the same underlying state."""
        raise NotImplementedError
