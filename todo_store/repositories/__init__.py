from .errors import NotFound, StorePoisonedError
from .memory import TodoDatastore, TodoRepositoryForMemory
from .rwlock import ReadWriteLock
from .todo_repository import TodoRepository

__all__ = [
    "NotFound",
    "ReadWriteLock",
    "StorePoisonedError",
    "TodoDatastore",
    "TodoRepository",
    "TodoRepositoryForMemory",
]
