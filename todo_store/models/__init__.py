from .todo import CreateTodo, Todo, UpdateTodo

__all__ = ["CreateTodo", "Todo", "UpdateTodo"]
