"""Payload validation and record helpers."""

import pytest
from pydantic import ValidationError

from todo_store.models import CreateTodo, Todo, UpdateTodo


class TestPayloads:
    def test_create_requires_text(self) -> None:
        with pytest.raises(ValidationError):
            CreateTodo(text="")
        with pytest.raises(ValidationError):
            CreateTodo()

    def test_create_text_length_limit(self) -> None:
        assert CreateTodo(text="a" * 100).text == "a" * 100
        with pytest.raises(ValidationError):
            CreateTodo(text="a" * 101)

    def test_update_fields_are_optional(self) -> None:
        payload = UpdateTodo()
        assert payload.text is None
        assert payload.completed is None

    def test_update_validates_text_when_present(self) -> None:
        with pytest.raises(ValidationError):
            UpdateTodo(text="")
        with pytest.raises(ValidationError):
            UpdateTodo(text="x" * 101)


class TestTodo:
    def test_new_is_not_completed(self) -> None:
        todo = Todo.new(1, "buy milk")
        assert todo == Todo(id=1, text="buy milk", completed=False)

    def test_records_are_immutable(self) -> None:
        todo = Todo.new(1, "buy milk")
        with pytest.raises(ValidationError):
            todo.completed = True

    def test_merge_keeps_unset_fields(self) -> None:
        todo = Todo(id=3, text="old", completed=True)

        assert todo.merge(UpdateTodo(text="new")) == Todo(id=3, text="new", completed=True)
        assert todo.merge(UpdateTodo(completed=False)) == Todo(id=3, text="old", completed=False)
        assert todo.merge(UpdateTodo()) == todo

    def test_serialized_field_names(self) -> None:
        assert Todo.new(7, "x").model_dump() == {"id": 7, "text": "x", "completed": False}
