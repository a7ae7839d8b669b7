"""Todo service operating on request and response messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from todoweb.db import Todo, TodoStore


@dataclass
class CreateTodoRequest:
    title: str = ""


@dataclass
class UpdateTodoRequest:
    id: int | None = None
    title: str = ""
    completed: bool = False


@dataclass
class DeleteTodoRequest:
    id: int | None = None


@dataclass
class Empty:
    pass


@dataclass
class TodoMessage:
    """A todo as sent to clients."""

    id: int | None = None
    title: str = ""
    completed: bool = False

    @classmethod
    def from_todo(cls, todo: Todo) -> TodoMessage:
        return cls(id=todo.id, title=todo.title, completed=todo.completed)


@dataclass
class TodoList:
    todos: list[TodoMessage] = field(default_factory=list)


class TodoService:
    """Handles todo requests against a store."""

    def __init__(self, store: TodoStore) -> None:
        self.store = store

    def create_todo(self, request: CreateTodoRequest) -> TodoMessage:
        return TodoMessage.from_todo(self.store.create_todo(request.title))

    def get_todos(self, request: Empty | None = None) -> TodoList:
        return TodoList(todos=[TodoMessage.from_todo(t) for t in self.store.get_todos()])

    def update_todo(self, request: UpdateTodoRequest) -> TodoMessage:
        todo = self.store.update_todo(request.id, request.title, request.completed)
        return TodoMessage.from_todo(todo)

    def delete_todo(self, request: DeleteTodoRequest) -> Empty:
        self.store.delete_todo(request.id)
        return Empty()