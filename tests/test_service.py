import pytest

from todoweb.config import Config
from todoweb.db import Todo, TodoNotFoundError, init_db
from todoweb.service import (
    CreateTodoRequest,
    DeleteTodoRequest,
    Empty,
    TodoList,
    TodoMessage,
    TodoService,
    UpdateTodoRequest,
)


@pytest.fixture
def service():
    with init_db(Config(database_url="sqlite::memory:")) as store:
        yield TodoService(store)


def test_from_todo_copies_fields():
    message = TodoMessage.from_todo(Todo(id=7, title="t", completed=True))
    assert message == TodoMessage(id=7, title="t", completed=True)


def test_create(service):
    message = service.create_todo(CreateTodoRequest(title="write"))
    assert message.title == "write"
    assert message.completed is False


def test_get_todos(service):
    created = [service.create_todo(CreateTodoRequest(title=t)) for t in ("a", "b")]
    assert service.get_todos(Empty()) == TodoList(todos=created)


def test_update(service):
    created = service.create_todo(CreateTodoRequest(title="a"))
    updated = service.update_todo(
        UpdateTodoRequest(id=created.id, title="b", completed=True)
    )
    assert updated == TodoMessage(id=created.id, title="b", completed=True)


def test_update_missing_raises(service):
    with pytest.raises(TodoNotFoundError):
        service.update_todo(UpdateTodoRequest(id=42, title="x", completed=False))


def test_delete(service):
    created = service.create_todo(CreateTodoRequest(title="a"))
    assert service.delete_todo(DeleteTodoRequest(id=created.id)) == Empty()
    assert service.get_todos(Empty()).todos == []