import pytest

from todoweb.config import Config
from todoweb.db import Todo, TodoNotFoundError, init_db


@pytest.fixture
def store():
    with init_db(Config(database_url="sqlite::memory:")) as todo_store:
        yield todo_store


def test_create_returns_uncompleted_todo(store):
    todo = store.create_todo("buy milk")
    assert todo.title == "buy milk"
    assert todo.completed is False
    assert isinstance(todo.id, int)


def test_ids_are_distinct(store):
    first = store.create_todo("a")
    second = store.create_todo("b")
    assert first.id != second.id
    assert second.id > first.id


def test_get_todos_lists_all(store):
    created = [store.create_todo(t) for t in ("a", "b", "c")]
    assert store.get_todos() == created


def test_get_todos_empty(store):
    assert store.get_todos() == []


def test_update_changes_fields(store):
    todo = store.create_todo("old")
    updated = store.update_todo(todo.id, "new", True)
    assert updated == Todo(id=todo.id, title="new", completed=True)
    assert store.get_todos() == [updated]


def test_update_missing_raises(store):
    with pytest.raises(TodoNotFoundError) as info:
        store.update_todo(999, "x", False)
    assert info.value.todo_id == 999


def test_update_none_id_raises(store):
    store.create_todo("a")
    with pytest.raises(TodoNotFoundError):
        store.update_todo(None, "x", True)


def test_delete_removes(store):
    keep = store.create_todo("keep")
    gone = store.create_todo("gone")
    store.delete_todo(gone.id)
    assert store.get_todos() == [keep]


def test_delete_missing_is_silent(store):
    todo = store.create_todo("a")
    store.delete_todo(todo.id + 100)
    assert store.get_todos() == [todo]


def test_init_db_creates_then_reuses(tmp_path, capsys):
    config = Config(database_url=f"sqlite://{tmp_path / 'todo.db'}?mode=rwc")
    with init_db(config) as first:
        todo = first.create_todo("persist")
    out = capsys.readouterr().out
    assert "Creating database" in out
    assert "Migration success" in out

    with init_db(config) as second:
        assert second.get_todos() == [todo]
    assert "Database already exists" in capsys.readouterr().out