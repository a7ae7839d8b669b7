"""SQLite storage for todo items."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path

from todoweb.config import Config

_SCHEMA = """
CREATE TABLE IF NOT EXISTS todos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    completed BOOLEAN NOT NULL DEFAULT FALSE
);
"""


@dataclass
class Todo:
    """A stored todo item."""

    id: int | None
    title: str
    completed: bool


class TodoNotFoundError(LookupError):
    """Raised when no todo has the requested id."""

    def __init__(self, todo_id: int | None) -> None:
        super().__init__(f"no todo with id {todo_id}")
        self.todo_id = todo_id


class TodoStore:
    """Create, read, update and delete todos on an SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._lock = threading.Lock()

    def __enter__(self) -> TodoStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch(self, todo_id: int | None) -> Todo:
        row = self._connection.execute(
            "SELECT id, title, completed FROM todos WHERE id = ?", (todo_id,)
        ).fetchone()
        if row is None:
            raise TodoNotFoundError(todo_id)
        return Todo(id=row[0], title=row[1], completed=bool(row[2]))

    def create_todo(self, title: str) -> Todo:
        """Insert a new, uncompleted todo and return it."""
        with self._lock, self._connection:
            cursor = self._connection.execute(
                "INSERT INTO todos (title, completed) VALUES (?, ?)", (title, False)
            )
            return self._fetch(cursor.lastrowid)

    def get_todos(self) -> list[Todo]:
        """Return every stored todo."""
        with self._lock:
            rows = self._connection.execute(
                "SELECT id, title, completed FROM todos"
            ).fetchall()
        return [Todo(id=row[0], title=row[1], completed=bool(row[2])) for row in rows]

    def update_todo(self, todo_id: int | None, title: str, completed: bool) -> Todo:
        """Replace the title and completion of a todo and return it."""
        with self._lock, self._connection:
            cursor = self._connection.execute(
                "UPDATE todos SET title = ?, completed = ? WHERE id = ?",
                (title, bool(completed), todo_id),
            )
            if cursor.rowcount == 0:
                raise TodoNotFoundError(todo_id)
            return self._fetch(todo_id)

    def delete_todo(self, todo_id: int | None) -> None:
        """Delete a todo; deleting a missing id does nothing."""
        with self._lock, self._connection:
            self._connection.execute("DELETE FROM todos WHERE id = ?", (todo_id,))

    def close(self) -> None:
        """Close the underlying connection."""
        self._connection.close()


def init_db(config: Config | None = None) -> TodoStore:
    """Open (creating if needed) the database and apply the schema."""
    config = config or Config.init()
    path = config.database_path()
    exists = path != ":memory:" and Path(path).exists()
    if exists:
        print("Database already exists")
    else:
        print(f"Creating database {config.database_url}")
    connection = sqlite3.connect(path, check_same_thread=False)
    if not exists:
        print("Create db success")
    try:
        connection.executescript(_SCHEMA)
    except sqlite3.Error:
        connection.close()
        raise
    print("Migration success")
    return TodoStore(connection)