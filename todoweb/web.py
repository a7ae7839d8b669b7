"""HTML front end for the todo service, served as a WSGI application."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Callable, Protocol
from urllib.parse import parse_qsl
from wsgiref.simple_server import make_server

from todoweb.config import Config
from todoweb.db import init_db
from todoweb.service import (
    CreateTodoRequest,
    DeleteTodoRequest,
    Empty,
    TodoList,
    TodoMessage,
    TodoService,
    UpdateTodoRequest,
)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3030

_HTML_TYPE = "text/html; charset=utf-8"
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")

_ITEM_TEMPLATE = (
    "\n"
    '    <div class="todo-item" id="todo-{id}" hx-target="this" hx-swap="outerHTML">\n'
    '        <input type="checkbox" \n'
    '               hx-put="/todos/{id}"\n'
    "               hx-include=\"[name='title-{id}']\"\n"
    '               name="completed"\n'
    "               {checked} />\n"
    '        <span class="{css}">{title}</span>\n'
    '        <input type="hidden" name="title-{id}" value="{title}" />\n'
    '        <button hx-delete="/todos/{id}">Delete</button>\n'
    "    </div>\n"
    "    "
)

_DEFAULT_INDEX = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8" />
    <title>Todos</title>
</head>
<body>
    <h1>Todos</h1>
    <form hx-post="/todos" hx-target="#todo-list" hx-swap="beforeend">
        <input type="text" name="title" />
        <button type="submit">Add</button>
    </form>
    <div id="todo-list" hx-get="/todos" hx-trigger="load"></div>
</body>
</html>
"""

StartResponse = Callable[..., object]


class TodoClient(Protocol):
    """What the web front end needs from the todo service."""

    def create_todo(self, request: CreateTodoRequest) -> TodoMessage: ...

    def get_todos(self, request: Empty) -> TodoList: ...

    def update_todo(self, request: UpdateTodoRequest) -> TodoMessage: ...

    def delete_todo(self, request: DeleteTodoRequest) -> Empty: ...


class _FormError(ValueError):
    """The request body is not a usable form."""


def render_todo_item(todo: TodoMessage) -> str:
    """Render one todo as an htmx-enabled HTML fragment."""
    return _ITEM_TEMPLATE.format(
        id=todo.id if todo.id is not None else 0,
        checked="checked" if todo.completed else "",
        css="completed" if todo.completed else "",
        title=todo.title,
    )


def render_todo_list(todos: Iterable[TodoMessage]) -> str:
    """Render every todo, one fragment after another."""
    return "".join(render_todo_item(todo) for todo in todos)


def parse_completed(value: str) -> bool:
    """Interpret a checkbox form value: "true" or "on", in any case, is checked."""
    return value.lower() in ("true", "on")


def _parse_id(segment: str) -> int | None:
    if not _INTEGER.fullmatch(segment):
        return None
    value = int(segment)
    if not _I64_MIN <= value <= _I64_MAX:
        return None
    return value


def _read_form(environ: Mapping[str, object]) -> dict[str, str]:
    try:
        length = int(str(environ.get("CONTENT_LENGTH") or 0))
    except ValueError:
        length = 0
    stream = environ.get("wsgi.input")
    body = stream.read(length) if length > 0 and stream is not None else b""
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise _FormError("form body is not valid UTF-8") from exc
    return dict(parse_qsl(text, keep_blank_values=True))


class TodoWebApp:
    """WSGI application rendering todos from a todo service as HTML."""

    index_html: str = _DEFAULT_INDEX

    def __init__(self, client: TodoClient) -> None:
        self.client = client

    def get_todos(self) -> str:
        """Return the HTML for every todo."""
        return render_todo_list(self.client.get_todos(Empty()).todos)

    def create_todo(self, form: Mapping[str, str]) -> str:
        """Create a todo from a form holding "title" and return its HTML."""
        if "title" not in form:
            raise _FormError("missing field `title`")
        todo = self.client.create_todo(CreateTodoRequest(title=form["title"]))
        return render_todo_item(todo)

    def update_todo(self, todo_id: int, form: Mapping[str, str]) -> str:
        """Update a todo from its "title-<id>" and "completed" fields and return its HTML."""
        title = form.get(f"title-{todo_id}", "")
        completed = parse_completed(form.get("completed", ""))
        todo = self.client.update_todo(
            UpdateTodoRequest(id=todo_id, title=title, completed=completed)
        )
        return render_todo_item(todo)

    def delete_todo(self, todo_id: int) -> str:
        """Delete a todo; the reply body is empty."""
        self.client.delete_todo(DeleteTodoRequest(id=todo_id))
        return ""

    def _dispatch(self, method: str, segments: list[str], environ) -> tuple[str, str]:
        if not segments:
            if method != "GET":
                return "405 Method Not Allowed", ""
            return "200 OK", self.index_html

        if segments[0] != "todos" or len(segments) > 2:
            return "404 Not Found", ""

        if len(segments) == 1:
            if method == "GET":
                return self._call("get_todos", self.get_todos)
            if method == "POST":
                form = _read_form(environ)
                return self._call("create_todo", lambda: self.create_todo(form))
            return "405 Method Not Allowed", ""

        todo_id = _parse_id(segments[1])
        if todo_id is None:
            return "404 Not Found", ""
        if method == "PUT":
            form = _read_form(environ)
            return self._call("update_todo", lambda: self.update_todo(todo_id, form))
        if method == "DELETE":
            return self._call("delete_todo", lambda: self.delete_todo(todo_id))
        return "405 Method Not Allowed", ""

    @staticmethod
    def _call(name: str, handler: Callable[[], str]) -> tuple[str, str]:
        try:
            return "200 OK", handler()
        except _FormError:
            raise
        except Exception as exc:  # any service failure becomes a 404
            print(f"Error calling {name}: {exc!r}", file=sys.stderr)
            return "404 Not Found", ""

    def __call__(self, environ, start_response: StartResponse) -> list[bytes]:
        method = str(environ.get("REQUEST_METHOD", "GET")).upper()
        segments = [part for part in str(environ.get("PATH_INFO", "")).split("/") if part]
        try:
            status, body = self._dispatch(method, segments, environ)
        except _FormError as exc:
            status, body = "400 Bad Request", f"Request body deserialize error: {exc}"
        payload = body.encode("utf-8")
        headers = [
            ("Content-Type", _HTML_TYPE),
            ("Content-Length", str(len(payload))),
        ]
        if environ.get("HTTP_ORIGIN"):
            headers.append(("Access-Control-Allow-Origin", "*"))
        start_response(status, headers)
        return [payload]


def main(argv: list[str] | None = None) -> int:
    """Serve the todo web front end until interrupted."""
    parser = argparse.ArgumentParser(description="Serve the todo list over HTTP.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--database-url", default=Config.init().database_url)
    parser.add_argument("--index", type=Path, help="HTML file served at /")
    args = parser.parse_args(argv)

    store = init_db(Config(database_url=args.database_url))
    app = TodoWebApp(TodoService(store))
    if args.index is not None:
        app.index_html = args.index.read_text(encoding="utf-8")

    with store, make_server(args.host, args.port, app) as server:
        print(f"Listening on http://{args.host}:{args.port}")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())