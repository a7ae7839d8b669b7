# todoweb

A small to-do list application in three layers:

- **Storage** (`todoweb.db`): to-dos kept in an SQLite database, each with an
  id, a title and a completed flag.
- **Service** (`todoweb.service`): a request/response interface over the store,
  with message classes for creating, listing, updating and deleting to-dos.
- **Web** (`todoweb.web`): a WSGI application, `TodoWebApp`, that renders
  to-dos as HTML fragments carrying htmx attributes.

It needs nothing beyond the Python standard library.

## Installation

```
pip install .
```

## Running the web interface

```
todoweb
```

This opens (creating if needed) the database `todo.db` in the current
directory and serves the web interface on `127.0.0.1:3030` with the
standard library's `wsgiref` server until interrupted. Options:

| Option           | Default                       | Meaning                         |
|------------------|-------------------------------|---------------------------------|
| `--host`         | `127.0.0.1`                   | address to listen on            |
| `--port`         | `3030`                        | port to listen on               |
| `--database-url` | `sqlite://todo.db?mode=rwc`   | SQLite URL of the database      |
| `--index`        | built-in page                 | HTML file served at `/`         |

The routes are:

| Method | Path          | Effect                                                     |
|--------|---------------|------------------------------------------------------------|
| GET    | `/`           | the page itself                                            |
| GET    | `/todos`      | all to-dos as HTML items                                   |
| POST   | `/todos`      | create a to-do from the `title` form field                 |
| PUT    | `/todos/<id>` | update from the `title-<id>` and `completed` form fields   |
| DELETE | `/todos/<id>` | delete the to-do; the reply body is empty                  |

Every reply is `text/html; charset=utf-8`. A POST without a `title` field, or
a form body that is not valid UTF-8, gets `400 Bad Request`. An `<id>` that is
not a signed 64-bit integer, an unknown path, or a failure in the service
(such as updating a to-do that does not exist) gets `404 Not Found`; the
failure is reported on standard error. A known path with the wrong method
gets `405 Method Not Allowed`. When the request has an `Origin` header the
reply carries `Access-Control-Allow-Origin: *`.

On an update, a missing `title-<id>` field sets the title to the empty
string, and the to-do counts as completed only when `completed` is `true` or
`on` in any case.

The built-in page at `/` carries htmx attributes but does not load the htmx
script itself; pass your own page with `--index` to use the interface in a
browser.

## Using the library

```python
from todoweb.config import Config
from todoweb.db import init_db
from todoweb.service import TodoService, CreateTodoRequest, Empty

store = init_db(Config.init())
service = TodoService(store)

created = service.create_todo(CreateTodoRequest(title="Buy milk"))
for todo in service.get_todos(Empty()).todos:
    print(todo.id, todo.title, todo.completed)

store.close()
```

`Config.init()` gives the default configuration, which keeps the database in
`todo.db`. `Config.database_path()` turns the URL into a file path; it accepts
`sqlite://<path>` and `sqlite:<path>` (anything after `?` is ignored), maps
`sqlite::memory:` and `sqlite://:memory:` to an in-memory database, and raises
`ValueError` for any other URL or an empty path. `init_db` creates the
database file and its `todos` table if they do not exist yet, printing what it
does.

The store can also be used directly, and as a context manager that closes its
connection on exit:

```python
with init_db(Config(database_url="sqlite::memory:")) as store:
    todo = store.create_todo("Write report")
    store.update_todo(todo.id, "Write report", True)
    store.delete_todo(todo.id)
```

Updating a to-do that does not exist raises `todoweb.db.TodoNotFoundError`
(a `LookupError`); deleting one that does not exist does nothing.

The HTML helpers `render_todo_item`, `render_todo_list` and `parse_completed`
in `todoweb.web` can be used on their own. Titles are written into the HTML
as they are, without escaping. `TodoWebApp` accepts any object with the
service's four methods, so it can be put in front of something other than
`TodoService`.

## What it does not do

The service layer is called in-process by the web application; it is not
exposed as a network service of its own, and the web interface cannot be
pointed at a remote to-do service. The database schema is created once and
there are no migrations beyond that.

## Tests

```
pip install .[test]
pytest
```