"""A to-do list on SQLite with a service layer and an htmx-style WSGI web interface."""

__version__ = "0.1.0"
__all__ = ["__version__"]