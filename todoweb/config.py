"""Runtime configuration for the todo service."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_DATABASE_URL = "sqlite://todo.db?mode=rwc"

_MEMORY_URLS = ("sqlite::memory:", "sqlite://:memory:")


@dataclass(frozen=True)
class Config:
    """Settings the service needs to start."""

    database_url: str = DEFAULT_DATABASE_URL

    @classmethod
    def init(cls) -> Config:
        """Return the default configuration."""
        return cls(database_url=DEFAULT_DATABASE_URL)

    def database_path(self) -> str:
        """Return the filesystem path named by the SQLite URL.

        Raises ValueError when the URL is not an SQLite URL.
        """
        url = self.database_url
        base = url.split("?", 1)[0]
        if base in _MEMORY_URLS:
            return ":memory:"
        if base.startswith("sqlite://"):
            path = base[len("sqlite://"):]
        elif base.startswith("sqlite:"):
            path = base[len("sqlite:"):]
        else:
            raise ValueError(f"not an sqlite database url: {url!r}")
        if not path:
            raise ValueError(f"database url has no path: {url!r}")
        return path