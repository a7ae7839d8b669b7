import pytest

from todoweb.config import Config


def test_init_uses_default_url():
    assert Config.init().database_url == "sqlite://todo.db?mode=rwc"


def test_default_path_strips_scheme_and_query():
    assert Config.init().database_path() == "todo.db"


def test_absolute_path(tmp_path):
    target = tmp_path / "data.db"
    config = Config(database_url=f"sqlite://{target}?mode=rwc")
    assert config.database_path() == str(target)


def test_memory_url():
    assert Config(database_url="sqlite::memory:").database_path() == ":memory:"


def test_non_sqlite_url_rejected():
    with pytest.raises(ValueError):
        Config(database_url="postgres://localhost/db").database_path()


def test_empty_path_rejected():
    with pytest.raises(ValueError):
        Config(database_url="sqlite://?mode=rwc").database_path()