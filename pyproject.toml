[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todoweb"
version = "0.1.0"
description = "A small to-do list backed by SQLite, with an htmx-style HTML front end served over WSGI"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "htmx", "sqlite", "wsgi", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
todoweb = "todoweb.web:main"

[tool.hatch.build.targets.wheel]
packages = ["todoweb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
