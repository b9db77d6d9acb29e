"""File helpers for the todo store kept in the working directory."""

from __future__ import annotations

from pathlib import Path

CONFIG_DIR_PATH = ".todo"
CONFIG_PATH = ".todo/todo.json"


def init_todos() -> None:
    """Create the todo store holding an empty list.

    Raises FileExistsError if the store already exists.
    """
    config = Path(CONFIG_PATH)
    if config.exists():
        raise FileExistsError("Already initialized")

    config_dir = Path(CONFIG_DIR_PATH)
    if not config_dir.exists():
        config_dir.mkdir()

    with config.open("x", encoding="utf-8") as handle:
        handle.write("[]")


def read_todos_from(path: str | Path) -> str:
    """Return the whole contents of the todo file at ``path``."""
    return Path(path).read_text(encoding="utf-8")


def write_todos_to(path: str | Path, tasks_json: str) -> None:
    """Replace the contents of ``path`` with ``tasks_json``, creating it if needed."""
    with Path(path).open("w", encoding="utf-8") as handle:
        handle.write(tasks_json)