"""Command-line entry point for managing the todo store."""

from __future__ import annotations

import argparse
import curses
import logging
import uuid
from collections.abc import Sequence

from kae import utils
from kae.task import Task, TaskStatus, dump_tasks
from kae.ui import UI

logger = logging.getLogger(__name__)

_STATUS_NAMES = {
    "todo": TaskStatus.TODO,
    "inprogress": TaskStatus.IN_PROGRESS,
    "done": TaskStatus.DONE,
}


def build_parser() -> argparse.ArgumentParser:
    """The argument parser with one sub-command per action."""
    parser = argparse.ArgumentParser(prog="kae", description="Keep a small todo list.")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    commands.add_parser("init", help="Initialize a new project.")

    list_cmd = commands.add_parser("list", help="List existing items")
    list_cmd.add_argument("-n", "--name", help="Name of todos to filter by")
    list_cmd.add_argument("-i", "--id", type=uuid.UUID, help="ID of todo to fetch")
    list_cmd.add_argument("-a", "--all", action="store_true", help="List all todos")

    add_cmd = commands.add_parser("add", help="Add a new item")
    add_cmd.add_argument("name")
    add_cmd.add_argument("description")

    commands.add_parser("remove", help="Remove an existing item.")

    update_cmd = commands.add_parser("update", help="Update an existing item.")
    update_cmd.add_argument(
        "-i", "--id", type=uuid.UUID, required=True, help="ID of the todo to update"
    )
    update_cmd.add_argument("--name", help="New name for the todo")
    update_cmd.add_argument("--description", help="New description for the todo")
    update_cmd.add_argument(
        "--status", help="New status for the todo (Todo, InProgress, Done)"
    )
    return parser


def parse_status(value: str) -> TaskStatus:
    """Read a status name, ignoring case; raises ValueError for unknown names."""
    try:
        return _STATUS_NAMES[value.lower()]
    except KeyError:
        raise ValueError(
            f"Invalid status: {value}. Must be one of Todo, InProgress, Done"
        ) from None


def update_task(
    tasks: list[Task],
    task_id: uuid.UUID,
    name: str | None,
    description: str | None,
    status: str | None,
) -> Task:
    """Apply the given changes to the task with ``task_id`` and return it.

    Raises LookupError when no task has that id and ValueError for an unknown status.
    """
    task = next((t for t in tasks if t.id == task_id), None)
    if task is None:
        raise LookupError(f"Task with ID {task_id} not found")
    if name is not None:
        task.name = name
    if description is not None:
        task.description = description
    if status is not None:
        task.status = parse_status(status)
    return task


def handle_command(args: argparse.Namespace) -> None:
    """Carry out the parsed command."""
    if args.command == "init":
        utils.init_todos()
    elif args.command == "list":
        tasks = Task.from_file(utils.CONFIG_PATH)
        curses.wrapper(UI(tasks).run)
    elif args.command == "update":
        tasks = Task.from_file(utils.CONFIG_PATH)
        update_task(tasks, args.id, args.name, args.description, args.status)
        utils.write_todos_to(utils.CONFIG_PATH, dump_tasks(tasks))
        logger.info("Task %s updated successfully.", args.id)
    # "add" and "remove" are accepted but change nothing.


def _configure_logging() -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("kae").setLevel(logging.DEBUG)
    logging.getLogger("kae.task").setLevel(logging.INFO)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; failures are logged rather than raised."""
    _configure_logging()
    logger.debug("arigato!!")
    args = build_parser().parse_args(argv)
    try:
        handle_command(args)
    except (OSError, ValueError, LookupError) as exc:
        logger.error("error: %s", exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())