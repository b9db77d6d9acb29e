# kae

A small to-do list manager for the terminal. Tasks are stored as JSON in
`.todo/todo.json` in the current directory, so each project can keep its own list.
The interactive view uses the standard `curses` module, so it needs a terminal
where `curses` is available (Linux, macOS and other POSIX systems).

## Installation

```
pip install .
```

## Usage

Create the task file in the current directory:

```
kae init
```

This creates `.todo/` if needed and writes an empty list (`[]`) to
`.todo/todo.json`. It reports an error if that file already exists.

Open the interactive list view:

```
kae list
```

Keys in the list view:

| Key        | Action                                        |
|------------|-----------------------------------------------|
| ↓ / ↑      | move the selection                            |
| ←          | clear the selection                           |
| Home / End | jump to the first / last task                 |
| Tab        | cycle status: Todo → InProgress → Done → Todo |
| e          | edit the selected task's name                 |
| d          | edit the selected task's description          |
| i          | switch to INSERT mode (Esc returns to VIEW)   |
| q          | quit                                          |

While editing, type to change the text, Backspace to delete, Enter to save or
Esc to cancel. Every status change and confirmed edit is written straight back
to the task file.

Update a task from the command line by its ID:

```
kae update --id 3f2b8c1e-0000-4000-8000-000000000000 --name "New name"
kae update --id 3f2b8c1e-0000-4000-8000-000000000000 --description "New text"
kae update --id 3f2b8c1e-0000-4000-8000-000000000000 --status done
```

`--status` accepts `todo`, `inprogress` or `done` (case does not matter).
An unknown status or an ID that is not in the file is reported as an error
and the file is left unchanged. Errors are logged; the command still exits
with status 0.

## What it does not do

- `kae add NAME DESCRIPTION` and `kae remove` are accepted but change nothing.
  Tasks have to be added to or removed from `.todo/todo.json` by hand.
- The `--name`, `--id` and `--all` options of `kae list` are accepted but do
  not filter the view; it always shows every task.
- INSERT mode in the list view has no editing behaviour; it only waits for Esc.

## File format

The task file is a JSON array of objects:

```json
[
  {
    "id": "3f2b8c1e-0000-4000-8000-000000000000",
    "name": "Write report",
    "description": "Quarterly summary",
    "status": "Todo"
  }
]
```

`status` is one of `Todo`, `InProgress` or `Done`.

## Using it from Python

- `kae.task.Task` holds one task; `Task.from_file(path)` loads a task file and
  `kae.task.dump_tasks(tasks)` serialises tasks as pretty-printed JSON.
- `kae.task.TaskList` keeps tasks with a selected row and clamped selection moves.
- `kae.ui.UI(tasks, path)` is the interactive view; `handle_key` applies one key
  and `run(screen)` drives it on a curses window.
- `kae.cli.update_task(tasks, task_id, name, description, status)` applies the
  same changes as `kae update` to a list of tasks.

## Development

```
pip install -e ".[test]"
pytest
```