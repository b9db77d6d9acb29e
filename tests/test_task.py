import json
import uuid

import pytest

from kae.task import ListMode, Task, TaskList, TaskStatus, dump_tasks


def make_tasks(n):
    return [Task.new(f"task {i}", f"about {i}") for i in range(n)]


def test_status_cycle_returns_to_start():
    assert TaskStatus.TODO.next() is TaskStatus.IN_PROGRESS
    assert TaskStatus.IN_PROGRESS.next() is TaskStatus.DONE
    assert TaskStatus.DONE.next() is TaskStatus.TODO


def test_status_symbols():
    assert TaskStatus.TODO.symbol() == "☐"
    assert TaskStatus.IN_PROGRESS.symbol() == "◌"
    assert TaskStatus.DONE.symbol() == "✓"


def test_new_task_defaults():
    task = Task.new("write", "the report")
    assert task.status is TaskStatus.TODO
    assert task.name == "write"
    assert task.description == "the report"
    assert Task.new("a", "b").id != task.id


def test_list_label():
    task = Task.new("shop", "milk")
    assert task.list_label() == " ☐ shop"
    task.status = TaskStatus.DONE
    assert task.list_label() == " ✓ shop"


def test_dict_round_trip():
    task = Task(uuid.uuid4(), "n", "d", TaskStatus.IN_PROGRESS)
    data = task.to_dict()
    assert data["status"] == "InProgress"
    assert Task.from_dict(data) == task


def test_from_dict_ignores_extra_fields():
    task = Task.new("n", "d")
    data = task.to_dict() | {"extra": 1}
    assert Task.from_dict(data) == task


def test_from_dict_unknown_status():
    data = Task.new("n", "d").to_dict() | {"status": "Later"}
    with pytest.raises(ValueError):
        Task.from_dict(data)


def test_from_dict_missing_field():
    data = Task.new("n", "d").to_dict()
    del data["description"]
    with pytest.raises(ValueError, match="description"):
        Task.from_dict(data)


def test_from_dict_bad_uuid():
    data = Task.new("n", "d").to_dict() | {"id": "not-a-uuid"}
    with pytest.raises(ValueError):
        Task.from_dict(data)


def test_dump_empty_list():
    assert dump_tasks([]) == "[]"


def test_dump_and_load_file(tmp_path):
    tasks = make_tasks(3)
    tasks[1].status = TaskStatus.DONE
    path = tmp_path / "todo.json"
    path.write_text(dump_tasks(tasks), encoding="utf-8")
    assert Task.from_file(path) == tasks


def test_dump_keeps_unicode():
    task = Task.new("café ✓", "")
    text = dump_tasks([task])
    assert "café ✓" in text
    assert json.loads(text)[0]["name"] == "café ✓"


def test_from_file_rejects_non_list(tmp_path):
    path = tmp_path / "todo.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError):
        Task.from_file(path)


def test_from_file_rejects_bad_json(tmp_path):
    path = tmp_path / "todo.json"
    path.write_text("[", encoding="utf-8")
    with pytest.raises(ValueError):
        Task.from_file(path)


def test_task_list_defaults():
    task_list = TaskList(make_tasks(2))
    assert task_list.selected is None
    assert task_list.mode is ListMode.VIEW
    assert task_list.selected_task() is None


def test_select_next_from_nothing_and_clamp():
    task_list = TaskList(make_tasks(2))
    task_list.select_next()
    assert task_list.selected == 0
    task_list.select_next()
    task_list.select_next()
    assert task_list.selected == 1
    assert task_list.selected_task() is task_list.tasks[1]


def test_select_previous_from_nothing_goes_last():
    task_list = TaskList(make_tasks(3))
    task_list.select_previous()
    assert task_list.selected == 2
    task_list.select_first()
    task_list.select_previous()
    assert task_list.selected == 0


def test_select_last_and_none():
    task_list = TaskList(make_tasks(4))
    task_list.select_last()
    assert task_list.selected == 3
    task_list.select(None)
    assert task_list.selected is None


def test_selection_on_empty_list_stays_none():
    task_list = TaskList([])
    task_list.select_next()
    task_list.select_first()
    task_list.select_last()
    assert task_list.selected is None
    assert task_list.selected_task() is None