"""Interactive terminal view for browsing and editing tasks."""

from __future__ import annotations

import curses
import logging
import textwrap
from enum import Enum
from pathlib import Path
from typing import Any, Union

from kae import style, utils
from kae.style import Rgb
from kae.task import Task, TaskList, TaskStatus, dump_tasks

logger = logging.getLogger(__name__)

VIEW_HELP = (
    "Use ↓↑ to move, ← to unselect, TAB to change status, "
    "'e' to edit name, 'd' to edit description, 'q' to exit"
)
EDIT_HELP = "Type to edit, Enter to save, Esc to cancel"


class UIMode(Enum):
    VIEW = "VIEW"
    INSERT = "INSERT"
    EDIT_NAME = "EDIT NAME"
    EDIT_DESCRIPTION = "EDIT DESCRIPTION"


class ActiveEditField(Enum):
    NONE = "none"
    NAME = "name"
    DESCRIPTION = "description"


class Key(Enum):
    """Non-character keys the interface reacts to."""

    ESC = "esc"
    ENTER = "enter"
    BACKSPACE = "backspace"
    TAB = "tab"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"


KeyInput = Union[Key, str]

_CONTROL_CHARS = {
    "\x1b": Key.ESC,
    "\n": Key.ENTER,
    "\r": Key.ENTER,
    "\t": Key.TAB,
    "\x7f": Key.BACKSPACE,
    "\b": Key.BACKSPACE,
}

_CURSES_KEYS = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_ENTER: Key.ENTER,
}

_STATUS_FG = {
    TaskStatus.TODO: style.TODO_TEXT_FG_COLOR,
    TaskStatus.IN_PROGRESS: style.IN_PROGRESS_TEXT_FG_COLOR,
    TaskStatus.DONE: style.COMPLETED_TEXT_FG_COLOR,
}

_STATUS_LABELS = {
    TaskStatus.DONE: "✓ DONE",
    TaskStatus.TODO: "☐ TODO",
    TaskStatus.IN_PROGRESS: "◌ IN PROGRESS",
}

_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def key_from_curses(code: int | str) -> KeyInput | None:
    """Translate a value from ``getch``/``get_wch`` into a key, or ``None`` if unknown."""
    if isinstance(code, str):
        if code in _CONTROL_CHARS:
            return _CONTROL_CHARS[code]
        return code if len(code) == 1 and code.isprintable() else None
    if code in _CURSES_KEYS:
        return _CURSES_KEYS[code]
    if 0 <= code < 0x110000:
        return key_from_curses(chr(code))
    return None


def _center(text: str, width: int) -> str:
    if len(text) >= width:
        return text[:width]
    return text.center(width)


def _put(screen: Any, y: int, x: int, text: str, width: int, attr: int = 0) -> None:
    if width <= 0:
        return
    try:
        screen.addstr(y, x, text[:width], attr)
    except curses.error:
        # Writing into the bottom-right cell moves the cursor off screen.
        pass


def _nearest_level(component: int) -> int:
    return min(range(len(_CUBE_LEVELS)), key=lambda i: abs(_CUBE_LEVELS[i] - component))


def _color_index(rgb: Rgb) -> int:
    if curses.COLORS >= 256:
        r, g, b = (_nearest_level(c) for c in rgb)
        return 16 + 36 * r + 6 * g + b
    return (rgb.r > 127) + (rgb.g > 127) * 2 + (rgb.b > 127) * 4


class UI:
    """State and key handling of the task browser."""

    def __init__(self, tasks: list[Task], path: str | Path = utils.CONFIG_PATH) -> None:
        self.task_list = TaskList(tasks=list(tasks))
        self.path = Path(path)
        self.should_exit = False
        self.mode = UIMode.VIEW
        self.input_buffer = ""
        self.active_edit_field = ActiveEditField.NONE
        self._offset = 0
        self._colors_enabled = False
        self._pairs: dict[tuple[Rgb, Rgb], int] = {}

    # -- key handling -------------------------------------------------

    def handle_key(self, key: KeyInput) -> None:
        """Apply one key press to the interface state."""
        if self.mode is UIMode.VIEW:
            self._handle_view_key(key)
        elif self.mode is UIMode.INSERT:
            if key is Key.ESC:
                self.mode = UIMode.VIEW
        else:
            self._handle_edit_key(key)

    def _handle_view_key(self, key: KeyInput) -> None:
        task = self.task_list.selected_task()
        if key == "q":
            self.should_exit = True
        elif key == "i":
            self.mode = UIMode.INSERT
        elif key == "e":
            if task is not None:
                self.mode = UIMode.EDIT_NAME
                self.active_edit_field = ActiveEditField.NAME
                self.input_buffer = task.name
        elif key == "d":
            if task is not None:
                self.mode = UIMode.EDIT_DESCRIPTION
                self.active_edit_field = ActiveEditField.DESCRIPTION
                self.input_buffer = task.description
        elif key is Key.ESC:
            self.mode = UIMode.VIEW
        elif key is Key.LEFT:
            self.task_list.select(None)
        elif key is Key.DOWN:
            self.task_list.select_next()
        elif key is Key.UP:
            self.task_list.select_previous()
        elif key is Key.HOME:
            self.task_list.select_first()
        elif key is Key.END:
            self.task_list.select_last()
        elif key is Key.TAB:
            self._toggle_status_and_save()

    def _handle_edit_key(self, key: KeyInput) -> None:
        if isinstance(key, str):
            self.input_buffer += key
        elif key is Key.BACKSPACE:
            self.input_buffer = self.input_buffer[:-1]
        elif key is Key.ENTER:
            self._confirm_edit_and_save()
            self._leave_edit()
        elif key is Key.ESC:
            self._leave_edit()

    def _leave_edit(self) -> None:
        self.mode = UIMode.VIEW
        self.active_edit_field = ActiveEditField.NONE
        self.input_buffer = ""

    def toggle_status(self) -> None:
        """Advance the selected task to its next status."""
        task = self.task_list.selected_task()
        if task is not None:
            task.status = task.status.next()

    def _toggle_status_and_save(self) -> None:
        self.toggle_status()
        try:
            self.save_tasks()
        except (OSError, ValueError) as exc:
            logger.error("Failed to save tasks after toggling status: %s", exc)

    def _confirm_edit_and_save(self) -> None:
        task = self.task_list.selected_task()
        if task is None:
            return
        if self.active_edit_field is ActiveEditField.NAME:
            task.name = self.input_buffer
        elif self.active_edit_field is ActiveEditField.DESCRIPTION:
            task.description = self.input_buffer
        try:
            self.save_tasks()
        except (OSError, ValueError) as exc:
            logger.error("Failed to save tasks after confirming edit: %s", exc)

    def save_tasks(self) -> None:
        """Write all tasks to the store file."""
        utils.write_todos_to(self.path, dump_tasks(self.task_list.tasks))

    # -- text content -------------------------------------------------

    def footer_text(self) -> str:
        """The help line shown at the bottom of the screen."""
        help_text = VIEW_HELP if self.mode in (UIMode.VIEW, UIMode.INSERT) else EDIT_HELP
        return f"{help_text} | mode: {self.mode.value} "

    def detail_lines(self) -> list[tuple[str, bool]]:
        """Lines of the detail pane as ``(text, bold)`` pairs."""
        task = self.task_list.selected_task()
        if task is None:
            return [("Nothing selected...", False)]

        lines: list[tuple[str, bool]] = []
        if self.mode is UIMode.EDIT_NAME and self.active_edit_field is ActiveEditField.NAME:
            lines.append((f"Name: {self.input_buffer}_", True))
        else:
            lines.append((f"Name: {task.name}", False))

        if (
            self.mode is UIMode.EDIT_DESCRIPTION
            and self.active_edit_field is ActiveEditField.DESCRIPTION
        ):
            lines.append((f"Description: {self.input_buffer}_", True))
        else:
            lines.append((f"Description: {task.description}", False))

        lines.append((f"Status: {_STATUS_LABELS[task.status]}", False))
        return lines

    # -- drawing ------------------------------------------------------

    def _attr(self, fg: Rgb, bg: Rgb) -> int:
        if not self._colors_enabled:
            return 0
        pair = self._pairs.get((fg, bg))
        if pair is None:
            pair = len(self._pairs) + 1
            if pair >= curses.COLOR_PAIRS:
                return 0
            curses.init_pair(pair, _color_index(fg), _color_index(bg))
            self._pairs[(fg, bg)] = pair
        return curses.color_pair(pair)

    def render(self, screen: Any) -> None:
        """Draw the whole interface onto a curses window."""
        screen.erase()
        height, width = screen.getmaxyx()
        if height <= 0 or width <= 0:
            return
        header_h = min(2, height)
        footer_h = 1 if height > header_h else 0
        main_h = height - header_h - footer_h

        _put(screen, 0, 0, _center("KAE", width), width, curses.A_BOLD)
        if footer_h:
            _put(screen, height - 1, 0, _center(self.footer_text(), width), width)
        if main_h > 0:
            list_w = (width + 2) // 4
            self._render_list(screen, header_h, 0, main_h, list_w)
            self._render_detail(screen, header_h, list_w, main_h, width - list_w)
        screen.refresh()

    def _render_list(self, screen: Any, top: int, left: int, height: int, width: int) -> None:
        header = self._attr(style.TODO_HEADER_FG, style.TODO_HEADER_BG)
        _put(screen, top, left, _center("TODO List", width).ljust(width), width, header)

        rows = height - 1
        selected = self.task_list.selected
        if selected is not None and rows > 0:
            if selected < self._offset:
                self._offset = selected
            elif selected >= self._offset + rows:
                self._offset = selected - rows + 1
        visible = self.task_list.tasks[self._offset:self._offset + max(rows, 0)]

        for row, (index, task) in enumerate(enumerate(visible, start=self._offset)):
            is_selected = index == selected
            bg = style.SELECTED_BG if is_selected else style.alternate_colors(index)
            attr = self._attr(_STATUS_FG[task.status], bg)
            if is_selected and style.SELECTED_BOLD:
                attr |= curses.A_BOLD
            prefix = ">" if is_selected else " "
            text = (prefix + task.list_label()).ljust(width)
            _put(screen, top + 1 + row, left, text, width, attr)

        blank = self._attr(style.TEXT_FG_COLOR, style.NORMAL_ROW_BG)
        for row in range(len(visible), rows):
            _put(screen, top + 1 + row, left, " " * width, width, blank)

    def _render_detail(self, screen: Any, top: int, left: int, height: int, width: int) -> None:
        header = self._attr(style.TODO_HEADER_FG, style.TODO_HEADER_BG)
        _put(screen, top, left, _center("TODO Info", width).ljust(width), width, header)

        inner = max(width - 2, 1)
        base = self._attr(style.TEXT_FG_COLOR, style.NORMAL_ROW_BG)
        body: list[tuple[str, int]] = []
        if self.task_list.selected_task() is None:
            text, _ = self.detail_lines()[0]
            body.append((_center(text, inner), base))
        else:
            for text, bold in self.detail_lines():
                attr = base | (curses.A_BOLD if bold else 0)
                wrapped = textwrap.wrap(
                    text, inner, drop_whitespace=False, replace_whitespace=False
                ) or [""]
                body.extend((piece, attr) for piece in wrapped)

        rows = height - 1
        for row in range(max(rows, 0)):
            text, attr = body[row] if row < len(body) else ("", base)
            padded = (" " + text.ljust(inner) + " ")[:width]
            _put(screen, top + 1 + row, left, padded, width, attr)

    # -- main loop ----------------------------------------------------

    def _setup_terminal(self, screen: Any) -> None:
        screen.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        try:
            if curses.has_colors():
                curses.start_color()
                self._colors_enabled = True
        except curses.error:
            self._colors_enabled = False

    def run(self, screen: Any) -> None:
        """Draw and react to keys until the user quits."""
        self._setup_terminal(screen)
        while not self.should_exit:
            self.render(screen)
            key = key_from_curses(screen.get_wch())
            if key is not None:
                self.handle_key(key)