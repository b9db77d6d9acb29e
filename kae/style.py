"""Colours used by the terminal interface."""

from __future__ import annotations

from typing import NamedTuple


class Rgb(NamedTuple):
    """A 24-bit colour."""

    r: int
    g: int
    b: int


def _hex(value: int) -> Rgb:
    return Rgb((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


_SLATE_100 = _hex(0xF1F5F9)
_SLATE_200 = _hex(0xE2E8F0)
_SLATE_800 = _hex(0x1E293B)
_SLATE_900 = _hex(0x0F172A)
_SLATE_950 = _hex(0x020617)
_FUCHSIA_300 = _hex(0xF0ABFC)
_GREEN_500 = _hex(0x22C55E)
_BLUE_800 = _hex(0x1E40AF)

TODO_TEXT_FG_COLOR = _SLATE_200
IN_PROGRESS_TEXT_FG_COLOR = _FUCHSIA_300
COMPLETED_TEXT_FG_COLOR = _GREEN_500

TODO_HEADER_FG = _SLATE_100
TODO_HEADER_BG = _BLUE_800
NORMAL_ROW_BG = _SLATE_950
ALT_ROW_BG_COLOR = _SLATE_900
SELECTED_BG = _SLATE_800
SELECTED_BOLD = True
TEXT_FG_COLOR = _SLATE_200


def alternate_colors(i: int) -> Rgb:
    """Background colour of the list row at index ``i``."""
    return NORMAL_ROW_BG if i % 2 == 0 else ALT_ROW_BG_COLOR