import pytest

from kae import style
from kae.style import Rgb, alternate_colors


def test_even_rows_use_normal_background():
    assert alternate_colors(0) == style.NORMAL_ROW_BG
    assert alternate_colors(4) == style.NORMAL_ROW_BG


def test_odd_rows_use_alternate_background():
    assert alternate_colors(1) == style.ALT_ROW_BG_COLOR
    assert alternate_colors(7) == style.ALT_ROW_BG_COLOR


@pytest.mark.parametrize("i", range(10))
def test_neighbouring_rows_differ(i):
    assert alternate_colors(i) == alternate_colors(i + 2)
    assert alternate_colors(i) != alternate_colors(i + 1)


def test_status_colours_differ_from_row_backgrounds():
    colours = {
        style.TODO_TEXT_FG_COLOR,
        style.IN_PROGRESS_TEXT_FG_COLOR,
        style.COMPLETED_TEXT_FG_COLOR,
    }
    assert len(colours) == 3
    backgrounds = {alternate_colors(0), alternate_colors(1)}
    assert len(backgrounds) == 2
    assert colours.isdisjoint(backgrounds)
    for colour in colours | backgrounds:
        assert isinstance(colour, Rgb)
        assert all(0 <= part <= 255 for part in colour)


def test_rgb_fields():
    colour = Rgb(1, 2, 3)
    assert (colour.r, colour.g, colour.b) == (1, 2, 3)