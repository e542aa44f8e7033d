# test_frame.py

import re

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cardline.display.colors import CLEAR_LINE, RESET, Color, change_color, cursor_up
from cardline.display.frame import Cell, Frame, MAX_ROWS

COLOR_ESCAPE = re.compile(r'\x1b\[\d+;\d+m')
CURSOR_UP = re.compile(r'\x1b\[(\d+)A')
ANY_SGR = re.compile(r'\x1b\[[\d;]*m')


def final_row(output: str, start_row: int) -> int:
    """Where the cursor ends, counted in rows, after writing output."""
    ups = sum(int(n) for n in CURSOR_UP.findall(output))
    return start_row + output.count("\n") - ups


def framed(*draws) -> Frame:
    frame = Frame()
    for args in draws:
        frame.draw(*args)
    return frame


class TestDraw:
    """Drawing text into a frame buffer."""

    def test_multiline_draw_scenario(self):
        frame = Frame()
        frame.draw("ab\ncd", 0, 0, Color.RED, Color.DEFAULT)
        assert frame.text == ["ab", "cd"]
        for line in frame.lines:
            assert [c.colors for c in line.cells] == [(Color.RED, Color.DEFAULT)] * 2
        expected = (
            CLEAR_LINE + "\x1b[31;49m" + "ab" + RESET + "\n"
            + CLEAR_LINE + "\x1b[31;49m" + "cd" + RESET + "\n"
        )
        assert frame.render() == expected

    def test_draw_is_idempotent(self):
        once = framed(("xy\nz", 2, 1, Color.GREEN, Color.BLACK))
        twice = framed(("xy\nz", 2, 1, Color.GREEN, Color.BLACK),
                       ("xy\nz", 2, 1, Color.GREEN, Color.BLACK))
        assert once == twice
        assert once.render() == twice.render()

    def test_draw_past_line_end_pads_with_default_blanks(self):
        frame = framed(("x", 3, 0, Color.RED))
        assert frame.text == ["   x"]
        cells = frame.lines[0].cells
        assert cells[:3] == [Cell()] * 3
        assert cells[3] == Cell("x", (Color.RED, Color.DEFAULT))

    def test_overwrite_replaces_glyphs_and_colors(self):
        frame = framed(("hello", 0, 0), ("XY", 1, 0, Color.GREEN))
        assert frame.text == ["hXYlo"]
        colors = [c.colors[0] for c in frame.lines[0].cells]
        assert colors == [Color.DEFAULT, Color.GREEN, Color.GREEN,
                          Color.DEFAULT, Color.DEFAULT]

    def test_line_width_never_shrinks(self):
        frame = framed(("abcdef", 0, 0), ("ab", 0, 0))
        assert frame.lines[0].width == 6
        assert frame.text == ["abcdef"]

    def test_rows_beyond_cap_are_dropped(self):
        frame = Frame(max_rows=3)
        frame.draw("a\nb\nc\nd\ne", 0, 1)
        assert frame.line_count == 3
        assert frame.text == ["", "a", "b"]

    def test_default_cap(self):
        frame = Frame()
        frame.draw("x", 0, MAX_ROWS + 5)
        assert frame.line_count == MAX_ROWS
        assert set(frame.text) == {""}

    def test_negative_coordinates_clip(self):
        frame = Frame()
        frame.draw("abc\ndef", -2, -1)
        assert frame.text == ["f"]

    def test_unset_colors_default(self):
        frame = Frame()
        frame.draw("ab", 0, 0, None, None)
        frame.draw("c", 2, 0, Color.RED, None)
        assert [c.colors for c in frame.lines[0].cells] == [
            (Color.DEFAULT, Color.DEFAULT),
            (Color.DEFAULT, Color.DEFAULT),
            (Color.RED, Color.DEFAULT),
        ]

    def test_text_matches_line_text(self):
        frame = framed(("ab\ncd", 1, 0))
        assert frame.text == [line.text for line in frame.lines] == [" ab", " cd"]

    def test_empty_draw_line_writes_nothing(self):
        frame = framed(("", 0, 2))
        assert frame.text == ["", "", ""]
        assert all(line.width == 0 for line in frame.lines)


class TestRender:
    """Rendering a frame and diffing it against the previous one."""

    def test_color_runs_emit_one_escape_each(self):
        short = framed(("aa", 0, 0, Color.RED), ("bb", 2, 0, Color.GREEN),
                       ("cc", 4, 0, Color.RED))
        long = framed(("a" * 40, 0, 0, Color.RED), ("b" * 40, 40, 0, Color.GREEN),
                      ("c" * 40, 80, 0, Color.RED))
        assert len(COLOR_ESCAPE.findall(short.render())) == 3
        assert len(COLOR_ESCAPE.findall(long.render())) == 3

    def test_escape_count_per_line(self):
        ends_colored = framed(("aa", 0, 0), ("bb", 2, 0, Color.RED))
        ends_default = framed(("aa", 0, 0, Color.RED), ("bb", 2, 0))
        # a line ending off the default pair adds one plain reset
        assert len(ANY_SGR.findall(ends_colored.render())) == 2 + 1
        assert ends_colored.render().endswith(RESET + "\n")
        assert len(ANY_SGR.findall(ends_default.render())) == 2
        assert RESET not in ends_default.render()

    def test_background_change_starts_a_run(self):
        frame = framed(("ab", 0, 0, Color.RED), ("b", 1, 0, Color.RED, Color.BLUE))
        assert COLOR_ESCAPE.findall(frame.render()) == [
            change_color(Color.RED, Color.DEFAULT),
            change_color(Color.RED, Color.BLUE),
        ]

    def test_default_colored_line_needs_no_reset(self):
        frame = framed(("plain", 0, 0))
        assert frame.render() == CLEAR_LINE + "\x1b[39;49mplain\n"

    def test_bright_colors_use_high_codes(self):
        assert change_color(Color.WHITE, Color.DARK_GRAY) == "\x1b[97;100m"
        assert change_color(Color.LIGHT_CYAN, Color.BLACK) == "\x1b[96;40m"

    def test_empty_to_empty_diff_is_silent(self):
        assert Frame().replace(Frame()) == ""
        assert Frame().replace(None) == ""

    def test_first_render_diffs_against_empty(self):
        frame = framed(("ab\ncd", 0, 0, Color.RED))
        assert frame.replace(None) == frame.render()
        assert CURSOR_UP.search(frame.replace(Frame())) is None

    def test_replace_unchanged_frame_is_idempotent(self):
        frame = framed(("ab\ncd", 1, 1, Color.YELLOW))
        first = frame.replace(frame)
        assert first == frame.replace(frame)
        assert first == cursor_up(3) + frame.render()

    def test_shrinking_diff_clears_extra_lines(self):
        previous = framed(("1\n2\n3\n4\n5", 0, 0))
        current = framed(("a\nb", 0, 0))
        output = current.replace(previous)
        tail = output[len(cursor_up(5) + current.render()):]
        assert tail.count(CLEAR_LINE) == 3
        assert final_row(output, 5) == 2

    def test_shrinking_diff_ends_where_same_height_diff_does(self):
        previous_tall = framed(("1\n2\n3\n4", 0, 0))
        previous_same = framed(("1\n2", 0, 0))
        current = framed(("a\nb", 0, 0))
        tall = current.replace(previous_tall)
        same = current.replace(previous_same)
        assert final_row(tall, 4) == final_row(same, 2) == current.line_count

    def test_repeated_ticks_stay_aligned(self):
        heights = [3, 5, 1, 0, 4, 4, 2]
        row, top, last = 0, 0, Frame()
        for height in heights:
            frame = framed(*[("x", 0, r) for r in range(height)])
            row = final_row(frame.replace(last), row)
            assert row - top == height
            last = frame

    def test_growing_diff_renders_everything(self):
        previous = framed(("a", 0, 0))
        current = framed(("a\nb\nc", 0, 0))
        assert current.replace(previous) == cursor_up(1) + current.render()

    def test_reset_moves_above_frame(self):
        assert framed(("a\nb", 0, 0)).reset() == "\x1b[2A"
        assert Frame().reset() == ""
