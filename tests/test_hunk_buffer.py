"""Tests for line preparation and the removed/added hunk buffer."""

from gitdelta.stream.hunk_buffer import HunkBuffer, prepare_line
from gitdelta.stream.models import State

from conftest import PY_LEXER, RecordingPainter


class TestPrepareLine:
    def test_marker_replaced(self):
        assert prepare_line("-old") == " old"
        assert prepare_line("+new") == " new"
        assert prepare_line(" same") == " same"

    def test_padded_to_width(self):
        assert prepare_line("-ab", 6) == " ab   "

    def test_never_truncated(self):
        assert prepare_line("+abcdefgh", 4) == " abcdefgh"

    def test_empty_line(self):
        assert prepare_line("") == ""
        assert prepare_line("", 3) == "   "

    def test_wide_characters_counted_by_cells(self):
        # Each CJK character takes two terminal cells
        assert prepare_line("+日本", 7) == " 日本  "


class TestHunkBuffer:
    def test_empty_flush_is_noop(self):
        painter = RecordingPainter()
        buffer = HunkBuffer()
        assert buffer.flush(painter, PY_LEXER) is False
        assert painter.calls == []
        assert buffer.flushes == 0

    def test_paired_flush_is_one_call(self):
        painter = RecordingPainter()
        buffer = HunkBuffer()
        for line in ("-a", "-b"):
            buffer.push_removed(line)
        for line in ("+c", "+d", "+e"):
            buffer.push_added(line)
        assert buffer.flush(painter, PY_LEXER) is True
        assert painter.calls == [("paired", [" a", " b"], [" c", " d", " e"])]
        assert buffer.paired_flushes == 1

    def test_removed_only(self):
        painter = RecordingPainter()
        buffer = HunkBuffer()
        buffer.push_removed("-gone")
        buffer.flush(painter, PY_LEXER)
        assert painter.calls == [("lines", State.HUNK_MINUS, [" gone"])]
        assert buffer.paired_flushes == 0

    def test_added_only(self):
        painter = RecordingPainter()
        buffer = HunkBuffer()
        buffer.push_added("+new")
        buffer.flush(painter, PY_LEXER)
        assert painter.calls == [("lines", State.HUNK_PLUS, [" new"])]

    def test_flush_clears(self):
        painter = RecordingPainter()
        buffer = HunkBuffer()
        buffer.push_removed("-a")
        buffer.push_added("+b")
        buffer.flush(painter, PY_LEXER)
        assert buffer.is_empty
        assert len(buffer) == 0
        buffer.flush(painter, PY_LEXER)
        assert len(painter.calls) == 1

    def test_lines_prepared_with_width(self):
        buffer = HunkBuffer(width=5)
        buffer.push_removed("-ab")
        buffer.push_added("+abc")
        assert buffer.removed == [" ab  "]
        assert buffer.added == [" abc "]
