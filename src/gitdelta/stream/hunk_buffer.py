"""Pending removed/added lines of a hunk, painted together once the pair is complete."""

from __future__ import annotations

from typing import List, Optional

from rich.cells import cell_len

from gitdelta.stream.models import Painter, State, SyntaxContext


def prepare_line(line: str, width: Optional[int] = None) -> str:
    """Replace the leading -/+/space marker with a space and pad to *width* cells.

    Lines are never truncated.
    """
    if line:
        line = " " + line[1:]
    if width is not None:
        pad = width - cell_len(line)
        if pad > 0:
            line += " " * pad
    return line


class HunkBuffer:
    """Consecutive removed and added lines awaiting a paired paint.

    Usage::

        buffer = HunkBuffer(width=80)
        buffer.push_removed("-old")
        buffer.push_added("+new")
        buffer.flush(painter, syntax)   # one paint_buffered() call
    """

    def __init__(self, width: Optional[int] = None) -> None:
        self.removed: List[str] = []
        self.added: List[str] = []
        self._width = width
        self.flushes = 0
        self.paired_flushes = 0

    def __len__(self) -> int:
        return len(self.removed) + len(self.added)

    @property
    def is_empty(self) -> bool:
        return not self.removed and not self.added

    def push_removed(self, line: str) -> None:
        self.removed.append(prepare_line(line, self._width))

    def push_added(self, line: str) -> None:
        self.added.append(prepare_line(line, self._width))

    def flush(self, painter: Painter, syntax: SyntaxContext) -> bool:
        """Hand pending lines to *painter* and clear. Returns False if nothing was pending."""
        if self.is_empty:
            return False
        if self.removed and self.added:
            painter.paint_buffered(list(self.removed), list(self.added), syntax)
            self.paired_flushes += 1
        elif self.removed:
            painter.paint_lines(list(self.removed), syntax, State.HUNK_MINUS)
        else:
            painter.paint_lines(list(self.added), syntax, State.HUNK_PLUS)
        self.flushes += 1
        self.removed.clear()
        self.added.clear()
        return True
