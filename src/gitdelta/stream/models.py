"""Data models for the diff stream: states, effects, and the painter interface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Tuple, Union

from pygments.lexer import Lexer

from gitdelta.config.schema import SectionStyle

# A Pygments lexer selected for the current file, or None.
SyntaxContext = Optional[Lexer]


class State(Enum):
    COMMIT_META = "commit_meta"  # commit metadata section
    FILE_META = "file_meta"  # between commit metadata and the first hunk
    HUNK_META = "hunk_meta"  # hunk header line
    HUNK_ZERO = "hunk_zero"  # unchanged line in a hunk
    HUNK_MINUS = "hunk_minus"  # removed line in a hunk
    HUNK_PLUS = "hunk_plus"  # added line in a hunk
    UNKNOWN = "unknown"

    @property
    def is_in_hunk(self) -> bool:
        return self in (State.HUNK_META, State.HUNK_ZERO, State.HUNK_MINUS, State.HUNK_PLUS)


# --- Effects returned by the classifier, executed by the driver ---


@dataclass(frozen=True)
class Flush:
    """Finalize any pending removed/added lines."""


@dataclass(frozen=True)
class SelectSyntax:
    """Replace the syntax context using a file extension (None disables highlighting)."""

    extension: Optional[str]


@dataclass(frozen=True)
class DrawHeader:
    """Draw a commit, file or hunk header for *line*.

    Commit lines keep their escapes (git colours ref decorations); file and
    hunk lines are ANSI-stripped.
    """

    state: State
    line: str


@dataclass(frozen=True)
class Passthrough:
    """Write the original line verbatim, escapes included."""

    raw_line: str


@dataclass(frozen=True)
class PushRemoved:
    line: str


@dataclass(frozen=True)
class PushAdded:
    line: str


@dataclass(frozen=True)
class PaintContext:
    """Paint an unchanged hunk line on its own."""

    line: str


Effect = Union[Flush, SelectSyntax, DrawHeader, Passthrough, PushRemoved, PushAdded, PaintContext]


@dataclass(frozen=True)
class Transition:
    """Result of classifying one line. No effects means the line is suppressed."""

    next_state: State
    effects: Tuple[Effect, ...] = ()


@dataclass
class StreamStats:
    """Counters for one run of the driver."""

    lines_read: int = 0
    lines_suppressed: int = 0
    headers_drawn: int = 0
    files_seen: int = 0
    flushes: int = 0
    paired_flushes: int = 0
    duration_ms: float = 0.0


class Painter(Protocol):
    """What the stream driver needs from a renderer."""

    def paint_lines(
        self, lines: List[str], syntax: SyntaxContext, state: State = State.HUNK_ZERO
    ) -> None:
        """Paint *lines* as one group styled for *state* (zero, minus or plus)."""

    def paint_buffered(self, removed: List[str], added: List[str], syntax: SyntaxContext) -> None:
        """Paint a removed block against the added block that replaced it."""

    def draw_header(
        self,
        state: State,
        style: SectionStyle,
        content: str,
        syntax: SyntaxContext,
        line_number: str = "",
    ) -> None:
        """Draw the header of a commit, file or hunk region.

        *content* is the commit line, the file change description, or the
        hunk's code fragment; *line_number* is only set for hunks.
        """

    def write_raw(self, raw_line: str) -> None:
        """Queue a line to be written unchanged."""

    def emit(self) -> None:
        """Write everything queued so far to the output sink."""
