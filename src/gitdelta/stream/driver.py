"""Reads diff lines, runs the state machine and executes its effects.

One StreamDriver handles one invocation. It owns the current state, the hunk
buffer and the syntax context; nothing is shared between drivers.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Optional

from rich.text import Text

from gitdelta.config.schema import DeltaConfig, SectionStyle
from gitdelta.output.syntax import find_context
from gitdelta.stream.classifier import classify
from gitdelta.stream.hunk_buffer import HunkBuffer, prepare_line
from gitdelta.stream.metadata import (
    get_file_change_description_from_diff_line,
    parse_hunk_metadata,
)
from gitdelta.stream.models import (
    DrawHeader,
    Effect,
    Flush,
    PaintContext,
    Painter,
    Passthrough,
    PushAdded,
    PushRemoved,
    SelectSyntax,
    State,
    StreamStats,
    SyntaxContext,
)

logger = logging.getLogger(__name__)

ContextLookup = Callable[[Optional[str]], SyntaxContext]


def strip_ansi(line: str) -> str:
    """Remove terminal escape sequences from *line*."""
    if "\x1b" not in line:
        return line
    return Text.from_ansi(line).plain


class StreamDriver:
    """Turn a stream of raw diff lines into painter calls.

    Usage::

        driver = StreamDriver(config, painter)
        stats = driver.run(sys.stdin)
    """

    def __init__(
        self,
        config: DeltaConfig,
        painter: Painter,
        *,
        context_lookup: ContextLookup = find_context,
    ) -> None:
        self._config = config
        self._painter = painter
        self._context_lookup = context_lookup
        self.state = State.UNKNOWN
        self.syntax: SyntaxContext = None
        self.buffer = HunkBuffer(config.output.width)
        self.stats = StreamStats()

    def run(self, lines: Iterable[str]) -> StreamStats:
        """Process every line of *lines*, then flush. Returns run statistics."""
        start = time.perf_counter()
        for raw_line in lines:
            self.feed(raw_line)
        self.finish()
        self.stats.duration_ms = (time.perf_counter() - start) * 1000
        return self.stats

    def feed(self, raw_line: str) -> None:
        """Classify one line and write whatever it produces."""
        line = strip_ansi(raw_line)
        transition = classify(
            self.state,
            line,
            raw_line,
            has_syntax=self.syntax is not None,
            sections=self._config.sections,
        )
        self.state = transition.next_state
        self.stats.lines_read += 1
        if not transition.effects:
            self.stats.lines_suppressed += 1
        for effect in transition.effects:
            self._apply(effect)
        self._painter.emit()

    def finish(self) -> None:
        """Flush anything still buffered at end of input."""
        self.buffer.flush(self._painter, self.syntax)
        self._painter.emit()
        self.stats.flushes = self.buffer.flushes
        self.stats.paired_flushes = self.buffer.paired_flushes

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, Flush):
            self.buffer.flush(self._painter, self.syntax)
        elif isinstance(effect, SelectSyntax):
            self._select_syntax(effect.extension)
        elif isinstance(effect, DrawHeader):
            self._draw_header(effect)
        elif isinstance(effect, Passthrough):
            self._painter.write_raw(effect.raw_line)
        elif isinstance(effect, PushRemoved):
            self.buffer.push_removed(effect.line)
        elif isinstance(effect, PushAdded):
            self.buffer.push_added(effect.line)
        elif isinstance(effect, PaintContext):
            line = prepare_line(effect.line, self._config.output.width)
            self._painter.paint_lines([line], self.syntax, State.HUNK_ZERO)
        else:
            raise TypeError(f"unknown effect: {effect!r}")

    def _select_syntax(self, extension: Optional[str]) -> None:
        self.stats.files_seen += 1
        self.syntax = self._context_lookup(extension)
        if self.syntax is None:
            logger.debug("No syntax highlighting for extension %r", extension)
        else:
            logger.debug("Selected %s lexer for extension %r", self.syntax.name, extension)

    def _draw_header(self, effect: DrawHeader) -> None:
        line_number = ""
        if effect.state is State.FILE_META:
            content = get_file_change_description_from_diff_line(effect.line)
        elif effect.state is State.HUNK_META:
            content, line_number = parse_hunk_metadata(effect.line)
        else:
            content = effect.line
        style = self._section_style(effect.state)
        self._painter.draw_header(effect.state, style, content, self.syntax, line_number)
        self.stats.headers_drawn += 1

    def _section_style(self, state: State) -> SectionStyle:
        sections = self._config.sections
        if state is State.COMMIT_META:
            return sections.commit_style
        if state is State.FILE_META:
            return sections.file_style
        return sections.hunk_style
