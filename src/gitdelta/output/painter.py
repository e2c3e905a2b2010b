"""Rich terminal painter — syntax colouring, diff backgrounds, emphasis of edits."""

from __future__ import annotations

import difflib
from typing import List, Optional, Union

from pygments.lexer import Lexer
from rich.console import Console
from rich.style import Style
from rich.syntax import Syntax
from rich.text import Text

from gitdelta.config.schema import DeltaConfig, SectionStyle
from gitdelta.output.draw import get_draw_fn
from gitdelta.stream.models import State, SyntaxContext

COMMIT_STYLE = Style(color="yellow")
FILE_STYLE = Style(color="blue", bold=True)
HUNK_STYLE = Style(color="blue")

# Below this similarity a removed/added pair is treated as a rewrite, not an edit
MIN_EMPH_SIMILARITY = 0.5


class TerminalPainter:
    """Paint diff lines into an ordered output queue and write it with ``emit()``.

    Usage::

        painter = TerminalPainter(Console(), config)
        painter.paint_buffered([" old"], [" new"], lexer)
        painter.emit()
    """

    def __init__(self, console: Console, config: DeltaConfig) -> None:
        self.console = console
        self._config = config
        minus, minus_emph, plus, plus_emph = config.theme.palette()
        self._minus_style = Style(bgcolor=minus)
        self._minus_emph_style = Style(bgcolor=minus_emph)
        self._plus_style = Style(bgcolor=plus)
        self._plus_emph_style = Style(bgcolor=plus_emph)
        self._output: List[Union[Text, str]] = []
        self._highlighter: Optional[Syntax] = None
        self._highlighter_lexer: Optional[Lexer] = None

    # ---- painting ----

    def paint_lines(
        self, lines: List[str], syntax: SyntaxContext, state: State = State.HUNK_ZERO
    ) -> None:
        for line in lines:
            self._output.append(self._paint(line, syntax, state))

    def paint_buffered(self, removed: List[str], added: List[str], syntax: SyntaxContext) -> None:
        minus_texts = [self._paint(line, syntax, State.HUNK_MINUS) for line in removed]
        plus_texts = [self._paint(line, syntax, State.HUNK_PLUS) for line in added]
        for minus_text, plus_text in zip(minus_texts, plus_texts):
            self._emphasize_edits(minus_text, plus_text)
        self._output.extend(minus_texts)
        self._output.extend(plus_texts)

    def _paint(self, line: str, syntax: SyntaxContext, state: State) -> Text:
        if state is State.HUNK_MINUS and not self._config.theme.highlight_removed:
            text = Text(line)
        else:
            text = self.highlight(line, syntax)
        if state is State.HUNK_MINUS:
            text.stylize(self._minus_style)
        elif state is State.HUNK_PLUS:
            text.stylize(self._plus_style)
        return text

    def _emphasize_edits(self, minus_text: Text, plus_text: Text) -> None:
        """Give the characters that differ between a removed and an added line a stronger background."""
        matcher = difflib.SequenceMatcher(
            None, minus_text.plain.rstrip(), plus_text.plain.rstrip(), autojunk=False
        )
        if matcher.ratio() < MIN_EMPH_SIMILARITY:
            return
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                continue
            if i2 > i1:
                minus_text.stylize(self._minus_emph_style, i1, i2)
            if j2 > j1:
                plus_text.stylize(self._plus_emph_style, j1, j2)

    def highlight(self, code: str, syntax: SyntaxContext) -> Text:
        """Syntax-colour *code* with the configured theme, without a background."""
        if syntax is None:
            return Text(code)
        if self._highlighter is None or self._highlighter_lexer is not syntax:
            self._highlighter = Syntax(
                "", syntax, theme=self._config.theme.theme, background_color="default"
            )
            self._highlighter_lexer = syntax
        text = self._highlighter.highlight(code)
        if text.plain.endswith("\n") and not code.endswith("\n"):
            text.right_crop(1)
        return text

    # ---- headers ----

    def draw_header(
        self,
        state: State,
        style: SectionStyle,
        content: str,
        syntax: SyntaxContext,
        line_number: str = "",
    ) -> None:
        self.emit()
        width = self.console.width
        if state is State.COMMIT_META:
            draw_fn = get_draw_fn(style, with_line=True)
            draw_fn(self.console, Text.from_ansi(content, style=COMMIT_STYLE), width, COMMIT_STYLE, True)
        elif state is State.FILE_META:
            draw_fn = get_draw_fn(style, with_line=True)
            draw_fn(self.console, Text(content, style=FILE_STYLE), width, FILE_STYLE, True)
        else:
            self._draw_hunk_header(style, content, syntax, line_number, width)

    def _draw_hunk_header(
        self,
        style: SectionStyle,
        code_fragment: str,
        syntax: SyntaxContext,
        line_number: str,
        width: int,
    ) -> None:
        draw_fn = get_draw_fn(style)
        if code_fragment.strip():
            draw_fn(self.console, self.highlight(code_fragment, syntax), width, HUNK_STYLE, False)
        self.console.print(Text(line_number, style=HUNK_STYLE), soft_wrap=True)

    # ---- output ----

    def write_raw(self, raw_line: str) -> None:
        self._output.append(raw_line)

    def emit(self) -> None:
        """Write queued output to the console's file, in order."""
        if not self._output:
            return
        for item in self._output:
            if isinstance(item, Text):
                self.console.print(item, soft_wrap=True)
            else:
                self.console.file.write(item + "\n")
        self._output.clear()
        self.console.file.flush()
