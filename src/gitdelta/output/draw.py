"""Header drawing with box-drawing characters.

Every draw function has the signature
``draw_fn(console, text, line_width, line_style, show_line_below)``::

    write_boxed                       write_boxed(show_line_below=True)

    ─────────────┐                    ─────────────┐
     fn delta(   │                    src/main.rs  │
    ─────────────┘                    ─────────────┴──────────────────

    write_underlined

    src/main.rs
    ──────────────────────────────────
"""

from __future__ import annotations

from typing import Callable, Union

from rich.console import Console
from rich.style import Style
from rich.text import Text

from gitdelta.config.schema import SectionStyle

HORIZONTAL = "─"
VERTICAL = "│"
DOWN_LEFT = "┐"
UP_LEFT = "┘"
UP_HORIZONTAL = "┴"

StyleType = Union[str, Style]
DrawFn = Callable[[Console, Text, int, StyleType, bool], None]


def _print(console: Console, text: Text) -> None:
    console.print(text, soft_wrap=True)


def write_boxed(
    console: Console,
    text: Text,
    line_width: int,
    line_style: StyleType,
    show_line_below: bool = False,
) -> None:
    """Draw *text* in a box open on its left side.

    With *show_line_below* the bottom edge continues as a rule to *line_width*.
    """
    box_width = text.cell_len + 1
    edge = HORIZONTAL * box_width
    _print(console, Text(edge + DOWN_LEFT, style=line_style))
    _print(console, Text.assemble(text, (VERTICAL, line_style)))
    if show_line_below:
        rule = HORIZONTAL * max(line_width - box_width - 1, 0)
        _print(console, Text(edge + UP_HORIZONTAL + rule, style=line_style))
    else:
        _print(console, Text(edge + UP_LEFT, style=line_style))


def write_boxed_with_line(
    console: Console,
    text: Text,
    line_width: int,
    line_style: StyleType,
    show_line_below: bool = True,
) -> None:
    write_boxed(console, text, line_width, line_style, show_line_below=True)


def write_underlined(
    console: Console,
    text: Text,
    line_width: int,
    line_style: StyleType,
    show_line_below: bool = True,
) -> None:
    """Draw *text* followed by a rule to *line_width*. The rule is always drawn."""
    _print(console, text)
    _print(console, Text(HORIZONTAL * max(line_width - 1, 0), style=line_style))


def get_draw_fn(style: SectionStyle, *, with_line: bool = False) -> DrawFn:
    """Return the draw function for *style*.

    ``plain`` headers are never drawn: callers pass the raw line through
    instead, so asking for one is a programming error.
    """
    if style is SectionStyle.BOX:
        return write_boxed_with_line if with_line else write_boxed
    if style is SectionStyle.UNDERLINE:
        return write_underlined
    raise AssertionError(f"no draw function for section style {style.value!r}")
