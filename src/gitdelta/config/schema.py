"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Optional

from rich.color import Color, ColorParseError

ColorMode = Literal["auto", "always", "never"]

COLOR_MODES = ("auto", "always", "never")


class SectionStyle(str, Enum):
    """How a commit, file or hunk header is drawn."""

    PLAIN = "plain"
    BOX = "box"
    UNDERLINE = "underline"


SECTION_STYLES = tuple(s.value for s in SectionStyle)

COLOR_OVERRIDES = ("minus_color", "minus_emph_color", "plus_color", "plus_emph_color")

# (minus, minus emphasis, plus, plus emphasis)
DARK_PALETTE = ("#3f0001", "#901011", "#002800", "#006000")
LIGHT_PALETTE = ("#ffe0e0", "#ffc0c0", "#d0ffd0", "#a0efa0")


def check_color(value: str) -> str:
    """Raise ValueError unless *value* is a colour Rich understands (name, #rrggbb, ...)."""
    if not isinstance(value, str):
        raise ValueError(f"invalid colour {value!r}")
    try:
        Color.parse(value)
    except ColorParseError as exc:
        raise ValueError(f"invalid colour {value!r}") from exc
    return value


@dataclass
class SectionsConfig:
    commit_style: SectionStyle = SectionStyle.PLAIN
    file_style: SectionStyle = SectionStyle.UNDERLINE
    hunk_style: SectionStyle = SectionStyle.BOX

    def __post_init__(self) -> None:
        # TOML and env values arrive as plain strings
        self.commit_style = SectionStyle(self.commit_style)
        self.file_style = SectionStyle(self.file_style)
        self.hunk_style = SectionStyle(self.hunk_style)


@dataclass
class OutputConfig:
    width: Optional[int] = None  # pad painted lines to this many cells
    color: ColorMode = "auto"

    def __post_init__(self) -> None:
        if self.color not in COLOR_MODES:
            raise ValueError(f"color must be one of {', '.join(COLOR_MODES)}")
        if self.width is not None and (
            isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0
        ):
            raise ValueError("width must be a positive integer")


@dataclass
class ThemeConfig:
    theme: str = "monokai"
    light: bool = False
    minus_color: Optional[str] = None
    minus_emph_color: Optional[str] = None
    plus_color: Optional[str] = None
    plus_emph_color: Optional[str] = None
    highlight_removed: bool = False

    def __post_init__(self) -> None:
        for name in COLOR_OVERRIDES:
            value = getattr(self, name)
            if value is not None:
                check_color(value)

    def palette(self) -> tuple[str, str, str, str]:
        """Return (minus, minus_emph, plus, plus_emph) background colours."""
        base = LIGHT_PALETTE if self.light else DARK_PALETTE
        return (
            self.minus_color or base[0],
            self.minus_emph_color or base[1],
            self.plus_color or base[2],
            self.plus_emph_color or base[3],
        )


@dataclass
class DeltaConfig:
    sections: SectionsConfig = field(default_factory=SectionsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
