"""Shared test fixtures."""

from __future__ import annotations

import io
import textwrap
from typing import List

import pytest
from pygments.lexers import PythonLexer
from rich.console import Console

from gitdelta.config.schema import DeltaConfig, SectionsConfig, SectionStyle
from gitdelta.stream.models import State

PY_LEXER = PythonLexer(stripnl=False, ensurenl=False)


class RecordingPainter:
    """Painter fake that records every call instead of drawing."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.emits = 0

    def paint_lines(self, lines, syntax, state=State.HUNK_ZERO) -> None:
        self.calls.append(("lines", state, list(lines)))

    def paint_buffered(self, removed, added, syntax) -> None:
        self.calls.append(("paired", list(removed), list(added)))

    def draw_header(self, state, style, content, syntax, line_number="") -> None:
        self.calls.append(("header", state, style, content, line_number))

    def write_raw(self, raw_line) -> None:
        self.calls.append(("raw", raw_line))

    def emit(self) -> None:
        self.emits += 1

    def kinds(self) -> List[str]:
        return [call[0] for call in self.calls]


def python_lookup(extension):
    """Context lookup that knows Python only."""
    return PY_LEXER if extension == "py" else None


def plain_config(**output) -> DeltaConfig:
    cfg = DeltaConfig(
        sections=SectionsConfig(
            commit_style=SectionStyle.PLAIN,
            file_style=SectionStyle.PLAIN,
            hunk_style=SectionStyle.PLAIN,
        )
    )
    for key, value in output.items():
        setattr(cfg.output, key, value)
    return cfg


def text_console(width: int = 40) -> Console:
    """A colourless console writing to a StringIO (read it back via ``.file.getvalue()``)."""
    return Console(
        file=io.StringIO(), width=width, color_system=None,
        highlight=False, markup=False, emoji=False, soft_wrap=True,
    )


def ansi_console(width: int = 80) -> Console:
    return Console(
        file=io.StringIO(), width=width, force_terminal=True, color_system="truecolor",
        highlight=False, markup=False, emoji=False, soft_wrap=True,
    )


@pytest.fixture(autouse=True)
def isolated_env(tmp_path_factory, monkeypatch):
    """Keep the user's ~/.gitdelta.toml and GITDELTA_* variables out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    for var in (
        "GITDELTA_COMMIT_STYLE",
        "GITDELTA_FILE_STYLE",
        "GITDELTA_HUNK_STYLE",
        "GITDELTA_WIDTH",
        "GITDELTA_THEME",
        "GITDELTA_COLOR",
    ):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def painter() -> RecordingPainter:
    return RecordingPainter()


@pytest.fixture
def sample_log_lines() -> List[str]:
    """`git log -p` output for one commit touching one Python file."""
    return textwrap.dedent("""\
        commit 3f2a9c1d0b8e7f6a5b4c3d2e1f0a9b8c7d6e5f4a
        Author: Test <test@test.com>
        Date:   Mon Oct 19 10:00:00 2026 +0000

            Rename greeting helper

        diff --git a/hello.py b/hello.py
        index 1234567..abcdef0 100644
        --- a/hello.py
        +++ b/hello.py
        @@ -1,4 +1,4 @@ import os
         import os
        -def greet(name):
        -    return "Hello " + name
        +def greet(name: str) -> str:
        +    return f"Hello {name}"

    """).splitlines()


@pytest.fixture
def sample_two_files_lines() -> List[str]:
    """A diff touching a Python file and a file with mismatched extensions."""
    return textwrap.dedent("""\
        diff --git a/a.py b/a.py
        index 1234567..abcdef0 100644
        --- a/a.py
        +++ b/a.py
        @@ -1,2 +1,2 @@
        -x = 1
        +x = 2
        diff --git a/notes.txt b/notes.md
        similarity index 90%
        rename from notes.txt
        rename to notes.md
        --- a/notes.txt
        +++ b/notes.md
        @@ -1 +1 @@
        -old note
        +new note
    """).splitlines()
