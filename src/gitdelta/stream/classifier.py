"""Line classification — the diff stream state machine.

Possible transitions, with actions on entry::

    | from \\ to | CommitMeta  | FileMeta    | HunkMeta    | HunkZero    | HunkMinus   | HunkPlus |
    |------------+-------------+-------------+-------------+-------------+-------------+----------|
    | CommitMeta | emit        | emit        |             |             |             |          |
    | FileMeta   |             | emit        | emit        |             |             |          |
    | HunkMeta   |             |             |             | emit        | push        | push     |
    | HunkZero   | emit        | emit        | emit        | emit        | push        | push     |
    | HunkMinus  | flush, emit | flush, emit | flush, emit | flush, emit | push        | push     |
    | HunkPlus   | flush, emit | flush, emit | flush, emit | flush, emit | flush, push | push     |

Headers always request a flush; in HunkZero the buffer is already empty, so
the flush does nothing there.
"""

from __future__ import annotations

from gitdelta.config.schema import SectionsConfig, SectionStyle
from gitdelta.stream.metadata import get_file_extension_from_diff_line
from gitdelta.stream.models import (
    DrawHeader,
    Effect,
    Flush,
    PaintContext,
    Passthrough,
    PushAdded,
    PushRemoved,
    SelectSyntax,
    State,
    Transition,
)


def classify(
    state: State,
    line: str,
    raw_line: str,
    *,
    has_syntax: bool,
    sections: SectionsConfig,
) -> Transition:
    """Decide the next state for *line* and what should happen to it.

    *line* is the ANSI-stripped text used for matching; *raw_line* is the
    original, written unchanged on passthrough.
    """
    if line.startswith("commit"):
        return _enter_section(State.COMMIT_META, sections.commit_style, raw_line, raw_line)
    if line.startswith("diff --"):
        select = SelectSyntax(get_file_extension_from_diff_line(line))
        return _enter_section(State.FILE_META, sections.file_style, line, raw_line, select)
    if line.startswith("@@"):
        return _enter_section(State.HUNK_META, sections.hunk_style, line, raw_line)
    if state.is_in_hunk and has_syntax:
        return classify_hunk_line(state, line)
    if state is State.FILE_META and sections.file_style is not SectionStyle.PLAIN:
        # index, ---, +++ etc. are replaced by the drawn file header
        return Transition(state)
    return Transition(state, (Passthrough(raw_line),))


def _enter_section(
    state: State, style: SectionStyle, header_line: str, raw_line: str, *extra: Effect
) -> Transition:
    if style is SectionStyle.PLAIN:
        emit: Effect = Passthrough(raw_line)
    else:
        emit = DrawHeader(state, header_line)
    return Transition(state, (Flush(), *extra, emit))


def classify_hunk_line(state: State, line: str) -> Transition:
    """Route a hunk body line into the removed/added buffer or paint it as context."""
    first = line[:1]
    if first == "-":
        if state is State.HUNK_PLUS:
            # A new removed run starts the next change block
            return Transition(State.HUNK_MINUS, (Flush(), PushRemoved(line)))
        return Transition(State.HUNK_MINUS, (PushRemoved(line),))
    if first == "+":
        return Transition(State.HUNK_PLUS, (PushAdded(line),))
    return Transition(State.HUNK_ZERO, (Flush(), PaintContext(line)))
