"""Diff stream processing."""

from gitdelta.stream.classifier import classify, classify_hunk_line
from gitdelta.stream.driver import StreamDriver, strip_ansi
from gitdelta.stream.hunk_buffer import HunkBuffer, prepare_line
from gitdelta.stream.metadata import (
    HunkMetadata,
    get_file_change_description_from_diff_line,
    get_file_extension_from_diff_line,
    parse_hunk_metadata,
)
from gitdelta.stream.models import Painter, State, StreamStats, Transition

__all__ = [
    "HunkBuffer",
    "HunkMetadata",
    "Painter",
    "State",
    "StreamDriver",
    "StreamStats",
    "Transition",
    "classify",
    "classify_hunk_line",
    "get_file_change_description_from_diff_line",
    "get_file_extension_from_diff_line",
    "parse_hunk_metadata",
    "prepare_line",
    "strip_ansi",
]
