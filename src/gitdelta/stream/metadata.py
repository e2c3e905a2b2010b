"""Parsers for single diff metadata lines.

Every function here is total: malformed input degrades to ``None``, ``"?"``
or empty strings instead of raising.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import NamedTuple, Optional, Tuple

NULL_DEVICE = "/dev/null"


class HunkMetadata(NamedTuple):
    code_fragment: str
    line_number: str


_DIFF_HEADER_RE = re.compile(r"^diff --git a/(.*) b/(.*)$")


def _strip_prefix(path: str) -> str:
    if path.startswith(("a/", "b/")):
        return path[2:]
    return path


def get_file_paths_from_diff_line(line: str) -> Tuple[Optional[str], Optional[str]]:
    """Given "diff --git a/src/main.rs b/src/main.rs" return ("src/main.rs", "src/main.rs")."""
    m = _DIFF_HEADER_RE.match(line)
    if m:
        # Paths containing spaces
        return m.group(1) or None, m.group(2) or None
    parts = line.split(" ")[2:4]  # skip "diff" and "--git"
    old = _strip_prefix(parts[0]) if len(parts) > 0 else None
    new = _strip_prefix(parts[1]) if len(parts) > 1 else None
    return old or None, new or None


def get_extension(path: Optional[str]) -> Optional[str]:
    """Return the extension of *path*, or its file name when it has none (e.g. Makefile)."""
    if not path or path == NULL_DEVICE:
        return None
    p = PurePosixPath(path)
    if p.suffix:
        return p.suffix[1:]
    return p.name or None


def get_file_extension_from_diff_line(line: str) -> Optional[str]:
    """Given "diff --git a/src/main.rs b/src/main.rs" return "rs".

    Returns None when neither path has an extension, or when the old and new
    files disagree.
    """
    old, new = get_file_paths_from_diff_line(line)
    ext1, ext2 = get_extension(old), get_extension(new)
    if ext1 and ext2:
        return ext1 if ext1 == ext2 else None
    return ext1 or ext2


def get_file_change_description_from_diff_line(line: str) -> str:
    old, new = get_file_paths_from_diff_line(line)
    if old is None or new is None:
        return "?"
    if old == new:
        return old
    if new == NULL_DEVICE:
        return f"deleted: {old}"
    if old == NULL_DEVICE:
        return f"added: {new}"
    return f"renamed: {old} ⟶ {new}"


def parse_hunk_metadata(line: str) -> HunkMetadata:
    """Given "@@ -74,15 +75,14 @@ pub fn delta(" return (" pub fn delta(", "75")."""
    parts = line.split("@@", 2)
    line_number = ""
    if len(parts) > 1:
        ranges = parts[1].split("+", 1)
        if len(ranges) > 1:
            line_number = ranges[1].split(",", 1)[0].strip()
    code_fragment = parts[2] if len(parts) > 2 else ""
    return HunkMetadata(code_fragment, line_number)
