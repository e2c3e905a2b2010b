"""Language and theme lookup backed by Pygments."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Tuple

from pygments.lexer import Lexer
from pygments.lexers import get_all_lexers, get_lexer_by_name, get_lexer_for_filename
from pygments.styles import get_all_styles
from pygments.util import ClassNotFound


@lru_cache(maxsize=256)
def find_context(extension: Optional[str]) -> Optional[Lexer]:
    """Return a lexer for a file extension (or bare file name such as ``Makefile``)."""
    if not extension:
        return None
    for filename in (f"file.{extension}", extension):
        try:
            return get_lexer_for_filename(filename, stripnl=False, ensurenl=False)
        except ClassNotFound:
            continue
    try:
        return get_lexer_by_name(extension.lower(), stripnl=False, ensurenl=False)
    except ClassNotFound:
        return None


def list_languages() -> List[Tuple[str, List[str]]]:
    """Return (language name, filename patterns) for every known lexer."""
    languages = [
        (name, list(filenames))
        for name, _aliases, filenames, _mimetypes in get_all_lexers()
        if filenames
    ]
    return sorted(languages, key=lambda item: item[0].lower())


def list_themes() -> List[str]:
    return sorted(get_all_styles())
