"""Substring search with an optional quote-aware mode, and word splitting.

These helpers work on the text of image description files, where pieces of
text inside double quotes must sometimes be left alone.
"""

from __future__ import annotations

import re
from typing import List

__all__ = ["str_str", "str_str_quoted", "str_to_wordtab"]

_BLANKS = re.compile(r"[ \t]+")


def _terminated(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text.split("\0", 1)[0]


def _check_find(find: str) -> None:
    if not find:
        raise ValueError("search string must not be empty")


def str_str(text: str, find: str, length: int) -> int:
    """Return the position of ``find`` in ``text``, or -1.

    When ``find`` is longer than ``length`` no search is made and -1 is
    returned.
    """
    _check_find(find)
    if len(find) > length:
        return -1
    return _terminated(text).find(find)


def str_str_quoted(text: str, find: str, length: int) -> int:
    """Like :func:`str_str`, but matches inside double quotes are skipped.

    A quote character toggles the quoted state; a match may start on the
    closing quote itself.
    """
    _check_find(find)
    if len(find) > length:
        return -1
    text = _terminated(text)
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def str_to_wordtab(text: str) -> List[str]:
    """Split ``text`` into words separated by runs of spaces and tabs."""
    return [word for word in _BLANKS.split(_terminated(text)) if word]