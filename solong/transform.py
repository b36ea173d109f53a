"""Building new text from old: slicing, joining, trimming, splitting,
number formatting and per-character mapping.

Text is treated as NUL-terminated: everything from the first NUL
character on is ignored.
"""

from __future__ import annotations

from typing import Any, Callable, List, MutableSequence, Optional, Union

__all__ = ["substr", "strjoin", "strtrim", "split", "itoa", "strmapi", "striteri"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _cstr(s: str, name: str = "text") -> str:
    """Return ``s`` up to its first NUL character."""
    if s is None:
        raise TypeError(f"{name} must not be None")
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a string, not {type(s).__name__}")
    return s.split("\0", 1)[0]


def _count(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _separator(sep: Union[str, int]) -> str:
    if isinstance(sep, bool):
        raise TypeError("separator must be a character or an integer code, not bool")
    if isinstance(sep, int):
        return chr(sep & 0xFF)
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"separator must be a single character, got {len(sep)}")
        return sep
    raise TypeError(f"separator must be a character, not {type(sep).__name__}")


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end of the text gives an empty string.
    """
    text = _cstr(s)
    start = _count(start, "start")
    length = _count(length, "length")
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _cstr(s1, "s1") + _cstr(s2, "s2")


def strtrim(s: str, charset: Optional[str]) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``.

    A ``charset`` of ``None`` returns ``s`` unchanged. When at most the
    first character of ``s`` would be kept, the result is empty.
    """
    text = _cstr(s)
    if charset is None:
        return text
    trim = set(_cstr(charset, "charset"))
    end = max(len(text) - 1, 0)
    while end > 0 and text[end] in trim:
        end -= 1
    if end == 0:
        return ""
    start = 0
    while start < end and text[start] in trim:
        start += 1
    return text[start : end + 1]


def split(s: str, sep: Union[str, int]) -> List[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces.

    Splitting on NUL gives the whole text as one word, or no words when the
    text is empty.
    """
    text = _cstr(s)
    separator = _separator(sep)
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def itoa(n: int) -> str:
    """Return the decimal form of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    text = _cstr(s)
    pieces = []
    for index, char in enumerate(text):
        mapped = f(index, char)
        if not isinstance(mapped, str) or len(mapped) != 1:
            raise ValueError(f"mapping function must return one character, got {mapped!r}")
        pieces.append(mapped)
    return "".join(pieces)


def striteri(s: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` for each item of ``s`` in place.

    ``s`` is a mutable sequence of characters or a ``bytearray``. A value
    returned by ``f`` replaces the item; ``None`` leaves it as it is. The
    walk stops at the first NUL.
    """
    if s is None:
        raise TypeError("sequence must not be None")
    for index, item in enumerate(s):
        if item in ("\0", 0):
            break
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement