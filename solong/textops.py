"""Length, bounded copy and concatenation, searching, comparison and
integer parsing of NUL-terminated text.

Text may carry an embedded NUL character; as with C strings, everything
from the first NUL on is ignored. Search functions return indices rather
than pointers, and ``None`` where nothing is found.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

__all__ = [
    "strlen",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "atoi",
]

SIZE_MAX = 2**64 - 1
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _cstr(s: str) -> str:
    """Return ``s`` up to its first NUL character."""
    if s is None:
        raise TypeError("text must not be None")
    return s.split("\0", 1)[0]


def _size(n: int, name: str = "size") -> int:
    """Interpret ``n`` as a size_t: negative values wrap around."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an integer, not {type(n).__name__}")
    return n % (SIZE_MAX + 1)


def _char(c: Union[str, int]) -> str:
    """Reduce ``c`` to a single character the way a char conversion does."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(s))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``; a result length
    at least ``size`` means the copy was truncated. A ``size`` of 0 copies
    nothing.
    """
    src = _cstr(src)
    size = _size(size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    need. When ``dst`` already fills the buffer it is returned unchanged and
    the length reported is ``size`` plus the length of ``src``.
    """
    dst = _cstr(dst)
    src = _cstr(src)
    size = _size(size)
    if size == 0:
        return dst, len(src)
    if len(dst) > size:
        return dst, size + len(src)
    room = max(size - 1 - len(dst), 0)
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    s = _cstr(s)
    target = _char(c)
    if target == "\0":
        return len(s)
    index = s.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    s = _cstr(s)
    target = _char(c)
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the first pair of characters that differ, the
    end of a string counting as code 0, or 0 when they agree.
    """
    s1 = _cstr(s1)
    s2 = _cstr(s2)
    n = _size(n, "n")
    limit = min(n, max(len(s1), len(s2)) + 1)
    for i in range(limit):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of the first ``needle`` that lies wholly within the
    first ``length`` characters of ``haystack``, or ``None``.

    An empty needle is found at index 0. A negative ``length`` wraps around
    to a very large one, so it places no limit.
    """
    haystack = _cstr(haystack)
    needle = _cstr(needle)
    length = _size(length, "length")
    if not needle:
        return 0
    if length == 0:
        return None
    window = haystack[: min(length, len(haystack))]
    index = window.find(needle)
    return None if index < 0 else index


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _to_int32(value: int) -> int:
    """Wrap ``value`` into a signed 32-bit integer."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted; parsing
    stops at the first non-digit. Values beyond the range of a 64-bit long
    are clamped to it, and the result is then wrapped to a 32-bit int.
    Text with no digits gives 0.
    """
    text = _cstr(text)
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and text[pos] in _DIGITS:
        digit = ord(text[pos]) - ord("0")
        if sign == 1 and result > _trunc_div(LONG_MAX - digit, 10):
            return _to_int32(LONG_MAX)
        if sign == -1 and -result < _trunc_div(LONG_MIN + digit, 10):
            return _to_int32(LONG_MIN)
        result = result * 10 + digit
        pos += 1
    return _to_int32(result * sign)