"""String helpers: searching, copying, joining, trimming, splitting and mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple


def _char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the terminator ``"\\0"`` finds the end of the string.
    """
    c = _char(c)
    if c == "\0":
        index = s.find(c)
        return len(s) if index < 0 else index
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the terminator ``"\\0"`` finds the end of the string.
    """
    c = _char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the first unequal character codes, a missing
    character counting as 0, or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for i in range(n):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return where ``needle`` first occurs wholly within the first ``n`` characters.

    An empty needle is found at index 0; otherwise None when there is no match.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, chars: str) -> str:
    """Remove every leading and trailing character that appears in ``chars``."""
    if s is None or chars is None:
        raise TypeError("strtrim needs a string and a set of characters")
    return s.strip(chars) if chars else s


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces."""
    sep = _char(sep)
    return [word for word in s.split(sep) if word]


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters including the terminator.

    Returns the copied text and the length of ``src``; a size of 0 copies nothing.
    """
    if dstsize < 0:
        raise ValueError(f"size must not be negative, got {dstsize}")
    copied = src[:dstsize - 1] if dstsize > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``dst`` already fills the buffer, it is returned unchanged together
    with ``dstsize + len(src)``.
    """
    if dstsize < 0:
        raise ValueError(f"size must not be negative, got {dstsize}")
    if len(dst) >= dstsize:
        return dst, dstsize + len(src)
    room = dstsize - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: str | MutableSequence[str], f: Callable[[int, MutableSequence[str]], None]) -> str:
    """Call ``f(index, chars)`` for every position; ``f`` may change ``chars[index]``.

    A mutable sequence passed in is changed in place. The resulting text is
    returned in every case.
    """
    chars = s if isinstance(s, list) else list(s)
    for i in range(len(chars)):
        f(i, chars)
    return "".join(chars)