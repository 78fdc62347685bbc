"""String helpers: parsing, searching, comparing, splitting and bounded copies.

Searches return an index or None instead of a pointer. The bounded copy
functions return the resulting string together with the length the caller
would have needed.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Callable, MutableSequence, Optional, Tuple, Union

from fractol.libft.chars import is_num, is_space, skip

Char = Union[str, int]


def _as_char(c: Char) -> str:
    """Turn a one-character string or an integer code into a character."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str) and len(c) == 1:
        return c
    raise ValueError(f"expected a single character, got {c!r}")


def atoi(text: str) -> int:
    """Parse a decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; no digits gives 0.
    """
    rest = skip(text, is_space)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(is_num, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: str, sep: Char) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    separator = _as_char(sep)
    return [piece for piece in text.split(separator) if piece]


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _char_codes(text: str, limit: Optional[int] = None):
    """Yield the codes of ``text`` followed by a terminating 0."""
    codes = [ord(ch) for ch in text] + [0]
    return codes if limit is None else codes[:limit]


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing characters, or 0 when equal."""
    for a, b in zip(_char_codes(s1), _char_codes(s2)):
        if a != b or a == 0:
            return a - b
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the first difference or 0."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for a, b in zip(_char_codes(s1), _char_codes(s2)):
        if n == 0 or (a == 0 and b == 0):
            break
        if a != b:
            return a - b
        n -= 1
    return 0


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` for each character, storing any value it returns."""
    for index, ch in enumerate(list(chars)):
        result = func(index, ch)
        if result is not None:
            chars[index] = result
    return chars


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` including its terminator.

    Returns the copied text (at most ``size - 1`` characters) and the
    length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` including its terminator.

    Returns the resulting text and the length the full result would need.
    When ``dst`` already fills the buffer it is returned unchanged and the
    length is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dst_len = min(len(dst), size)
    src_len = len(src)
    if dst_len >= size:
        return dst, size + src_len
    to_copy = min(src_len, size - dst_len - 1)
    return dst + src[:to_copy], dst_len + src_len


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle matches at 0; a zero length never matches otherwise.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    if not length:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]