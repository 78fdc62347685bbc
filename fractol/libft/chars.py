"""Character classification and case conversion for single ASCII characters.

Every function accepts either a one-character string or an integer
character code. The case converters return a value of the same kind
they were given.
"""

from __future__ import annotations

from typing import Callable, Union

Char = Union[str, int]


def _code(c: Char) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def isalpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def isdigit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert(c: Char, code: int) -> Char:
    return chr(code) if isinstance(c, str) else code


def tolower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is unchanged."""
    code = _code(c)
    if _is_upper(code):
        code += 32
    return _convert(c, code)


def toupper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is unchanged."""
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return _convert(c, code)


def is_num(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return isdigit(c)


def is_sign(c: Char) -> bool:
    """True for '+' and '-'."""
    return _code(c) in (ord("+"), ord("-"))


def is_space(c: Char) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    code = _code(c)
    return code == ord(" ") or 9 <= code <= 13


def skip(text: str, predicate: Callable[[str], bool]) -> str:
    """Return ``text`` without its leading characters that satisfy ``predicate``."""
    for index, ch in enumerate(text):
        if not predicate(ch):
            return text[index:]
    return ""