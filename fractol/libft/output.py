"""Write characters, strings and integers to a stream or file descriptor.

``stream`` is either an object with a text ``write`` method or an integer
file descriptor.
"""

from __future__ import annotations

import os
from typing import TextIO, Union

Stream = Union[TextIO, int]


def _write(text: str, stream: Stream) -> None:
    if isinstance(stream, bool):
        raise TypeError("expected a stream or a file descriptor, got bool")
    if isinstance(stream, int):
        data = text.encode("utf-8")
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def putchar_fd(c: Union[str, int], stream: Stream) -> None:
    """Write one character, given as a string or an integer code."""
    if isinstance(c, int) and not isinstance(c, bool):
        c = chr(c)
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(c, stream)


def putstr_fd(text: str, stream: Stream) -> None:
    """Write ``text`` as it is."""
    _write(text, stream)


def putendl_fd(text: str, stream: Stream) -> None:
    """Write ``text`` followed by a newline."""
    _write(text + "\n", stream)


def putnbr_fd(n: int, stream: Stream) -> None:
    """Write ``n`` in decimal."""
    _write(str(int(n)), stream)