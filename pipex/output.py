"""Small helpers that write characters, strings and integers to a text stream."""

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: Optional[TextIO] = None) -> None:
    """Write exactly one character to the stream."""
    if not isinstance(c, str):
        raise TypeError(f"expected a character, not {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)}")
    _target(stream).write(c)


def putstr(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string to the stream as is."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, not {type(text).__name__}")
    _target(stream).write(text)


def putendl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    putstr(text, out)
    putchar("\n", out)


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    _target(stream).write(str(n))