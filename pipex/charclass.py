"""ASCII character classification and case conversion.

Each function accepts either a one-character string or an integer code
point. The classifiers only recognise the ASCII ranges and return a bool.
"""

from typing import TypeVar, Union

CharLike = Union[str, int]
_T = TypeVar("_T", str, int)


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _same_kind(original: _T, code: int) -> _T:
    return chr(code) if isinstance(original, str) else code  # type: ignore[return-value]


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters a-z and A-Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def toupper(c: _T) -> _T:
    """Convert an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def tolower(c: _T) -> _T:
    """Convert an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)