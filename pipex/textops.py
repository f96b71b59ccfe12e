"""String and byte helpers: parsing, searching, comparing, splitting and slicing.

Searches return an index, or None when nothing is found. The character
'\\0' stands for the end of a string, so searching for it finds the position
just past the last character.
"""

from typing import Callable, List, Optional, Union

_NUL = "\0"
_WHITESPACE = frozenset(" \t\n\v\f\r")

BytesLike = Union[bytes, bytearray, memoryview]


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, not {type(value).__name__}")
    return value


def _require_char(value: object, name: str) -> str:
    _require_str(value, name)
    if len(value) != 1:  # type: ignore[arg-type]
        raise ValueError(f"{name} must be a single character, got {len(value)}")  # type: ignore[arg-type]
    return value  # type: ignore[return-value]


def _require_count(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then one optional '+' or '-', then as many
    digits as follow. Anything after the digits is ignored; no digits gives 0.
    """
    _require_str(text, "text")
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    return str(n)


def memchr(data: BytesLike, byte: int, n: int) -> Optional[int]:
    """Return the index of the first occurrence of byte in data[:n], or None.

    Only the low eight bits of byte are compared.
    """
    view = bytes(data)
    _require_count(n, "n")
    if n > len(view):
        raise ValueError(f"n ({n}) exceeds the length of data ({len(view)})")
    if isinstance(byte, bool) or not isinstance(byte, int):
        raise TypeError(f"byte must be an integer, not {type(byte).__name__}")
    index = view.find(byte & 0xFF, 0, n)
    return None if index == -1 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first n bytes of a and b as unsigned values.

    Returns -1, 0 or 1 as the first differing byte of a is smaller, there is
    no difference, or it is greater.
    """
    left, right = bytes(a), bytes(b)
    _require_count(n, "n")
    if n > len(left) or n > len(right):
        raise ValueError("n exceeds the length of one of the buffers")
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return 1 if x > y else -1
    return 0


def split(text: str, sep: str) -> List[str]:
    """Split text on a single separator character, dropping empty pieces."""
    _require_str(text, "text")
    _require_char(sep, "sep")
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, char: str) -> Optional[int]:
    """Return the index of the first occurrence of char, or None.

    Searching for '\\0' returns len(text).
    """
    _require_str(text, "text")
    _require_char(char, "char")
    index = text.find(char)
    if index != -1:
        return index
    return len(text) if char == _NUL else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last occurrence of char, or None.

    Searching for '\\0' returns len(text).
    """
    _require_str(text, "text")
    _require_char(char, "char")
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index == -1 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, character) for each character."""
    _require_str(text, "text")
    if not callable(func):
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of two strings.

    The end of a string compares as code 0. Returns the difference between
    the codes of the first differing characters, or 0 when none differ.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    _require_count(n, "n")
    for i in range(n):
        c1 = ord(s1[i]) if i < len(s1) else 0
        c2 = ord(s2[i]) if i < len(s2) else 0
        if c1 == 0 and c2 == 0:
            break
        if c1 != c2:
            return c1 - c2
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find little wholly inside the first length characters of big.

    An empty little is found at index 0. Returns None when there is no match.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    _require_count(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index == -1 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    _require_str(text, "text")
    _require_str(charset, "charset")
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start past the end gives an empty string; length is cut to what remains.
    """
    _require_str(text, "text")
    _require_count(start, "start")
    _require_count(length, "length")
    start = min(start, len(text))
    return text[start:start + length]