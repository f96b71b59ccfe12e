"""Locating commands on the search path and splitting command lines."""

import errno
import os
from typing import List, Mapping, Optional, Tuple

from .textops import split


class PipexError(Exception):
    """A failure that stops the pipeline and is reported as an error."""


def _environment(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def find_path(cmd: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the first '<dir>/<cmd>' that exists for a directory in PATH.

    Empty PATH entries are skipped. Existence is enough; the file is not
    checked for execute permission. Returns None when nothing matches.
    """
    environment = _environment(env)
    try:
        search = environment["PATH"]
    except KeyError:
        raise PipexError("PATH is not set in the environment") from None
    for directory in split(search, ":"):
        candidate = f"{directory}/{cmd}"
        if os.path.exists(candidate):
            return candidate
    return None


def split_command(argument: str) -> List[str]:
    """Split a command line into words on spaces, dropping empty words."""
    words = split(argument, " ")
    if not words:
        raise PipexError("empty command")
    return words


def resolve_command(
    argument: str, env: Optional[Mapping[str, str]] = None
) -> Tuple[str, List[str]]:
    """Return the executable path and the argument list for a command line."""
    args = split_command(argument)
    path = find_path(args[0], env)
    if path is None:
        raise PipexError(os.strerror(errno.ENOENT))
    return path, args