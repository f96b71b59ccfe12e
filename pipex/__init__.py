"""Run two commands joined by a pipe between an input file and an output file.

Also holds small text, character-class and stream-writing helpers.
"""

__version__ = "0.1.0"
__all__ = ["charclass", "output", "textops", "resolve", "cli"]