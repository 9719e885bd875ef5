"""Small string helpers: splitting, joining and ASCII case folding."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "split_string",
    "join_strings",
    "to_lower_ascii",
    "equals_case_insensitive_ascii",
]


def split_string(text: str, sep: str) -> list[str]:
    """Split text at every occurrence of the single character sep.

    Empty fields are kept, so the result always has one more element than
    there are separators in text.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return text.split(sep)


def join_strings(parts: Iterable[str], sep: str) -> str:
    """Join parts with the single character sep between them."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return sep.join(parts)


def to_lower_ascii(c: str) -> str:
    """Lower-case an ASCII letter; every other character is returned as is."""
    return chr(ord(c) + 32) if "A" <= c <= "Z" else c


def equals_case_insensitive_ascii(a: str, b: str) -> bool:
    """Compare two strings, ignoring the case of ASCII letters only."""
    if len(a) != len(b):
        return False
    return all(to_lower_ascii(x) == to_lower_ascii(y) for x, y in zip(a, b))