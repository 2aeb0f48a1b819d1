"""Text helpers for literal substring matching."""

from __future__ import annotations


def fold_case(text: str, case_sensitive: bool) -> str:
    """Return ``text`` unchanged, or lower-cased for case-insensitive search."""
    return text if case_sensitive else text.lower()


def count_occurrences(line: str, query: str, *, case_sensitive: bool = False) -> int:
    """Count non-overlapping occurrences of ``query`` in ``line``.

    Both sides are lower-cased first unless ``case_sensitive`` is set. An empty
    query never matches.
    """
    if not query:
        return 0
    return fold_case(line, case_sensitive).count(fold_case(query, case_sensitive))


def strip_line_ending(line: str) -> str:
    """Drop a trailing newline (``\\n`` or ``\\r\\n``) from a line read from a file."""
    return line.rstrip("\r\n")


def looks_binary(line: str) -> bool:
    return "\x00" in line


def printable(text: str) -> str:
    """Make ``text`` safe to encode as UTF-8.

    Lone surrogates, which appear in paths whose names are not valid UTF-8, are
    rendered as backslash escapes such as ``\\udcff``.
    """
    return text.encode("utf-8", "backslashreplace").decode("utf-8")
