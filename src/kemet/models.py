"""Core kemet data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """A single line of a file that contains the query."""

    file_path: Path
    line_number: int
    line_text: Optional[str] = None
    occurrences: int = 1


@dataclass(frozen=True, slots=True)
class Searched:
    """A file that was opened and scanned to the end."""

    path: Path
    match_count: int = 0
    matches: Tuple[MatchRecord, ...] = ()


@dataclass(frozen=True, slots=True)
class Unreadable:
    """A file or directory that could not be read."""

    path: Path
    reason: str


FileOutcome = Union[Searched, Unreadable]
