"""Per-file literal substring scanning."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Tuple

from kemet.config import SearchConfig
from kemet.models import FileOutcome, MatchRecord, Searched, Unreadable
from kemet.utils.text import count_occurrences, looks_binary, strip_line_ending

LOGGER = logging.getLogger(__name__)


class BinaryContentError(ValueError):
    """Raised while scanning when a file turns out to hold binary data."""


def find_matches(
    lines: Iterable[str], query: str, *, case_sensitive: bool = False
) -> Iterator[Tuple[int, str, int]]:
    """Yield ``(line_number, line, occurrences)`` for lines containing ``query``.

    Line numbers start at 1. Lines are yielded without their line ending.
    """
    for line_number, raw in enumerate(lines, start=1):
        line = strip_line_ending(raw)
        occurrences = count_occurrences(line, query, case_sensitive=case_sensitive)
        if occurrences:
            yield line_number, line, occurrences


def _checked_lines(handle: Iterable[str]) -> Iterator[str]:
    for line in handle:
        if looks_binary(line):
            raise BinaryContentError("Binary content")
        yield line


def scan_file(path: Path, config: SearchConfig) -> FileOutcome:
    """Scan one file and return its outcome.

    The whole file must decode as UTF-8 text; otherwise the file is reported as
    unreadable and any matches found before the failure are discarded. Lines
    end at ``\\n`` only; a lone ``\\r`` stays part of the line.
    """
    records: list[MatchRecord] = []
    total = 0
    try:
        with path.open("r", encoding="utf-8", errors="strict", newline="\n") as handle:
            for line_number, line, occurrences in find_matches(
                _checked_lines(handle), config.query, case_sensitive=config.case_sensitive
            ):
                total += occurrences
                records.append(
                    MatchRecord(
                        file_path=path,
                        line_number=line_number,
                        line_text=line if config.show_lines else None,
                        occurrences=occurrences,
                    )
                )
    except UnicodeDecodeError as exc:
        LOGGER.debug("Skipping %s, not UTF-8: %s", path, exc)
        return Unreadable(path, f"Not valid UTF-8 text: {exc.reason}")
    except BinaryContentError as exc:
        LOGGER.debug("Skipping binary file %s", path)
        return Unreadable(path, str(exc))
    except OSError as exc:
        LOGGER.debug("Could not open file %s: %s", path, exc)
        return Unreadable(path, f"Could not open file: {exc.strerror or exc}")

    return Searched(path=path, match_count=total, matches=tuple(records))
