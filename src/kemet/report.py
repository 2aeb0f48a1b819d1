"""Rendering and writing search reports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from rich.console import Console

from kemet.config import SearchConfig
from kemet.models import MatchRecord
from kemet.search.aggregator import SearchSummary
from kemet.utils.text import printable

LOGGER = logging.getLogger(__name__)


class OutputWriteError(OSError):
    """Raised when the report cannot be written to its destination."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not write results to {_show(path)}: {printable(reason)}")
        self.path = path
        self.reason = reason


def _show(path: Path) -> str:
    return printable(str(path))


def _display_path(path: Path, root: Path) -> str:
    try:
        return _show(path.relative_to(root))
    except ValueError:
        return _show(path)


def format_match(record: MatchRecord, root: Path) -> str:
    location = f"{_display_path(record.file_path, root)} (Line {record.line_number})"
    if record.line_text is None:
        return location
    return f"{location}: {record.line_text.strip()}"


def render_report(config: SearchConfig, summary: SearchSummary) -> List[str]:
    """Render the report as a list of lines without line endings."""
    lines = [
        f'Searching for "{printable(config.query)}" in {_show(config.root)} '
        "and all subfolders..."
    ]
    if config.case_sensitive:
        lines.append("Case-sensitive search enabled")
    lines.append("Extensions: " + ", ".join(f".{ext}" for ext in config.extensions))
    lines.append("")

    if summary.total_matches == 0:
        lines.append("No matches found.")
    else:
        lines.append(
            f"Found {summary.total_matches} matches in {summary.files_with_matches} files:"
        )
        if config.show_lines:
            lines.append("")
            lines.extend(format_match(record, config.root) for record in summary.matches)

    lines.append("")
    lines.append(
        f"Summary: {summary.files_searched} files searched, "
        f"{summary.total_matches} matches found"
    )

    if summary.errors:
        lines.append("")
        lines.append("Errors encountered:")
        lines.extend(
            f"  {_show(error.path)}: {printable(error.reason)}" for error in summary.errors
        )
    return lines


def print_lines(console: Console, lines: List[str]) -> None:
    """Print plain report lines, bypassing rich markup and wrapping."""
    console.print(
        "\n".join(lines),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def write_report(config: SearchConfig, summary: SearchSummary, console: Console) -> None:
    """Write the report to ``config.output`` or, when unset, to ``console``.

    The full text is rendered before the output file is opened.
    """
    lines = render_report(config, summary)
    if config.output is None:
        print_lines(console, lines)
        return

    text = "\n".join(lines) + "\n"
    try:
        config.output.write_text(text, encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        LOGGER.debug("Writing %s failed: %s", config.output, exc)
        reason = getattr(exc, "strerror", None) or str(exc)
        raise OutputWriteError(config.output, reason) from exc

    console.print(
        f"Results written to {_show(config.output)}", markup=False, highlight=False, soft_wrap=True
    )
