"""Search pipeline: walk, scan and aggregate."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterator, List, Union

from kemet.config import SearchConfig
from kemet.models import FileOutcome, Unreadable
from kemet.search.aggregator import Aggregator, SearchSummary
from kemet.search.matcher import scan_file
from kemet.utils.files import iter_candidate_files

LOGGER = logging.getLogger(__name__)

Candidate = Union[Path, Unreadable]


def describe_walk_error(exc: OSError, kind: str) -> str:
    return f"Could not read {kind}: {exc.strerror or exc}"


class SearchEngine:
    """Runs one search described by a :class:`SearchConfig`."""

    def __init__(self, config: SearchConfig, *, jobs: int = 1) -> None:
        if jobs < 1:
            raise ValueError("jobs must be at least 1")
        self.config = config
        self.jobs = jobs

    def candidates(self) -> Iterator[Candidate]:
        """Yield candidate files and walk failures in traversal order."""
        failures: List[Unreadable] = []

        def on_error(path: Path, exc: OSError, kind: str) -> None:
            failures.append(Unreadable(path, describe_walk_error(exc, kind)))

        for path in iter_candidate_files(
            self.config.root, self.config.extensions, on_error=on_error
        ):
            while failures:
                yield failures.pop(0)
            yield path
        yield from failures

    def _scan(self, candidate: Candidate) -> FileOutcome:
        if isinstance(candidate, Unreadable):
            return candidate
        return scan_file(candidate, self.config)

    def outcomes(self) -> Iterator[FileOutcome]:
        if self.jobs == 1:
            for candidate in self.candidates():
                yield self._scan(candidate)
            return

        # Executor.map keeps submission order, so output matches a sequential run.
        with ThreadPoolExecutor(max_workers=self.jobs) as pool:
            yield from pool.map(self._scan, self.candidates())

    def run(self) -> SearchSummary:
        aggregator = Aggregator(keep_matches=self.config.show_lines)
        for outcome in self.outcomes():
            aggregator.fold(outcome)

        summary = aggregator.summary()
        LOGGER.debug(
            "Searched %d files, %d matches, %d errors",
            summary.files_searched,
            summary.total_matches,
            len(summary.errors),
        )
        return summary
