"""Folding per-file outcomes into run totals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from kemet.models import FileOutcome, MatchRecord, Searched, Unreadable


@dataclass(frozen=True, slots=True)
class SearchSummary:
    files_searched: int = 0
    files_with_matches: int = 0
    total_matches: int = 0
    errors: Tuple[Unreadable, ...] = ()
    matches: Tuple[MatchRecord, ...] = ()


@dataclass(slots=True)
class Aggregator:
    """Running totals for a search.

    Counters are plain sums, so folding outcomes in any order (or merging
    partial aggregators) gives the same totals. ``errors`` and ``matches`` keep
    the order outcomes were folded in.
    """

    keep_matches: bool = True
    files_searched: int = 0
    files_with_matches: int = 0
    total_matches: int = 0
    errors: List[Unreadable] = field(default_factory=list)
    matches: List[MatchRecord] = field(default_factory=list)

    def fold(self, outcome: FileOutcome) -> "Aggregator":
        if isinstance(outcome, Unreadable):
            self.errors.append(outcome)
            return self
        if not isinstance(outcome, Searched):
            raise TypeError(f"Unexpected outcome type: {type(outcome).__name__}")

        self.files_searched += 1
        self.total_matches += outcome.match_count
        if outcome.match_count > 0:
            self.files_with_matches += 1
        if self.keep_matches:
            self.matches.extend(outcome.matches)
        return self

    def merge(self, other: "Aggregator") -> "Aggregator":
        self.files_searched += other.files_searched
        self.files_with_matches += other.files_with_matches
        self.total_matches += other.total_matches
        self.errors.extend(other.errors)
        if self.keep_matches:
            self.matches.extend(other.matches)
        return self

    def summary(self) -> SearchSummary:
        return SearchSummary(
            files_searched=self.files_searched,
            files_with_matches=self.files_with_matches,
            total_matches=self.total_matches,
            errors=tuple(self.errors),
            matches=tuple(self.matches),
        )


def summarize(outcomes: Iterable[FileOutcome], *, keep_matches: bool = True) -> SearchSummary:
    """Fold ``outcomes`` into a final summary."""
    aggregator = Aggregator(keep_matches=keep_matches)
    for outcome in outcomes:
        aggregator.fold(outcome)
    return aggregator.summary()
