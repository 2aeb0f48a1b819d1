"""Tests for core data models."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from kemet.models import MatchRecord, Searched, Unreadable


class TestMatchRecord:
    """Test MatchRecord dataclass."""

    def test_create_record(self) -> None:
        """Should create MatchRecord with all fields."""
        record = MatchRecord(
            file_path=Path("/src/main.rs"),
            line_number=3,
            line_text="fn main() {}",
            occurrences=2,
        )

        assert record.file_path == Path("/src/main.rs")
        assert record.line_number == 3
        assert record.line_text == "fn main() {}"
        assert record.occurrences == 2

    def test_defaults(self) -> None:
        """Line text is optional and occurrences default to one."""
        record = MatchRecord(file_path=Path("a.txt"), line_number=1)

        assert record.line_text is None
        assert record.occurrences == 1

    def test_record_equality(self) -> None:
        """Should compare records by value."""
        assert MatchRecord(Path("a.txt"), 1) == MatchRecord(Path("a.txt"), 1)
        assert MatchRecord(Path("a.txt"), 1) != MatchRecord(Path("a.txt"), 2)

    def test_record_is_frozen(self) -> None:
        """Records cannot be modified."""
        record = MatchRecord(Path("a.txt"), 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.line_number = 2  # type: ignore[misc]


class TestOutcomes:
    """Test file outcome variants."""

    def test_searched_defaults(self) -> None:
        """A searched file defaults to no matches."""
        outcome = Searched(path=Path("empty.txt"))

        assert outcome.match_count == 0
        assert outcome.matches == ()

    def test_unreadable(self) -> None:
        """Unreadable keeps path and reason."""
        outcome = Unreadable(path=Path("bin.dat"), reason="Binary content")

        assert outcome.path == Path("bin.dat")
        assert outcome.reason == "Binary content"

    def test_outcomes_are_hashable(self) -> None:
        """Frozen outcomes can be used in sets."""
        outcomes = {
            Unreadable(Path("a"), "x"),
            Unreadable(Path("a"), "x"),
            Searched(Path("b"), 0),
        }
        assert len(outcomes) == 2
