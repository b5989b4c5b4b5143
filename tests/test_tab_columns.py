"""Tests for column-level note reading."""

import pytest

from accessible_tab import MUTED
from accessible_tab.tab_parser.columns import (
    detect_measures,
    digit_run_end,
    find_extended_techniques,
    find_techniques,
    is_ghost_note,
    note_at,
)
from accessible_tab.tab_parser.models import StringLine


def make_line(content: str, index: int = 0, name: str = "high E") -> StringLine:
    """Build a string line for tests."""
    return StringLine(content=content, string_index=index, string_name=name, line_number=0)


def read_all(content: str) -> list[tuple[int, object]]:
    """Return (column, fret) for every note in a line."""
    line = make_line(content)
    notes = (note_at(line, pos) for pos in range(len(content)))
    return [(n.position, n.fret) for n in notes if n is not None]


class TestNoteAt:
    """Test reading a note at a column."""

    def test_single_digit(self) -> None:
        """Test a plain fret."""
        note = note_at(make_line("|--3--|"), 3)
        assert note is not None
        assert note.fret == 3
        assert note.position == 3
        assert note.string_name == "high E"

    @pytest.mark.parametrize("column", [0, 1, 2, 4, 5, 6, 99])
    def test_no_note(self, column: int) -> None:
        """Test separators and out-of-range columns."""
        assert note_at(make_line("|--3--|"), column) is None

    def test_two_digit_fret(self) -> None:
        """Test that a digit run is one fret anchored at its first digit."""
        assert read_all("|--15--|") == [(3, 15)]

    def test_adjacent_frets(self) -> None:
        """Test frets separated by a technique symbol."""
        assert read_all("|--12h14--|") == [(3, 12), (6, 14)]

    def test_fret_above_range_skipped(self) -> None:
        """Test that frets above 24 are dropped silently."""
        assert read_all("|--99--|") == []

    @pytest.mark.parametrize("content", ["|--x--|", "|--X--|"])
    def test_muted(self, content: str) -> None:
        """Test muted strings in either case."""
        note = note_at(make_line(content), 3)
        assert note is not None
        assert note.fret is MUTED
        assert note.techniques == ()

    def test_x_before_digit_is_not_muted(self) -> None:
        """Test that x followed by a digit yields only the fret."""
        assert read_all("|--x5--|") == [(4, 5)]

    def test_unknown_characters(self) -> None:
        """Test that letters that are not marks yield nothing."""
        assert read_all("e|--Q--") == []


class TestTechniques:
    """Test technique detection around frets."""

    def test_hammer_on(self) -> None:
        """Test both notes of a hammer-on carry the mark."""
        line = make_line("|--5h7--|")
        assert note_at(line, 3).techniques == ("hammer-on",)
        assert note_at(line, 5).techniques == ("hammer-on",)

    def test_before_and_after(self) -> None:
        """Test marks on both sides of a fret."""
        assert find_techniques("--/12~-", 3, 2) == ["slide up", "vibrato"]

    @pytest.mark.parametrize(
        ("symbol", "name"),
        [
            ("h", "hammer-on"),
            ("p", "pull-off"),
            ("b", "bend"),
            ("r", "release"),
            ("s", "slide"),
            ("/", "slide up"),
            ("\\", "slide down"),
            ("~", "vibrato"),
            ("t", "tap"),
            ("^", "bend"),
            ("v", "whammy"),
        ],
    )
    def test_symbol_map(self, symbol: str, name: str) -> None:
        """Test every technique symbol."""
        assert find_techniques(f"-7{symbol}-", 1) == [name]

    def test_window_is_adjacent_only(self) -> None:
        """Test that marks two columns away are ignored."""
        assert find_techniques("h-7-p", 2) == []

    @pytest.mark.parametrize("symbol", ["h", "p", "b", "/", "\\", "~", "^", "v", "t"])
    @pytest.mark.parametrize("fret", ["3", "12"])
    def test_symbol_never_changes_fret(self, symbol: str, fret: str) -> None:
        """Test that inserting a mark next to a fret keeps the fret value."""
        plain = read_all(f"|--{fret}--|")
        before = read_all(f"|-{symbol}{fret}--|")
        after = read_all(f"|--{fret}{symbol}-|")
        assert [f for _, f in plain] == [f for _, f in before] == [f for _, f in after]

    def test_harmonic(self) -> None:
        """Test a natural harmonic in angle brackets."""
        assert find_extended_techniques("--<12>--", 3, 5) == ["harmonic"]

    def test_between_harmonics_is_plain(self) -> None:
        """Test a fret between two closed harmonics."""
        assert find_extended_techniques("<5>-3-<7>", 4, 5) == []

    def test_palm_mute(self) -> None:
        """Test PM directly before a fret."""
        note = note_at(make_line("e|PM5---"), 4)
        assert note is not None
        assert "palm mute" in note.techniques

    def test_ghost_note(self) -> None:
        """Test parentheses around a fret."""
        assert is_ghost_note("--(5)--", 3, 4) is True
        assert is_ghost_note("--5--", 2, 3) is False
        note = note_at(make_line("e|-(7)-"), 4)
        assert note is not None
        assert note.ghost is True


class TestHelpers:
    """Test small helpers."""

    def test_digit_run_end(self) -> None:
        """Test digit run boundaries."""
        assert digit_run_end("--123-", 2) == 5
        assert digit_run_end("--1", 2) == 3

    def test_detect_measures(self) -> None:
        """Test bar line columns."""
        assert detect_measures("|--3--|--5--|") == [0, 6, 12]
        assert detect_measures("e--3--") == []
