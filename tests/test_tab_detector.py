"""Tests for line classification and format detection."""

from pathlib import Path

import pytest

from accessible_tab.tab_parser import TabFormat, detect_format
from accessible_tab.tab_parser.detector import (
    is_chord_chart,
    is_standard_tab_line,
    is_tab_line,
    is_technique_line,
    preprocess,
)

TESTDATA_DIR = Path(__file__).parent.parent / "testdata"

LABELED = "E:--3--\nB:--0--\nG:--0--\nD:-----\nA:-----\nE:-----"


class TestPreprocess:
    """Test line splitting."""

    def test_drops_blank_lines(self) -> None:
        """Test that blank and whitespace-only lines are removed."""
        assert preprocess("a\n\n   \nb") == ["a", "b"]

    def test_normalizes_line_endings(self) -> None:
        """Test CRLF and CR endings."""
        assert preprocess("a\r\nb\rc") == ["a", "b", "c"]

    def test_keeps_indentation(self) -> None:
        """Test that leading spaces survive for column positions."""
        assert preprocess("   Intro") == ["   Intro"]


class TestLinePredicates:
    """Test individual line classifiers."""

    @pytest.mark.parametrize(
        "line",
        ["|-----0-----|", "|--5h7--7p5--|", "|--x--x--|", "| -3- | -5- |", "  |--/9~--|  "],
    )
    def test_standard_tab_lines(self, line: str) -> None:
        """Test pipe-framed unlabeled lines."""
        assert is_standard_tab_line(line) is True

    @pytest.mark.parametrize(
        "line",
        ["e|--3--|", "| h  Hammer-on", "Intro", "|", "--3--"],
    )
    def test_not_standard_tab_lines(self, line: str) -> None:
        """Test lines that are not unlabeled tab."""
        assert is_standard_tab_line(line) is False

    @pytest.mark.parametrize(
        "line",
        ["e|--3--|", "E:--3--", "B |-----", "F#|--2--", "  G|--0--"],
    )
    def test_labeled_tab_lines(self, line: str) -> None:
        """Test string-labeled lines."""
        assert is_tab_line(line) is True

    @pytest.mark.parametrize(
        "line",
        ["Em  G  D", "|--3--|", "Bridge", "E:", "Chorus: x2"],
    )
    def test_not_labeled_tab_lines(self, line: str) -> None:
        """Test lines that are not labeled tab."""
        assert is_tab_line(line) is False

    @pytest.mark.parametrize(
        "line",
        ["h  Hammer-on", "~ vibrato", "| b  Bend", "| p Pull-off"],
    )
    def test_technique_lines(self, line: str) -> None:
        """Test technique legend lines."""
        assert is_technique_line(line) is True

    def test_chord_chart_majority(self) -> None:
        """Test that chord lines must be more than half of all lines."""
        assert is_chord_chart(["F: 1-3-3-2-1-1", "G: 3-2-0-0-0-3", "Notes"]) is True
        assert is_chord_chart(["F: 1-3-3-2-1-1", "Notes"]) is False
        assert is_chord_chart([]) is False


class TestDetectFormat:
    """Test whole-input format detection."""

    def test_chord_chart(self) -> None:
        """Test chord chart detection."""
        assert detect_format("F: 1-3-3-2-1-1") is TabFormat.CHORD_CHART

    def test_standard_tab(self) -> None:
        """Test unlabeled tab detection."""
        assert detect_format("|------|\n" * 6) is TabFormat.STANDARD_TAB

    def test_labeled_tab(self) -> None:
        """Test labeled tab detection with colon separators."""
        assert detect_format(LABELED) is TabFormat.LABELED_TAB

    def test_two_lines_not_enough(self) -> None:
        """Test that fewer than three tab lines is not tab."""
        assert detect_format("e|--3--\nB|--0--") is None

    @pytest.mark.parametrize("text", ["asdf\nqwer", "", "   \n\n", "Just some words"])
    def test_no_format(self, text: str) -> None:
        """Test inputs that match no rule."""
        assert detect_format(text) is None

    @pytest.mark.parametrize(
        "name",
        ["standard_riff.txt", "labeled_solo.txt", "chord_chart.txt", "seven_string.txt"],
    )
    def test_idempotent(self, name: str) -> None:
        """Test that detection gives the same answer every time."""
        text = (TESTDATA_DIR / name).read_text()
        first = detect_format(text)
        assert first is not None
        assert detect_format(text) is first

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("standard_riff.txt", TabFormat.STANDARD_TAB),
            ("labeled_solo.txt", TabFormat.LABELED_TAB),
            ("chord_chart.txt", TabFormat.CHORD_CHART),
            ("seven_string.txt", TabFormat.STANDARD_TAB),
        ],
    )
    def test_fixtures(self, name: str, expected: TabFormat) -> None:
        """Test detection of each fixture."""
        assert detect_format((TESTDATA_DIR / name).read_text()) is expected
