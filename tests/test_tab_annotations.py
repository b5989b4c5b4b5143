"""Tests for annotation extraction and lookup."""

import pytest

from accessible_tab.tab_parser.annotations import (
    categorize,
    extract_annotations,
    find_annotation,
)
from accessible_tab.tab_parser.models import Annotation


class TestCategorize:
    """Test category inference."""

    @pytest.mark.parametrize(
        ("text", "category"),
        [
            ("I - Intro", "section"),
            ("IV- Solo", "section"),
            ('"Hello darkness my old friend"', "lyrics"),
            ('He said "go"', "lyrics"),
            ("0:45", "timing"),
            ("Starts at 1:02", "timing"),
            ("Repeat 4 times", "instruction"),
            ("x2", "instruction"),
            ("Am  G  F  E", "chords"),
            ("C G/B Am", "chords"),
            ("Let ring", "note"),
            ("Bridge", "note"),
            ("Am then slowly", "note"),
        ],
    )
    def test_categories(self, text: str, category: str) -> None:
        """Test each category rule."""
        assert categorize(text) == category

    def test_rule_order(self) -> None:
        """Test that earlier rules win when several match."""
        assert categorize('II - "Chorus" 1:20 repeat') == "section"
        assert categorize('"Repeat" at 1:20') == "lyrics"
        assert categorize("Repeat from 1:20") == "timing"


class TestExtractAnnotations:
    """Test annotation extraction."""

    def test_skips_tab_and_legend_lines(self) -> None:
        """Test that only free text becomes annotations."""
        lines = ["Intro", "e|--3--", "|--3--|", "h  Hammer-on", "  Let ring"]
        annotations = extract_annotations(lines)

        assert [a.text for a in annotations] == ["Intro", "Let ring"]

    def test_positions(self) -> None:
        """Test line numbers and columns."""
        annotations = extract_annotations(["e|--3--", "    Let ring"])
        assert annotations == [
            Annotation(text="Let ring", line_number=1, column=4, category="note")
        ]


class TestFindAnnotation:
    """Test proximity lookup."""

    def make(self, text: str, line_number: int, column: int) -> Annotation:
        """Build an annotation."""
        return Annotation(text=text, line_number=line_number, column=column, category="note")

    def test_within_windows(self) -> None:
        """Test the inclusive window edges."""
        a = self.make("Intro", 0, 0)
        assert find_annotation([a], 10, 2) is a
        assert find_annotation([a], 11, 2) is None
        assert find_annotation([a], 10, 3) is None

    def test_first_match_wins(self) -> None:
        """Test that the first annotation in input order is returned."""
        first = self.make("Intro", 0, 5)
        second = self.make("Verse", 1, 4)
        assert find_annotation([first, second], 4, 1) is first

    def test_custom_windows(self) -> None:
        """Test tunable thresholds."""
        a = self.make("Intro", 0, 0)
        assert find_annotation([a], 20, 5, column_window=20, line_window=5) is a
        assert find_annotation([a], 3, 0, column_window=2) is None

    def test_no_annotations(self) -> None:
        """Test an empty list."""
        assert find_annotation([], 0, 0) is None
