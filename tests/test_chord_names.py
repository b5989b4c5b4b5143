"""Tests for chord name recognition."""

import pytest

from accessible_tab.chord_names import is_chord, leading_chords, parse_chord


class TestIsChord:
    """Test chord detection."""

    @pytest.mark.parametrize(
        "text",
        [
            "C",
            "G",
            "Am",
            "Dm",
            "Em",
            "Bb",
            "F#",
            "Gm7",
            "Cmaj7",
            "Bdim",
            "Faug",
            "Dsus4",
            "Asus2",
            "C/E",
            "G/B",
            "F#m",
            "Bbm7",
            "E5",
        ],
    )
    def test_valid_chords(self, text: str) -> None:
        """Test that valid chords are recognized."""
        assert is_chord(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "Upside",
            "down",
            "Hello",
            "Bridge",
            "Chorus",
            "am",
            "",
            "|---3---|",
            "Amaj7sus4add9dim7aug",
            "a",
            "be",
        ],
    )
    def test_invalid_chords(self, text: str) -> None:
        """Test that non-chords are rejected."""
        assert is_chord(text) is False


class TestParseChord:
    """Test pychord-backed parsing."""

    def test_root(self) -> None:
        """Test the parsed root note."""
        chord = parse_chord("Gm7")
        assert chord is not None
        assert chord.root == "G"

    def test_invalid(self) -> None:
        """Test that pychord failures return None."""
        assert parse_chord("Xyz") is None


class TestLeadingChords:
    """Test leading chord run extraction."""

    def test_stops_at_first_word(self) -> None:
        """Test that the run ends at the first non-chord."""
        assert leading_chords("Am G F and so on") == ["Am", "G", "F"]

    def test_no_chords(self) -> None:
        """Test a line starting with a word."""
        assert leading_chords("Bridge Am G") == []
