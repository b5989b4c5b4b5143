"""Chord name recognition.

This module provides regex pre-filtering backed by pychord validation to
decide whether a piece of free text names a chord. It is used to spot chord
progressions written above or between tab lines.
"""

from __future__ import annotations

import re

from pychord import Chord as PyChord

MAX_CHORD_LENGTH = 15

# Matches: root (A-G), optional accidental (b/#), optional quality, optional slash bass
CHORD_RE = re.compile(
    r"^[A-G][b#]?"  # Root note with optional accidental
    r"(?:"
    r"m(?:aj)?(?:7|9|11|13)?|"  # minor variants: m, maj, maj7, m7, m9, etc.
    r"M(?:aj)?(?:7|9|11|13)?|"  # major variants: M, Maj, Maj7, M7, etc.
    r"dim(?:7)?|"  # diminished
    r"aug(?:7)?|"  # augmented
    r"sus[24]?(?:7)?|"  # suspended
    r"add[29]|"  # added tones
    r"[679]|"  # extensions
    r"7|9|11|13|"  # dominant extensions
    r"m7-5|m7b5|"  # half-diminished
    r"mM7|mmaj7|"  # minor-major seventh
    r"5"  # power chord
    r")*"
    r"(?:/[A-G][b#]?)?$",  # Optional slash bass
    re.IGNORECASE,
)

# Lowercase words the pattern accepts that are usually lyrics
FALSE_POSITIVES_LOWERCASE: frozenset[str] = frozenset({"a", "am", "be"})


def parse_chord(text: str) -> PyChord | None:
    """Parse a chord name with pychord.

    Parameters
    ----------
    text : str
        The chord name to parse.

    Returns
    -------
    PyChord | None
        The parsed chord, or None if pychord rejects the name.

    Examples
    --------
    >>> parse_chord("Gm7").root
    'G'
    >>> parse_chord("Hello") is None
    True
    """
    try:
        return PyChord(text)
    except ValueError:
        return None


def is_chord(text: str) -> bool:
    """Check if text names a chord.

    Parameters
    ----------
    text : str
        The text to check.

    Returns
    -------
    bool
        True if the text is a valid chord name.

    Examples
    --------
    >>> is_chord("Am")
    True
    >>> is_chord("C/E")
    True
    >>> is_chord("Bridge")
    False
    """
    if not text or len(text) > MAX_CHORD_LENGTH:
        return False

    if text.islower() and text in FALSE_POSITIVES_LOWERCASE:
        return False

    if not CHORD_RE.match(text):
        return False

    return parse_chord(text) is not None


def leading_chords(text: str) -> list[str]:
    """Return the run of chord names at the start of a line.

    Examples
    --------
    >>> leading_chords("Am  G  F  then the verse")
    ['Am', 'G', 'F']
    """
    chords: list[str] = []
    for token in text.split():
        if not is_chord(token):
            break
        chords.append(token)
    return chords
