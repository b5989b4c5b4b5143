"""Chord chart parsing.

This module turns chord definitions such as ``F: 1-3-3-2-1-1`` into Chord
records. It also recognises ASCII chord diagrams and chord progressions
written as plain chord names.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from accessible_tab.chord_names import is_chord
from accessible_tab.lexicon import CHORD_LINE_RE
from accessible_tab.models import MUTED, Chord, Fret, is_valid_chord

logger = logging.getLogger(__name__)

# Diagram parts: a bare chord name line, then "e|---0---" string lines
DIAGRAM_NAME_RE = re.compile(r"^[A-G][#b]?\w*$")
DIAGRAM_STRING_RE = re.compile(r"^[eEbBgGdDaA]\s*\|")
DIAGRAM_CELL_RE = re.compile(r"^[^|]*\|[^|\dxX]*(\d+|[xX])")
DIAGRAM_STRING_ORDER = ("e", "b", "g", "d", "a", "e")
MAX_DIAGRAM_NAME_LENGTH = 5

PROGRESSION_SPLIT_RE = re.compile(r"[\s\-|]+")


@dataclass(frozen=True)
class ChordProgression:
    """A run of chord names found on one line.

    Parameters
    ----------
    chords : tuple[str, ...]
        The chord names in order of appearance.
    original : str
        The stripped source line.
    """

    chords: tuple[str, ...]
    original: str


def parse_fret_positions(fret_string: str) -> list[Fret]:
    """Parse a dash-joined fret list.

    ``X`` or ``x`` is a muted string; any other non-numeric token is treated
    as muted too.

    Examples
    --------
    >>> parse_fret_positions("x-3-2-0-1-0")
    [MUTED, 3, 2, 0, 1, 0]
    """
    frets: list[Fret] = []
    for token in fret_string.split("-"):
        if token.isdigit():
            frets.append(int(token))
        else:
            frets.append(MUTED)
    return frets


def parse_chord_line(line: str) -> Chord | None:
    """Parse a single chord definition line.

    Parameters
    ----------
    line : str
        A line such as ``"F: 1-3-3-2-1-1"``.

    Returns
    -------
    Chord | None
        The chord, or None if the line is not a valid 6, 7 or 8 string
        chord definition.

    Examples
    --------
    >>> parse_chord_line("F: 1-3-3-2-1-1").frets
    (1, 3, 3, 2, 1, 1)
    >>> parse_chord_line("F: 1-3-3") is None
    True
    """
    match = CHORD_LINE_RE.match(line.strip())
    if not match:
        return None

    frets = parse_fret_positions(match.group(2))
    if not is_valid_chord(frets):
        logger.debug("Dropping chord %s with frets %s", match.group(1), frets)
        return None

    return Chord(name=match.group(1), frets=tuple(frets))


def parse_chord_chart(lines: Iterable[str]) -> list[Chord]:
    """Parse every chord definition in a chord chart.

    Lines that are not chord definitions are skipped.

    Parameters
    ----------
    lines : Iterable[str]
        Lines of the chart.

    Returns
    -------
    list[Chord]
        Parsed chords in input order (possibly empty).
    """
    chords = [chord for chord in map(parse_chord_line, lines) if chord is not None]
    logger.debug("Parsed %d chords from chord chart", len(chords))
    return chords


def _diagram_frets(string_lines: list[str]) -> tuple[Fret, ...]:
    """Read one fret per string from diagram lines, high E first."""
    frets: list[Fret] = []
    remaining = list(string_lines)

    for letter in DIAGRAM_STRING_ORDER:
        line = next((l for l in remaining if l[0].lower() == letter), None)
        if line is None:
            frets.append(MUTED)
            continue
        remaining.remove(line)

        match = DIAGRAM_CELL_RE.match(line)
        if match and match.group(1).isdigit():
            frets.append(int(match.group(1)))
        else:
            frets.append(MUTED)

    return tuple(frets)


def parse_chord_diagrams(lines: Iterable[str]) -> list[Chord]:
    """Parse ASCII chord diagrams.

    A diagram is a chord name on its own line followed by six string lines::

        C
        e|---0---
        B|---1---
        G|---0---
        D|---2---
        A|---3---
        E|-------

    A string with no fret in its first cell is muted.

    Parameters
    ----------
    lines : Iterable[str]
        Lines to scan.

    Returns
    -------
    list[Chord]
        Chords with frets ordered high E to low E.
    """
    diagrams: list[Chord] = []
    current_name: str | None = None
    string_lines: list[str] = []

    def flush() -> None:
        if current_name is not None and len(string_lines) == 6:
            diagrams.append(Chord(name=current_name, frets=_diagram_frets(string_lines)))

    for raw in lines:
        line = raw.strip()
        if len(line) <= MAX_DIAGRAM_NAME_LENGTH and DIAGRAM_NAME_RE.match(line):
            flush()
            current_name = line
            string_lines = []
        elif DIAGRAM_STRING_RE.match(line):
            string_lines.append(line)

    flush()
    return diagrams


def extract_chord_progressions(lines: Iterable[str]) -> list[ChordProgression]:
    """Find lines that list two or more chord names.

    Examples
    --------
    >>> extract_chord_progressions(["Am - G - F - E", "just words"])
    [ChordProgression(chords=('Am', 'G', 'F', 'E'), original='Am - G - F - E')]
    """
    progressions: list[ChordProgression] = []

    for line in lines:
        stripped = line.strip()
        tokens = PROGRESSION_SPLIT_RE.split(stripped)
        chords = tuple(token for token in tokens if is_chord(token))
        if len(chords) > 1:
            progressions.append(ChordProgression(chords=chords, original=stripped))

    return progressions
