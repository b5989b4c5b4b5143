"""Column-level note reading for tab lines.

This module reads one string line at one column: fret digit runs, muted
strings, and the technique marks written immediately around a fret.
"""

from __future__ import annotations

from accessible_tab.lexicon import MAX_FRET, SEPARATORS, TECHNIQUE_SYMBOLS
from accessible_tab.models import MUTED
from accessible_tab.tab_parser.models import Note, StringLine

DIGITS = frozenset("0123456789")
MUTE_CHARS = frozenset("xX")


def digit_run_end(content: str, start: int) -> int:
    """Return the exclusive end of the digit run starting at ``start``.

    Examples
    --------
    >>> digit_run_end("--15--", 2)
    4
    """
    end = start
    while end < len(content) and content[end] in DIGITS:
        end += 1
    return end


def find_techniques(content: str, start: int, length: int = 1) -> list[str]:
    """Find technique marks immediately around a fret.

    Only the character just before the fret and the one just after it are
    examined.

    Parameters
    ----------
    content : str
        The string line.
    start : int
        Column of the fret's first digit.
    length : int
        Number of digits in the fret.

    Returns
    -------
    list[str]
        Technique names, the preceding mark first.

    Examples
    --------
    >>> find_techniques("--5h7--", 4)
    ['hammer-on']
    >>> find_techniques("--/12~-", 3, 2)
    ['slide up', 'vibrato']
    """
    techniques: list[str] = []
    for pos in (start - 1, start + length):
        if 0 <= pos < len(content) and content[pos] in TECHNIQUE_SYMBOLS:
            techniques.append(TECHNIQUE_SYMBOLS[content[pos]])
    return techniques


def find_extended_techniques(content: str, start: int, end: int) -> list[str]:
    """Find harmonic and palm mute marks around the fret at ``[start, end)``.

    Examples
    --------
    >>> find_extended_techniques("--<12>--", 3, 5)
    ['harmonic']
    >>> find_extended_techniques("PM5---", 2, 3)
    ['palm mute']
    """
    techniques: list[str] = []

    opened = content.rfind("<", 0, start)
    if opened > content.rfind(">", 0, start) and content.find(">", end) != -1:
        techniques.append("harmonic")

    if start >= 2 and content[start - 2 : start] == "PM":
        techniques.append("palm mute")

    return techniques


def is_ghost_note(content: str, start: int, end: int) -> bool:
    """Check whether the fret at ``[start, end)`` is wrapped in parentheses."""
    return start > 0 and end < len(content) and content[start - 1] == "(" and content[end] == ")"


def note_at(string_line: StringLine, position: int) -> Note | None:
    """Read the note starting at a column of a string line.

    A note starts at the first digit of a fret (so ``15`` is a single note
    anchored at the ``1``) or at an ``x`` not followed by a digit, which is a
    muted string. Separators, continuation digits and any other character
    yield no note, as do frets above 24.

    Parameters
    ----------
    string_line : StringLine
        The line to read.
    position : int
        Column to read at.

    Returns
    -------
    Note | None
        The note, or None if no note starts here.

    Examples
    --------
    >>> line = StringLine(content="|--12h14--|", string_index=0,
    ...                   string_name="high E", line_number=0)
    >>> note_at(line, 3).fret
    12
    >>> note_at(line, 4) is None
    True
    """
    content = string_line.content
    if position >= len(content):
        return None

    char = content[position]
    if char in SEPARATORS:
        return None

    if char in DIGITS:
        if position > 0 and content[position - 1] in DIGITS:
            return None

        end = digit_run_end(content, position)
        fret = int(content[position:end])
        if fret > MAX_FRET:
            return None

        techniques = find_techniques(content, position, end - position)
        techniques.extend(find_extended_techniques(content, position, end))
        return Note(
            string_name=string_line.string_name,
            string_index=string_line.string_index,
            fret=fret,
            techniques=tuple(techniques),
            position=position,
            ghost=is_ghost_note(content, position, end),
        )

    if char in MUTE_CHARS:
        if position + 1 < len(content) and content[position + 1] in DIGITS:
            return None
        return Note(
            string_name=string_line.string_name,
            string_index=string_line.string_index,
            fret=MUTED,
            position=position,
        )

    return None


def detect_measures(line: str) -> list[int]:
    """Return the column of every bar line in a tab line.

    Examples
    --------
    >>> detect_measures("|--3--|--5--|")
    [0, 6, 12]
    """
    return [i for i, char in enumerate(line) if char == "|"]
