"""Data models for tablature parsing.

This module defines the structures produced while parsing tablature: string
lines and the groups they form, free-text annotations, and the notes, note
groups and sequences extracted by the column walk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from accessible_tab.models import Fret


class TabFormat(str, Enum):
    """The notations the converter recognises."""

    CHORD_CHART = "chord_chart"
    STANDARD_TAB = "standard_tab"
    LABELED_TAB = "labeled_tab"


AnnotationCategory = Literal["section", "lyrics", "timing", "instruction", "chords", "note"]


@dataclass(frozen=True)
class StringLine:
    """One guitar string's line of tablature.

    Parameters
    ----------
    content : str
        The raw line text.
    string_index : int
        0 for the highest pitched string.
    string_name : str
        Display name (e.g., "high E", "B").
    line_number : int
        Index of the line among the non-blank input lines.
    """

    content: str
    string_index: int
    string_name: str
    line_number: int


@dataclass(frozen=True)
class TabGroup:
    """A block of 3-8 string lines read together by the column walk.

    Parameters
    ----------
    lines : tuple[StringLine, ...]
        String lines, highest pitched first.
    """

    lines: tuple[StringLine, ...]

    @property
    def max_length(self) -> int:
        """Length of the longest line in the group."""
        return max((len(line.content) for line in self.lines), default=0)

    @property
    def first_line_number(self) -> int:
        return self.lines[0].line_number


@dataclass(frozen=True)
class Annotation:
    """Free text found between or around tab lines.

    Parameters
    ----------
    text : str
        The stripped line text.
    line_number : int
        Index of the line among the non-blank input lines.
    column : int
        Column of the first non-space character.
    category : AnnotationCategory
        The inferred kind of annotation.
    """

    text: str
    line_number: int
    column: int
    category: AnnotationCategory


@dataclass(frozen=True)
class TechniqueDetail:
    """A technique with its description and positional context.

    Parameters
    ----------
    name : str
        Technique name (e.g., "hammer-on").
    description : str
        Static explanation of how to play it.
    context : str
        Derived description such as "Hammer from 5 to 7", or "".
    """

    name: str
    description: str
    context: str = ""


@dataclass(frozen=True)
class Note:
    """A single fretted, open or muted note.

    Parameters
    ----------
    string_name : str
        Display name of the string.
    string_index : int
        0 for the highest pitched string.
    fret : Fret
        Fret number or MUTED.
    techniques : tuple[str, ...]
        Technique names found next to the fret.
    position : int
        Column of the note's first character.
    technique_details : tuple[TechniqueDetail, ...]
        Filled in by the technique enricher.
    ghost : bool
        True when the fret is wrapped in parentheses.
    """

    string_name: str
    string_index: int
    fret: Fret
    techniques: tuple[str, ...] = ()
    position: int = 0
    technique_details: tuple[TechniqueDetail, ...] = ()
    ghost: bool = False


@dataclass(frozen=True)
class NoteGroup:
    """All notes struck at one column.

    Parameters
    ----------
    position : int
        The column index.
    notes : tuple[Note, ...]
        Notes in string order, highest pitched first.
    annotation : str | None
        Text of a nearby annotation, if any.
    """

    position: int
    notes: tuple[Note, ...]
    annotation: str | None = None

    @property
    def is_chord(self) -> bool:
        return len(self.notes) > 1


@dataclass(frozen=True)
class Sequence:
    """The parsed output of one tab group.

    Parameters
    ----------
    section : int
        1-based number of the group in the input.
    notes : tuple[NoteGroup, ...]
        Note groups ordered by column.
    """

    section: int
    notes: tuple[NoteGroup, ...]


@dataclass(frozen=True)
class TabData:
    """Complete parsed tablature.

    Parameters
    ----------
    sequences : tuple[Sequence, ...]
        Non-empty sequences in input order.
    annotations : tuple[Annotation, ...]
        Every annotation found in the input.
    groups : tuple[TabGroup, ...]
        The tab groups the sequences were read from.
    """

    sequences: tuple[Sequence, ...]
    annotations: tuple[Annotation, ...] = ()
    groups: tuple[TabGroup, ...] = field(default=(), repr=False)
