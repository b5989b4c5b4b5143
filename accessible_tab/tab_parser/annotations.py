"""Annotation extraction and proximity lookup.

Free text between tab lines (section labels, lyrics, timing marks, playing
instructions, chord names) is collected once per input and later looked up
by line and column proximity when note groups are built.
"""

from __future__ import annotations

from accessible_tab.chord_names import leading_chords
from accessible_tab.lexicon import (
    ANNOTATION_COLUMN_WINDOW,
    ANNOTATION_LINE_WINDOW,
    INSTRUCTION_RE,
    SECTION_RE,
    TIMING_RE,
)
from accessible_tab.tab_parser.detector import (
    is_standard_tab_line,
    is_tab_line,
    is_technique_line,
)
from accessible_tab.tab_parser.models import Annotation, AnnotationCategory

MIN_PROGRESSION_CHORDS = 2


def categorize(text: str) -> AnnotationCategory:
    """Infer the category of an annotation from its shape.

    Rules are tried in order: section, lyrics, timing, instruction, chords,
    and finally note.

    Parameters
    ----------
    text : str
        Stripped annotation text.

    Returns
    -------
    AnnotationCategory
        The first matching category.

    Examples
    --------
    >>> categorize("II - Chorus")
    'section'
    >>> categorize('"Hello darkness"')
    'lyrics'
    >>> categorize("0:45")
    'timing'
    >>> categorize("Repeat 4 times")
    'instruction'
    >>> categorize("Am  G  F")
    'chords'
    >>> categorize("Let ring")
    'note'
    """
    if SECTION_RE.match(text):
        return "section"
    if '"' in text:
        return "lyrics"
    if TIMING_RE.search(text):
        return "timing"
    if INSTRUCTION_RE.search(text):
        return "instruction"
    if len(leading_chords(text)) >= MIN_PROGRESSION_CHORDS:
        return "chords"
    return "note"


def extract_annotations(lines: list[str]) -> list[Annotation]:
    """Collect every non-tab, non-legend line as an annotation.

    Parameters
    ----------
    lines : list[str]
        Input lines; line numbers are indices into this list.

    Returns
    -------
    list[Annotation]
        Annotations in input order.
    """
    annotations: list[Annotation] = []

    for i, line in enumerate(lines):
        text = line.strip()
        if not text:
            continue
        if is_tab_line(line) or is_standard_tab_line(line) or is_technique_line(line):
            continue

        annotations.append(
            Annotation(
                text=text,
                line_number=i,
                column=line.index(text),
                category=categorize(text),
            )
        )

    return annotations


def find_annotation(
    annotations: list[Annotation] | tuple[Annotation, ...],
    column: int,
    line_number: int,
    *,
    column_window: int = ANNOTATION_COLUMN_WINDOW,
    line_window: int = ANNOTATION_LINE_WINDOW,
) -> Annotation | None:
    """Find the first annotation near a column and line.

    Matching is lenient and non-exclusive: the same annotation may be
    returned for many positions.

    Parameters
    ----------
    annotations : list[Annotation] | tuple[Annotation, ...]
        Candidates, in input order.
    column : int
        Column of the note group.
    line_number : int
        Line number of the group's first string line.
    column_window : int
        Maximum column distance.
    line_window : int
        Maximum line distance.

    Returns
    -------
    Annotation | None
        The first annotation within both windows, or None.

    Examples
    --------
    >>> a = Annotation(text="Intro", line_number=0, column=2, category="note")
    >>> find_annotation([a], column=8, line_number=1).text
    'Intro'
    >>> find_annotation([a], column=30, line_number=1) is None
    True
    """
    for annotation in annotations:
        if (
            abs(annotation.column - column) <= column_window
            and abs(annotation.line_number - line_number) <= line_window
        ):
            return annotation
    return None
