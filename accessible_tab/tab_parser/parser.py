"""Main tablature parser orchestration.

This module provides the parse_tablature() function that groups tab lines,
extracts annotations and walks each group column by column.
"""

from __future__ import annotations

import logging

from accessible_tab.lexicon import ANNOTATION_COLUMN_WINDOW, ANNOTATION_LINE_WINDOW
from accessible_tab.tab_parser.annotations import extract_annotations, find_annotation
from accessible_tab.tab_parser.columns import note_at
from accessible_tab.tab_parser.detector import preprocess
from accessible_tab.tab_parser.grouping import group_lines
from accessible_tab.tab_parser.models import (
    Annotation,
    NoteGroup,
    Sequence,
    TabData,
    TabGroup,
)

logger = logging.getLogger(__name__)


def parse_group(
    group: TabGroup,
    annotations: list[Annotation],
    section: int,
    *,
    column_window: int = ANNOTATION_COLUMN_WINDOW,
    line_window: int = ANNOTATION_LINE_WINDOW,
) -> Sequence:
    """Walk a tab group column by column.

    Every column where at least one string has a note becomes a NoteGroup.
    The group's annotation is the first annotation near the column and the
    group's first string line.

    Parameters
    ----------
    group : TabGroup
        The string lines to walk.
    annotations : list[Annotation]
        All annotations of the input.
    section : int
        1-based section number for the resulting sequence.
    column_window : int
        Maximum column distance for annotation lookup.
    line_window : int
        Maximum line distance for annotation lookup.

    Returns
    -------
    Sequence
        The note groups found, ordered by column (possibly empty).
    """
    note_groups: list[NoteGroup] = []

    for pos in range(group.max_length):
        notes = []
        for line in group.lines:
            note = note_at(line, pos)
            if note is not None:
                notes.append(note)

        if not notes:
            continue

        annotation = find_annotation(
            annotations,
            pos,
            group.first_line_number,
            column_window=column_window,
            line_window=line_window,
        )
        note_groups.append(
            NoteGroup(
                position=pos,
                notes=tuple(notes),
                annotation=annotation.text if annotation else None,
            )
        )

    return Sequence(section=section, notes=tuple(note_groups))


def parse_tablature(
    lines: list[str],
    *,
    column_window: int = ANNOTATION_COLUMN_WINDOW,
    line_window: int = ANNOTATION_LINE_WINDOW,
) -> TabData:
    """Parse tablature lines into note sequences.

    This is the main entry point for tablature parsing. Lines that do not
    parse are skipped; groups without any notes are dropped.

    Parameters
    ----------
    lines : list[str]
        Non-blank input lines.
    column_window : int
        Maximum column distance for annotation lookup.
    line_window : int
        Maximum line distance for annotation lookup.

    Returns
    -------
    TabData
        Sequences, annotations and the groups they came from.

    Examples
    --------
    >>> data = parse_tablature(["e|--3--", "B|--0--", "G|--0--"])
    >>> len(data.sequences)
    1
    >>> data.sequences[0].notes[0].is_chord
    True
    """
    groups = group_lines(lines)
    annotations = extract_annotations(lines)

    sequences: list[Sequence] = []
    for section, group in enumerate(groups, start=1):
        sequence = parse_group(
            group,
            annotations,
            section,
            column_window=column_window,
            line_window=line_window,
        )
        if sequence.notes:
            sequences.append(sequence)
        else:
            logger.debug("Dropping section %d: no notes found", section)

    logger.debug(
        "Parsed %d sequences and %d annotations from %d groups",
        len(sequences),
        len(annotations),
        len(groups),
    )
    return TabData(
        sequences=tuple(sequences),
        annotations=tuple(annotations),
        groups=tuple(groups),
    )


def parse(text: str, **kwargs: int) -> TabData:
    """Parse raw tablature text.

    Convenience wrapper that splits ``text`` into non-blank lines before
    calling parse_tablature().
    """
    return parse_tablature(preprocess(text), **kwargs)
