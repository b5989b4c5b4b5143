"""Technique enrichment for parsed note sequences.

Each technique on a note gets a static description and, where the technique
depends on neighbouring notes, a context string built from the note played
on the same string just before or just after it.
"""

from __future__ import annotations

from dataclasses import replace

from accessible_tab.lexicon import TECHNIQUE_DESCRIPTIONS
from accessible_tab.tab_parser.models import Note, NoteGroup, Sequence, TechniqueDetail


def describe(technique: str) -> str:
    """Return the description of a technique, or its name if unknown."""
    return TECHNIQUE_DESCRIPTIONS.get(technique, technique)


def note_on_string(group: NoteGroup | None, string_index: int) -> Note | None:
    """Find the note a group plays on a given string."""
    if group is None:
        return None
    return next((n for n in group.notes if n.string_index == string_index), None)


def _numeric_fret(note: Note | None) -> int | None:
    if note is None or isinstance(note.fret, bool) or not isinstance(note.fret, int):
        return None
    return note.fret


def technique_context(
    technique: str,
    note: Note,
    previous: NoteGroup | None,
    following: NoteGroup | None,
) -> str:
    """Derive the positional context for one technique.

    Parameters
    ----------
    technique : str
        Technique name.
    note : Note
        The note carrying the technique.
    previous : NoteGroup | None
        The note group before the note's group.
    following : NoteGroup | None
        The note group after the note's group.

    Returns
    -------
    str
        Context such as "Hammer from 5 to 7", or "" when none applies.

    Examples
    --------
    >>> prev = NoteGroup(position=2, notes=(Note("B", 1, 5),))
    >>> technique_context("hammer-on", Note("B", 1, 7), prev, None)
    'Hammer from 5 to 7'
    """
    if technique == "hammer-on":
        source = _numeric_fret(note_on_string(previous, note.string_index))
        if source is not None:
            return f"Hammer from {source} to {note.fret}"
        return ""

    if technique == "pull-off":
        target = _numeric_fret(note_on_string(following, note.string_index))
        if target is not None:
            return f"Pull off from {note.fret} to {target}"
        return ""

    if technique in ("slide up", "slide down"):
        target = _numeric_fret(note_on_string(following, note.string_index))
        if target is not None:
            direction = technique.split()[1]
            return f"Slide {direction} from {note.fret} to {target}"
        return ""

    if technique == "bend":
        return f"Bend the string at fret {note.fret}"

    return ""


def enhance_note(note: Note, previous: NoteGroup | None, following: NoteGroup | None) -> Note:
    """Attach technique details to a single note."""
    if not note.techniques:
        return note

    details = tuple(
        TechniqueDetail(
            name=technique,
            description=describe(technique),
            context=technique_context(technique, note, previous, following),
        )
        for technique in note.techniques
    )
    return replace(note, technique_details=details)


def enhance_notes(groups: tuple[NoteGroup, ...]) -> tuple[NoteGroup, ...]:
    """Enrich every note of a sequence's note groups."""
    enhanced: list[NoteGroup] = []

    for i, group in enumerate(groups):
        previous = groups[i - 1] if i > 0 else None
        following = groups[i + 1] if i + 1 < len(groups) else None
        notes = tuple(enhance_note(n, previous, following) for n in group.notes)
        enhanced.append(replace(group, notes=notes))

    return tuple(enhanced)


def enhance(sequences: list[Sequence] | tuple[Sequence, ...]) -> list[Sequence]:
    """Add technique details to parsed sequences.

    The transform is pure: the input sequences are left untouched and the
    returned sequences keep the same shape.

    Parameters
    ----------
    sequences : list[Sequence] | tuple[Sequence, ...]
        Sequences from the tablature parser.

    Returns
    -------
    list[Sequence]
        Sequences whose notes carry technique details.
    """
    return [replace(seq, notes=enhance_notes(seq.notes)) for seq in sequences]
