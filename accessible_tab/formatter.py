"""Accessible text rendering.

This module turns parsed chord charts and tablature into plain text meant to
be read line by line with a screen reader.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence as SequenceABC

from accessible_tab.lexicon import STRING_NAMES, STRING_NUMBERS
from accessible_tab.models import MUTED, Chord, Fret
from accessible_tab.settings import ConversionSettings
from accessible_tab.tab_parser.models import Annotation, Note, NoteGroup, Sequence, TabData

SCREEN_READER_PREAMBLE = (
    "Guitar Tab - Accessible Format\n\n"
    "Navigation: Each line represents a note or chord to play.\n"
    "Format: String name/number, fret position, and any techniques.\n\n"
)


def ordinal_suffix(number: int) -> str:
    """Return the English ordinal suffix for a number.

    Examples
    --------
    >>> [ordinal_suffix(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 111)]
    ['st', 'nd', 'rd', 'th', 'th', 'th', 'th', 'st', 'nd', 'th']
    """
    if 11 <= number % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def describe_fret(fret: Fret) -> str:
    """Describe a fret as "open", "muted" or "5th fret"."""
    if fret is MUTED:
        return "muted"
    if fret == 0:
        return "open"
    return f"{fret}{ordinal_suffix(fret)} fret"


def string_name(index: int, total_strings: int = 6) -> str:
    """Return the display name of a string for a guitar of a given size.

    Examples
    --------
    >>> string_name(0)
    'high E'
    >>> string_name(6, 7)
    'low B'
    >>> string_name(6)
    'String 7'
    """
    names = STRING_NAMES.get(total_strings, STRING_NAMES[6])
    if index < len(names):
        return names[index]
    return f"String {index + 1}"


def format_chord_chart(chords: Iterable[Chord], settings: ConversionSettings) -> str:
    """Render chord shapes, one line per string.

    Parameters
    ----------
    chords : Iterable[Chord]
        Parsed chords.
    settings : ConversionSettings
        Output options; only ``use_string_names`` applies.

    Returns
    -------
    str
        The chord chart text.

    Examples
    --------
    >>> chart = format_chord_chart([Chord("Em", (0, 0, 0, 2, 2, 0))], ConversionSettings())
    >>> print(chart)
    Chord Chart:
    <BLANKLINE>
    Em chord (6-string):
    - high E: open
    - B: open
    - G: open
    - D: 2nd fret
    - A: 2nd fret
    - low E: open
    """
    lines = ["Chord Chart:", ""]

    for chord in chords:
        count = chord.string_count
        lines.append(f"{chord.name} chord ({count}-string):")
        for i, fret in enumerate(chord.frets):
            label = string_name(i, count) if settings.use_string_names else f"String {i + 1}"
            lines.append(f"- {label}: {describe_fret(fret)}")
        lines.append("")

    return "\n".join(lines).strip()


def summarize_annotations(annotations: Iterable[Annotation]) -> str:
    """Summarize annotations by category.

    Returns an empty string when there are no annotations.
    """
    categories: dict[str, list[str]] = {}
    for annotation in annotations:
        texts = categories.setdefault(annotation.category, [])
        if annotation.text not in texts:
            texts.append(annotation.text)

    if not categories:
        return ""

    lines = ["Tab Information:"]
    if "section" in categories:
        lines.append(f"- Sections: {', '.join(categories['section'])}")
    if "timing" in categories:
        lines.append(f"- Timing: {', '.join(categories['timing'])}")
    if "chords" in categories:
        lines.append(f"- Chord progression: {', '.join(categories['chords'])}")
    if "instruction" in categories:
        lines.append(f"- Instructions: {', '.join(categories['instruction'])}")
    if "lyrics" in categories:
        lines.append("- Contains lyrics")

    return "\n".join(lines)


def sequence_annotations(sequence: Sequence) -> list[str]:
    """Return the distinct annotations of a sequence in order."""
    return list(dict.fromkeys(g.annotation for g in sequence.notes if g.annotation))


def _string_label(note: Note, settings: ConversionSettings, *, ordinal: bool = False) -> str:
    if settings.use_string_names:
        return f"{note.string_name} string"
    if ordinal:
        return f"{STRING_NUMBERS[note.string_index]} string"
    return f"String {note.string_index + 1}"


def format_note(note: Note, settings: ConversionSettings) -> str:
    """Render a single note line.

    Examples
    --------
    >>> print(format_note(Note("B", 1, 5, techniques=("bend",)), ConversionSettings()))
    - B string, 5th fret (bend)
    """
    desc = f"- {_string_label(note, settings)}, {describe_fret(note.fret)}"
    if note.ghost:
        desc += ", ghost note"

    if settings.include_technique_details and note.techniques:
        if settings.verbose_mode:
            if note.technique_details:
                parts = [d.context or d.name for d in note.technique_details]
            else:
                parts = list(note.techniques)
            desc += f" ({', '.join(parts)})"
        else:
            desc += f" {'+'.join(note.techniques)}"

    return desc


def format_chord(notes: SequenceABC[Note], settings: ConversionSettings) -> str:
    """Render simultaneous notes as one chord line.

    Examples
    --------
    >>> notes = (Note("high E", 0, 3), Note("B", 1, 0), Note("G", 2, MUTED))
    >>> format_chord(notes, ConversionSettings())
    '- Chord: high E string 3rd fret, B string open, G string muted'
    >>> format_chord(notes, ConversionSettings(verbose_mode=False))
    '- Chord: (3-0-x)'
    """
    if settings.verbose_mode:
        parts = [
            f"{_string_label(n, settings, ordinal=True)} {describe_fret(n.fret)}"
            for n in notes
        ]
        desc = f"- Chord: {', '.join(parts)}"
    else:
        ordered = sorted(notes, key=lambda n: n.string_index)
        pattern = "-".join("x" if n.fret is MUTED else str(n.fret) for n in ordered)
        desc = f"- Chord: ({pattern})"

    techniques = list(dict.fromkeys(t for n in notes for t in n.techniques))
    if settings.include_technique_details and techniques:
        desc += f" with {', '.join(techniques)}"

    return desc


def format_note_group(group: NoteGroup, settings: ConversionSettings) -> list[str]:
    """Render the lines for one playing instant."""
    if group.is_chord:
        lines = [format_chord(group.notes, settings)]
    else:
        lines = [format_note(n, settings) for n in group.notes]

    if settings.include_timing and group.annotation:
        lines[-1] = f"{lines[-1]} [{group.annotation}]"

    return lines


def format_sequence(sequence: Sequence, settings: ConversionSettings) -> str:
    """Render a section header followed by its note groups."""
    annotations = sequence_annotations(sequence)
    if settings.include_timing and annotations:
        header = f"Section {sequence.section} ({', '.join(annotations)}):"
    else:
        header = f"Section {sequence.section}:"

    lines = [header]
    for group in sequence.notes:
        lines.extend(format_note_group(group, settings))
    return "\n".join(lines)


def format_tablature(tab_data: TabData, settings: ConversionSettings) -> str:
    """Render parsed tablature.

    Parameters
    ----------
    tab_data : TabData
        Parsed (and usually enriched) tablature.
    settings : ConversionSettings
        Output options.

    Returns
    -------
    str
        The accessible text, sections separated by blank lines.
    """
    blocks: list[str] = []

    summary = summarize_annotations(tab_data.annotations)
    if summary and settings.include_timing:
        blocks.append(summary)

    blocks.extend(format_sequence(seq, settings) for seq in tab_data.sequences)
    return "\n\n".join(blocks).strip()


def format_output(parsed: TabData | Iterable[Chord], settings: ConversionSettings) -> str:
    """Render either a chord chart or tablature."""
    if isinstance(parsed, TabData):
        return format_tablature(parsed, settings)
    return format_chord_chart(parsed, settings)


def generate_summary(tab_data: TabData) -> str:
    """Summarize note, chord and technique counts.

    Examples
    --------
    >>> group = NoteGroup(position=0, notes=(Note("B", 1, 5, techniques=("bend",)),))
    >>> generate_summary(TabData(sequences=(Sequence(section=1, notes=(group,)),)))
    'Tab Summary: 1 sections, 1 individual notes, 0 chords, techniques used: bend'
    """
    total_notes = 0
    total_chords = 0
    techniques: dict[str, None] = {}

    for sequence in tab_data.sequences:
        for group in sequence.notes:
            if group.is_chord:
                total_chords += 1
            else:
                total_notes += len(group.notes)
            for note in group.notes:
                techniques.update(dict.fromkeys(note.techniques))

    summary = (
        f"Tab Summary: {len(tab_data.sequences)} sections, "
        f"{total_notes} individual notes, {total_chords} chords"
    )
    if techniques:
        summary += f", techniques used: {', '.join(techniques)}"
    return summary


def enhance_for_screen_reader(output: str, settings: ConversionSettings) -> str:
    """Prefix navigation hints in verbose mode."""
    if not settings.verbose_mode:
        return output
    return SCREEN_READER_PREAMBLE + output
