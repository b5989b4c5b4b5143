#!/usr/bin/env python3
"""CLI tool to convert tab files to accessible text or JSON.

Usage:
    python examples/convert_tab.py <input_file> [-o output_file]

Examples:
    python examples/convert_tab.py riff.txt
    python examples/convert_tab.py riff.txt --compact --no-string-names
    python examples/convert_tab.py riff.txt --json --pretty -o riff.json
    python examples/convert_tab.py shapes.txt --diagrams
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from accessible_tab import MUTED, Chord, ConversionError, ConversionSettings, convert
from accessible_tab.chart import extract_chord_progressions, parse_chord_chart, parse_chord_diagrams
from accessible_tab.converter import parse_and_enhance
from accessible_tab.errors import NoValidChordsError
from accessible_tab.formatter import enhance_for_screen_reader, format_chord_chart, generate_summary
from accessible_tab.models import Fret
from accessible_tab.tab_parser import Note, NoteGroup, TabData, TabFormat, detect_format
from accessible_tab.tab_parser.columns import detect_measures
from accessible_tab.tab_parser.detector import preprocess


def fret_to_json(fret: Fret) -> int | str:
    """Convert a fret to a JSON-serializable value."""
    return "x" if fret is MUTED else fret


def note_to_dict(note: Note) -> dict[str, Any]:
    """Convert a Note to a JSON-serializable dict."""
    result: dict[str, Any] = {
        "string": note.string_name,
        "string_index": note.string_index,
        "fret": fret_to_json(note.fret),
        "position": note.position,
    }
    if note.ghost:
        result["ghost"] = True
    if note.technique_details:
        result["techniques"] = [
            {"name": d.name, "description": d.description, "context": d.context}
            for d in note.technique_details
        ]
    return result


def note_group_to_dict(group: NoteGroup) -> dict[str, Any]:
    """Convert a NoteGroup to a JSON-serializable dict."""
    return {
        "position": group.position,
        "is_chord": group.is_chord,
        "annotation": group.annotation,
        "notes": [note_to_dict(n) for n in group.notes],
    }


def tab_data_to_dict(tab_data: TabData) -> dict[str, Any]:
    """Convert parsed tablature to a JSON-serializable dict."""
    return {
        "type": "tablature",
        "sequences": [
            {
                "section": seq.section,
                "notes": [note_group_to_dict(g) for g in seq.notes],
            }
            for seq in tab_data.sequences
        ],
        "annotations": [
            {
                "text": a.text,
                "line": a.line_number,
                "column": a.column,
                "category": a.category,
            }
            for a in tab_data.annotations
        ],
        "progressions": [
            {"chords": list(p.chords), "line": p.original}
            for p in extract_chord_progressions(a.text for a in tab_data.annotations)
        ],
        "measures": [detect_measures(g.lines[0].content) for g in tab_data.groups],
    }


def chords_to_dict(chords: list[Chord]) -> dict[str, Any]:
    """Convert parsed chords to a JSON-serializable dict."""
    return {
        "type": "chord_chart",
        "chords": [
            {"name": c.name, "frets": [fret_to_json(f) for f in c.frets]}
            for c in chords
        ],
    }


def read_diagrams(text: str) -> list[Chord]:
    """Parse ASCII chord diagrams, failing when there are none."""
    chords = parse_chord_diagrams(preprocess(text))
    if not chords:
        raise NoValidChordsError
    return chords


def parse_tab_file(input_path: Path, *, diagrams: bool = False) -> dict[str, Any]:
    """Parse a tab file and return JSON-serializable data."""
    text = input_path.read_text()
    if diagrams:
        return chords_to_dict(read_diagrams(text))

    tab_format = detect_format(text)
    lines = preprocess(text)

    if tab_format is TabFormat.CHORD_CHART:
        return chords_to_dict(parse_chord_chart(lines))

    if tab_format is None:
        return {"type": "unknown"}

    return tab_data_to_dict(parse_and_enhance(lines))


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Convert a guitar tab file to accessible text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s riff.txt
  %(prog)s riff.txt --compact --no-timing
  %(prog)s riff.txt --json --pretty -o riff.json
  %(prog)s shapes.txt --diagrams
        """,
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Input tab file to convert",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Render chords as fret patterns and techniques as short names",
    )
    parser.add_argument(
        "--no-timing",
        action="store_true",
        help="Omit tab information, section annotations and note annotations",
    )
    parser.add_argument(
        "--no-string-names",
        action="store_true",
        help="Number strings instead of naming them",
    )
    parser.add_argument(
        "--no-techniques",
        action="store_true",
        help="Omit technique details",
    )
    parser.add_argument(
        "--diagrams",
        action="store_true",
        help="Read the file as ASCII chord diagrams (a chord name above six string lines)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Append note, chord and technique counts",
    )
    parser.add_argument(
        "--screen-reader",
        action="store_true",
        help="Prefix navigation hints (verbose mode only)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Dump the parsed structure as JSON instead of text",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log parsing details to stderr",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    settings = ConversionSettings(
        include_timing=not args.no_timing,
        verbose_mode=not args.compact,
        use_string_names=not args.no_string_names,
        include_technique_details=not args.no_techniques,
    )

    try:
        if args.json:
            indent = 2 if args.pretty else None
            output = json.dumps(
                parse_tab_file(args.input, diagrams=args.diagrams),
                indent=indent,
                ensure_ascii=False,
            )
        else:
            text = args.input.read_text()
            if args.diagrams:
                output = format_chord_chart(read_diagrams(text), settings)
            else:
                output = convert(text, settings)
            summarize = args.summary and not args.diagrams
            if summarize and detect_format(text) is not TabFormat.CHORD_CHART:
                output += "\n\n" + generate_summary(parse_and_enhance(preprocess(text)))
            if args.screen_reader:
                output = enhance_for_screen_reader(output, settings)
    except ConversionError as e:
        print(f"Error converting tab: {e}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(output)
        print(f"Wrote output to {args.output}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
