"""Shared lookup tables and patterns for tab conversion.

This module holds the immutable tables every stage of the pipeline reads:
string names per string count, technique symbols and descriptions, and the
compiled regular expressions used to classify lines.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Final

# String names from high to low, keyed by string count
STRING_NAMES: Final = MappingProxyType(
    {
        6: ("high E", "B", "G", "D", "A", "low E"),
        7: ("high E", "B", "G", "D", "A", "E", "low B"),
        8: ("high E", "B", "G", "D", "A", "E", "low B", "F#"),
    }
)

# Ordinal string numbers, 1st string = highest pitched
STRING_NUMBERS: Final = ("1st", "2nd", "3rd", "4th", "5th", "6th", "7th", "8th")

SUPPORTED_STRING_COUNTS: Final = frozenset(STRING_NAMES)

MIN_GROUP_STRINGS = 3
MAX_FRET = 24

# Symbols recognised next to a fret digit
TECHNIQUE_SYMBOLS: Final = MappingProxyType(
    {
        "h": "hammer-on",
        "p": "pull-off",
        "b": "bend",
        "r": "release",
        "s": "slide",
        "/": "slide up",
        "\\": "slide down",
        "~": "vibrato",
        "t": "tap",
        "^": "bend",
        "v": "whammy",
    }
)

TECHNIQUE_DESCRIPTIONS: Final = MappingProxyType(
    {
        "hammer-on": "Strike the string and tap the higher fret with another finger",
        "pull-off": "Pull your finger off the fret to sound the lower note",
        "bend": "Push or pull the string to raise the pitch",
        "release": "Return the bent string to its original position",
        "slide": "Slide your finger along the string between frets",
        "slide up": "Slide your finger up to a higher fret",
        "slide down": "Slide your finger down to a lower fret",
        "vibrato": "Rapidly bend and release the string for a wavering effect",
        "tap": "Tap the fret with your picking hand finger",
        "mute": "Lightly touch the string to prevent it from ringing",
        "whammy": "Use the whammy bar to lower and raise the pitch",
        "harmonic": "Lightly touch the string above the fret to sound a harmonic",
        "palm mute": "Rest the side of your picking hand on the strings near the bridge",
    }
)

# Characters that never start a note during the column walk
SEPARATORS: Final = frozenset("-| :")

# Annotation proximity thresholds
ANNOTATION_COLUMN_WINDOW = 10
ANNOTATION_LINE_WINDOW = 2

# Fraction of lines that must be chord definitions for a chord chart
CHORD_CHART_THRESHOLD = 0.5

_TECHNIQUE_CHARS = r"hpbrst/\\~^v"

# Chord definition: "F: 1-3-3-2-1-1", "Cadd9 : x-3-2-0-3-3"
CHORD_LINE_RE = re.compile(
    r"^([A-G][#b]?[\w*]*)"  # Chord name
    r"\s*:\s*"  # Separator
    r"([\dXx]+(?:-[\dXx]+)*)$",  # Dash-joined fret tokens
    re.IGNORECASE,
)

# Unlabeled tab line framed by a pipe: "|--3--5h7--|"
STANDARD_TAB_LINE_RE = re.compile(rf"^\|[-\d{_TECHNIQUE_CHARS}xX\s|]+$")

# Labeled tab line: "e|--3--", "B: --0--", "F#|-----"
TAB_LINE_RE = re.compile(r"^(F#|[EADGBFe])\s*[:|]")

TECHNIQUE_LINE_RE = re.compile(r"^[~/\\^vhp]\s+")

LEGEND_LINE_RE = re.compile(
    r"^\|\s*[a-zA-Z]\s+(Bend|Hammer|Pull|Slide|Vibrato|Trill|Release)",
    re.IGNORECASE,
)

# Annotation categories, evaluated in this order
SECTION_RE = re.compile(r"^[IVX]+\s*-")
TIMING_RE = re.compile(r"\d+:\d+")
INSTRUCTION_RE = re.compile(r"repeat|times|x\d+", re.IGNORECASE)
