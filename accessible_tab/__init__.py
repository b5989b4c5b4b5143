"""Accessible guitar tab converter.

This library converts guitar tablature written as plain text (chord charts,
string-labeled tab, and unlabeled pipe-framed tab for 6, 7 or 8 strings) into
a sequential description that reads well with a screen reader.

Examples
--------
>>> from accessible_tab import convert

>>> print(convert("Em: 0-0-0-2-2-0"))
Chord Chart:
<BLANKLINE>
Em chord (6-string):
- high E: open
- B: open
- G: open
- D: 2nd fret
- A: 2nd fret
- low E: open

>>> # Settings accept snake_case or camelCase keys
>>> from accessible_tab import ConversionSettings
>>> settings = ConversionSettings(verbose_mode=False)
>>> print(convert("|--3--|\\n|--0--|\\n|--0--|", settings))
Section 1:
- Chord: (3-0-0)
"""

from accessible_tab.converter import convert
from accessible_tab.errors import (
    ConversionError,
    EmptyInputError,
    NoNotesFoundError,
    NoValidChordsError,
    NoValidFormatError,
    UnsupportedFormatError,
)
from accessible_tab.models import MUTED, Chord, Fret
from accessible_tab.settings import ConversionSettings

__all__ = [
    "MUTED",
    "Chord",
    "ConversionError",
    "ConversionSettings",
    "EmptyInputError",
    "Fret",
    "NoNotesFoundError",
    "NoValidChordsError",
    "NoValidFormatError",
    "UnsupportedFormatError",
    "convert",
]
