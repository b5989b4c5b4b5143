"""Tablature parser for standard and labeled guitar tab.

This module provides functionality to detect tab notation, group tab lines
into string groups, read notes column by column, collect nearby free-text
annotations and describe playing techniques.
"""

from accessible_tab.tab_parser.detector import detect_format
from accessible_tab.tab_parser.models import (
    Annotation,
    Note,
    NoteGroup,
    Sequence,
    StringLine,
    TabData,
    TabFormat,
    TabGroup,
    TechniqueDetail,
)
from accessible_tab.tab_parser.parser import parse, parse_group, parse_tablature
from accessible_tab.tab_parser.techniques import enhance

__all__ = [
    "Annotation",
    "Note",
    "NoteGroup",
    "Sequence",
    "StringLine",
    "TabData",
    "TabFormat",
    "TabGroup",
    "TechniqueDetail",
    "detect_format",
    "enhance",
    "parse",
    "parse_group",
    "parse_tablature",
]
