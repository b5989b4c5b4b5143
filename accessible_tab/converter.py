"""Tab to accessible text conversion.

This module provides convert(), the single entry point that detects the
notation of a tab, parses it and renders the accessible description.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from accessible_tab.chart import parse_chord_chart
from accessible_tab.errors import (
    EmptyInputError,
    NoNotesFoundError,
    NoValidChordsError,
    NoValidFormatError,
    UnsupportedFormatError,
)
from accessible_tab.formatter import format_chord_chart, format_tablature
from accessible_tab.lexicon import ANNOTATION_COLUMN_WINDOW, ANNOTATION_LINE_WINDOW
from accessible_tab.settings import ConversionSettings, resolve_settings
from accessible_tab.tab_parser import TabData, TabFormat, detect_format, enhance, parse_tablature
from accessible_tab.tab_parser.detector import preprocess

logger = logging.getLogger(__name__)


def convert_chord_chart(lines: list[str], settings: ConversionSettings) -> str:
    """Convert chord chart lines.

    Raises
    ------
    NoValidChordsError
        If no line parses into a chord.
    """
    chords = parse_chord_chart(lines)
    if not chords:
        logger.warning("Chord chart detected but no valid chords parsed")
        raise NoValidChordsError
    return format_chord_chart(chords, settings)


def parse_and_enhance(
    lines: list[str],
    *,
    column_window: int = ANNOTATION_COLUMN_WINDOW,
    line_window: int = ANNOTATION_LINE_WINDOW,
) -> TabData:
    """Parse tablature lines and attach technique details.

    Raises
    ------
    NoNotesFoundError
        If no tab group produced any note.
    """
    tab_data = parse_tablature(lines, column_window=column_window, line_window=line_window)
    if not tab_data.sequences:
        logger.warning("Tablature detected but no notes found")
        raise NoNotesFoundError

    return TabData(
        sequences=tuple(enhance(tab_data.sequences)),
        annotations=tab_data.annotations,
        groups=tab_data.groups,
    )


def convert(
    text: str,
    settings: ConversionSettings | Mapping[str, Any] | None = None,
    *,
    column_window: int = ANNOTATION_COLUMN_WINDOW,
    line_window: int = ANNOTATION_LINE_WINDOW,
) -> str:
    """Convert guitar tab text to an accessible description.

    Parameters
    ----------
    text : str
        Chord chart, labeled tab or standard tab text.
    settings : ConversionSettings | Mapping[str, Any] | None
        Output options. Mappings may use camelCase or snake_case keys;
        unknown keys are ignored and missing ones default to True.
    column_window : int
        Maximum column distance when attaching annotations to notes.
    line_window : int
        Maximum line distance when attaching annotations to notes.

    Returns
    -------
    str
        The accessible text.

    Raises
    ------
    EmptyInputError
        If ``text`` is blank or not a string.
    NoValidFormatError
        If the text matches no known notation.
    NoValidChordsError
        If a chord chart contains no valid chord.
    NoNotesFoundError
        If tablature contains no notes.

    Examples
    --------
    >>> print(convert("e|--3--\\nB|--0--\\nG|--0--", {"verboseMode": False}))
    Section 1:
    - Chord: (3-0-0)
    """
    if not isinstance(text, str) or not text.strip():
        raise EmptyInputError

    resolved = resolve_settings(settings)
    tab_format = detect_format(text)
    if tab_format is None:
        logger.warning("No valid tab format detected")
        raise NoValidFormatError

    lines = preprocess(text)
    logger.debug("Converting %d lines as %s", len(lines), tab_format.value)

    if tab_format is TabFormat.CHORD_CHART:
        return convert_chord_chart(lines, resolved)

    if tab_format in (TabFormat.STANDARD_TAB, TabFormat.LABELED_TAB):
        tab_data = parse_and_enhance(lines, column_window=column_window, line_window=line_window)
        return format_tablature(tab_data, resolved)

    raise UnsupportedFormatError(tab_format)
