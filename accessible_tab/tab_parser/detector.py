"""Line classification and format detection.

This module provides the regex-based predicates that classify individual
lines and the detector that decides which notation an input uses.

The detector evaluates its rules in a fixed order: chord chart, then
standard (unlabeled) tab, then labeled tab. Reordering them changes the
outcome for inputs that satisfy more than one rule.
"""

from __future__ import annotations

import logging

from accessible_tab.lexicon import (
    CHORD_CHART_THRESHOLD,
    CHORD_LINE_RE,
    LEGEND_LINE_RE,
    MIN_GROUP_STRINGS,
    STANDARD_TAB_LINE_RE,
    TAB_LINE_RE,
    TECHNIQUE_LINE_RE,
)
from accessible_tab.tab_parser.models import TabFormat

logger = logging.getLogger(__name__)


def preprocess(text: str) -> list[str]:
    """Split text into non-blank lines.

    Normalizes line endings and keeps each remaining line unstripped so that
    column positions survive.

    Examples
    --------
    >>> preprocess("e|--3--\\r\\n\\n  B|--0--")
    ['e|--3--', '  B|--0--']
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return [line for line in text.split("\n") if line.strip()]


def is_chord_line(line: str) -> bool:
    """Check for a chord definition such as ``F: 1-3-3-2-1-1``."""
    return CHORD_LINE_RE.match(line.strip()) is not None


def is_standard_tab_line(line: str) -> bool:
    """Check for an unlabeled, pipe-framed tab line.

    Examples
    --------
    >>> is_standard_tab_line("|--3--5h7--|")
    True
    >>> is_standard_tab_line("e|--3--|")
    False
    """
    return STANDARD_TAB_LINE_RE.match(line.strip()) is not None


def is_tab_line(line: str) -> bool:
    """Check for a tab line labeled with its string letter.

    Examples
    --------
    >>> is_tab_line("e|--3--")
    True
    >>> is_tab_line("Em  G  D")
    False
    """
    stripped = line.strip()
    if not TAB_LINE_RE.match(stripped):
        return False
    return any(c.isdigit() or c == "-" for c in stripped)


def is_technique_line(line: str) -> bool:
    """Check for a technique legend line such as ``h  Hammer-on``."""
    stripped = line.strip()
    return bool(TECHNIQUE_LINE_RE.match(stripped) or LEGEND_LINE_RE.match(stripped))


def is_chord_chart(lines: list[str]) -> bool:
    """Check whether more than half the lines are chord definitions."""
    if not lines:
        return False
    chord_lines = sum(1 for line in lines if is_chord_line(line))
    return chord_lines / len(lines) > CHORD_CHART_THRESHOLD


def detect_format(text: str) -> TabFormat | None:
    """Detect the notation used by a tab.

    Parameters
    ----------
    text : str
        The raw tab text.

    Returns
    -------
    TabFormat | None
        The detected format, or None if no rule matched.

    Examples
    --------
    >>> detect_format("F: 1-3-3-2-1-1")
    <TabFormat.CHORD_CHART: 'chord_chart'>
    >>> detect_format("asdf\\nqwer") is None
    True
    """
    lines = preprocess(text)
    if not lines:
        return None

    if is_chord_chart(lines):
        logger.debug("Detected chord chart")
        return TabFormat.CHORD_CHART

    standard_lines = sum(1 for line in lines if is_standard_tab_line(line))
    if standard_lines >= MIN_GROUP_STRINGS:
        logger.debug("Detected standard tab with %d tab lines", standard_lines)
        return TabFormat.STANDARD_TAB

    labeled_lines = sum(1 for line in lines if is_tab_line(line))
    if labeled_lines >= MIN_GROUP_STRINGS:
        logger.debug("Detected labeled tab with %d tab lines", labeled_lines)
        return TabFormat.LABELED_TAB

    return None
