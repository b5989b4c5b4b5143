"""Grouping of tab lines into string groups.

Standard (unlabeled) tab identifies strings purely by position within a
group. Labeled tab identifies them by the leading letter, with E and B
resolved by order of appearance since both letters name two strings.
"""

from __future__ import annotations

import logging

from accessible_tab.lexicon import MIN_GROUP_STRINGS, STRING_NAMES, SUPPORTED_STRING_COUNTS
from accessible_tab.tab_parser.detector import (
    is_standard_tab_line,
    is_tab_line,
    is_technique_line,
)
from accessible_tab.tab_parser.models import StringLine, TabGroup

logger = logging.getLogger(__name__)

FULL_GROUP_SIZE = 6
MAX_GROUP_SIZE = 8
SYSTEM_SIZES = tuple(sorted(SUPPORTED_STRING_COUNTS))

# Labeled string letters with a fixed index; E and B are resolved by order
FIXED_LETTER_INDEX: dict[str, int] = {"e": 0, "G": 2, "D": 3, "A": 4, "F": 7, "F#": 7}

HIGH_E, LOW_E = 0, 5
B_STRING, LOW_B = 1, 6


def string_names_for_count(count: int) -> tuple[str, ...]:
    """Return display names for a group of ``count`` strings.

    Examples
    --------
    >>> string_names_for_count(6)
    ('high E', 'B', 'G', 'D', 'A', 'low E')
    >>> string_names_for_count(4)
    ('high E', 'B', 'G', 'D')
    """
    if count in STRING_NAMES:
        return STRING_NAMES[count]

    names = list(STRING_NAMES[MAX_GROUP_SIZE][:count])
    names.extend(f"String {i + 1}" for i in range(len(names), count))
    return tuple(names)


def _name_group(lines: list[tuple[str, int]]) -> TabGroup:
    """Build a positional group from (content, line_number) pairs."""
    names = string_names_for_count(len(lines))
    return TabGroup(
        lines=tuple(
            StringLine(content=content, string_index=i, string_name=names[i], line_number=n)
            for i, (content, n) in enumerate(lines)
        )
    )


def _is_skippable(line: str) -> bool:
    return not line.strip() or is_technique_line(line)


def system_size(count: int) -> int:
    """Pick the string count that splits a run of ``count`` lines evenly.

    Examples
    --------
    >>> system_size(12), system_size(14), system_size(16), system_size(10)
    (6, 7, 8, 6)
    """
    for size in SYSTEM_SIZES:
        if count % size == 0:
            return size
    return FULL_GROUP_SIZE


def _split_run(run: list[tuple[str, int]]) -> list[TabGroup]:
    """Cut a run of standard lines into groups of one guitar each."""
    if len(run) <= MAX_GROUP_SIZE:
        chunks = [run]
    else:
        size = system_size(len(run))
        chunks = [run[i : i + size] for i in range(0, len(run), size)]
    return [_name_group(chunk) for chunk in chunks if len(chunk) >= MIN_GROUP_STRINGS]


def group_standard_lines(lines: list[str]) -> list[TabGroup]:
    """Group unlabeled, pipe-framed tab lines by position.

    Blank and technique legend lines are skipped; any other non-tab line
    ends the current run. A run of up to eight lines is one group. Longer
    runs hold several systems printed back to back and are cut into groups
    of 6, 7 or 8 lines, whichever divides the run evenly (6 otherwise).
    Groups with fewer than three lines are dropped.

    Parameters
    ----------
    lines : list[str]
        Input lines.

    Returns
    -------
    list[TabGroup]
        Groups with positional string identities.
    """
    groups: list[TabGroup] = []
    run: list[tuple[str, int]] = []

    for i, raw in enumerate(lines):
        line = raw.strip()
        if _is_skippable(line):
            continue
        if is_standard_tab_line(line):
            run.append((line, i))
            continue
        groups.extend(_split_run(run))
        run = []

    groups.extend(_split_run(run))
    return groups


def _letter(line: str) -> str:
    stripped = line.strip()
    return "F#" if stripped.startswith("F#") else stripped[0]


def resolve_labeled_group(lines: list[tuple[str, int]]) -> TabGroup:
    """Assign string identities to a run of labeled tab lines.

    The first uppercase E is the high E string and a later one the low E,
    unless the group also has a lowercase ``e``, in which case every
    uppercase E is low. The first B is the B string, a later one low B.
    When two lines resolve to the same string the first is kept.

    Parameters
    ----------
    lines : list[tuple[str, int]]
        (content, line_number) pairs in input order.

    Returns
    -------
    TabGroup
        Lines sorted highest pitched string first.

    Examples
    --------
    >>> group = resolve_labeled_group([("E|-3-", 0), ("B|-0-", 1), ("E|---", 2)])
    >>> [(l.string_index, l.string_name) for l in group.lines]
    [(0, 'high E'), (1, 'B'), (5, 'low E')]
    """
    letters = [_letter(content) for content, _ in lines]
    seen_high_e = "e" in letters
    seen_b = False

    by_index: dict[int, tuple[str, int]] = {}
    for (content, line_number), letter in zip(lines, letters):
        if letter == "E":
            index = LOW_E if seen_high_e else HIGH_E
            seen_high_e = True
        elif letter == "B":
            index = LOW_B if seen_b else B_STRING
            seen_b = True
        else:
            index = FIXED_LETTER_INDEX[letter]
        by_index.setdefault(index, (content, line_number))

    names = string_names_for_count(max(FULL_GROUP_SIZE, max(by_index) + 1))
    return TabGroup(
        lines=tuple(
            StringLine(
                content=content,
                string_index=index,
                string_name=names[index],
                line_number=line_number,
            )
            for index, (content, line_number) in sorted(by_index.items())
        )
    )


def starts_new_system(letters: list[str], letter: str) -> bool:
    """Check whether a labeled line repeats a string of the current run.

    Two E lines and, from the seventh line on, two B lines fit one guitar.
    Any other repeat means a second system follows without a separating
    text line.

    Examples
    --------
    >>> starts_new_system(["e", "B", "G", "D", "A", "E"], "e")
    True
    >>> starts_new_system(["E", "B", "G", "D", "A"], "E")
    False
    >>> starts_new_system(["e", "B", "G", "D", "A", "E"], "B")
    False
    """
    if len(letters) >= MAX_GROUP_SIZE:
        return True

    upper_e = letters.count("E")
    if letter == "e":
        return "e" in letters or upper_e >= 2
    if letter == "E":
        return upper_e >= 2 or (upper_e == 1 and "e" in letters)
    if letter == "B":
        count = letters.count("B")
        return count >= 2 or (count == 1 and len(letters) < FULL_GROUP_SIZE)
    if letter in ("F", "F#"):
        return "F" in letters or "F#" in letters
    return letter in letters


def group_labeled_lines(lines: list[str]) -> list[TabGroup]:
    """Group consecutive labeled tab lines.

    Any line that is not a labeled tab line ends the current group, and so
    does a line whose string the group already holds. Groups with fewer
    than three lines are dropped.
    """
    groups: list[TabGroup] = []
    current: list[tuple[str, int]] = []

    for i, line in enumerate(lines):
        if is_tab_line(line):
            letter = _letter(line)
            if starts_new_system([_letter(content) for content, _ in current], letter):
                if len(current) >= MIN_GROUP_STRINGS:
                    groups.append(resolve_labeled_group(current))
                current = []
            current.append((line, i))
            continue
        if len(current) >= MIN_GROUP_STRINGS:
            groups.append(resolve_labeled_group(current))
        current = []

    if len(current) >= MIN_GROUP_STRINGS:
        groups.append(resolve_labeled_group(current))

    return groups


def group_lines(lines: list[str]) -> list[TabGroup]:
    """Partition input lines into tab groups.

    Standard grouping is tried first; labeled grouping is used only when it
    finds nothing.
    """
    groups = group_standard_lines(lines)
    if groups:
        logger.debug("Found %d standard tab groups", len(groups))
        return groups

    groups = group_labeled_lines(lines)
    logger.debug("Found %d labeled tab groups", len(groups))
    return groups
