"""Core data models for tab conversion.

This module defines the fret value type, the muted-string sentinel and the
chord record shared by the chord chart parser and the formatter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from accessible_tab.lexicon import MAX_FRET, SUPPORTED_STRING_COUNTS


class _Muted:
    """Sentinel fret value for a muted string."""

    _instance: _Muted | None = None

    def __new__(cls) -> _Muted:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MUTED"

    def __str__(self) -> str:
        return "mute"


MUTED: Final = _Muted()

Fret = int | _Muted


def is_valid_fret(fret: object) -> bool:
    """Check whether a value is a playable fret or the muted sentinel.

    Parameters
    ----------
    fret : object
        The value to check.

    Returns
    -------
    bool
        True for MUTED or an integer in 0-24.

    Examples
    --------
    >>> is_valid_fret(12)
    True
    >>> is_valid_fret(MUTED)
    True
    >>> is_valid_fret(25)
    False
    """
    if fret is MUTED:
        return True
    if isinstance(fret, bool) or not isinstance(fret, int):
        return False
    return 0 <= fret <= MAX_FRET


def is_valid_chord(frets: tuple[Fret, ...] | list[Fret]) -> bool:
    """Check that a fret list describes a 6, 7 or 8 string chord."""
    if len(frets) not in SUPPORTED_STRING_COUNTS:
        return False
    return all(is_valid_fret(f) for f in frets)


@dataclass(frozen=True)
class Chord:
    """A named chord shape from a chord chart.

    Parameters
    ----------
    name : str
        The chord name as written (e.g., "F", "Cadd9").
    frets : tuple[Fret, ...]
        One fret per string, highest pitched string first.

    Examples
    --------
    >>> chord = Chord(name="Em", frets=(0, 0, 0, 2, 2, 0))
    >>> chord.string_count
    6
    """

    name: str
    frets: tuple[Fret, ...]

    def __post_init__(self) -> None:
        if not is_valid_chord(self.frets):
            msg = f"Invalid frets for chord {self.name}: {self.frets}"
            raise ValueError(msg)

    @property
    def string_count(self) -> int:
        """Number of strings in this chord shape."""
        return len(self.frets)
