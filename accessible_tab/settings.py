"""Conversion settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

# Accepted spellings for each setting
_KEY_ALIASES: dict[str, str] = {
    "includeTiming": "include_timing",
    "verboseMode": "verbose_mode",
    "useStringNames": "use_string_names",
    "includeTechniqueDetails": "include_technique_details",
}


@dataclass(frozen=True)
class ConversionSettings:
    """Options controlling the accessible text output.

    Parameters
    ----------
    include_timing : bool
        Render the tab information block, section annotations and per-note
        annotations. Default True.
    verbose_mode : bool
        Describe chords string by string and techniques in full. When False,
        chords render as fret patterns and techniques as short names.
        Default True.
    use_string_names : bool
        Name strings ("high E string") rather than number them. Default True.
    include_technique_details : bool
        Append technique information to notes and chords. Default True.
    """

    include_timing: bool = True
    verbose_mode: bool = True
    use_string_names: bool = True
    include_technique_details: bool = True

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> ConversionSettings:
        """Build settings from a loosely typed mapping.

        Keys may be snake_case or camelCase. Unknown keys and non-boolean
        values are ignored; missing keys keep their defaults.

        Parameters
        ----------
        values : Mapping[str, Any] | None
            The raw settings.

        Returns
        -------
        ConversionSettings
            Validated settings.

        Examples
        --------
        >>> ConversionSettings.from_mapping({"verboseMode": False}).verbose_mode
        False
        >>> ConversionSettings.from_mapping({"verbose_mode": "no"}).verbose_mode
        True
        """
        if not values:
            return cls()

        known = {f.name for f in fields(cls)}
        kwargs: dict[str, bool] = {}
        for key, value in values.items():
            name = _KEY_ALIASES.get(key, key)
            if name in known and isinstance(value, bool):
                kwargs[name] = value
        return cls(**kwargs)


def resolve_settings(
    settings: ConversionSettings | Mapping[str, Any] | None,
) -> ConversionSettings:
    """Normalise any accepted settings value to ConversionSettings."""
    if isinstance(settings, ConversionSettings):
        return settings
    return ConversionSettings.from_mapping(settings)
