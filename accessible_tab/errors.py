"""Conversion failures.

Every failure is terminal for the current conversion. Problems with
individual lines never surface here; they are skipped by the parsers.
"""


class ConversionError(ValueError):
    """Base class for all conversion failures."""


class EmptyInputError(ConversionError):
    """The input text was blank or missing."""

    def __init__(self) -> None:
        super().__init__("Please enter a guitar tab to convert.")


class NoValidFormatError(ConversionError):
    """The input matched none of the recognised tab shapes."""

    def __init__(self) -> None:
        super().__init__(
            "No valid tab format detected. "
            "Please check that your tab is in the correct format."
        )


class NoValidChordsError(ConversionError):
    """A chord chart was detected but no chord line parsed."""

    def __init__(self) -> None:
        super().__init__("No valid chords found in chord chart.")


class NoNotesFoundError(ConversionError):
    """Tablature was detected but the column walk found no notes."""

    def __init__(self) -> None:
        super().__init__(
            "No notes found in the tab. "
            "Please make sure your tab is properly formatted."
        )


class UnsupportedFormatError(ConversionError):
    """The detector returned a format without a conversion handler."""

    def __init__(self, tab_format: object) -> None:
        self.tab_format = tab_format
        super().__init__(f"Unsupported tab format: {tab_format}")
