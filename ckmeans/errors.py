"""Exceptions raised by the clustering functions."""

from __future__ import annotations


class CkmeansError(Exception):
    """Base class for every error raised while clustering."""

    default_message = "An error occurred during clustering"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)

    @property
    def message(self) -> str:
        """The human-readable description of the error."""
        return str(self.args[0])


class TooFewClassesError(CkmeansError, ValueError):
    """Raised when zero classes are requested."""

    default_message = "You can't specify 0 classes. Try a positive number"


class TooManyClassesError(CkmeansError, ValueError):
    """Raised when more classes are requested than there are data values."""

    default_message = "You can't generate more classes than there are data values"


class ConversionError(CkmeansError):
    """Raised when a numeric conversion fails."""

    default_message = "An error occurred during numeric conversion"


class LowWindowError(CkmeansError):
    """Raised when the lower of two adjacent clusters has no last element."""

    default_message = "Couldn't get last element of low window"


class HighWindowError(CkmeansError):
    """Raised when the higher of two adjacent clusters has no first element."""

    default_message = "Couldn't get first element of high window"