"""Errors and diagnostics raised or collected during a conversion run.

Fatal problems are exceptions; recoverable gaps are returned as
Diagnostic values next to the result that produced them.
"""

from enum import Enum

from pydantic import BaseModel


class ConversionError(Exception):
    """Base class for errors that abort a conversion run."""


class InputError(ConversionError):
    """The input document is missing, unreadable or structurally invalid."""


class PathResolutionError(ConversionError):
    """An endpoint path has no segment left to name a file after."""


class DiagnosticKind(str, Enum):
    SECURITY_LOOKUP = "security_lookup"
    UNSUPPORTED_SHAPE = "unsupported_shape"


class Diagnostic(BaseModel):
    """A recoverable problem; the affected feature is left out of the output."""

    kind: DiagnosticKind
    message: str

    def __str__(self) -> str:
        return self.message
