"""Error taxonomy for the analysis pipeline.

Every failure of a run is one of these exceptions; a report is either
returned whole or not at all. ``kind`` names the failure class for logs and
``user_message`` is what an end user should see.
"""

from __future__ import annotations

GENERIC_FAILURE_MESSAGE = "Failed to analyze resume. Please try again."


class TransportError(Exception):
    """Raised by a generation backend when the remote call itself fails."""


class AnalysisError(Exception):
    """Base class for every classified pipeline failure."""

    kind = "AnalysisError"
    user_message = GENERIC_FAILURE_MESSAGE


class ValidationFailure(AnalysisError):
    """Caller input is unusable; raised before any backend call."""

    kind = "ValidationFailure"
    user_message = "Please provide both resume text and target job role."


class TransportFailure(AnalysisError):
    kind = "TransportFailure"


class EmptyResponse(AnalysisError):
    kind = "EmptyResponse"


class MalformedResponse(AnalysisError):
    """The backend body could not be parsed as JSON."""

    kind = "MalformedResponse"

    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.raw_text = raw_text


class SchemaViolation(AnalysisError):
    """The body parsed but does not have the report's structure.

    ``path`` is the dotted location of the first violation, e.g.
    ``grammarImprovements.corrections.0.improved``; ``$`` means the root.
    """

    kind = "SchemaViolation"

    def __init__(self, path: str, message: str, raw_text: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.raw_text = raw_text
