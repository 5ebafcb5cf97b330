"""
Error taxonomy for the advice pipeline.

Every round-level failure is an AdvisorError. The presentation boundary
turns it into a single AdviceFailure value via ``to_failure()``.
Malformed lines and blocks inside an otherwise usable reply are never
raised; the parser drops them and logs a warning.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


FailureKind = Literal["configuration", "generation", "parse"]


class AdviceFailure(BaseModel):
    """Discriminated failure value handed to the presentation layer."""

    kind: FailureKind = Field(description="Which stage of the pipeline failed")
    reason: str = Field(description="Machine-readable failure reason")
    detail: Optional[str] = Field(default=None, description="Backend or parser detail")
    retryable: bool = Field(description="Whether re-running the round may succeed")
    message: str = Field(description="Human-readable message")


class AdvisorError(Exception):
    """Base class for errors that end an advisory round."""

    kind: FailureKind = "generation"
    retryable: bool = True

    def __init__(self, reason: str, detail: Optional[str] = None):
        self.reason = reason
        self.detail = detail
        message = reason if detail is None else f"{reason}: {detail}"
        super().__init__(message)

    def to_failure(self) -> AdviceFailure:
        return AdviceFailure(
            kind=self.kind,
            reason=self.reason,
            detail=self.detail,
            retryable=self.retryable,
            message=str(self),
        )


class GenerationError(AdvisorError):
    """
    The generation backend call failed or returned unusable content.

    Reasons: ``no_credentials``, ``backend_rejected``, ``empty_response``,
    ``timeout``, ``connection_failed``, ``internal`` (unexpected failure
    inside a round).
    """

    kind: FailureKind = "generation"


class ConfigurationError(GenerationError):
    """The backend credential is not configured. Retrying will not help."""

    kind: FailureKind = "configuration"
    retryable = False

    def __init__(self, detail: Optional[str] = None):
        super().__init__("no_credentials", detail)


class ParseError(AdvisorError):
    """The model reply contained no salvageable alternative itinerary."""

    kind: FailureKind = "parse"

    def __init__(self, reason: str = "no_alternatives", detail: Optional[str] = None):
        super().__init__(reason, detail)


class SessionBusyError(Exception):
    """An advisory round was requested while another one is loading."""

    pass


class ItemNotFoundError(KeyError):
    """No agenda or queue item carries the requested id."""

    pass


class PinnedItemError(Exception):
    """A pinned agenda item cannot be removed or moved."""

    pass
