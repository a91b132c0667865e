"""
Failure description — structured error information for the failure track.

An ErrorCode classifies what went wrong; a FailureDescription carries the
code, a human-readable message, the originating exception (if any) and the
moment the failure was recorded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique
from typing import Optional


@unique
class ErrorCode(Enum):
    """
    Structured error codes for the failure track.

    Grouped by where the fault lies:
    - Caller errors: VALIDATION
    - Remote/infrastructure errors: EXTERNAL_SERVICE, SERVICE_UNAVAILABLE, PARSE
    - Local errors: CONFIGURATION, TECHNICAL
    """

    # --- Caller errors ---
    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Input rejected before any I/O (malformed or too short)."""

    # --- Remote errors ---
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    """The remote service answered, but not with a usable status."""

    SERVICE_UNAVAILABLE_ERROR = "SERVICE_UNAVAILABLE_ERROR"
    """The remote service could not be reached (DNS, refused, timeout)."""

    PARSE_ERROR = "PARSE_ERROR"
    """A payload was received but could not be decoded."""

    # --- Local errors ---
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    """Settings could not be loaded or failed validation."""

    TECHNICAL_ERROR = "TECHNICAL_ERROR"
    """Unexpected fault in local code."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable failure descriptor carrying error code, message, optional exception, and timestamp.

    >>> desc = FailureDescription(ErrorCode.VALIDATION_ERROR, "serial too short")
    >>> desc.code
    <ErrorCode.VALIDATION_ERROR: 'VALIDATION_ERROR'>
    >>> desc.message
    'serial too short'
    """

    code: ErrorCode
    message: str
    exception: Optional[BaseException] = field(default=None, repr=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def with_context(self, context: str) -> FailureDescription:
        """Return a copy whose message is prefixed with `context`, keeping code and exception."""
        return FailureDescription(
            code=self.code,
            message=f"{context}: {self.message}",
            exception=self.exception,
            timestamp=self.timestamp,
        )
