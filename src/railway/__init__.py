"""
Railway-Oriented Programming (ROP) helpers.

Explicit, composable error handling — no exceptions in business logic.

    from railway import Result, ErrorCode

    def require_hex(serial: str) -> Result[str]:
        if not serial.isalnum():
            return Result.failure(ErrorCode.VALIDATION_ERROR, "serial must be hex")
        return Result.success(serial)
"""

from railway.assertions import ResultAssertions
from railway.failure import ErrorCode, FailureDescription
from railway.result import Failure, Result, Success

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ErrorCode",
    "FailureDescription",
    "ResultAssertions",
]

__version__ = "1.0.0"
