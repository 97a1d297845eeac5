"""
Error Handler - Data-Access Fault Capture.

Provides:
    - Capture of message, severity and state from the underlying fault
    - A single ReportDataAccessError type surfaced to callers

Design Notes:
    - No retry and no degraded results: a failed load fails the run
    - The original exception stays chained as __cause__
    - Severity/state follow SQL Server conventions (16/1 when unknown)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar, Union

from sqlalchemy.exc import DBAPIError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_SEVERITY = 16
DEFAULT_STATE = 1


class ReportDataAccessError(Exception):
    """Raised when report source data cannot be read."""

    def __init__(
        self,
        message: str,
        severity: int = DEFAULT_SEVERITY,
        state: Union[int, str] = DEFAULT_STATE,
        operation: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.state = state
        self.operation = operation

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class FaultDetails:
    """Message, severity and state captured from an exception."""

    message: str
    severity: int
    state: Union[int, str]

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FaultDetails":
        source: Any = exc
        if isinstance(exc, DBAPIError) and exc.orig is not None:
            source = exc.orig

        severity = getattr(source, "severity", None)
        state = getattr(source, "state", None)
        if state is None:
            state = _sqlstate_from_args(getattr(source, "args", ()))

        message = str(source) or type(source).__name__
        return cls(
            message=message,
            severity=severity if isinstance(severity, int) else DEFAULT_SEVERITY,
            state=state if state is not None else DEFAULT_STATE,
        )


def _sqlstate_from_args(args: tuple) -> Optional[str]:
    """ODBC drivers put the five-character SQLSTATE first in args."""
    if args and isinstance(args[0], str) and len(args[0]) == 5:
        return args[0]
    return None


class ErrorHandler:
    """
    Wraps data-access calls so any fault surfaces as ReportDataAccessError.
    """

    def guard(
        self,
        func: Callable[[], T],
        operation_name: str = "operation",
    ) -> T:
        """
        Execute a data-access call.

        Args:
            func: Function to execute
            operation_name: Name for logging

        Returns:
            Result of the call

        Raises:
            ReportDataAccessError: When the call fails for any reason
        """
        try:
            return func()
        except ReportDataAccessError:
            raise
        except Exception as e:
            details = FaultDetails.from_exception(e)
            logger.error(
                f"{operation_name} failed (severity={details.severity}, "
                f"state={details.state}): {details.message}"
            )
            raise ReportDataAccessError(
                details.message,
                severity=details.severity,
                state=details.state,
                operation=operation_name,
            ) from e
