"""
Resilience Package - Error Capture for Data Access.

Design Principles:
    - Fail fast: no retry, no partial results
    - Preserve message, severity and state of the underlying fault
"""

from aims_compliance.resilience.error_handler import (
    ErrorHandler,
    FaultDetails,
    ReportDataAccessError,
)

__all__ = ["ErrorHandler", "FaultDetails", "ReportDataAccessError"]
