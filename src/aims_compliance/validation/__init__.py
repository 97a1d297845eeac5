"""
Validation Package - Request Validation.

Validates the measurement date before any data access happens.
"""

from aims_compliance.validation.request_validator import (
    RequestValidator,
    ValidationError,
)

__all__ = ["RequestValidator", "ValidationError"]
