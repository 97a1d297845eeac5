"""
Request Validator - Validate Report Requests.

Validates requests before any data is loaded:
    - Measurement date not before 1900-01-01
    - Measurement date not too far in the future

Design Notes:
    - Fail-fast principle
    - Clear error messages
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Callable, List, Optional

from aims_compliance.config.models import ReportConfig
from aims_compliance.domain.entities import ReportRequest

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when request validation fails."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class RequestValidator:
    """Validates report requests before processing."""

    MIN_DATE = date(1900, 1, 1)

    def __init__(self, today: Optional[Callable[[], date]] = None) -> None:
        """
        Initialize request validator.

        Args:
            today: Clock used for the future-date check (defaults to date.today)
        """
        self._today = today or date.today

    def validate(self, request: ReportRequest, config: ReportConfig) -> None:
        """
        Validate a report request.

        Raises:
            ValidationError: If validation fails
        """
        errors: List[str] = []

        measurement_date = request.measurement_date
        if measurement_date < self.MIN_DATE:
            errors.append(
                f"measurement_date {measurement_date} is before {self.MIN_DATE}"
            )

        latest = self._today() + timedelta(days=config.validation.max_future_days)
        if measurement_date > latest:
            errors.append(
                f"measurement_date {measurement_date} is more than "
                f"{config.validation.max_future_days} days in the future"
            )

        if errors:
            message = "; ".join(errors)
            logger.warning(f"Request validation failed: {message}")
            raise ValidationError(message, field="measurement_date")
