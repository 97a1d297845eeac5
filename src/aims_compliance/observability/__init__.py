"""
Observability Package - Structured Logging and Metrics.

Components:
    - ObservabilityManager: structlog events with correlation IDs,
      usable as both audit logger and metrics collector
"""

from aims_compliance.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
)

__all__ = ["ObservabilityManager", "get_correlation_id"]
