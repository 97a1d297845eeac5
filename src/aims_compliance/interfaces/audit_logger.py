"""
Audit Logger Protocol.

The audit logger tracks every decision the pipeline makes about an
episode so a reviewer can see why a client is or is not on the report.

Design Notes:
    - Correlation ID propagation for tracing
    - No side effects on report content
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class AuditLogger(Protocol):
    """Abstract interface for audit logging."""

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        ...

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...

    def log_episode_rejected(
        self,
        episode_key: str,
        stage_name: str,
        reason: str,
    ) -> None:
        """
        Log that an episode was dropped.

        Args:
            episode_key: client_id|medication|start_date
            stage_name: Which stage dropped it
            reason: Human-readable rejection reason
        """
        ...

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an anomaly. Severity is INFO, WARNING or ERROR."""
        ...
