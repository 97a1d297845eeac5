"""
Console Audit Logger.

A simple audit logger that writes the audit trail through the standard
logging module, tagged with a short correlation id.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class ConsoleAuditLogger:
    """Simple logging-based audit logger."""

    def __init__(
        self,
        verbose: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log stage starts and every rejected episode.
                     If False, only stage summaries and anomalies.
            logger: Target logger (default: aims_compliance.audit)
        """
        self._verbose = verbose
        self._logger = logger or logging.getLogger("aims_compliance.audit")
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        self._correlation_id = correlation_id

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if self._verbose:
            self._log("INFO", f"Starting {stage_name} with {input_count} items")

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._log(
            "INFO",
            f"Completed {stage_name}: {output_count} items passed "
            f"({duration_seconds:.3f}s)",
        )

    def log_episode_rejected(
        self,
        episode_key: str,
        stage_name: str,
        reason: str,
    ) -> None:
        if self._verbose:
            self._log("DEBUG", f"{episode_key} dropped by {stage_name}: {reason}")

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        suffix = f" {context}" if context else ""
        self._log(severity, f"ANOMALY: {message}{suffix}")

    def _log(self, level: str, message: str) -> None:
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        self._logger.log(
            _LEVELS.get(level.upper(), logging.INFO), f"[{corr_id}] {message}"
        )
