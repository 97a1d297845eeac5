"""
Observability Manager - Structured Audit Events and Metrics.

Provides:
    - Structured JSON (or console) logging via structlog
    - Correlation ID propagation through structlog contextvars
    - Metrics recording

Implements both the AuditLogger and MetricsCollector protocols, so a
single instance can be handed to the pipeline for both roles.
"""

from __future__ import annotations

import logging
import sys
import threading
from contextvars import ContextVar
from datetime import datetime
from typing import Any, Dict, List, Optional

import structlog

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return _correlation_id.get()


class ObservabilityManager:
    """Structured audit events and metrics for a report run."""

    def __init__(
        self,
        service_name: str = "aims_compliance",
        use_json: bool = True,
        log_level: int = logging.INFO,
        configure: bool = True,
    ) -> None:
        """
        Initialize observability manager.

        Args:
            service_name: Logger name bound to every event
            use_json: Render JSON lines instead of the console renderer
            log_level: Minimum level emitted
            configure: Apply structlog configuration (global)
        """
        self.service_name = service_name
        self.use_json = use_json
        self.log_level = log_level
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._events: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

        if configure:
            self._configure_structlog()
        self._logger = structlog.get_logger(service_name)

    def _configure_structlog(self) -> None:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        if self.use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(self.log_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            cache_logger_on_first_use=False,
        )

    def set_correlation_id(self, correlation_id: str) -> None:
        """Bind the correlation ID to subsequent events."""
        _correlation_id.set(correlation_id)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

    def log_event(
        self,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        level: str = "info",
    ) -> None:
        """
        Log and keep a structured event.

        Args:
            event_type: e.g. "stage_end", "episode_rejected"
            data: Event fields
            level: debug, info, warning or error
        """
        event_data = {
            "event_type": event_type,
            "correlation_id": get_correlation_id(),
            **(data or {}),
        }
        with self._lock:
            self._events.append(event_data)

        log_method = getattr(self._logger, level.lower(), self._logger.info)
        fields = {k: v for k, v in event_data.items() if k != "correlation_id"}
        log_method(event_type, **fields)

    def get_events(self) -> List[Dict[str, Any]]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._metrics.clear()
            self._events.clear()

    # AuditLogger protocol

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict] = None,
    ) -> None:
        self.log_event(
            "stage_start",
            {"stage_name": stage_name, "input_count": input_count, **(metadata or {})},
            level="debug",
        )

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict] = None,
    ) -> None:
        self.log_event(
            "stage_end",
            {
                "stage_name": stage_name,
                "output_count": output_count,
                "duration_seconds": round(duration_seconds, 6),
                **(metadata or {}),
            },
        )

    def log_episode_rejected(
        self,
        episode_key: str,
        stage_name: str,
        reason: str,
    ) -> None:
        self.log_event(
            "episode_rejected",
            {"episode_key": episode_key, "stage_name": stage_name, "reason": reason},
            level="debug",
        )

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict] = None,
    ) -> None:
        level = {"INFO": "info", "WARNING": "warning"}.get(severity.upper(), "error")
        self.log_event(
            "anomaly",
            {"message": message, "severity": severity, **(context or {})},
            level=level,
        )

    # MetricsCollector protocol

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict] = None,
    ) -> None:
        self._record_metric(name, duration_seconds, tags, "histogram")

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict] = None,
    ) -> None:
        self._record_metric(name, float(value), tags, "counter")

    def get_metrics(self) -> Dict[str, List[Dict[str, Any]]]:
        with self._lock:
            return {name: list(entries) for name, entries in self._metrics.items()}

    def _record_metric(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]],
        metric_type: str,
    ) -> None:
        entry = {
            "timestamp": datetime.now().isoformat(),
            "value": value,
            "tags": tags or {},
            "type": metric_type,
            "correlation_id": get_correlation_id(),
        }
        with self._lock:
            self._metrics.setdefault(name, []).append(entry)
