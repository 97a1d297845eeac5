"""
In-Memory Metrics Collector.

Keeps run metrics in memory and summarises them per metric and tag set.
"""

from __future__ import annotations

from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


def _series_name(name: str, tags: Optional[Dict[str, str]]) -> str:
    """'name{k=v,...}' with tags sorted, or the bare name."""
    if not tags:
        return name
    labels = ",".join(f"{k}={v}" for k, v in sorted(tags.items()))
    return f"{name}{{{labels}}}"


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector."""

    def __init__(self) -> None:
        self._samples: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "count", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """
        Summarise collected metrics.

        Returns:
            Series name -> {type, samples, total, last}
        """
        with self._lock:
            return {
                series: {
                    "type": samples[-1]["type"],
                    "samples": len(samples),
                    "total": sum(s["value"] for s in samples),
                    "last": samples[-1]["value"],
                }
                for series, samples in self._samples.items()
                if samples
            }

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        with self._lock:
            self._samples.setdefault(_series_name(name, tags), []).append(
                {
                    "type": metric_type,
                    "value": value,
                    "timestamp": datetime.now().isoformat(),
                }
            )
