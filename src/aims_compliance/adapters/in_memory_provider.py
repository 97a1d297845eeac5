"""
In-Memory Report Data Provider.

Serves a fixed snapshot of the four source collections. Used for tests,
dry runs, and for replaying an extract saved as YAML.

Snapshot YAML layout:

    clients:
      - {client_id: 1, first_name: Ada, last_name: Byrne, status: Active}
    medications:
      - {client_id: 1, medication: Risperidone 2mg, start_date: 2024-01-10,
         discontinuation_date: null, prescriber_id: 7, status_code: A}
    employees:
      - {employee_id: 7, first_name: Jane, last_name: Doe}
    screenings:
      - {client_id: 1, screening_date: 2025-02-01, score: 2}
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from aims_compliance.domain.entities import (
    Client,
    Employee,
    MedicationEpisode,
    ScreeningRecord,
)

logger = logging.getLogger(__name__)


class InMemoryReportDataProvider:
    """Snapshot-backed data provider."""

    def __init__(
        self,
        clients: Optional[List[Client]] = None,
        episodes: Optional[List[MedicationEpisode]] = None,
        employees: Optional[List[Employee]] = None,
        screenings: Optional[List[ScreeningRecord]] = None,
    ) -> None:
        self._clients = list(clients or [])
        self._episodes = list(episodes or [])
        self._employees = list(employees or [])
        self._screenings = list(screenings or [])

    @classmethod
    def from_dict(cls, snapshot: Dict[str, Any]) -> "InMemoryReportDataProvider":
        """Build a provider from a snapshot dictionary (see module docstring)."""
        return cls(
            clients=[Client.model_validate(c) for c in snapshot.get("clients") or []],
            episodes=[
                MedicationEpisode.model_validate(m)
                for m in snapshot.get("medications") or []
            ],
            employees=[
                Employee.model_validate(e) for e in snapshot.get("employees") or []
            ],
            screenings=[
                ScreeningRecord.model_validate(s)
                for s in snapshot.get("screenings") or []
            ],
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "InMemoryReportDataProvider":
        """Load a snapshot YAML file."""
        with open(path, encoding="utf-8") as f:
            snapshot = yaml.safe_load(f) or {}
        provider = cls.from_dict(snapshot)
        logger.info(f"Loaded snapshot {path}: {provider!r}")
        return provider

    def load_clients(self, measurement_date: date) -> List[Client]:
        return list(self._clients)

    def load_medication_episodes(
        self, measurement_date: date
    ) -> List[MedicationEpisode]:
        return list(self._episodes)

    def load_employees(self) -> List[Employee]:
        return list(self._employees)

    def load_screenings(self, measurement_date: date) -> List[ScreeningRecord]:
        return list(self._screenings)

    def __repr__(self) -> str:
        return (
            f"InMemoryReportDataProvider(clients={len(self._clients)}, "
            f"episodes={len(self._episodes)}, employees={len(self._employees)}, "
            f"screenings={len(self._screenings)})"
        )
