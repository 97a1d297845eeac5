"""
Report Data Context - In-Memory Data Container.

The ReportDataContext holds the snapshot loaded for one report run and
provides the keyed lookups the stages join against.

Design Notes:
    - Built once per run, read-only afterwards
    - Screenings keep their load order within a client
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional

from aims_compliance.domain.entities import (
    Client,
    Employee,
    MedicationEpisode,
    ScreeningRecord,
)

logger = logging.getLogger(__name__)


class ReportDataContext:
    """In-memory container for report source data."""

    def __init__(
        self,
        clients: List[Client],
        episodes: List[MedicationEpisode],
        employees: Optional[List[Employee]] = None,
        screenings: Optional[List[ScreeningRecord]] = None,
        *,
        unassigned_prescriber_label: str = "Not Assigned",
    ) -> None:
        """
        Initialize data context.

        Args:
            clients: Client records
            episodes: Medication episodes to evaluate
            employees: Employees for prescriber lookup
            screenings: AIMS screenings
            unassigned_prescriber_label: Name shown when no prescriber resolves
        """
        self._clients = clients
        self._episodes = episodes
        self._employees = employees or []
        self._screenings = screenings or []
        self._unassigned_label = unassigned_prescriber_label

        self._clients_by_id: Dict[int, Client] = {}
        for client in clients:
            if client.client_id in self._clients_by_id:
                logger.warning(f"Duplicate client_id {client.client_id}, keeping first")
                continue
            self._clients_by_id[client.client_id] = client

        self._employees_by_id: Dict[int, Employee] = {}
        for employee in self._employees:
            self._employees_by_id.setdefault(employee.employee_id, employee)

        self._screenings_by_client: Dict[int, List[ScreeningRecord]] = defaultdict(list)
        for screening in self._screenings:
            self._screenings_by_client[screening.client_id].append(screening)

    @property
    def episodes(self) -> List[MedicationEpisode]:
        """All medication episodes in the snapshot."""
        return self._episodes

    def get_client(self, client_id: int) -> Optional[Client]:
        return self._clients_by_id.get(client_id)

    def get_employee(self, employee_id: Optional[int]) -> Optional[Employee]:
        if employee_id is None:
            return None
        return self._employees_by_id.get(employee_id)

    def prescriber_name(self, prescriber: Optional[Employee]) -> str:
        """Display name of a resolved prescriber, or the unassigned label."""
        if prescriber is None or prescriber.display_name is None:
            return self._unassigned_label
        return prescriber.display_name

    def get_screenings(self, client_id: int) -> List[ScreeningRecord]:
        """Screenings for a client in load order, empty if none."""
        return self._screenings_by_client.get(client_id, [])

    def __len__(self) -> int:
        """Number of episodes in the context."""
        return len(self._episodes)

    def __repr__(self) -> str:
        return (
            f"ReportDataContext(clients={len(self._clients)}, "
            f"episodes={len(self._episodes)}, "
            f"employees={len(self._employees)}, "
            f"screenings={len(self._screenings)})"
        )
