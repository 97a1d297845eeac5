"""
Report Data Provider Protocol.

Defines the abstract interface for data access. All data sources
(in-memory snapshot, database) must implement this protocol to be used
with the report pipeline.

The provider is responsible for:
    - Loading clients and employees
    - Loading medication episodes that may be active on the measurement date
    - Loading AIMS screenings recorded on or before the measurement date

Design Notes:
    - Bulk loaders only; the pipeline joins in memory
    - Date pushdown is optional and must never drop a row the
      eligibility rules would keep
"""

from __future__ import annotations

from datetime import date
from typing import List, Protocol, runtime_checkable

from aims_compliance.domain.entities import (
    Client,
    Employee,
    MedicationEpisode,
    ScreeningRecord,
)


@runtime_checkable
class ReportDataProvider(Protocol):
    """Abstract interface for data access."""

    def load_clients(self, measurement_date: date) -> List[Client]:
        """Load client records."""
        ...

    def load_medication_episodes(
        self, measurement_date: date
    ) -> List[MedicationEpisode]:
        """
        Load medication episodes.

        Args:
            measurement_date: Point-in-time for the report

        Returns:
            Episodes that may be active on the measurement date
        """
        ...

    def load_employees(self) -> List[Employee]:
        """Load employees for prescriber name resolution."""
        ...

    def load_screenings(self, measurement_date: date) -> List[ScreeningRecord]:
        """Load AIMS screenings recorded on or before the measurement date."""
        ...
