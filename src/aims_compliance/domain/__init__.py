"""
Domain Layer - Core Business Entities and Value Objects.

Entities:
    - Client, MedicationEpisode, Employee, ScreeningRecord: source records
    - ReportRow: one output row for the BI report
    - RiskBucket: Current / Routine AIMS Overdue / No AIMS Since AP Start
    - ReportRequest, ReportResult, StageResult: run envelope and audit trail

Value Objects:
    - EpisodeCandidate: episode joined with client and prescriber
    - ScreeningMatch: selected episode with its qualifying screening
    - StageOutput: items passed by a stage plus rejection reasons

Design Principles:
    - Immutable where possible (frozen models)
    - No infrastructure dependencies
"""

from aims_compliance.domain.entities import (
    REPORT_COLUMNS,
    Client,
    Employee,
    MedicationEpisode,
    ReportRequest,
    ReportResult,
    ReportRow,
    RiskBucket,
    ScreeningRecord,
    StageResult,
)
from aims_compliance.domain.value_objects import (
    EpisodeCandidate,
    ScreeningMatch,
    StageOutput,
)

__all__ = [
    "REPORT_COLUMNS",
    "Client",
    "Employee",
    "MedicationEpisode",
    "ReportRequest",
    "ReportResult",
    "ReportRow",
    "RiskBucket",
    "ScreeningRecord",
    "StageResult",
    "EpisodeCandidate",
    "ScreeningMatch",
    "StageOutput",
]
