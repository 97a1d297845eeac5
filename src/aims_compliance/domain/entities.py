"""
Core Domain Entities.

This module defines the fundamental entities of the AIMS report domain:
the four source record types, the report row the BI layer consumes, and
the request/result objects wrapped around a pipeline run.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class RiskBucket(str, Enum):
    """Currency of a client's AIMS screening."""

    CURRENT = "Current"
    MISSING = "No AIMS Since AP Start"
    OVERDUE = "Routine AIMS Overdue"


class Client(BaseModel):
    """A client record from the clients table."""

    client_id: int = Field(..., description="Client unique identifier")
    first_name: Optional[str] = Field(default=None, description="Client first name")
    last_name: Optional[str] = Field(default=None, description="Client last name")
    status: Optional[str] = Field(default=None, description="Client status, e.g. Active")

    model_config = {"frozen": True}


class MedicationEpisode(BaseModel):
    """One prescription period for a client."""

    client_id: int
    medication: str = Field(..., description="Free-text medication name")
    start_date: date
    discontinuation_date: Optional[date] = None
    prescriber_id: Optional[int] = None
    status_code: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def key(self) -> str:
        """Identifier used in the audit trail."""
        return f"{self.client_id}|{self.medication}|{self.start_date.isoformat()}"

    def is_active_on(self, measurement_date: date) -> bool:
        """Episode started on or before the date and was not discontinued by it."""
        if self.start_date > measurement_date:
            return False
        return (
            self.discontinuation_date is None
            or self.discontinuation_date > measurement_date
        )


class Employee(BaseModel):
    """A staff member, used to resolve prescriber names."""

    employee_id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def display_name(self) -> Optional[str]:
        """'First Last', or None when either part is missing."""
        if self.first_name is None or self.last_name is None:
            return None
        return f"{self.first_name} {self.last_name}"


class ScreeningRecord(BaseModel):
    """An AIMS screening stored on the client extension record."""

    client_id: int
    screening_date: Optional[date] = None
    score: Optional[float] = None

    model_config = {"frozen": True}


# BI column names, in output order.
REPORT_COLUMNS = [
    "client_id",
    "first_name",
    "last_name",
    "medication",
    "MedicationStartDate",
    "MedicationEndDate",
    "PrescriberName",
    "AimScreeningDate",
    "AimsScore",
    "RiskBucket",
    "AlertReason",
    "MeasurementDate",
    "HasAimsScreening",
    "HasHighAimsScore",
]


class ReportRow(BaseModel):
    """One output row: a client, their current episode and AIMS status."""

    client_id: int
    first_name: str
    last_name: str
    medication: str
    medication_start_date: date
    medication_end_date: Optional[date] = None
    prescriber_name: str
    aims_screening_date: Optional[date] = None
    aims_score: Optional[float] = None
    risk_bucket: RiskBucket
    alert_reason: str
    measurement_date: date
    has_aims_screening: int = Field(..., ge=0, le=1)
    has_high_aims_score: int = Field(..., ge=0, le=1)

    model_config = {"frozen": True}

    def to_record(self) -> Dict[str, Any]:
        """Return the row keyed by BI column name."""
        values = [
            self.client_id,
            self.first_name,
            self.last_name,
            self.medication,
            self.medication_start_date,
            self.medication_end_date,
            self.prescriber_name,
            self.aims_screening_date,
            self.aims_score,
            self.risk_bucket.value,
            self.alert_reason,
            self.measurement_date,
            self.has_aims_screening,
            self.has_high_aims_score,
        ]
        return dict(zip(REPORT_COLUMNS, values))


class ReportRequest(BaseModel):
    """Input for a report run."""

    measurement_date: date = Field(..., description="As-of date for the report")
    correlation_id: str = Field(..., description="Unique request identifier")

    model_config = {"frozen": True}


class StageResult(BaseModel):
    """Result of a single pipeline stage for the audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float
    rejected_keys: List[str] = Field(default_factory=list)
    rejection_reasons: Dict[str, str] = Field(
        default_factory=dict, description="Episode key -> rejection reason"
    )


class ReportResult(BaseModel):
    """Complete result of a report run."""

    request: ReportRequest
    rows: List[ReportRow]
    input_episode_count: int = 0
    audit_trail: List[StageResult] = Field(default_factory=list)
    metrics: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def count_by_bucket(self) -> Dict[RiskBucket, int]:
        counts = {bucket: 0 for bucket in RiskBucket}
        for row in self.rows:
            counts[row.risk_bucket] += 1
        return counts

    def records(self) -> List[Dict[str, Any]]:
        return [row.to_record() for row in self.rows]
