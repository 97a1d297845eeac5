"""
Risk Classification.

Turns each episode/screening match into a report row: assigns the risk
bucket, writes the alert reason, and derives the two 0/1 flags.

Buckets:
    - No AIMS Since AP Start: no qualifying screening
    - Routine AIMS Overdue: last screening older than the overdue window
    - Current: otherwise
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING, List, Optional, Tuple

from aims_compliance.config.models import ReportSettings
from aims_compliance.domain.entities import ReportRow, RiskBucket
from aims_compliance.domain.value_objects import ScreeningMatch, StageOutput

if TYPE_CHECKING:
    from aims_compliance.pipeline.data_context import ReportDataContext

DATE_DISPLAY_FORMAT = "%m/%d/%Y"


def format_display_date(value: date) -> str:
    """MM/DD/YYYY, as shown in alert reasons."""
    return value.strftime(DATE_DISPLAY_FORMAT)


class RiskClassifier:
    """Classify screening currency and build report rows."""

    def __init__(self, settings: ReportSettings) -> None:
        """
        Initialize with report settings.

        Args:
            settings: Overdue window and high-score threshold
        """
        self.settings = settings

    @property
    def name(self) -> str:
        return "risk_classification"

    def apply(
        self,
        items: List[ScreeningMatch],
        measurement_date: date,
        context: "ReportDataContext",
    ) -> StageOutput:
        rows = [self.build_row(match, measurement_date) for match in items]
        return StageOutput(items=rows)

    def classify(
        self,
        screening_date: Optional[date],
        episode_start: date,
        measurement_date: date,
    ) -> Tuple[RiskBucket, str]:
        """
        Return the risk bucket and alert reason.

        Args:
            screening_date: Date of the qualifying screening, if any
            episode_start: Start date of the current episode
            measurement_date: As-of date of the report
        """
        if screening_date is None:
            return (
                RiskBucket.MISSING,
                "No AIMS on record since current AP episode started on "
                f"{format_display_date(episode_start)}",
            )

        window = self.settings.overdue_after_days
        if screening_date < measurement_date - timedelta(days=window):
            return (
                RiskBucket.OVERDUE,
                f"Last AIMS ({format_display_date(screening_date)}) is >{window} days "
                f"prior to {format_display_date(measurement_date)}",
            )

        return RiskBucket.CURRENT, "AIMS screening is current"

    def is_high_score(self, score: Optional[float]) -> bool:
        if score is None:
            return False
        return score >= self.settings.high_score_threshold

    def build_row(self, match: ScreeningMatch, measurement_date: date) -> ReportRow:
        """Build the report row for one match."""
        candidate = match.candidate
        episode = candidate.episode
        bucket, reason = self.classify(
            match.screening_date, episode.start_date, measurement_date
        )
        return ReportRow(
            client_id=candidate.client_id,
            first_name=candidate.client.first_name,
            last_name=candidate.client.last_name,
            medication=episode.medication,
            medication_start_date=episode.start_date,
            medication_end_date=episode.discontinuation_date,
            prescriber_name=candidate.prescriber_name,
            aims_screening_date=match.screening_date,
            aims_score=match.score,
            risk_bucket=bucket,
            alert_reason=reason,
            measurement_date=measurement_date,
            has_aims_screening=1 if match.screening_date is not None else 0,
            has_high_aims_score=1 if self.is_high_score(match.score) else 0,
        )
