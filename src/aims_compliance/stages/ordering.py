"""
Report Ordering.

Final sort of the report: risk bucket text, then prescriber name, then
client id, all ascending. Text sorts case-insensitively.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, List, Tuple

from aims_compliance.domain.entities import ReportRow
from aims_compliance.domain.value_objects import StageOutput
from aims_compliance.stages.collation import collation_key

if TYPE_CHECKING:
    from aims_compliance.pipeline.data_context import ReportDataContext


def report_sort_key(row: ReportRow) -> Tuple[str, str, int]:
    return (
        collation_key(row.risk_bucket.value),
        collation_key(row.prescriber_name),
        row.client_id,
    )


class ReportOrdering:
    """Order report rows for the BI consumer."""

    @property
    def name(self) -> str:
        return "report_ordering"

    def apply(
        self,
        items: List[ReportRow],
        measurement_date: date,
        context: "ReportDataContext",
    ) -> StageOutput:
        return StageOutput(items=sorted(items, key=report_sort_key))
