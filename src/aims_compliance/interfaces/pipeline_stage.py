"""
Pipeline Stage Protocol.

Each stage takes the items produced by the previous stage and returns the
items it passes on, together with a reason for every item it drops.

Design Notes:
    - Stages are stateless (all shared data via ReportDataContext)
    - Configuration injected via constructor
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from aims_compliance.domain.value_objects import StageOutput
    from aims_compliance.pipeline.data_context import ReportDataContext


@runtime_checkable
class PipelineStage(Protocol):
    """Abstract interface for pipeline stages."""

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        ...

    def apply(
        self,
        items: List[Any],
        measurement_date: date,
        context: "ReportDataContext",
    ) -> "StageOutput":
        """
        Apply the stage.

        Args:
            items: Output of the previous stage
            measurement_date: As-of date of the report
            context: Indexed snapshot of the source data

        Returns:
            StageOutput with passed items and rejection reasons
        """
        ...
