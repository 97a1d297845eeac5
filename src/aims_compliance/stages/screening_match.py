"""
Screening Matcher.

Left-joins each selected episode with one AIMS screening dated between the
episode start and the measurement date, both inclusive. When several
screenings qualify the latest date wins, then the higher score (a missing
score ranks lowest), then the first one loaded.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, List, Optional, Tuple

from aims_compliance.domain.entities import ScreeningRecord
from aims_compliance.domain.value_objects import (
    EpisodeCandidate,
    ScreeningMatch,
    StageOutput,
)

if TYPE_CHECKING:
    from aims_compliance.pipeline.data_context import ReportDataContext

logger = logging.getLogger(__name__)


def screening_rank_key(screening: ScreeningRecord) -> Tuple[date, bool, float]:
    """Sort key; later date first, then a present score, then the higher score."""
    return (
        screening.screening_date,
        screening.score is not None,
        screening.score if screening.score is not None else 0.0,
    )


class ScreeningMatcher:
    """Attach the qualifying AIMS screening to each episode."""

    @property
    def name(self) -> str:
        return "screening_match"

    def apply(
        self,
        items: List[EpisodeCandidate],
        measurement_date: date,
        context: "ReportDataContext",
    ) -> StageOutput:
        matches = [
            ScreeningMatch(
                candidate=candidate,
                screening=self.select_screening(
                    context.get_screenings(candidate.client_id),
                    candidate.episode.start_date,
                    measurement_date,
                ),
            )
            for candidate in items
        ]
        return StageOutput(items=matches)

    def select_screening(
        self,
        screenings: List[ScreeningRecord],
        episode_start: date,
        measurement_date: date,
    ) -> Optional[ScreeningRecord]:
        """
        Pick the qualifying screening for one episode.

        Args:
            screenings: Client's screenings in load order
            episode_start: Start date of the selected episode
            measurement_date: As-of date of the report

        Returns:
            The chosen screening, or None if none qualifies
        """
        qualifying = [
            s
            for s in screenings
            if s.screening_date is not None
            and episode_start <= s.screening_date <= measurement_date
        ]
        if not qualifying:
            return None
        if len(qualifying) > 1:
            logger.debug(
                f"client_id={qualifying[0].client_id}: {len(qualifying)} screenings "
                f"in range, keeping the latest"
            )
        # max() returns the first maximal element, so load order breaks full ties.
        return max(qualifying, key=screening_rank_key)
