"""
Latest Episode Selector.

Reduces eligible episodes to one per client: the most recent start date,
ties broken by medication name descending, compared case-insensitively.
Implemented as an explicit sort-and-dedupe pass.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Dict, List, Tuple

from aims_compliance.domain.value_objects import EpisodeCandidate, StageOutput
from aims_compliance.stages.collation import collation_key

if TYPE_CHECKING:
    from aims_compliance.pipeline.data_context import ReportDataContext


def episode_rank_key(candidate: EpisodeCandidate) -> Tuple[date, str]:
    """Sort key; the highest key is rank 1. Medication names compare case-blind."""
    return (candidate.episode.start_date, collation_key(candidate.episode.medication))


class LatestEpisodeSelector:
    """Keep the rank-1 episode per client."""

    @property
    def name(self) -> str:
        return "latest_episode"

    def apply(
        self,
        items: List[EpisodeCandidate],
        measurement_date: date,
        context: "ReportDataContext",
    ) -> StageOutput:
        by_client: Dict[int, List[EpisodeCandidate]] = {}
        for candidate in items:
            by_client.setdefault(candidate.client_id, []).append(candidate)

        selected: List[EpisodeCandidate] = []
        reasons: Dict[str, str] = {}

        for candidates in by_client.values():
            # Stable sort: exact duplicates keep load order.
            ranked = sorted(candidates, key=episode_rank_key, reverse=True)
            winner = ranked[0]
            selected.append(winner)
            for superseded in ranked[1:]:
                reasons[superseded.key] = f"superseded by {winner.key}"

        return StageOutput(items=selected, rejection_reasons=reasons)
