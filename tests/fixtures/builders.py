"""Builders for domain objects used across the unit tests."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from aims_compliance.domain.entities import (
    Client,
    Employee,
    MedicationEpisode,
    ScreeningRecord,
)
from aims_compliance.domain.value_objects import EpisodeCandidate, ScreeningMatch
from aims_compliance.pipeline.data_context import ReportDataContext


def make_episode(
    client_id: int = 1,
    medication: str = "Risperidone 2mg",
    start_date: date = date(2024, 6, 1),
    discontinuation_date: Optional[date] = None,
    prescriber_id: Optional[int] = 7,
    status_code: Optional[str] = "A",
) -> MedicationEpisode:
    """Build a medication episode with sensible defaults."""
    return MedicationEpisode(
        client_id=client_id,
        medication=medication,
        start_date=start_date,
        discontinuation_date=discontinuation_date,
        prescriber_id=prescriber_id,
        status_code=status_code,
    )


def make_candidate(
    episode: MedicationEpisode,
    first_name: str = "Ada",
    last_name: str = "Byrne",
    prescriber_name: str = "Jane Doe",
) -> EpisodeCandidate:
    """Wrap an episode as an eligible candidate."""
    return EpisodeCandidate(
        client=Client(
            client_id=episode.client_id,
            first_name=first_name,
            last_name=last_name,
            status="Active",
        ),
        episode=episode,
        prescriber_name=prescriber_name,
    )


def make_match(
    candidate: EpisodeCandidate,
    screening_date: Optional[date] = None,
    score: Optional[float] = None,
) -> ScreeningMatch:
    """Pair a candidate with an optional screening."""
    screening = None
    if screening_date is not None:
        screening = ScreeningRecord(
            client_id=candidate.client_id,
            screening_date=screening_date,
            score=score,
        )
    return ScreeningMatch(candidate=candidate, screening=screening)


def make_context(
    clients: List[Client],
    episodes: List[MedicationEpisode],
    employees: Optional[List[Employee]] = None,
    screenings: Optional[List[ScreeningRecord]] = None,
) -> ReportDataContext:
    """Build a data context with the default unassigned label."""
    return ReportDataContext(
        clients=clients,
        episodes=episodes,
        employees=employees,
        screenings=screenings,
    )
