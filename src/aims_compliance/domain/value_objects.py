"""
Value Objects for Domain Layer.

Intermediate shapes that flow between pipeline stages. They carry no
identity of their own.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from aims_compliance.domain.entities import (
    Client,
    Employee,
    MedicationEpisode,
    ScreeningRecord,
)

# Rejection reasons: episode key -> reason string
RejectionReasonsDict = Dict[str, str]


class EpisodeCandidate(BaseModel):
    """A medication episode joined with its client and resolved prescriber."""

    client: Client
    episode: MedicationEpisode
    prescriber: Optional[Employee] = None
    prescriber_name: str

    model_config = {"frozen": True}

    @property
    def client_id(self) -> int:
        return self.client.client_id

    @property
    def key(self) -> str:
        return self.episode.key


class ScreeningMatch(BaseModel):
    """A selected episode left-joined with its qualifying screening, if any."""

    candidate: EpisodeCandidate
    screening: Optional[ScreeningRecord] = None

    model_config = {"frozen": True}

    @property
    def screening_date(self) -> Optional[date]:
        return self.screening.screening_date if self.screening else None

    @property
    def score(self) -> Optional[float]:
        return self.screening.score if self.screening else None


class StageOutput(BaseModel):
    """Result of applying one pipeline stage."""

    items: List[Any] = Field(default_factory=list)
    rejection_reasons: RejectionReasonsDict = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def passed_count(self) -> int:
        return len(self.items)

    @property
    def rejected_count(self) -> int:
        return len(self.rejection_reasons)
