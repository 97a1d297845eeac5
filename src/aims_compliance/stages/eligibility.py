"""
Eligible Episode Filter.

Keeps medication episodes that count toward the AIMS measure:
    - Client is on file and active
    - Medication name contains a known antipsychotic
    - Prescription status code is an active one
    - Episode is running on the measurement date
    - Neither client nor prescriber is a test/placeholder record

Episodes that pass are joined with their client and prescriber.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from aims_compliance.config.models import ReferenceDataConfig
from aims_compliance.domain.entities import Client, Employee, MedicationEpisode
from aims_compliance.domain.value_objects import EpisodeCandidate, StageOutput
from aims_compliance.stages.collation import collation_key, text_equals

if TYPE_CHECKING:
    from aims_compliance.pipeline.data_context import ReportDataContext


class EligibleEpisodeFilter:
    """Filter medication episodes down to active antipsychotic episodes."""

    def __init__(
        self,
        reference_data: ReferenceDataConfig,
        test_name_pattern: str = "test",
    ) -> None:
        """
        Initialize with reference data.

        Args:
            reference_data: Antipsychotic names, active status codes and
                the client status that counts as active
            test_name_pattern: Substring marking test/placeholder names
        """
        self.reference_data = reference_data
        self._antipsychotics = [collation_key(n) for n in reference_data.antipsychotics]
        self._active_codes = {collation_key(c) for c in reference_data.active_status_codes}
        self._test_pattern = collation_key(test_name_pattern)

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "eligible_episodes"

    def apply(
        self,
        items: List[MedicationEpisode],
        measurement_date: date,
        context: "ReportDataContext",
    ) -> StageOutput:
        """
        Apply eligibility rules.

        Args:
            items: Medication episodes to check
            measurement_date: As-of date of the report
            context: Data context for client and prescriber lookups

        Returns:
            StageOutput whose items are EpisodeCandidate objects
        """
        passed: List[EpisodeCandidate] = []
        reasons: Dict[str, str] = {}

        for episode in items:
            client = context.get_client(episode.client_id)
            prescriber = context.get_employee(episode.prescriber_id)
            is_valid, reason = self._check_episode(
                episode, client, prescriber, measurement_date
            )
            if is_valid:
                passed.append(
                    EpisodeCandidate(
                        client=client,
                        episode=episode,
                        prescriber=prescriber,
                        prescriber_name=context.prescriber_name(prescriber),
                    )
                )
            else:
                reasons[episode.key] = reason

        return StageOutput(items=passed, rejection_reasons=reasons)

    def _check_episode(
        self,
        episode: MedicationEpisode,
        client: Optional[Client],
        prescriber: Optional[Employee],
        measurement_date: date,
    ) -> Tuple[bool, str]:
        """Check a single episode against every eligibility rule."""
        if client is None:
            return False, f"client_id={episode.client_id} not on file"

        if not text_equals(client.status, self.reference_data.active_client_status):
            return False, f"client_status={client.status} is not active"

        if not self.is_antipsychotic(episode.medication):
            return False, f"medication={episode.medication} is not an antipsychotic"

        if (
            episode.status_code is None
            or collation_key(episode.status_code) not in self._active_codes
        ):
            return False, f"rx_status={episode.status_code} is not an active status"

        if episode.start_date > measurement_date:
            return False, f"starts {episode.start_date} after {measurement_date}"

        if not episode.is_active_on(measurement_date):
            return (
                False,
                f"discontinued {episode.discontinuation_date} on or before {measurement_date}",
            )

        if self._is_test_name(client.first_name, client.last_name):
            return False, "test client record"

        if prescriber is not None and self._is_test_name(
            prescriber.first_name, prescriber.last_name
        ):
            return False, f"test prescriber record (emp_id={prescriber.employee_id})"

        return True, ""

    def is_antipsychotic(self, medication: str) -> bool:
        """Case-insensitive substring match against the antipsychotic list."""
        folded = medication.casefold()
        return any(name in folded for name in self._antipsychotics)

    def _is_test_name(self, first_name: Optional[str], last_name: Optional[str]) -> bool:
        # A missing name part can never be cleared as non-test.
        if first_name is None or last_name is None:
            return True
        return (
            self._test_pattern in first_name.casefold()
            or self._test_pattern in last_name.casefold()
        )
