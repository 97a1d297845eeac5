"""
Unit Tests for ReportDataContext.

Test Aspects Covered:
    ✅ Lookups: Clients, employees, screenings by client
    ✅ Edge Cases: Duplicate ids, missing prescribers, partial names
"""

from __future__ import annotations

import logging
from datetime import date

import pytest

from aims_compliance.domain.entities import Client, Employee, ScreeningRecord
from aims_compliance.pipeline.data_context import ReportDataContext
from tests.fixtures.builders import make_episode


class TestLookups:
    """Test cases for keyed lookups."""

    def test_get_client(self, active_client: Client) -> None:
        context = ReportDataContext(clients=[active_client], episodes=[])

        assert context.get_client(1) == active_client
        assert context.get_client(2) is None

    def test_duplicate_client_keeps_first(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """
        SCENARIO: Client id appears twice
        EXPECTED: First record kept, warning logged
        """
        # Arrange
        first = Client(client_id=1, first_name="Ada", last_name="Byrne", status="Active")
        second = Client(client_id=1, first_name="Ada", last_name="Byrne", status="Inactive")

        # Act
        with caplog.at_level(logging.WARNING):
            context = ReportDataContext(clients=[first, second], episodes=[])

        # Assert
        assert context.get_client(1).status == "Active"
        assert "Duplicate client_id 1" in caplog.text

    def test_screenings_grouped_in_load_order(self) -> None:
        """
        SCENARIO: Screenings for two clients, interleaved
        EXPECTED: Per-client lists keep load order; unknown client is empty
        """
        # Arrange
        s1 = ScreeningRecord(client_id=1, screening_date=date(2025, 2, 1), score=1)
        s2 = ScreeningRecord(client_id=2, screening_date=date(2025, 1, 1), score=2)
        s3 = ScreeningRecord(client_id=1, screening_date=date(2024, 1, 1), score=3)

        # Act
        context = ReportDataContext(clients=[], episodes=[], screenings=[s1, s2, s3])

        # Assert
        assert context.get_screenings(1) == [s1, s3]
        assert context.get_screenings(3) == []

    def test_len_counts_episodes(self) -> None:
        context = ReportDataContext(
            clients=[], episodes=[make_episode(), make_episode(client_id=2)]
        )

        assert len(context) == 2

    def test_repr_counts_loaded_records(self, active_client: Client) -> None:
        context = ReportDataContext(
            clients=[active_client, active_client], episodes=[make_episode()]
        )

        assert repr(context) == (
            "ReportDataContext(clients=2, episodes=1, employees=0, screenings=0)"
        )


class TestPrescriberName:
    """Test cases for prescriber display names."""

    def test_resolved_prescriber(self, prescriber: Employee) -> None:
        context = ReportDataContext(clients=[], episodes=[], employees=[prescriber])

        assert context.prescriber_name(context.get_employee(7)) == "Jane Doe"

    @pytest.mark.parametrize(
        "employee",
        [
            None,
            Employee(employee_id=3, first_name="Jane", last_name=None),
            Employee(employee_id=4, first_name=None, last_name="Doe"),
        ],
    )
    def test_unassigned_label(self, employee) -> None:
        """
        SCENARIO: No prescriber, or a name part is missing
        EXPECTED: Unassigned label
        """
        context = ReportDataContext(clients=[], episodes=[])

        assert context.prescriber_name(employee) == "Not Assigned"

    def test_custom_unassigned_label(self) -> None:
        context = ReportDataContext(
            clients=[], episodes=[], unassigned_prescriber_label="Unassigned"
        )

        assert context.prescriber_name(None) == "Unassigned"

    def test_get_employee_none_id(self, prescriber: Employee) -> None:
        context = ReportDataContext(clients=[], episodes=[], employees=[prescriber])

        assert context.get_employee(None) is None
