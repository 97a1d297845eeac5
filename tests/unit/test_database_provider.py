"""
Unit Tests for DatabaseReportDataProvider.

Runs against an in-memory SQLite database with the source tables created
from the same table definitions the provider queries.

Test Aspects Covered:
    ✅ Mapping: Column names to domain fields
    ✅ Pushdown: Point-in-time filters on medications and screenings
    ✅ Edge Cases: NULL keys, NULL dates, missing tables
"""

from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from aims_compliance.adapters.database_provider import (
    DatabaseReportDataProvider,
    create_report_engine,
)
from aims_compliance.adapters.tables import build_tables
from aims_compliance.config.models import DatabaseConfig

DB_CONFIG = DatabaseConfig(schema_name=None)


@pytest.fixture
def engine() -> Engine:
    """In-memory SQLite engine shared across connections."""
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def provider(engine: Engine) -> DatabaseReportDataProvider:
    """Provider over a populated in-memory database."""
    tables = build_tables(DB_CONFIG)
    tables.metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(
            tables.clients.insert(),
            [
                {"client_id": 1, "first_name": "Ada", "last_name": "Byrne", "client_status": "Active"},
                {"client_id": 2, "first_name": None, "last_name": "Cole", "client_status": "Inactive"},
            ],
        )
        conn.execute(
            tables.medications.insert(),
            [
                # running
                {"client_id": 1, "medication": "Risperidone 2mg", "start_date": date(2024, 6, 1),
                 "disc_date": None, "provider_id_int": 7, "rx_status": "A"},
                # discontinued on the measurement date
                {"client_id": 1, "medication": "Haldol", "start_date": date(2024, 1, 1),
                 "disc_date": date(2025, 5, 12), "provider_id_int": 7, "rx_status": "A"},
                # discontinued later
                {"client_id": 2, "medication": "Seroquel", "start_date": date(2024, 1, 1),
                 "disc_date": date(2025, 6, 1), "provider_id_int": None, "rx_status": "CC"},
                # future start
                {"client_id": 2, "medication": "Latuda", "start_date": date(2025, 5, 13),
                 "disc_date": None, "provider_id_int": 7, "rx_status": "A"},
                # no medication name
                {"client_id": 2, "medication": None, "start_date": date(2024, 1, 1),
                 "disc_date": None, "provider_id_int": 7, "rx_status": "A"},
            ],
        )
        conn.execute(
            tables.employees.insert(),
            [{"emp_id": 7, "first_name": "Jane", "last_name": "Doe"}],
        )
        conn.execute(
            tables.client_extensions.insert(),
            [
                {"client_id": 1, "date12": date(2025, 3, 1), "num19": 2.5},
                {"client_id": 1, "date12": date(2025, 5, 13), "num19": 1},
                {"client_id": 2, "date12": None, "num19": 3},
                {"client_id": 2, "date12": date(2025, 1, 1), "num19": None},
            ],
        )
    return DatabaseReportDataProvider(engine, DB_CONFIG)


MEASUREMENT_DATE = date(2025, 5, 12)


class TestLoads:
    """Test cases for each source collection."""

    def test_load_clients(self, provider: DatabaseReportDataProvider) -> None:
        clients = provider.load_clients(MEASUREMENT_DATE)

        assert [(c.client_id, c.first_name, c.status) for c in sorted(clients, key=lambda c: c.client_id)] == [
            (1, "Ada", "Active"),
            (2, None, "Inactive"),
        ]

    def test_load_medication_episodes_pushdown(
        self,
        provider: DatabaseReportDataProvider,
    ) -> None:
        """
        SCENARIO: Five medication rows, two running on the measurement date
        EXPECTED: Only running episodes with a medication name are loaded
        """
        # Act
        episodes = provider.load_medication_episodes(MEASUREMENT_DATE)

        # Assert
        assert sorted(e.medication for e in episodes) == ["Risperidone 2mg", "Seroquel"]
        seroquel = next(e for e in episodes if e.medication == "Seroquel")
        assert seroquel.discontinuation_date == date(2025, 6, 1)
        assert seroquel.prescriber_id is None
        assert seroquel.status_code == "CC"

    def test_load_employees(self, provider: DatabaseReportDataProvider) -> None:
        employees = provider.load_employees()

        assert [e.display_name for e in employees] == ["Jane Doe"]

    def test_load_screenings_pushdown(self, provider: DatabaseReportDataProvider) -> None:
        """
        SCENARIO: Screenings after the date and without a date exist
        EXPECTED: Only dated screenings on or before the date; NULL score kept
        """
        # Act
        screenings = provider.load_screenings(MEASUREMENT_DATE)

        # Assert
        by_client = {s.client_id: s for s in screenings}
        assert len(screenings) == 2
        assert by_client[1].screening_date == date(2025, 3, 1)
        assert by_client[1].score == 2.5
        assert by_client[2].score is None

    def test_health_check(self, provider: DatabaseReportDataProvider) -> None:
        assert provider.health_check() is True


class TestFailures:
    """Test cases for database faults."""

    def test_missing_table_raises(self, engine: Engine) -> None:
        """
        SCENARIO: Tables were never created
        EXPECTED: SQLAlchemy OperationalError propagates from the provider
        """
        provider = DatabaseReportDataProvider(engine, DB_CONFIG)

        with pytest.raises(OperationalError, match="no such table"):
            provider.load_clients(MEASUREMENT_DATE)


class TestEngineFactory:
    """Test cases for create_report_engine."""

    def test_missing_url_rejected(self) -> None:
        with pytest.raises(ValueError, match="database.url is not configured"):
            create_report_engine(DatabaseConfig())

    def test_engine_from_url(self) -> None:
        engine = create_report_engine(DatabaseConfig(url="sqlite://"))

        assert engine.dialect.name == "sqlite"
