"""
Database Report Data Provider.

Reads the four source tables through SQLAlchemy Core.

Design Notes:
    - One connection per bulk load, closed on exit
    - Point-in-time pushdown only where it cannot drop a row the
      eligibility stage would keep:
        Meds        start_date <= :date AND (disc_date IS NULL OR disc_date > :date)
        ClientsExt  date12 IS NOT NULL AND date12 <= :date
    - Rows missing a value the report cannot do without (client_id,
      medication, start_date) are not loaded; SQL comparisons against
      NULL would exclude them anyway
    - Errors propagate; the pipeline's ErrorHandler captures them
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import and_, create_engine, or_, select, text
from sqlalchemy.engine import Engine

from aims_compliance.adapters.tables import ReportTables, build_tables
from aims_compliance.config.models import DatabaseConfig
from aims_compliance.domain.entities import (
    Client,
    Employee,
    MedicationEpisode,
    ScreeningRecord,
)

logger = logging.getLogger(__name__)


class DatabaseReportDataProvider:
    """
    Database-backed report data provider.

    Usage:
        engine = create_report_engine(config.database)
        provider = DatabaseReportDataProvider(engine, config.database)
    """

    def __init__(
        self,
        engine: Engine,
        config: Optional[DatabaseConfig] = None,
    ) -> None:
        """
        Initialize database provider.

        Args:
            engine: SQLAlchemy engine for the source database
            config: Schema and table names (defaults to DatabaseConfig())
        """
        self.engine = engine
        self.config = config or DatabaseConfig()
        self.tables: ReportTables = build_tables(self.config)
        logger.info(
            f"DatabaseReportDataProvider initialized "
            f"(dialect={engine.dialect.name}, schema={self.config.schema_name})"
        )

    def load_clients(self, measurement_date: date) -> List[Client]:
        t = self.tables.clients
        query = select(
            t.c.client_id, t.c.first_name, t.c.last_name, t.c.client_status
        ).where(t.c.client_id.is_not(None))
        return [
            Client(
                client_id=row["client_id"],
                first_name=row["first_name"],
                last_name=row["last_name"],
                status=row["client_status"],
            )
            for row in self._fetch(query, "client")
        ]

    def load_medication_episodes(
        self, measurement_date: date
    ) -> List[MedicationEpisode]:
        t = self.tables.medications
        query = (
            select(
                t.c.client_id,
                t.c.medication,
                t.c.start_date,
                t.c.disc_date,
                t.c.provider_id_int,
                t.c.rx_status,
            )
            .where(
                and_(
                    t.c.client_id.is_not(None),
                    t.c.medication.is_not(None),
                    t.c.start_date <= measurement_date,
                    or_(t.c.disc_date.is_(None), t.c.disc_date > measurement_date),
                )
            )
        )
        return [
            MedicationEpisode(
                client_id=row["client_id"],
                medication=row["medication"],
                start_date=row["start_date"],
                discontinuation_date=row["disc_date"],
                prescriber_id=row["provider_id_int"],
                status_code=row["rx_status"],
            )
            for row in self._fetch(query, "medication")
        ]

    def load_employees(self) -> List[Employee]:
        t = self.tables.employees
        query = select(t.c.emp_id, t.c.first_name, t.c.last_name).where(
            t.c.emp_id.is_not(None)
        )
        return [
            Employee(
                employee_id=row["emp_id"],
                first_name=row["first_name"],
                last_name=row["last_name"],
            )
            for row in self._fetch(query, "employee")
        ]

    def load_screenings(self, measurement_date: date) -> List[ScreeningRecord]:
        t = self.tables.client_extensions
        query = select(t.c.client_id, t.c.date12, t.c.num19).where(
            and_(
                t.c.client_id.is_not(None),
                t.c.date12.is_not(None),
                t.c.date12 <= measurement_date,
            )
        )
        return [
            ScreeningRecord(
                client_id=row["client_id"],
                screening_date=row["date12"],
                score=row["num19"],
            )
            for row in self._fetch(query, "screening")
        ]

    def _fetch(self, query: Any, label: str) -> List[Dict[str, Any]]:
        """Execute a query and return rows as dicts."""
        with self.engine.connect() as conn:
            rows = [dict(row) for row in conn.execute(query).mappings()]
        logger.debug(f"Fetched {len(rows)} {label} rows")
        return rows

    def health_check(self) -> bool:
        """
        Check database connectivity.

        Returns:
            True if the database answers SELECT 1
        """
        with self.engine.connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1


def create_report_engine(config: DatabaseConfig) -> Engine:
    """
    Create a SQLAlchemy engine from configuration.

    Args:
        config: Database configuration; url must be set

    Returns:
        Engine

    Raises:
        ValueError: If no database URL is configured
    """
    if not config.url:
        raise ValueError("database.url is not configured")
    return create_engine(config.url, echo=config.echo, pool_pre_ping=True)
