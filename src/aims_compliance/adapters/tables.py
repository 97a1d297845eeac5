"""
Source Table Definitions.

SQLAlchemy Core tables for the four source collections. Only the columns
the report reads are declared; the real tables carry many more.

    Clients     client_id, first_name, last_name, client_status
    Meds        client_id, medication, start_date, disc_date,
                provider_id_int, rx_status
    Employees   emp_id, first_name, last_name
    ClientsExt  client_id, date12 (AIMS date), num19 (AIMS score)
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import Column, Date, Integer, MetaData, Numeric, String, Table

from aims_compliance.config.models import DatabaseConfig


@dataclass(frozen=True)
class ReportTables:
    """The four source tables bound to one MetaData."""

    metadata: MetaData
    clients: Table
    medications: Table
    employees: Table
    client_extensions: Table


def build_tables(config: DatabaseConfig) -> ReportTables:
    """Declare the source tables using configured schema and table names."""
    metadata = MetaData(schema=config.schema_name)

    clients = Table(
        config.clients_table,
        metadata,
        Column("client_id", Integer, primary_key=True),
        Column("first_name", String(100)),
        Column("last_name", String(100)),
        Column("client_status", String(30)),
    )

    medications = Table(
        config.medications_table,
        metadata,
        Column("client_id", Integer, index=True),
        Column("medication", String(255)),
        Column("start_date", Date),
        Column("disc_date", Date),
        Column("provider_id_int", Integer),
        Column("rx_status", String(10)),
    )

    employees = Table(
        config.employees_table,
        metadata,
        Column("emp_id", Integer, primary_key=True),
        Column("first_name", String(100)),
        Column("last_name", String(100)),
    )

    client_extensions = Table(
        config.client_extensions_table,
        metadata,
        Column("client_id", Integer, index=True),
        Column("date12", Date),
        Column("num19", Numeric(10, 2, asdecimal=False)),
    )

    return ReportTables(
        metadata=metadata,
        clients=clients,
        medications=medications,
        employees=employees,
        client_extensions=client_extensions,
    )
