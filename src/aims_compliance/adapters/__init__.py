"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the interfaces package (Ports & Adapters).

Providers:
    - InMemoryReportDataProvider: Fixed snapshot, optionally from YAML
    - DatabaseReportDataProvider: SQLAlchemy Core over the source tables

Loggers:
    - ConsoleAuditLogger: Audit trail through standard logging

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection

Output:
    - write_report: CSV / JSON lines export for the BI tool
"""

from aims_compliance.adapters.console_logger import ConsoleAuditLogger
from aims_compliance.adapters.database_provider import (
    DatabaseReportDataProvider,
    create_report_engine,
)
from aims_compliance.adapters.in_memory_provider import InMemoryReportDataProvider
from aims_compliance.adapters.metrics_collector import InMemoryMetricsCollector
from aims_compliance.adapters.report_writer import OutputFormat, write_report
from aims_compliance.adapters.tables import ReportTables, build_tables

__all__ = [
    "ConsoleAuditLogger",
    "DatabaseReportDataProvider",
    "create_report_engine",
    "InMemoryReportDataProvider",
    "InMemoryMetricsCollector",
    "OutputFormat",
    "write_report",
    "ReportTables",
    "build_tables",
]
