"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from aims_compliance.adapters.console_logger import ConsoleAuditLogger
from aims_compliance.adapters.in_memory_provider import InMemoryReportDataProvider
from aims_compliance.adapters.metrics_collector import InMemoryMetricsCollector
from aims_compliance.config.models import ReportConfig, ReportSettings
from aims_compliance.domain.entities import Client, Employee


@pytest.fixture
def reference_date() -> date:
    """Measurement date used throughout the tests."""
    return date(2025, 5, 12)


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def sample_snapshot_path() -> Path:
    """Path to the sample data snapshot."""
    return Path(__file__).parent / "fixtures" / "snapshot.yaml"


@pytest.fixture
def sample_provider(sample_snapshot_path: Path) -> InMemoryReportDataProvider:
    """Provider over the sample snapshot."""
    return InMemoryReportDataProvider.from_yaml(sample_snapshot_path)


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def default_config() -> ReportConfig:
    """Create default report configuration."""
    return ReportConfig()


@pytest.fixture
def report_settings() -> ReportSettings:
    """Default report settings (180-day window, threshold 4)."""
    return ReportSettings()


@pytest.fixture
def active_client() -> Client:
    return Client(client_id=1, first_name="Ada", last_name="Byrne", status="Active")


@pytest.fixture
def prescriber() -> Employee:
    return Employee(employee_id=7, first_name="Jane", last_name="Doe")
