"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for all
external dependencies. High-level modules depend on these abstractions, not
on concrete implementations.

Protocols:
    - ReportDataProvider: Data access abstraction
    - PipelineStage: Base protocol for pipeline stages
    - AuditLogger: Logging abstraction for audit trail
    - MetricsCollector: Performance metrics abstraction
"""

from aims_compliance.interfaces.audit_logger import AuditLogger
from aims_compliance.interfaces.metrics_collector import MetricsCollector
from aims_compliance.interfaces.pipeline_stage import PipelineStage
from aims_compliance.interfaces.report_data_provider import ReportDataProvider

__all__ = [
    "AuditLogger",
    "MetricsCollector",
    "PipelineStage",
    "ReportDataProvider",
]
