"""
Pipeline Package - Orchestration and Data Management.

Components:
    - AimsReportPipeline: Main orchestrator coordinating all stages
    - ReportDataContext: In-memory container for loaded data

The pipeline is responsible for:
    - Validating report requests
    - Loading the source collections (any fault aborts the run)
    - Executing stages in sequence
    - Collecting metrics and audit trail
    - Generating the final ReportResult

Design Principles:
    - All dependencies injected via constructor
    - Stateless operation (state in ReportDataContext)
"""

from aims_compliance.pipeline.data_context import ReportDataContext
from aims_compliance.pipeline.report_pipeline import (
    AimsReportPipeline,
    get_aims_validation_report_data,
)

__all__ = [
    "AimsReportPipeline",
    "ReportDataContext",
    "get_aims_validation_report_data",
]
