"""
AIMS Report Pipeline - Main Orchestrator.

The AimsReportPipeline coordinates a report run: validate the request,
load the four source collections, run the stages in order, and wrap the
rows with an audit trail and metrics.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import date, datetime
from typing import Any, List, Optional, Tuple

from aims_compliance import __version__
from aims_compliance.config.models import ReportConfig
from aims_compliance.domain.entities import (
    ReportRequest,
    ReportResult,
    ReportRow,
    RiskBucket,
    StageResult,
)
from aims_compliance.interfaces.audit_logger import AuditLogger
from aims_compliance.interfaces.metrics_collector import MetricsCollector
from aims_compliance.interfaces.pipeline_stage import PipelineStage
from aims_compliance.interfaces.report_data_provider import ReportDataProvider
from aims_compliance.pipeline.data_context import ReportDataContext
from aims_compliance.resilience.error_handler import ErrorHandler
from aims_compliance.stages import create_default_stages
from aims_compliance.validation.request_validator import RequestValidator

logger = logging.getLogger(__name__)


class AimsReportPipeline:
    """Main orchestrator for the AIMS validation report."""

    def __init__(
        self,
        provider: ReportDataProvider,
        stages: List[PipelineStage],
        config: ReportConfig,
        audit_logger: AuditLogger,
        metrics_collector: MetricsCollector,
        error_handler: Optional[ErrorHandler] = None,
        request_validator: Optional[RequestValidator] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            provider: Data access provider
            stages: Ordered list of pipeline stages
            config: Report configuration
            audit_logger: For audit trail
            metrics_collector: For run metrics
            error_handler: Captures data-access faults (default ErrorHandler())
            request_validator: For request validation (optional)
        """
        self.provider = provider
        self.stages = stages
        self.config = config
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.error_handler = error_handler or ErrorHandler()
        self.request_validator = request_validator

    @classmethod
    def from_config(
        cls,
        provider: ReportDataProvider,
        config: Optional[ReportConfig] = None,
        audit_logger: Optional[AuditLogger] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> "AimsReportPipeline":
        """Build a pipeline with the standard stages and default adapters."""
        from aims_compliance.adapters.console_logger import ConsoleAuditLogger
        from aims_compliance.adapters.metrics_collector import InMemoryMetricsCollector

        config = config or ReportConfig()
        return cls(
            provider=provider,
            stages=create_default_stages(config),
            config=config,
            audit_logger=audit_logger or ConsoleAuditLogger(verbose=False),
            metrics_collector=metrics_collector or InMemoryMetricsCollector(),
            request_validator=RequestValidator(),
        )

    def run(self, measurement_date: Optional[date] = None) -> ReportResult:
        """
        Execute the report.

        Args:
            measurement_date: As-of date (default: configured default date)

        Returns:
            ReportResult with ordered rows and audit trail

        Raises:
            ValidationError: If request validation fails
            ReportDataAccessError: If any source collection cannot be read
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        self.audit_logger.set_correlation_id(correlation_id)

        # 1. Create request
        request = ReportRequest(
            measurement_date=measurement_date
            or self.config.report.default_measurement_date,
            correlation_id=correlation_id,
        )

        # 2. Validate request
        if self.request_validator:
            self.request_validator.validate(request, self.config)
            logger.debug(f"Request validated: {correlation_id}")

        # 3. Load data; any fault aborts the run
        context = self._load_data(request)

        # 4. Execute stages
        items: List[Any] = list(context.episodes)
        audit_trail: List[StageResult] = []

        for stage in self.stages:
            stage_result, items = self._execute_stage(
                stage, items, request.measurement_date, context
            )
            audit_trail.append(stage_result)

        rows: List[ReportRow] = items

        # 5. Record totals
        total_duration = time.perf_counter() - start_time
        self.metrics_collector.record_timing("report_total_seconds", total_duration)
        self.metrics_collector.record_count("report_rows_total", len(rows))
        for bucket in RiskBucket:
            self.metrics_collector.record_count(
                "risk_bucket_rows",
                sum(1 for row in rows if row.risk_bucket == bucket),
                {"risk_bucket": bucket.value},
            )
        if not rows:
            self.audit_logger.log_anomaly(
                f"Report for {request.measurement_date} has no rows",
                severity="WARNING",
                context={"input_episodes": len(context)},
            )

        result = ReportResult(
            request=request,
            rows=rows,
            input_episode_count=len(context),
            audit_trail=audit_trail,
            metrics=self.metrics_collector.get_metrics(),
            metadata=self._build_metadata(correlation_id, total_duration),
        )

        logger.info(
            f"AIMS report for {request.measurement_date}: {len(rows)} rows "
            f"from {len(context)} episodes ({total_duration:.3f}s)"
        )
        return result

    def _load_data(self, request: ReportRequest) -> ReportDataContext:
        """Bulk load the four source collections into a ReportDataContext."""
        load_start = time.perf_counter()
        as_of = request.measurement_date
        guard = self.error_handler.guard

        clients = guard(
            lambda: self.provider.load_clients(as_of), operation_name="load_clients"
        )
        episodes = guard(
            lambda: self.provider.load_medication_episodes(as_of),
            operation_name="load_medication_episodes",
        )
        employees = guard(self.provider.load_employees, operation_name="load_employees")
        screenings = guard(
            lambda: self.provider.load_screenings(as_of),
            operation_name="load_screenings",
        )

        load_duration = time.perf_counter() - load_start
        self.metrics_collector.record_timing("data_load_seconds", load_duration)
        self.metrics_collector.record_count("input_episodes_total", len(episodes))

        return ReportDataContext(
            clients=clients,
            episodes=episodes,
            employees=employees,
            screenings=screenings,
            unassigned_prescriber_label=self.config.report.unassigned_prescriber_label,
        )

    def _execute_stage(
        self,
        stage: PipelineStage,
        items: List[Any],
        measurement_date: date,
        context: ReportDataContext,
    ) -> Tuple[StageResult, List[Any]]:
        """Execute a single stage."""
        stage_start = time.perf_counter()

        self.audit_logger.log_stage_start(stage.name, len(items))

        output = stage.apply(items, measurement_date, context)

        stage_duration = time.perf_counter() - stage_start

        for key, reason in output.rejection_reasons.items():
            self.audit_logger.log_episode_rejected(key, stage.name, reason)

        self.audit_logger.log_stage_end(stage.name, output.passed_count, stage_duration)

        self.metrics_collector.record_timing(
            "stage_duration_seconds",
            stage_duration,
            {"stage": stage.name},
        )
        self.metrics_collector.record_count(
            "episodes_rejected_total",
            output.rejected_count,
            {"stage": stage.name},
        )

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(items),
            output_count=output.passed_count,
            duration_seconds=stage_duration,
            rejected_keys=list(output.rejection_reasons),
            rejection_reasons=output.rejection_reasons,
        )
        return stage_result, output.items

    def _build_metadata(self, correlation_id: str, duration: float) -> dict:
        return {
            "correlation_id": correlation_id,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
            "version": __version__,
        }


def get_aims_validation_report_data(
    provider: ReportDataProvider,
    measurement_date: Optional[date] = None,
    config: Optional[ReportConfig] = None,
) -> List[ReportRow]:
    """
    Run the report with default stages and return only the rows.

    Args:
        provider: Data access provider
        measurement_date: As-of date (default: configured default date)
        config: Report configuration (default: ReportConfig())

    Returns:
        Ordered report rows
    """
    pipeline = AimsReportPipeline.from_config(provider, config)
    return pipeline.run(measurement_date).rows
