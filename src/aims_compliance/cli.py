"""Command-line entry point for the AIMS validation report.

Usage:
    aims-report --database-url mssql+pyodbc://... --measurement-date 2025-05-12
    aims-report --snapshot extract.yaml --format jsonl --output report.jsonl

Exit codes: 0 success, 1 data-access failure (database or unreadable
snapshot), 2 invalid configuration or request.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import pydantic
import yaml

from aims_compliance import configure_logging
from aims_compliance.adapters.console_logger import ConsoleAuditLogger
from aims_compliance.adapters.database_provider import (
    DatabaseReportDataProvider,
    create_report_engine,
)
from aims_compliance.adapters.in_memory_provider import InMemoryReportDataProvider
from aims_compliance.adapters.metrics_collector import InMemoryMetricsCollector
from aims_compliance.adapters.report_writer import OutputFormat, write_report
from aims_compliance.config.loader import load_config
from aims_compliance.config.models import ReportConfig
from aims_compliance.interfaces.report_data_provider import ReportDataProvider
from aims_compliance.observability.observability_manager import ObservabilityManager
from aims_compliance.pipeline.report_pipeline import AimsReportPipeline
from aims_compliance.resilience.error_handler import ErrorHandler, ReportDataAccessError
from aims_compliance.stages import create_default_stages
from aims_compliance.validation.request_validator import (
    RequestValidator,
    ValidationError,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DATA_ACCESS = 1
EXIT_INVALID = 2


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aims-report",
        description="Active clients on antipsychotics and the currency of their AIMS screening",
    )
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--profile", help="Configuration profile to overlay")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--database-url", help="SQLAlchemy URL of the source database")
    source.add_argument("--snapshot", type=Path, help="YAML snapshot instead of a database")
    parser.add_argument(
        "--measurement-date",
        type=_parse_date,
        help="As-of date YYYY-MM-DD (default from configuration)",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.CSV.value,
    )
    parser.add_argument("--output", type=Path, help="Output file (default: stdout)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--log-format",
        default="text",
        choices=["text", "json"],
        help="json emits structured audit events on stderr",
    )
    return parser


def load_report_config(args: argparse.Namespace) -> ReportConfig:
    if args.config is None:
        if args.profile:
            raise ValueError("--profile requires --config")
        return ReportConfig()
    return load_config(args.config, profile=args.profile)


def build_provider(args: argparse.Namespace, config: ReportConfig) -> ReportDataProvider:
    """
    Open the selected data source.

    Raises:
        ValueError: If no data source is selected
        ReportDataAccessError: If the snapshot or engine cannot be opened
    """
    database = config.database
    if args.database_url:
        database = database.model_copy(update={"url": args.database_url})
    if args.snapshot is None and not database.url:
        raise ValueError("no data source: pass --snapshot, --database-url or set database.url")

    guard = ErrorHandler().guard
    if args.snapshot is not None:
        return guard(
            lambda: InMemoryReportDataProvider.from_yaml(args.snapshot),
            operation_name="load_snapshot",
        )
    return guard(
        lambda: DatabaseReportDataProvider(create_report_engine(database), database),
        operation_name="create_engine",
    )


def build_pipeline(
    args: argparse.Namespace,
    provider: ReportDataProvider,
    config: ReportConfig,
) -> AimsReportPipeline:
    level = getattr(logging, args.log_level)
    if args.log_format == "json":
        observability = ObservabilityManager(use_json=True, log_level=level)
        audit_logger, metrics = observability, observability
    else:
        audit_logger = ConsoleAuditLogger(verbose=level <= logging.DEBUG)
        metrics = InMemoryMetricsCollector()

    return AimsReportPipeline(
        provider=provider,
        stages=create_default_stages(config),
        config=config,
        audit_logger=audit_logger,
        metrics_collector=metrics,
        request_validator=RequestValidator(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    try:
        config = load_report_config(args)
        provider = build_provider(args, config)
        pipeline = build_pipeline(args, provider, config)
        result = pipeline.run(args.measurement_date)
    except (pydantic.ValidationError, yaml.YAMLError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except ValidationError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_INVALID
    except ReportDataAccessError as e:
        print(
            f"error: {e.message} (severity={e.severity}, state={e.state})",
            file=sys.stderr,
        )
        return EXIT_DATA_ACCESS

    output_format = OutputFormat(args.format)
    if args.output is not None:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            count = write_report(result.rows, f, output_format)
        logger.info(f"Wrote {count} rows to {args.output}")
    else:
        write_report(result.rows, sys.stdout, output_format)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
