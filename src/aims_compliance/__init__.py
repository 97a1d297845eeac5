"""
AIMS Compliance - Antipsychotic AIMS Screening Report Pipeline.

Builds the raw data set behind the AIMS quality measure report: active
clients on antipsychotic medications, their current medication episode,
and whether an Abnormal Involuntary Movement Scale screening is on record
since that episode started.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Staged, read-only transformation pipeline
    - Configuration-driven reference data via YAML

Main Components:
    - domain: Core entities (Client, MedicationEpisode, ReportRow, etc.)
    - interfaces: Abstract protocols for all dependencies
    - stages: Eligibility, ranking, screening match, classification, ordering
    - pipeline: Orchestration and data context
    - adapters: Infrastructure implementations (providers, loggers, writers)
    - config: Configuration models and loaders

Example:
    >>> from aims_compliance.pipeline import AimsReportPipeline
    >>> pipeline = AimsReportPipeline.from_config(provider, config)
    >>> result = pipeline.run(measurement_date=date(2025, 5, 12))
    >>> print(f"{len(result.rows)} clients on the report")

"""

import logging

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for the AIMS report.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import aims_compliance
        >>> aims_compliance.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("aims_compliance").setLevel(level)
