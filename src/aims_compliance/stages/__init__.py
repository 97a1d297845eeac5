"""
Stages Package - The Report Transformation Steps.

Each stage implements the PipelineStage protocol. Run in order they turn
the raw medication episodes into the ordered report rows.

Stages:
    - EligibleEpisodeFilter: Active clients on active antipsychotic episodes
    - LatestEpisodeSelector: One episode per client
    - ScreeningMatcher: Qualifying AIMS screening per episode
    - RiskClassifier: Risk bucket, alert reason and flags
    - ReportOrdering: Final row order

Design Principles:
    - Each stage is independently testable
    - Configuration injected via constructor
    - Clear rejection reasons for the audit trail
"""

from typing import List

from aims_compliance.config.models import ReportConfig
from aims_compliance.stages.classification import RiskClassifier
from aims_compliance.stages.eligibility import EligibleEpisodeFilter
from aims_compliance.stages.latest_episode import LatestEpisodeSelector
from aims_compliance.stages.ordering import ReportOrdering
from aims_compliance.stages.screening_match import ScreeningMatcher


def create_default_stages(config: ReportConfig) -> List:
    """Build the standard stage sequence from configuration."""
    return [
        EligibleEpisodeFilter(
            config.reference_data,
            test_name_pattern=config.report.test_name_pattern,
        ),
        LatestEpisodeSelector(),
        ScreeningMatcher(),
        RiskClassifier(config.report),
        ReportOrdering(),
    ]


__all__ = [
    "EligibleEpisodeFilter",
    "LatestEpisodeSelector",
    "ScreeningMatcher",
    "RiskClassifier",
    "ReportOrdering",
    "create_default_stages",
]
