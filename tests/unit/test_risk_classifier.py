"""
Unit Tests for RiskClassifier.

Test Aspects Covered:
    ✅ Business Logic: Missing / overdue / current buckets
    ✅ Edge Cases: Exactly 180 days, score threshold boundary
    ✅ Output: Alert reason text, 0/1 flags, row fields
"""

from __future__ import annotations

from datetime import date

import pytest

from aims_compliance.config.models import ReportSettings
from aims_compliance.domain.entities import RiskBucket
from aims_compliance.stages.classification import RiskClassifier, format_display_date
from tests.fixtures.builders import make_candidate, make_context, make_episode, make_match


@pytest.fixture
def classifier(report_settings: ReportSettings) -> RiskClassifier:
    return RiskClassifier(report_settings)


class TestClassify:
    """Test cases for bucket and reason."""

    def test_no_screening_is_missing(
        self,
        classifier: RiskClassifier,
        reference_date: date,
    ) -> None:
        """
        SCENARIO: No qualifying screening
        EXPECTED: Missing bucket naming the episode start
        """
        bucket, reason = classifier.classify(None, date(2025, 1, 2), reference_date)

        assert bucket == RiskBucket.MISSING
        assert reason == "No AIMS on record since current AP episode started on 01/02/2025"

    def test_old_screening_is_overdue(
        self,
        classifier: RiskClassifier,
        reference_date: date,
    ) -> None:
        """
        SCENARIO: Last screening 192 days before the measurement date
        EXPECTED: Overdue bucket with both dates in the reason
        """
        bucket, reason = classifier.classify(
            date(2024, 11, 1), date(2023, 1, 15), reference_date
        )

        assert bucket == RiskBucket.OVERDUE
        assert reason == "Last AIMS (11/01/2024) is >180 days prior to 05/12/2025"

    def test_exactly_window_days_is_current(
        self,
        classifier: RiskClassifier,
        reference_date: date,
    ) -> None:
        """
        SCENARIO: Screening exactly 180 days before the measurement date
        EXPECTED: Current (overdue needs strictly more than the window)
        """
        # 2025-05-12 minus 180 days
        boundary = date(2024, 11, 13)

        bucket, _ = classifier.classify(boundary, date(2024, 1, 1), reference_date)

        assert bucket == RiskBucket.CURRENT

    def test_one_day_past_window_is_overdue(
        self,
        classifier: RiskClassifier,
        reference_date: date,
    ) -> None:
        """
        SCENARIO: Screening 181 days before the measurement date
        EXPECTED: Overdue
        """
        bucket, _ = classifier.classify(date(2024, 11, 12), date(2024, 1, 1), reference_date)

        assert bucket == RiskBucket.OVERDUE

    def test_recent_screening_is_current(
        self,
        classifier: RiskClassifier,
        reference_date: date,
    ) -> None:
        """
        SCENARIO: Screened two months ago
        EXPECTED: Current with fixed reason
        """
        bucket, reason = classifier.classify(
            date(2025, 3, 1), date(2024, 6, 1), reference_date
        )

        assert bucket == RiskBucket.CURRENT
        assert reason == "AIMS screening is current"

    def test_configured_window(self, reference_date: date) -> None:
        """
        SCENARIO: Window configured as 365 days
        EXPECTED: A 192-day-old screening is current; reason uses the window
        """
        # Arrange
        annual = RiskClassifier(ReportSettings(overdue_after_days=365))

        # Act
        current, _ = annual.classify(date(2024, 11, 1), date(2023, 1, 1), reference_date)
        overdue, reason = annual.classify(
            date(2024, 5, 1), date(2023, 1, 1), reference_date
        )

        # Assert
        assert current == RiskBucket.CURRENT
        assert overdue == RiskBucket.OVERDUE
        assert ">365 days" in reason


class TestHighScore:
    """Test cases for the high-score flag."""

    @pytest.mark.parametrize(
        "score,expected",
        [(None, False), (0, False), (3.99, False), (4, True), (4.5, True), (12, True)],
    )
    def test_threshold(
        self,
        classifier: RiskClassifier,
        score,
        expected: bool,
    ) -> None:
        """
        SCENARIO: Scores around the threshold of 4
        EXPECTED: High at 4 and above; a missing score is never high
        """
        assert classifier.is_high_score(score) is expected


class TestBuildRow:
    """Test cases for the report row."""

    def test_row_for_screened_client(
        self,
        classifier: RiskClassifier,
        reference_date: date,
    ) -> None:
        """
        SCENARIO: Client screened with a high score
        EXPECTED: Row carries episode, screening and both flags set
        """
        # Arrange
        episode = make_episode(
            client_id=2,
            medication="Seroquel 100mg",
            start_date=date(2023, 1, 15),
            discontinuation_date=date(2025, 12, 31),
        )
        match = make_match(
            make_candidate(episode, first_name="Ben", last_name="Cole", prescriber_name="Omar Reyes"),
            screening_date=date(2024, 11, 1),
            score=4,
        )

        # Act
        row = classifier.build_row(match, reference_date)

        # Assert
        assert row.client_id == 2
        assert row.first_name == "Ben"
        assert row.medication == "Seroquel 100mg"
        assert row.medication_start_date == date(2023, 1, 15)
        assert row.medication_end_date == date(2025, 12, 31)
        assert row.prescriber_name == "Omar Reyes"
        assert row.aims_screening_date == date(2024, 11, 1)
        assert row.aims_score == 4
        assert row.risk_bucket == RiskBucket.OVERDUE
        assert row.measurement_date == reference_date
        assert row.has_aims_screening == 1
        assert row.has_high_aims_score == 1

    def test_row_for_unscreened_client(
        self,
        classifier: RiskClassifier,
        reference_date: date,
    ) -> None:
        """
        SCENARIO: No qualifying screening
        EXPECTED: Screening fields empty and both flags 0
        """
        match = make_match(make_candidate(make_episode()))

        row = classifier.build_row(match, reference_date)

        assert row.aims_screening_date is None
        assert row.aims_score is None
        assert row.has_aims_screening == 0
        assert row.has_high_aims_score == 0
        assert row.risk_bucket == RiskBucket.MISSING

    def test_stage_builds_one_row_per_match(
        self,
        classifier: RiskClassifier,
        reference_date: date,
    ) -> None:
        """
        SCENARIO: Stage applied to two matches
        EXPECTED: Two rows, nothing rejected
        """
        matches = [
            make_match(make_candidate(make_episode(client_id=1))),
            make_match(make_candidate(make_episode(client_id=2)), date(2025, 4, 1), 1),
        ]

        output = classifier.apply(matches, reference_date, make_context([], []))

        assert [r.risk_bucket for r in output.items] == [
            RiskBucket.MISSING,
            RiskBucket.CURRENT,
        ]


def test_format_display_date() -> None:
    """
    SCENARIO: Single-digit month and day
    EXPECTED: Zero-padded MM/DD/YYYY
    """
    assert format_display_date(date(2025, 1, 2)) == "01/02/2025"
