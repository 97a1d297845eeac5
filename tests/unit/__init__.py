"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_eligibility_filter.py: Eligibility rules
    - test_latest_episode.py: One episode per client
    - test_screening_match.py: Qualifying screening selection
    - test_risk_classifier.py: Buckets, reasons and flags
    - test_report_ordering.py: Final row order
    - test_config_loader.py: Configuration loading/validation
    - test_collation.py: Case-insensitive text comparison
    - test_error_handler.py: Data-access fault capture
    - test_request_validator.py: Measurement date validation
    - test_database_provider.py: SQLAlchemy provider over SQLite
    - test_report_writer.py: CSV / JSON lines export
    - test_data_context.py: Snapshot lookups and prescriber names
    - test_observability.py: Audit loggers and metrics collectors
    - test_cli.py: Command-line entry point
"""
