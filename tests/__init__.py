"""
Test Suite for the AIMS Compliance Report.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end pipeline tests (in-memory and SQLite)
    - fixtures/: Shared YAML configuration and data snapshots

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
