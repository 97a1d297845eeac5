"""
Integration Tests - End-to-End Pipeline Tests.

Test Files:
    - test_report_pipeline.py: Full report over in-memory data
    - test_database_pipeline.py: Full report over a SQLite database
"""
