"""
Test Fixtures - Shared Test Data and Configurations.

    - sample_config.yaml: Sample configuration for testing
    - snapshot.yaml: Small source-data snapshot with a known report
    - builders.py: Helpers that build episodes, candidates and matches
"""
