"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the AIMS report:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Profile overlays kept in profiles/ beside the configuration file

Configuration Structure:
    - ReportConfig: Root configuration object
    - ReportSettings: Default measurement date, thresholds, labels
    - ReferenceDataConfig: Antipsychotic names, active status codes
    - DatabaseConfig: Source database URL, schema and table names
    - ValidationConfig: Request validation limits
"""

from aims_compliance.config.loader import load_config, overlay, profile_path
from aims_compliance.config.models import (
    DatabaseConfig,
    ReferenceDataConfig,
    ReportConfig,
    ReportSettings,
    ValidationConfig,
)

__all__ = [
    "load_config",
    "overlay",
    "profile_path",
    "DatabaseConfig",
    "ReferenceDataConfig",
    "ReportConfig",
    "ReportSettings",
    "ValidationConfig",
]
