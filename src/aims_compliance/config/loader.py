"""
Configuration Loading.

A report configuration is one YAML file, optionally overlaid with a named
profile kept beside it:

    config/default.yaml
    config/profiles/annual.yaml     # --profile annual

The profile is merged section by section. Any key the profile sets wins,
lists included, and the merged mapping is validated as a ReportConfig.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from aims_compliance.config.models import ReportConfig

logger = logging.getLogger(__name__)

PROFILE_DIR = "profiles"


def profile_path(config_path: Path, profile: str) -> Path:
    """
    Locate a profile overlay for a configuration file.

    Raises:
        ValueError: If the profile is not a bare name
    """
    if not profile or Path(profile).name != profile or profile.endswith(".yaml"):
        raise ValueError(f"invalid profile name: {profile!r}")
    return config_path.parent / PROFILE_DIR / f"{profile}.yaml"


def read_yaml_mapping(path: Path) -> Dict[str, Any]:
    """Read a YAML file whose top level must be a mapping; empty gives {}."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"{path}: expected a mapping at the top level, got {type(data).__name__}"
        )
    return data


def overlay(base: Dict[str, Any], profile: Dict[str, Any]) -> Dict[str, Any]:
    """Merge profile settings over base settings, recursing into sections."""
    merged = dict(base)
    for key, value in profile.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = overlay(current, value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
) -> ReportConfig:
    """
    Load and validate a report configuration.

    Args:
        config_path: YAML configuration file
        profile: Name of an overlay in the sibling profiles/ directory

    Returns:
        Validated ReportConfig

    Raises:
        FileNotFoundError: If the file or the profile does not exist
        ValueError: If a file is not a YAML mapping or the profile name is invalid
        pydantic.ValidationError: If a setting is out of range
    """
    path = Path(config_path)
    settings = read_yaml_mapping(path)

    if profile:
        source = profile_path(path, profile)
        if not source.is_file():
            raise FileNotFoundError(f"Profile not found: {profile} (looked for {source})")
        settings = overlay(settings, read_yaml_mapping(source))
        logger.info(f"Applied profile '{profile}' to {path}")

    return ReportConfig.model_validate(settings)
