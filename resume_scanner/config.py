"""Scanner configuration: YAML loading and startup validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

import yaml

DEFAULT_CONFIG_PATH = "config/config.yaml"
LEVEL_ENV_VAR = "RESUME_SCANNER_LEVEL"

VALID_LEVELS = ("fresher", "experienced")
VALID_OUTPUT_FORMATS = ("markdown", "json")


@dataclass
class ScannerConfig:
    """Configuration for a scan run."""

    experience_level: str = "fresher"
    output_format: str = "markdown"
    short_text_threshold: int = 50
    verbose: bool = False


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""

    field: str
    message: str
    severity: Severity


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_raw_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load the YAML mapping at *config_path*.

    Relative paths that do not exist are retried against the repository root.
    """
    path = Path(config_path)
    if not path.exists() and not path.is_absolute():
        path = Path(__file__).resolve().parents[1] / config_path
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must be a mapping: {path}")
    return data


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> ScannerConfig:
    """Load scanner configuration from *config_path*."""
    return config_from_mapping(load_raw_config(config_path))


def config_from_mapping(data: Dict[str, Any]) -> ScannerConfig:
    """Build a :class:`ScannerConfig`; ``RESUME_SCANNER_LEVEL`` overrides the level."""
    defaults = ScannerConfig()
    return ScannerConfig(
        experience_level=os.environ.get(LEVEL_ENV_VAR) or data.get("experience_level", defaults.experience_level),
        output_format=data.get("output_format", defaults.output_format),
        short_text_threshold=data.get("short_text_threshold", defaults.short_text_threshold),
        verbose=bool(data.get("verbose", defaults.verbose)),
    )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_config(raw_config: Dict[str, Any]) -> List[ConfigError]:
    """Validate raw configuration and return a list of issues.

    Args:
        raw_config: Raw config dict from YAML

    Returns:
        List of ConfigError (empty = valid)
    """
    errors: List[ConfigError] = []

    # --- Experience level ---
    level = raw_config.get("experience_level", "fresher")
    if level not in VALID_LEVELS:
        errors.append(
            ConfigError(
                field="experience_level",
                message=f"experience_level must be one of {', '.join(VALID_LEVELS)}, got {level!r}",
                severity=Severity.ERROR,
            )
        )

    env_level = os.environ.get(LEVEL_ENV_VAR, "")
    if env_level and env_level not in VALID_LEVELS:
        errors.append(
            ConfigError(
                field=LEVEL_ENV_VAR,
                message=f"{LEVEL_ENV_VAR} must be one of {', '.join(VALID_LEVELS)}, got {env_level!r}",
                severity=Severity.ERROR,
            )
        )

    # --- Output format ---
    output_format = raw_config.get("output_format", "markdown")
    if output_format not in VALID_OUTPUT_FORMATS:
        errors.append(
            ConfigError(
                field="output_format",
                message=f"output_format must be one of {', '.join(VALID_OUTPUT_FORMATS)}, got {output_format!r}",
                severity=Severity.ERROR,
            )
        )

    # --- Short text threshold ---
    threshold = raw_config.get("short_text_threshold", 50)
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold <= 0:
        errors.append(
            ConfigError(
                field="short_text_threshold",
                message=f"short_text_threshold must be a positive integer, got {threshold!r}",
                severity=Severity.ERROR,
            )
        )

    # --- Verbose ---
    verbose = raw_config.get("verbose", False)
    if not isinstance(verbose, bool):
        errors.append(
            ConfigError(
                field="verbose",
                message=f"verbose should be true or false, got {verbose!r}",
                severity=Severity.WARNING,
            )
        )

    known = {"experience_level", "output_format", "short_text_threshold", "verbose"}
    for key in sorted(set(raw_config) - known):
        errors.append(
            ConfigError(
                field=key,
                message=f"Unknown configuration key: {key}",
                severity=Severity.WARNING,
            )
        )

    return errors


def has_errors(issues: List[ConfigError]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)
