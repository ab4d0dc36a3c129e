from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DEFAULT_ALLOWED_GROUPS,
    DEFAULT_EXCLUDED_STATUS,
    DEFAULT_TAX_DIVISOR,
    FilterRules,
    ReportConfig,
)

"""Config loader for report runs.

Responsibilities:
- Load YAML config/report.yml (or the path in SALES_PIVOT_CONFIG)
- Validate against the bundled JSON schema
- Apply defaults for every omitted key
"""

__all__ = [
    "ConfigError",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "load_config",
    "resolve_config_path",
]

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SALES_PIVOT_CONFIG"
DEFAULT_CONFIG_PATH = Path("config/report.yml")
SCHEMA_PATH = Path(__file__).with_name("report_config_schema.json")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file missing/invalid, or data violates the schema
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def resolve_config_path(explicit: Path | None = None) -> tuple[Path, bool]:
    """Pick the config path: explicit argument, then env var, then default.

    Returns the path and whether it was requested explicitly (a missing
    explicit file is an error, a missing default file is not).
    """
    if explicit is not None:
        return explicit, True
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value), True
    return DEFAULT_CONFIG_PATH, False


def load_config(path: Path | None = None, *, required: bool = True) -> ReportConfig:
    """Load and validate a report configuration.

    ``path=None`` returns the built-in defaults. With ``required=False`` a
    missing file also falls back to the defaults.
    """
    if path is None:
        return ReportConfig()
    if not path.exists():
        if required:
            raise ConfigError(f"config file not found: {path}")
        logger.debug(f"config file not found, using defaults: {path}")
        return ReportConfig()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    filters = data.get("filters", {})
    groups = filters.get("allowed_groups")
    rules = FilterRules(
        excluded_status=filters.get("excluded_status", DEFAULT_EXCLUDED_STATUS),
        allowed_groups=frozenset(groups) if groups else DEFAULT_ALLOWED_GROUPS,
    )
    return ReportConfig(
        filter_rules=rules,
        tax_divisor=float(data.get("net_amount", {}).get("tax_divisor", DEFAULT_TAX_DIVISOR)),
        output_directory=data.get("output_directory", "."),
    )
