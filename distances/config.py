"""
Distances Configuration Loader
==============================

Load library defaults from a YAML file.

Lookup order:
    1. explicit path passed to load_config()
    2. $DISTANCES_CONFIG
    3. ./distances.yaml
    4. built-in defaults

File layout (the top-level ``distances:`` key is optional):

    distances:
      accumulator: f32        # f32 | f64
      length_policy: strict   # truncate | strict
      metric: pearson
      log_level: INFO

Usage:
    from distances.config import load_config

    config = load_config()
    pearson(x, y, dtype=config.accumulator, strict=config.strict)
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from distances.core.pairwise import METRICS
from distances.number import resolve_float
from distances.validation import ValidationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'DISTANCES_CONFIG'
DEFAULT_CONFIG_FILE = 'distances.yaml'

LENGTH_POLICIES = ('truncate', 'strict')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigError(ValidationError):
    """Raised when a configuration file is missing or invalid."""


@dataclass(frozen=True)
class DistanceConfig:
    """Library settings."""
    accumulator: str = 'f64'
    length_policy: str = 'truncate'
    metric: str = 'pearson'
    log_level: str = 'WARNING'

    @property
    def strict(self) -> bool:
        return self.length_policy == 'strict'

    def validate(self) -> 'DistanceConfig':
        """Check every field, raising ConfigError on the first bad value."""
        try:
            resolve_float(self.accumulator)
        except ValidationError as e:
            raise ConfigError(f"accumulator: {e}")

        if self.length_policy not in LENGTH_POLICIES:
            raise ConfigError(
                f"length_policy must be one of {LENGTH_POLICIES}, got '{self.length_policy}'"
            )
        if self.metric not in METRICS:
            raise ConfigError(
                f"metric must be one of {tuple(sorted(METRICS))}, got '{self.metric}'"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {LOG_LEVELS}, got '{self.log_level}'"
            )
        return self

    def merged(self, overrides: Dict[str, Any]) -> 'DistanceConfig':
        """Return a copy with the non-None overrides applied."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

        values = {k: str(v) for k, v in overrides.items() if v is not None}
        return replace(self, **values).validate()


def get_config_path(path: Union[str, Path, None] = None) -> Optional[Path]:
    """Resolve which config file to read, or None for defaults."""
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        return path

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if not path.exists():
            raise ConfigError(f"{CONFIG_ENV_VAR} points to a missing file: {path}")
        return path

    local = Path(DEFAULT_CONFIG_FILE)
    if local.exists():
        return local

    return None


def load_config(path: Union[str, Path, None] = None) -> DistanceConfig:
    """
    Load configuration, merging the file over the defaults.

    Args:
        path: Optional YAML file

    Returns:
        Validated DistanceConfig

    Raises:
        ConfigError: if the file is missing, malformed or has bad values
    """
    config_file = get_config_path(path)
    if config_file is None:
        logger.debug("No config file found, using defaults")
        return DistanceConfig()

    with open(config_file) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_file}: {e}")

    data = data or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file} must contain a mapping")
    if 'distances' in data:
        data = data['distances'] or {}
        if not isinstance(data, dict):
            raise ConfigError(f"'distances' in {config_file} must be a mapping")

    logger.debug(f"Loaded config from {config_file}: {data}")
    return DistanceConfig().merged(data)
