"""Runtime configuration for the shapesort command line and benchmarks.

Values come from three layers, later ones winning:

1. the defaults on :class:`SorterConfig`;
2. an optional YAML file;
3. ``SHAPESORT_*`` environment variables.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

DEFAULT_CONFIG_PATH = "config/shapesort.yaml"
ENV_PREFIX = "SHAPESORT_"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class SorterConfig:
    """Settings shared by the CLI and the benchmark system."""

    checkpoint_interval: int = 1000
    log_level: str = "INFO"
    results_dir: str = "benchmarks/results"
    default_compare_type: str = "h"
    default_algorithm: Optional[str] = None

    def __post_init__(self) -> None:
        self.checkpoint_interval = int(self.checkpoint_interval)
        if self.checkpoint_interval <= 0:
            raise ValueError(
                f"checkpoint_interval must be positive, got {self.checkpoint_interval}"
            )
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ValueError(f"Config file {path} is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def _from_env(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for f in fields(SorterConfig):
        value = environ.get(ENV_PREFIX + f.name.upper())
        if value is not None:
            overrides[f.name] = value
    return overrides


def load_config(
    path: Union[str, Path, None] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SorterConfig:
    """Build a :class:`SorterConfig` from YAML and the environment.

    A missing file is not an error; unknown keys in the file are.
    """
    data = _load_yaml(path or DEFAULT_CONFIG_PATH)
    known = {f.name for f in fields(SorterConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    data.update(_from_env(os.environ if environ is None else environ))
    config = SorterConfig(**data)
    logging.getLogger(__name__).debug(f"Loaded config: {config.to_dict()}")
    return config
