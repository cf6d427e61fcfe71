"""YAML run configuration."""

from .load_config import (
    MixtureConfig,
    OutputConfig,
    RollingConfig,
    RunConfig,
    load_run_config,
    parse_run_config,
)

__all__ = [
    "MixtureConfig",
    "OutputConfig",
    "RollingConfig",
    "RunConfig",
    "load_run_config",
    "parse_run_config",
]
