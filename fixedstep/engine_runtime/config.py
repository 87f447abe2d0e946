"""Run configuration schema and YAML loading."""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from ..core_numerics import ConfigurationError, TimeGrid, resolve_step_method
from ..integration.callbacks import CallbackGroup
from ..integration.hooks_core import periodic_callback, progress_effect_factory

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RunConfig(BaseModel):
    """Settings for a single fixed-step run."""
    t_start: float = 0.0
    t_stop: float = 1.0
    num_points: int = 101
    method: str = "rk4"
    log_level: str = "INFO"
    progress_period: int = 0

    @field_validator("num_points")
    @classmethod
    def _check_points(cls, v: int) -> int:
        if v < 2:
            raise ValueError("num_points must be >= 2")
        return v

    @field_validator("method")
    @classmethod
    def _check_method(cls, v: str) -> str:
        return resolve_step_method(v).name

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}")
        return v.upper()

    @field_validator("progress_period")
    @classmethod
    def _check_progress(cls, v: int) -> int:
        if v < 0:
            raise ValueError("progress_period must be >= 0")
        return v

    @model_validator(mode="after")
    def _check_span(self) -> "RunConfig":
        if not self.t_stop > self.t_start:
            raise ValueError("t_stop must be greater than t_start")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"invalid run configuration: {e}") from e

    def build_grid(self) -> TimeGrid:
        return TimeGrid.linspace(self.t_start, self.t_stop, self.num_points)

    def build_step_method(self):
        return resolve_step_method(self.method)

    def build_callbacks(self) -> CallbackGroup:
        """Fresh callback instances for one run (progress logging if enabled)."""
        members = []
        if self.progress_period > 0:
            members.append(periodic_callback(self.progress_period, progress_effect_factory()))
        return CallbackGroup(members)


def load_config(path: Union[str, Path]) -> RunConfig:
    """Load a RunConfig from YAML; settings may sit at top level or under ``run:``."""
    path = Path(path)
    try:
        with open(path, 'r') as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"cannot read configuration {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid YAML in {path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"configuration {path} must be a mapping")
    data = raw.get('run', raw)
    if not isinstance(data, dict):
        raise ConfigurationError(f"'run' section of {path} must be a mapping")

    config = RunConfig.from_dict(data)
    logger.info(f"Loaded configuration from {path}")
    return config
