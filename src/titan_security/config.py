"""
Titan Security configuration

Settings are a Pydantic model so a JSON file, CLI flags and test code all
go through the same validation.
"""

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ValidationError, field_validator

from .domain.enums import ArmingPolicy, HouseMode
from .exceptions import ConfigError


class SecurityConfig(BaseModel):
    """Hub settings."""
    # Alarm log destination (append-only text)
    log_path: str = "system_log.txt"

    # Arming behaviour when leaving Away
    arming_policy: ArmingPolicy = ArmingPolicy.CLEARING

    # Out-of-range simulated input: False = ignore, True = IndexError
    strict_sensor_index: bool = False

    initial_mode: HouseMode = HouseMode.DAY

    log_level: str = "INFO"

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f'Unsupported log level: {v}')
        return level


def load_config(path: Optional[Union[str, Path]] = None, **overrides) -> SecurityConfig:
    """
    Load settings from a JSON file.

    A None path yields the defaults. Keyword overrides whose value is not
    None win over the file (used for CLI flags).
    """
    data: dict = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f) or {}
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be an object: {path}")

    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return SecurityConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
