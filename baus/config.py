"""Run configuration with YAML defaults support."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

import platformdirs
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ranking import ValueKind
from store.paths import APP_NAME

DEFAULT_NAME = "baus"
DEFAULTS_FILE_NAME = "config.yaml"

# Keys a defaults file may set; name and action always come from the command line.
DEFAULT_KEYS = frozenset({"cache_dir", "value", "desc", "cleanup"})


class ConfigError(Exception):
    """Raised when the defaults file or the merged configuration is invalid."""


class Action(str, Enum):
    SORT = "sort"
    SAVE = "save"


TBaseSchema = TypeVar("TBaseSchema", bound="BaseSchema")


class BaseSchema(BaseModel):
    def to_dict(self) -> dict[str, object]:
        return self.model_dump()

    @classmethod
    def from_dict(cls: type[TBaseSchema], data: Mapping[str, object]) -> TBaseSchema:
        return cls.model_validate(data)


class SelectorConfig(BaseSchema):
    """Validated settings for one invocation."""

    model_config = ConfigDict(frozen=True)

    name: str = DEFAULT_NAME
    action: Action = Action.SORT
    # save only
    value: ValueKind = ValueKind.COUNT
    # sort only
    desc: bool = False
    cleanup: bool = False
    cache_dir: str | None = None

    @field_validator("name")
    @classmethod
    def name_is_file_name(cls, value: str) -> str:
        if not value or value in (".", ".."):
            raise ValueError("name must be a non-empty file name")
        if "/" in value or "\\" in value or "\0" in value:
            raise ValueError("name must not contain path separators")
        return value


def default_config_path() -> Path:
    return Path(platformdirs.user_config_dir(APP_NAME)) / DEFAULTS_FILE_NAME


def load_defaults(yaml_path: str | Path | None = None) -> dict[str, Any]:
    """Load default option values from a YAML file.

    Args:
        yaml_path: Path to the defaults file. When None, the per-user config
            file is used if it exists.

    Returns:
        Mapping of option name to default value (empty if there is no file)

    Raises:
        ConfigError: If an explicit file is missing, or the YAML is invalid,
            not a mapping, or names unknown options
    """
    if yaml_path is None:
        yaml_path = default_config_path()
        if not yaml_path.exists():
            return {}
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise ConfigError(f"Config file not found: {yaml_path}")

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {yaml_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must hold a mapping: {yaml_path}")

    unknown = sorted(str(key) for key in data if key not in DEFAULT_KEYS)
    if unknown:
        raise ConfigError(f"Unknown option(s) in {yaml_path}: {', '.join(unknown)}")
    return dict(data)


def build_config(
    cli_values: Mapping[str, object],
    defaults: Mapping[str, object] | None = None,
) -> SelectorConfig:
    """Merge command-line values over file defaults and validate the result.

    Command-line values of None count as "not given".
    """
    merged: dict[str, object] = dict(defaults or {})
    merged.update({key: value for key, value in cli_values.items() if value is not None})
    try:
        return SelectorConfig.from_dict(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
