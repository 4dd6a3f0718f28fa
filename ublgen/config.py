"""
Run configuration for UblGen.

The two values the core needs are the root output namespace and the
optimization flag; both can come from a YAML or JSON file and be overridden
from the command line.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ublgen.constants import DEFAULT_ROOT_NAMESPACE, PROJECT_HOME
from ublgen.exceptions import ConfigurationError


class GeneratorConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    root_namespace: str = Field(default=DEFAULT_ROOT_NAMESPACE, min_length=1)
    optimize: bool = False
    strict: bool = False
    schema_dir: Optional[Path] = None
    project_home: str = Field(default=PROJECT_HOME, min_length=1)

    @field_validator("root_namespace")
    @classmethod
    def _check_root_namespace(cls, value: str) -> str:
        segments = value.split(".")
        if not all(segment.isidentifier() for segment in segments):
            raise ValueError(f"'{value}' is not a dotted identifier")
        return value

    def merged(self, **overrides: Any) -> "GeneratorConfig":
        """Returns a copy with every non-None override applied and validated."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return build_config(data)


def build_config(data: Dict[str, Any]) -> GeneratorConfig:
    """
    Raises:
        ConfigurationError: If the values fail validation.
    """
    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(path: str) -> GeneratorConfig:
    """
    Loads a GeneratorConfig from a YAML (.yaml/.yml) or JSON file.

    Raises:
        ConfigurationError: If the file is missing, unreadable, malformed
            or holds invalid values.
    """
    if not os.path.exists(path):
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.endswith((".yaml", ".yml")):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in configuration file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must hold a mapping")

    return build_config(data)
