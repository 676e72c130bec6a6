# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Compiler configuration."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from .exceptions import ConfigurationError
from .utils.logging_utils import configure_split_stream_logging

ENV_PREFIX = "OPENAPI_SCHEMA_CHECKS_"

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def _parse_bool(raw: str, name: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise ConfigurationError(name, f"Expected a boolean, got '{raw}'")


@dataclass(frozen=True)
class CompilerConfig:
    """Options controlling how schemas are compiled."""

    root_path: str = "root"
    # Let maximum/minimum accept any real number rather than integers only.
    real_number_bounds: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            expected = bool if f.type in (bool, "bool") else str
            if not isinstance(value, expected):
                raise ConfigurationError(
                    f.name, f"Expected {expected.__name__}, got {type(value).__name__}"
                )
        if not self.root_path:
            raise ConfigurationError("root_path", "Must be a non-empty string")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError("log_level", f"Unknown log level '{self.log_level}'")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any], source: str = "config") -> "CompilerConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in options if key not in known)
        if unknown:
            raise ConfigurationError(source, f"Unknown option(s): {', '.join(unknown)}")
        return cls(**dict(options))

    @classmethod
    def from_env(cls) -> "CompilerConfig":
        """Create configuration from environment variables."""
        options: Dict[str, Any] = {}
        for f in fields(cls):
            env_name = ENV_PREFIX + f.name.upper()
            raw = os.getenv(env_name)
            if raw is None:
                continue
            if f.type in (bool, "bool"):
                options[f.name] = _parse_bool(raw, env_name)
            else:
                options[f.name] = raw
        return cls(**options)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "CompilerConfig":
        """Create configuration from a YAML mapping of option names."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(str(path), f"Unable to read config file: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(str(path), f"Invalid YAML: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(str(path), "Config file must contain a mapping")
        return cls.from_mapping(data, source=str(path))

    def set_logging(self) -> logging.Logger:
        """Setup package logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        return configure_split_stream_logging(level=level)


DEFAULT_CONFIG = CompilerConfig()
