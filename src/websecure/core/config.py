# Copyright 2026 Firefly Software Solutions Inc.
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
"""Application settings loaded from YAML/TOML/JSON files and env vars."""

from __future__ import annotations

import dataclasses
import json
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]

from websecure.kernel.exceptions import ConfigurationException

T = TypeVar("T")

ENV_PREFIX = "WEBSECURE_"

DEFAULT_FILE_NAMES = ("websecure.yaml", "websecure.yml", "websecure.toml", "websecure.json")

_CONFIG_PROPERTIES_ATTR = "__websecure_config_prefix__"


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass as bindable to a configuration prefix.

    Usage:
        @config_properties(prefix="websecure")
        @dataclass
        class WebSecureProperties:
            environment: str = "development"
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


class Config:
    """Hierarchical configuration with dot-notation access and env var overrides.

    Priority (highest wins):
    1. Environment variables (WEBSECURE_SECTION_KEY format)
    2. Configuration dict / file values
    3. Dataclass defaults
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """List of config file paths that were loaded, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the raw configuration data."""
        return dict(self._data)

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load configuration from a single YAML, TOML or JSON file.

        A missing file yields an empty configuration.
        """
        path = Path(path)
        instance = cls()
        if path.is_file():
            instance._data = read_data_file(path)
            instance._loaded_sources.append(str(path))
        return instance

    @classmethod
    def discover(cls, base_dir: str | Path = ".") -> Config:
        """Load the first ``websecure.*`` file found in *base_dir*."""
        base_dir = Path(base_dir)
        for name in DEFAULT_FILE_NAMES:
            candidate = base_dir / name
            if candidate.is_file():
                return cls.from_file(candidate)
        return cls()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first.

        ``websecure.environment`` is overridden by ``WEBSECURE_ENVIRONMENT``.
        """
        env_base = key.removeprefix("websecure.")
        env_key = ENV_PREFIX + env_base.upper().replace(".", "_").replace("-", "_")
        env_val = os.environ.get(env_key)
        if env_val is not None:
            return env_val

        current: Any = self._data
        for part in key.split("."):
            if isinstance(current, dict):
                current = current.get(part)
                if current is None:
                    return default
            else:
                return default
        return current

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get all values under a prefix as a dict."""
        current: Any = self._data
        for part in prefix.split("."):
            if isinstance(current, dict):
                current = current.get(part, {})
            else:
                return {}
        return current if isinstance(current, dict) else {}

    def bind(self, config_cls: type[T]) -> T:
        """Bind configuration to a @config_properties dataclass."""
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(config_cls):  # type: ignore[arg-type]
            value = self.get(f"{prefix}.{field.name}")
            if value is None:
                continue
            expected_type = hints.get(field.name)
            if expected_type is int and isinstance(value, str):
                value = int(value)
            elif expected_type is bool and isinstance(value, str):
                value = value.lower() in ("true", "1", "yes")
            kwargs[field.name] = value

        return config_cls(**kwargs)


def read_data_file(path: Path) -> dict[str, Any]:
    """Parse a YAML, TOML or JSON document into a dict."""
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with open(path) as f:
                data = json.load(f)
        elif suffix in (".yaml", ".yml"):
            with open(path) as f:
                data = yaml.safe_load(f)
        else:
            raise ConfigurationException(
                f"Unsupported configuration format '{suffix}'. Use .json, .yaml, .yml or .toml.",
                code="CONFIG_FORMAT",
                context={"path": str(path)},
            )
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationException(
            f"Cannot parse configuration file '{path}': {exc}",
            code="CONFIG_PARSE",
            context={"path": str(path)},
        ) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationException(
            f"Configuration file '{path}' must contain a mapping at the top level",
            code="CONFIG_SHAPE",
            context={"path": str(path)},
        )
    return data
