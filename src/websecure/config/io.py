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
"""Import and export of security configurations as JSON, YAML or TOML."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml  # type: ignore[import-untyped]

from websecure.config.model import SecurityConfig
from websecure.core.config import read_data_file
from websecure.kernel.exceptions import ConfigurationException

logger = structlog.get_logger("websecure.config")

EXPORT_FORMATS = ("json", "yaml")


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Read a partial security configuration from *path*.

    Accepts a bare configuration (``{"hsts": {...}}``) or a settings file
    whose ``websecure.headers`` section holds it.

    Raises:
        ConfigurationException: Missing file, unsupported suffix or bad content.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationException(
            f"Configuration file '{path}' does not exist",
            code="CONFIG_MISSING",
            context={"path": str(path)},
        )
    data = read_data_file(path)
    section = data.get("websecure")
    if isinstance(section, Mapping):
        data = dict(section.get("headers") or {})
    logger.debug("config_file_loaded", path=str(path), features=list(data))
    return data


def dump_config(config: SecurityConfig | Mapping[str, Any], fmt: str = "json") -> str:
    """Serialize *config* in camelCase form as ``json`` or ``yaml``."""
    data = config.to_dict() if isinstance(config, SecurityConfig) else dict(config)
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ConfigurationException(
        f"Unsupported export format '{fmt}'. Use one of: {', '.join(EXPORT_FORMATS)}",
        code="CONFIG_FORMAT",
    )
