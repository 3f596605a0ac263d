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
"""Built-in presets (strict, moderate) and industry templates.

The catalog ships as ``websecure/resources/templates.yaml``. Every entry's
``config`` is a partial override meant to be merged over the defaults.
"""

from __future__ import annotations

import copy
import importlib.resources
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

import yaml  # type: ignore[import-untyped]

from websecure.kernel.exceptions import TemplateNotFoundException


@dataclass(frozen=True)
class SecurityTemplate:
    """A named partial configuration from the built-in catalog."""

    key: str
    name: str
    description: str
    use_case: str
    config: dict[str, Any] = field(default_factory=dict)


@lru_cache(maxsize=1)
def _load_catalog() -> dict[str, Any]:
    catalog_file = importlib.resources.files("websecure.resources").joinpath("templates.yaml")
    with importlib.resources.as_file(catalog_file) as p, open(p) as f:
        return yaml.safe_load(f) or {}


def _build(section: str, key: str) -> SecurityTemplate:
    entries: dict[str, Any] = _load_catalog().get(section, {})
    entry = entries.get(key.lower())
    if entry is None:
        raise TemplateNotFoundException(
            f"Unknown {section[:-1]} '{key}'. Available: {', '.join(entries)}",
            code="TEMPLATE_NOT_FOUND",
            context={"key": key, "available": list(entries)},
        )
    # callers may customize the returned config
    return SecurityTemplate(
        key=key.lower(),
        name=entry["name"],
        description=entry["description"],
        use_case=entry["use_case"],
        config=copy.deepcopy(entry["config"]),
    )


def template_names() -> list[str]:
    return list(_load_catalog().get("templates", {}))


def preset_names() -> list[str]:
    return list(_load_catalog().get("presets", {}))


def get_template(key: str) -> SecurityTemplate:
    """Return an industry template by key (case-insensitive)."""
    return _build("templates", key)


def get_preset(key: str) -> SecurityTemplate:
    """Return the ``strict`` or ``moderate`` preset."""
    return _build("presets", key)


def list_templates() -> list[SecurityTemplate]:
    return [get_template(key) for key in template_names()]


def resolve_template(key: str) -> SecurityTemplate:
    """Look *key* up among templates first, then presets."""
    if key.lower() in template_names():
        return get_template(key)
    if key.lower() in preset_names():
        return get_preset(key)
    available = template_names() + preset_names()
    raise TemplateNotFoundException(
        f"Unknown template or preset '{key}'. Available: {', '.join(available)}",
        code="TEMPLATE_NOT_FOUND",
        context={"key": key, "available": available},
    )
