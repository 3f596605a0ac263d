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
"""Merge a partial override into a base :class:`SecurityConfig`.

Rules, applied per feature:

1. A feature the override omits keeps the base sub-config verbatim.
2. ``enabled`` resolves to the override's value, else the base's, else ``False``.
3. Fields tagged ``REPLACE`` are replaced when the override names them.
4. Fields tagged ``UNION`` (CSP ``directives``, Permissions-Policy ``features``)
   merge key by key, the override winning on collisions.

Merging never mutates its inputs.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

import structlog

from websecure.config.model import (
    FEATURE_TYPES,
    MergeStrategy,
    SecurityConfig,
    key_transform,
    merge_strategy,
)
from websecure.kernel.exceptions import ConfigurationException
from websecure.utils.naming import to_snake_case

logger = structlog.get_logger("websecure.config")

PartialConfig = Mapping[str, Any]


def merge_config(
    defaults: SecurityConfig,
    override: PartialConfig | SecurityConfig | None,
) -> SecurityConfig:
    """Merge *override* over *defaults* and return a new configuration.

    Keys may be camelCase (``contentSecurityPolicy``, ``maxAge``) or snake_case
    (``content_security_policy``, ``max_age``). ``merge_config(d, {}) == d``.

    Raises:
        ConfigurationException: If *override*, or one of its feature entries,
            is not a mapping.
    """
    if override is None:
        return defaults
    if isinstance(override, SecurityConfig):
        override = _as_partial(override)
    if not isinstance(override, Mapping):
        raise ConfigurationException(
            f"Security configuration must be a mapping, got {type(override).__name__}",
            code="CONFIG_SHAPE",
        )

    changes: dict[str, Any] = {}
    for raw_key, value in override.items():
        name = to_snake_case(str(raw_key))
        feature_type = FEATURE_TYPES.get(name)
        if feature_type is None:
            logger.warning("unknown_feature_ignored", feature=raw_key)
            continue
        if value is None:
            continue
        if not isinstance(value, Mapping):
            raise ConfigurationException(
                f"Configuration for '{raw_key}' must be a mapping, got {type(value).__name__}",
                code="CONFIG_SHAPE",
                context={"feature": raw_key},
            )
        changes[name] = _merge_feature(feature_type, getattr(defaults, name), value)

    if not changes:
        return defaults
    logger.debug("config_merged", features=list(changes))
    return dataclasses.replace(defaults, **changes)


def merge_layers(defaults: SecurityConfig, *overrides: PartialConfig | SecurityConfig | None) -> SecurityConfig:
    """Apply several overrides left to right (e.g. defaults, template, user)."""
    merged = defaults
    for override in overrides:
        merged = merge_config(merged, override)
    return merged


def _merge_feature(feature_type: type, base: Any, override: Mapping[str, Any]) -> Any:
    fields = {f.name: f for f in dataclasses.fields(feature_type)}

    partial: dict[str, Any] = {}
    for raw_key, value in override.items():
        name = to_snake_case(str(raw_key))
        if name not in fields:
            logger.warning("unknown_field_ignored", feature=feature_type.__name__, field=raw_key)
            continue
        partial[name] = value

    enabled = partial.get("enabled")
    if enabled is None:
        enabled = base.enabled if base is not None else False

    kwargs: dict[str, Any] = {"enabled": enabled}
    for name, f in fields.items():
        if name == "enabled":
            continue
        base_value = getattr(base, name) if base is not None else None
        if name not in partial:
            if base is not None:
                kwargs[name] = base_value
            continue
        if merge_strategy(f) is MergeStrategy.UNION:
            kwargs[name] = _union(f, base_value, partial[name], feature_type)
        else:
            kwargs[name] = partial[name]

    return feature_type(**kwargs)


def _union(f: dataclasses.Field[Any], base: Mapping[str, Any] | None, incoming: Any, feature_type: type) -> dict:
    merged: dict[str, Any] = dict(base) if base is not None else {}
    if incoming is None:
        return merged
    if not isinstance(incoming, Mapping):
        raise ConfigurationException(
            f"'{f.name}' of {feature_type.__name__} must be a mapping, got {type(incoming).__name__}",
            code="CONFIG_SHAPE",
            context={"field": f.name},
        )
    normalize = key_transform(f)
    for key, value in incoming.items():
        merged[normalize(str(key))] = value
    return merged


def _as_partial(config: SecurityConfig) -> dict[str, dict[str, Any]]:
    partial: dict[str, dict[str, Any]] = {}
    for name, sub in config.items():
        if sub is None:
            continue
        partial[name] = {
            f.name: getattr(sub, f.name)
            for f in dataclasses.fields(sub)
            if getattr(sub, f.name) is not None
        }
    return partial
