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
"""Security configuration model.

A :class:`SecurityConfig` holds one optional sub-configuration per feature.
Every feature dataclass is frozen and carries an ``enabled`` flag. Each field
is tagged with the :class:`MergeStrategy` the merger applies to it: plain
replacement for scalars, key-by-key union for the CSP ``directives`` and the
Permissions-Policy ``features`` mappings.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum, StrEnum
from types import MappingProxyType
from typing import Any

from websecure.utils.naming import to_camel_case

MERGE_STRATEGY_KEY = "websecure.merge"
KEY_TRANSFORM_KEY = "websecure.key_transform"
FEATURE_TYPE_KEY = "websecure.feature"

# Directives whose value is a flag rather than a source list.
BOOLEAN_DIRECTIVES: frozenset[str] = frozenset({"upgradeInsecureRequests", "blockAllMixedContent"})


class MergeStrategy(Enum):
    """How a field of an override combines with the default value."""

    REPLACE = "replace"
    UNION = "union"


class FrameOption(StrEnum):
    DENY = "DENY"
    SAMEORIGIN = "SAMEORIGIN"


class SameSite(StrEnum):
    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"


class ReferrerPolicyToken(StrEnum):
    NO_REFERRER = "no-referrer"
    NO_REFERRER_WHEN_DOWNGRADE = "no-referrer-when-downgrade"
    ORIGIN = "origin"
    ORIGIN_WHEN_CROSS_ORIGIN = "origin-when-cross-origin"
    SAME_ORIGIN = "same-origin"
    STRICT_ORIGIN = "strict-origin"
    STRICT_ORIGIN_WHEN_CROSS_ORIGIN = "strict-origin-when-cross-origin"
    UNSAFE_URL = "unsafe-url"


class XssMode(StrEnum):
    BLOCK = "block"
    REPORT = "report"


class EmbedderPolicy(StrEnum):
    UNSAFE_NONE = "unsafe-none"
    REQUIRE_CORP = "require-corp"


class OpenerPolicy(StrEnum):
    UNSAFE_NONE = "unsafe-none"
    SAME_ORIGIN_ALLOW_POPUPS = "same-origin-allow-popups"
    SAME_ORIGIN = "same-origin"


class ResourcePolicy(StrEnum):
    SAME_SITE = "same-site"
    SAME_ORIGIN = "same-origin"
    CROSS_ORIGIN = "cross-origin"


DirectiveValue = tuple[str, ...] | bool
FeatureValue = str | tuple[str, ...]


def _identity(key: str) -> str:
    return key


def _union_field(key_transform: Callable[[str], str] = _identity) -> Any:
    return field(
        default_factory=lambda: MappingProxyType({}),
        metadata={MERGE_STRATEGY_KEY: MergeStrategy.UNION, KEY_TRANSFORM_KEY: key_transform},
    )


def merge_strategy(f: dataclasses.Field[Any]) -> MergeStrategy:
    """Return the merge strategy a dataclass field is tagged with."""
    return f.metadata.get(MERGE_STRATEGY_KEY, MergeStrategy.REPLACE)


def key_transform(f: dataclasses.Field[Any]) -> Callable[[str], str]:
    """Return the key normalizer of a union field."""
    return f.metadata.get(KEY_TRANSFORM_KEY, _identity)


def _freeze_union_fields(instance: Any) -> None:
    """Store union fields as read-only mappings, turning lists into tuples."""
    for f in dataclasses.fields(instance):
        if merge_strategy(f) is not MergeStrategy.UNION:
            continue
        normalize = key_transform(f)
        frozen: dict[str, Any] = {}
        for key, value in getattr(instance, f.name).items():
            frozen[normalize(key)] = tuple(value) if isinstance(value, (list, tuple)) else value
        object.__setattr__(instance, f.name, MappingProxyType(frozen))


def _thaw(value: Any) -> Any:
    return dict(value) if isinstance(value, MappingProxyType) else value


def _union_hash(self: Any) -> int:
    """Hash a feature whose union fields are read-only mappings."""
    return hash(tuple(
        frozenset(value.items()) if isinstance(value, Mapping) else value
        for value in (getattr(self, f.name) for f in dataclasses.fields(self))
    ))


def _union_reduce(self: Any) -> tuple[type, tuple[Any, ...]]:
    """Rebuild from plain dicts; ``mappingproxy`` objects cannot be pickled."""
    return type(self), tuple(_thaw(getattr(self, f.name)) for f in dataclasses.fields(self))


@dataclass(frozen=True)
class ContentSecurityPolicy:
    """Content-Security-Policy. Directive keys are canonical camelCase."""

    enabled: bool = False
    directives: Mapping[str, DirectiveValue] = _union_field(to_camel_case)
    report_only: bool = False
    report_uri: str | None = None

    def __post_init__(self) -> None:
        _freeze_union_fields(self)

    __hash__ = _union_hash
    __reduce__ = _union_reduce


@dataclass(frozen=True)
class XFrameOptions:
    enabled: bool = False
    option: str | None = None


@dataclass(frozen=True)
class SecureCookies:
    enabled: bool = False
    http_only: bool | None = None
    secure: bool | None = None
    same_site: str | None = None


@dataclass(frozen=True)
class ReferrerPolicy:
    enabled: bool = False
    policy: str | None = None


@dataclass(frozen=True)
class PermissionsPolicy:
    """Permissions-Policy. Feature names are kept exactly as given."""

    enabled: bool = False
    features: Mapping[str, FeatureValue] = _union_field()

    def __post_init__(self) -> None:
        _freeze_union_fields(self)

    __hash__ = _union_hash
    __reduce__ = _union_reduce


@dataclass(frozen=True)
class XContentTypeOptions:
    enabled: bool = False


@dataclass(frozen=True)
class XssProtection:
    enabled: bool = False
    mode: str | None = None
    report_uri: str | None = None


@dataclass(frozen=True)
class Hsts:
    enabled: bool = False
    max_age: int | None = None
    include_sub_domains: bool = False
    preload: bool = False


@dataclass(frozen=True)
class ExpectCt:
    enabled: bool = False
    max_age: int | None = None
    enforce: bool = False
    report_uri: str | None = None


@dataclass(frozen=True)
class CrossOriginEmbedderPolicy:
    enabled: bool = False
    policy: str | None = None


@dataclass(frozen=True)
class CrossOriginOpenerPolicy:
    enabled: bool = False
    policy: str | None = None


@dataclass(frozen=True)
class CrossOriginResourcePolicy:
    enabled: bool = False
    policy: str | None = None


def _feature(feature_type: type) -> Any:
    return field(default=None, metadata={FEATURE_TYPE_KEY: feature_type})


@dataclass(frozen=True)
class SecurityConfig:
    """Root configuration: one optional sub-configuration per feature.

    ``None`` means the feature is absent. ``SecurityConfig()`` is the empty
    configuration; :data:`websecure.config.defaults.DEFAULT_CONFIG` holds the
    built-in defaults.
    """

    content_security_policy: ContentSecurityPolicy | None = _feature(ContentSecurityPolicy)
    x_frame_options: XFrameOptions | None = _feature(XFrameOptions)
    secure_cookies: SecureCookies | None = _feature(SecureCookies)
    referrer_policy: ReferrerPolicy | None = _feature(ReferrerPolicy)
    permissions_policy: PermissionsPolicy | None = _feature(PermissionsPolicy)
    x_content_type_options: XContentTypeOptions | None = _feature(XContentTypeOptions)
    xss_protection: XssProtection | None = _feature(XssProtection)
    hsts: Hsts | None = _feature(Hsts)
    expect_ct: ExpectCt | None = _feature(ExpectCt)
    cross_origin_embedder_policy: CrossOriginEmbedderPolicy | None = _feature(CrossOriginEmbedderPolicy)
    cross_origin_opener_policy: CrossOriginOpenerPolicy | None = _feature(CrossOriginOpenerPolicy)
    cross_origin_resource_policy: CrossOriginResourcePolicy | None = _feature(CrossOriginResourcePolicy)

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(feature_name, sub_config_or_None)`` in declaration order."""
        for f in dataclasses.fields(self):
            yield f.name, getattr(self, f.name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SecurityConfig:
        """Build a configuration from a partial mapping without any defaults."""
        from websecure.config.merge import merge_config

        return merge_config(cls(), data)

    def to_dict(self, camel_case: bool = True) -> dict[str, Any]:
        """Export as plain nested dicts and lists, omitting absent values.

        With ``camel_case`` the keys match the JSON form accepted by
        :meth:`from_dict` (``contentSecurityPolicy``, ``includeSubDomains``).
        """
        result: dict[str, Any] = {}
        for name, sub in self.items():
            if sub is None:
                continue
            key = to_camel_case(name) if camel_case else name
            result[key] = _feature_to_dict(sub, camel_case)
        return result


FEATURE_TYPES: dict[str, type] = {
    f.name: f.metadata[FEATURE_TYPE_KEY] for f in dataclasses.fields(SecurityConfig)
}


def _export_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _export_value(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_export_value(v) for v in value]
    if isinstance(value, str):
        return str(value)
    return value


def _feature_to_dict(sub: Any, camel_case: bool) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for f in dataclasses.fields(sub):
        value = getattr(sub, f.name)
        if value is None:
            continue
        key = to_camel_case(f.name) if camel_case else f.name
        out[key] = _export_value(value)
    return out
