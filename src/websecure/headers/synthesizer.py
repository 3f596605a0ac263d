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
"""Serialize a merged :class:`SecurityConfig` into response header values.

Each builder returns ``None`` when its header must be omitted. Malformed
values are skipped rather than raised, so one bad directive never prevents
the remaining headers from being produced.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from websecure.config.defaults import DEFAULT_EXPECT_CT_MAX_AGE, DEFAULT_HSTS_MAX_AGE
from websecure.config.model import (
    ContentSecurityPolicy,
    EmbedderPolicy,
    ExpectCt,
    Hsts,
    OpenerPolicy,
    PermissionsPolicy,
    ResourcePolicy,
    SecurityConfig,
    XssMode,
    XssProtection,
)
from websecure.utils.naming import to_kebab_case

logger = structlog.get_logger("websecure.headers")

CONTENT_SECURITY_POLICY = "Content-Security-Policy"
CONTENT_SECURITY_POLICY_REPORT_ONLY = "Content-Security-Policy-Report-Only"
X_FRAME_OPTIONS = "X-Frame-Options"
REFERRER_POLICY = "Referrer-Policy"
PERMISSIONS_POLICY = "Permissions-Policy"
X_CONTENT_TYPE_OPTIONS = "X-Content-Type-Options"
X_XSS_PROTECTION = "X-XSS-Protection"
STRICT_TRANSPORT_SECURITY = "Strict-Transport-Security"
EXPECT_CT = "Expect-CT"
CROSS_ORIGIN_EMBEDDER_POLICY = "Cross-Origin-Embedder-Policy"
CROSS_ORIGIN_OPENER_POLICY = "Cross-Origin-Opener-Policy"
CROSS_ORIGIN_RESOURCE_POLICY = "Cross-Origin-Resource-Policy"

# Flag directives rendered as a bare name when true.
_FLAG_DIRECTIVES = {
    "upgradeInsecureRequests": "upgrade-insecure-requests",
    "blockAllMixedContent": "block-all-mixed-content",
}


def _is_source_list(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, str)
        and len(value) > 0
        and all(isinstance(item, str) for item in value)
    )


def build_content_security_policy(csp: ContentSecurityPolicy | None) -> tuple[str, str] | None:
    """Return ``(header_name, value)`` for the CSP, or ``None``.

    Directives are emitted in mapping order as ``name v1 v2`` and joined with
    ``"; "``. An enabled policy with no usable directive emits nothing.
    """
    if csp is None or not csp.enabled:
        return None

    clauses: list[str] = []
    for key, value in csp.directives.items():
        if key in _FLAG_DIRECTIVES and value is True:
            clauses.append(_FLAG_DIRECTIVES[key])
        elif _is_source_list(value):
            clauses.append(f"{to_kebab_case(key)} {' '.join(value)}")
        else:
            logger.debug("csp_directive_skipped", directive=key)

    if not clauses:
        return None
    name = CONTENT_SECURITY_POLICY_REPORT_ONLY if csp.report_only else CONTENT_SECURITY_POLICY
    return name, "; ".join(clauses)


def build_permissions_policy(policy: PermissionsPolicy | None) -> str | None:
    """``feature=(v1 v2)`` for lists, ``feature=value`` for scalars, joined by ``", "``."""
    if policy is None or not policy.enabled or not policy.features:
        return None

    tokens: list[str] = []
    for feature, value in policy.features.items():
        if isinstance(value, bool):
            tokens.append(f"{feature}={str(value).lower()}")
        elif isinstance(value, (str, int, float)):
            tokens.append(f"{feature}={value}")
        elif isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
            tokens.append(f"{feature}=({' '.join(value)})")
        else:
            logger.debug("permissions_feature_skipped", feature=feature)

    value = ", ".join(token for token in tokens if token)
    return value or None


def build_xss_protection(xss: XssProtection | None) -> str | None:
    if xss is None or not xss.enabled:
        return None
    mode = xss.mode or XssMode.BLOCK
    value = "1"
    if mode == XssMode.BLOCK:
        value += "; mode=block"
    elif mode == XssMode.REPORT and xss.report_uri:
        value += f"; report={xss.report_uri}"
    return value


def build_hsts(hsts: Hsts | None, is_secure_transport: bool) -> str | None:
    """HSTS value; never produced for plain-HTTP requests."""
    if hsts is None or not hsts.enabled or not is_secure_transport:
        return None
    value = f"max-age={hsts.max_age or DEFAULT_HSTS_MAX_AGE}"
    if hsts.include_sub_domains:
        value += "; includeSubDomains"
    if hsts.preload:
        value += "; preload"
    return value


def build_expect_ct(expect_ct: ExpectCt | None) -> str | None:
    if expect_ct is None or not expect_ct.enabled:
        return None
    value = f"max-age={expect_ct.max_age or DEFAULT_EXPECT_CT_MAX_AGE}"
    if expect_ct.enforce:
        value += ", enforce"
    if expect_ct.report_uri:
        value += f', report-uri="{expect_ct.report_uri}"'
    return value


def _policy(sub: Any, default: str) -> str | None:
    if sub is None or not sub.enabled:
        return None
    return str(sub.policy or default)


def synthesize_headers(config: SecurityConfig, is_secure_transport: bool) -> dict[str, str]:
    """Produce the ordered ``header-name -> value`` mapping for one response.

    Pure function of its arguments: *config* is never modified and the
    result depends on the request only through *is_secure_transport*.
    """
    headers: dict[str, str] = {}

    csp = build_content_security_policy(config.content_security_policy)
    if csp is not None:
        name, value = csp
        headers[name] = value

    xfo = config.x_frame_options
    if xfo is not None and xfo.enabled and xfo.option:
        headers[X_FRAME_OPTIONS] = str(xfo.option)

    referrer = config.referrer_policy
    if referrer is not None and referrer.enabled and referrer.policy:
        headers[REFERRER_POLICY] = str(referrer.policy)

    permissions = build_permissions_policy(config.permissions_policy)
    if permissions is not None:
        headers[PERMISSIONS_POLICY] = permissions

    nosniff = config.x_content_type_options
    if nosniff is not None and nosniff.enabled:
        headers[X_CONTENT_TYPE_OPTIONS] = "nosniff"

    xss = build_xss_protection(config.xss_protection)
    if xss is not None:
        headers[X_XSS_PROTECTION] = xss

    hsts = build_hsts(config.hsts, is_secure_transport)
    if hsts is not None:
        headers[STRICT_TRANSPORT_SECURITY] = hsts

    expect_ct = build_expect_ct(config.expect_ct)
    if expect_ct is not None:
        headers[EXPECT_CT] = expect_ct

    for header, sub, default in (
        (CROSS_ORIGIN_EMBEDDER_POLICY, config.cross_origin_embedder_policy, EmbedderPolicy.UNSAFE_NONE),
        (CROSS_ORIGIN_OPENER_POLICY, config.cross_origin_opener_policy, OpenerPolicy.SAME_ORIGIN_ALLOW_POPUPS),
        (CROSS_ORIGIN_RESOURCE_POLICY, config.cross_origin_resource_policy, ResourcePolicy.SAME_SITE),
    ):
        policy = _policy(sub, default)
        if policy is not None:
            headers[header] = policy

    return headers
