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
"""Built-in default security configuration."""

from __future__ import annotations

from websecure.config.model import (
    ContentSecurityPolicy,
    CrossOriginEmbedderPolicy,
    CrossOriginOpenerPolicy,
    CrossOriginResourcePolicy,
    EmbedderPolicy,
    ExpectCt,
    FrameOption,
    Hsts,
    OpenerPolicy,
    PermissionsPolicy,
    ReferrerPolicy,
    ReferrerPolicyToken,
    ResourcePolicy,
    SameSite,
    SecureCookies,
    SecurityConfig,
    XContentTypeOptions,
    XFrameOptions,
    XssMode,
    XssProtection,
)

DEFAULT_HSTS_MAX_AGE = 31536000  # 1 year
DEFAULT_EXPECT_CT_MAX_AGE = 86400  # 24 hours

DEFAULT_CONFIG = SecurityConfig(
    content_security_policy=ContentSecurityPolicy(
        enabled=True,
        directives={
            "defaultSrc": ["'self'"],
            "scriptSrc": ["'self'", "'unsafe-inline'"],
            "styleSrc": ["'self'", "'unsafe-inline'"],
            "imgSrc": ["'self'", "data:", "https:"],
            "connectSrc": ["'self'"],
            "fontSrc": ["'self'", "https:", "data:"],
            "objectSrc": ["'none'"],
            "mediaSrc": ["'self'"],
            "frameSrc": ["'none'"],
            "childSrc": ["'self'"],
            "workerSrc": ["'self'"],
            "manifestSrc": ["'self'"],
            "formAction": ["'self'"],
            "frameAncestors": ["'none'"],
            "baseUri": ["'self'"],
            "upgradeInsecureRequests": True,
        },
        report_only=False,
    ),
    x_frame_options=XFrameOptions(enabled=True, option=FrameOption.DENY),
    secure_cookies=SecureCookies(enabled=True, http_only=True, secure=True, same_site=SameSite.STRICT),
    referrer_policy=ReferrerPolicy(enabled=True, policy=ReferrerPolicyToken.STRICT_ORIGIN_WHEN_CROSS_ORIGIN),
    permissions_policy=PermissionsPolicy(
        enabled=True,
        features={
            "camera": "'none'",
            "microphone": "'none'",
            "geolocation": "'none'",
            "payment": "'none'",
            "usb": "'none'",
            "vr": "'none'",
            "magnetometer": "'none'",
            "gyroscope": "'none'",
            "speaker": "'none'",
            "vibrate": "'none'",
        },
    ),
    x_content_type_options=XContentTypeOptions(enabled=True),
    xss_protection=XssProtection(enabled=True, mode=XssMode.BLOCK),
    hsts=Hsts(enabled=True, max_age=DEFAULT_HSTS_MAX_AGE, include_sub_domains=True, preload=True),
    expect_ct=ExpectCt(enabled=False, max_age=DEFAULT_EXPECT_CT_MAX_AGE, enforce=False),
    cross_origin_embedder_policy=CrossOriginEmbedderPolicy(enabled=False, policy=EmbedderPolicy.UNSAFE_NONE),
    cross_origin_opener_policy=CrossOriginOpenerPolicy(
        enabled=False, policy=OpenerPolicy.SAME_ORIGIN_ALLOW_POPUPS
    ),
    cross_origin_resource_policy=CrossOriginResourcePolicy(enabled=False, policy=ResourcePolicy.SAME_SITE),
)
