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
"""Score a security configuration and list recommended improvements.

The score starts at 100 and each finding deducts a fixed number of points.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from websecure.config.defaults import DEFAULT_HSTS_MAX_AGE
from websecure.config.model import SameSite, SecurityConfig

UNSAFE_INLINE = "'unsafe-inline'"


class IssueLevel(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class SecurityIssue:
    level: IssueLevel
    title: str
    description: str
    fix: str
    penalty: int


@dataclass(frozen=True)
class SecurityReport:
    score: int
    issues: tuple[SecurityIssue, ...] = field(default_factory=tuple)

    @property
    def grade(self) -> str:
        return score_grade(self.score)

    @property
    def summary(self) -> str:
        if self.score >= 90:
            return "Excellent security configuration!"
        if self.score >= 70:
            return "Good security with room for improvement."
        if self.score >= 50:
            return "Basic security in place, consider improvements."
        return "Security configuration needs attention."


def score_grade(score: int) -> str:
    """Letter grade: A >= 90, B >= 80, C >= 70, D >= 60, otherwise F."""
    for threshold, grade in ((90, "A"), (80, "B"), (70, "C"), (60, "D")):
        if score >= threshold:
            return grade
    return "F"


def _enabled(sub: object | None) -> bool:
    return sub is not None and bool(getattr(sub, "enabled", False))


def _check_csp(config: SecurityConfig) -> list[SecurityIssue]:
    csp = config.content_security_policy
    if csp is None or not csp.enabled:
        return [
            SecurityIssue(
                IssueLevel.ERROR,
                "Content Security Policy Disabled",
                "CSP is one of the most important security headers for preventing XSS attacks.",
                "Enable Content Security Policy in the configuration.",
                30,
            )
        ]
    issues: list[SecurityIssue] = []
    script_src = csp.directives.get("scriptSrc")
    if isinstance(script_src, tuple) and UNSAFE_INLINE in script_src:
        issues.append(
            SecurityIssue(
                IssueLevel.WARNING,
                "Unsafe Script Sources",
                "Allowing unsafe-inline scripts reduces XSS protection.",
                "Remove unsafe-inline from script-src and use nonces or hashes instead.",
                10,
            )
        )
    style_src = csp.directives.get("styleSrc")
    if isinstance(style_src, tuple) and UNSAFE_INLINE in style_src:
        issues.append(
            SecurityIssue(
                IssueLevel.WARNING,
                "Unsafe Style Sources",
                "Allowing unsafe-inline styles can lead to CSS injection attacks.",
                "Remove unsafe-inline from style-src and use nonces or hashes for inline styles.",
                5,
            )
        )
    if csp.report_only:
        issues.append(
            SecurityIssue(
                IssueLevel.INFO,
                "CSP in Report-Only Mode",
                "CSP is currently only reporting violations, not blocking them.",
                "Disable report-only mode to actively block violations in production.",
                5,
            )
        )
    return issues


def _check_hsts(config: SecurityConfig) -> list[SecurityIssue]:
    hsts = config.hsts
    if hsts is None or not hsts.enabled:
        return [
            SecurityIssue(
                IssueLevel.ERROR,
                "HSTS Not Enabled",
                "HTTP Strict Transport Security protects against protocol downgrade attacks.",
                "Enable HSTS to force HTTPS connections.",
                20,
            )
        ]
    issues: list[SecurityIssue] = []
    if (hsts.max_age or 0) < DEFAULT_HSTS_MAX_AGE:
        issues.append(
            SecurityIssue(
                IssueLevel.WARNING,
                "Short HSTS Max Age",
                "HSTS max-age should be at least 1 year (31536000 seconds).",
                "Increase HSTS max-age to 31536000 or higher.",
                5,
            )
        )
    if not hsts.include_sub_domains:
        issues.append(
            SecurityIssue(
                IssueLevel.INFO,
                "HSTS Subdomains Not Included",
                "Consider including subdomains in HSTS protection.",
                "Enable includeSubDomains for comprehensive protection.",
                3,
            )
        )
    return issues


def _check_cookies(config: SecurityConfig) -> list[SecurityIssue]:
    cookies = config.secure_cookies
    if cookies is None or not cookies.enabled:
        return [
            SecurityIssue(
                IssueLevel.WARNING,
                "Secure Cookie Defaults Not Applied",
                "Cookies should have secure attributes set by default.",
                "Enable secure cookie defaults.",
                10,
            )
        ]
    issues: list[SecurityIssue] = []
    if not cookies.http_only:
        issues.append(
            SecurityIssue(
                IssueLevel.WARNING,
                "Cookies Not HttpOnly",
                "HttpOnly cookies are not accessible via JavaScript, reducing XSS risks.",
                "Enable httpOnly for cookies.",
                5,
            )
        )
    if cookies.same_site not in (SameSite.STRICT, SameSite.LAX):
        issues.append(
            SecurityIssue(
                IssueLevel.INFO,
                "SameSite Cookie Attribute",
                "SameSite attribute helps prevent CSRF attacks.",
                "Set sameSite to Strict or Lax depending on your needs.",
                3,
            )
        )
    return issues


def analyze_config(config: SecurityConfig) -> SecurityReport:
    """Return the score, grade and findings for *config*."""
    issues: list[SecurityIssue] = []
    issues += _check_csp(config)
    issues += _check_hsts(config)

    if not _enabled(config.x_frame_options):
        issues.append(
            SecurityIssue(
                IssueLevel.WARNING,
                "Clickjacking Protection Disabled",
                "X-Frame-Options protects against clickjacking attacks.",
                "Enable X-Frame-Options with DENY or SAMEORIGIN.",
                15,
            )
        )

    issues += _check_cookies(config)

    if not _enabled(config.xss_protection):
        issues.append(
            SecurityIssue(
                IssueLevel.INFO,
                "XSS Protection Disabled",
                "X-XSS-Protection provides additional XSS filtering in older browsers.",
                "Enable XSS Protection for legacy browser support.",
                5,
            )
        )
    if not _enabled(config.x_content_type_options):
        issues.append(
            SecurityIssue(
                IssueLevel.WARNING,
                "MIME Sniffing Protection Disabled",
                "X-Content-Type-Options prevents MIME-sniffing attacks.",
                "Enable X-Content-Type-Options.",
                10,
            )
        )

    score = max(0, 100 - sum(issue.penalty for issue in issues))
    return SecurityReport(score=score, issues=tuple(issues))
