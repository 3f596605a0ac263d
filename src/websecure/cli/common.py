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
"""Helpers shared by the CLI commands: config resolution, customization, file output."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from websecure.cli.console import console
from websecure.config.defaults import DEFAULT_CONFIG
from websecure.config.io import load_config_file
from websecure.config.merge import merge_layers
from websecure.config.model import SecurityConfig
from websecure.config.presets import resolve_template
from websecure.config.properties import build_security_config
from websecure.core.config import Config

FRAMEWORKS = ("starlette", "fastapi")


def resolve_cli_config(config_path: str | None, template: str | None) -> SecurityConfig:
    """Build the effective config for a command.

    With neither option the project settings (``websecure.yaml`` and
    environment) are used; otherwise defaults <- template <- config file.
    """
    if config_path is None and template is None:
        return build_security_config(Config.discover())
    template_config = resolve_template(template).config if template else None
    file_config = load_config_file(config_path) if config_path else None
    return merge_layers(DEFAULT_CONFIG, template_config, file_config)


def customize_overrides(
    overrides: Mapping[str, Any],
    *,
    report_only: bool = False,
    connect_src: Iterable[str] = (),
    include_sub_domains: bool | None = None,
) -> dict[str, Any]:
    """Apply the common tweaks offered by ``template`` and the wizard.

    Returns a new camelCase override mapping; *overrides* is left untouched.
    """
    result: dict[str, Any] = copy.deepcopy(dict(overrides))
    extra_sources = [source.strip() for source in connect_src if source.strip()]

    if report_only or extra_sources:
        csp = result.setdefault("contentSecurityPolicy", {})
        if report_only:
            csp["reportOnly"] = True
        if extra_sources:
            directives = csp.setdefault("directives", {})
            current = list(directives.get("connectSrc") or _default_connect_src())
            directives["connectSrc"] = current + [s for s in extra_sources if s not in current]

    if include_sub_domains is not None:
        result.setdefault("hsts", {})["includeSubDomains"] = include_sub_domains
    return result


def _default_connect_src() -> tuple[str, ...]:
    csp = DEFAULT_CONFIG.content_security_policy
    if csp is None:
        return ("'self'",)
    return tuple(csp.directives.get("connectSrc", ("'self'",)))


def write_output(path: str | Path, content: str, *, force: bool = False) -> Path:
    """Write *content* to *path*, refusing to replace an existing file unless *force*."""
    target = Path(path)
    if target.exists() and not force:
        console.print(f"[error]'{target}' already exists.[/error] Use --force to overwrite it.")
        raise SystemExit(1)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content)
    return target
