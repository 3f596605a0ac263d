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
"""Jinja2-based renderer for ready-to-run secured application modules."""

from __future__ import annotations

import pprint
from collections.abc import Mapping
from typing import Any

import structlog
from jinja2 import Environment, PackageLoader

from websecure.config.model import SecurityConfig
from websecure.kernel.exceptions import CodeGenerationException

logger = structlog.get_logger("websecure.codegen")

# Framework -> template file
FRAMEWORK_TEMPLATES: dict[str, str] = {
    "starlette": "starlette_app.py.j2",
    "fastapi": "fastapi_app.py.j2",
}


def _get_env() -> Environment:
    """Create the Jinja2 template environment."""
    return Environment(
        loader=PackageLoader("websecure.codegen", "templates"),
        keep_trailing_newline=True,
        lstrip_blocks=True,
        trim_blocks=True,
    )


def _config_literal(overrides: SecurityConfig | Mapping[str, Any] | None) -> str:
    if overrides is None:
        return "{}"
    if isinstance(overrides, SecurityConfig):
        data: Any = overrides.to_dict()
    else:
        data = dict(overrides)
    return pprint.pformat(data, indent=4, width=88, sort_dicts=False)


def generate_middleware_code(
    overrides: SecurityConfig | Mapping[str, Any] | None = None,
    framework: str = "starlette",
    title: str | None = None,
    description: str | None = None,
) -> str:
    """Render a Python module wiring ``SecurityHeadersMiddleware`` into an app.

    Args:
        overrides: Partial configuration embedded as the middleware config.
        framework: ``"starlette"`` or ``"fastapi"``.
        title: Optional heading for the module docstring (e.g. a template name).
        description: Optional second line for the module docstring.
    """
    template_name = FRAMEWORK_TEMPLATES.get(framework)
    if template_name is None:
        raise CodeGenerationException(
            f"Unsupported framework '{framework}'",
            code="CODEGEN_FRAMEWORK",
            context={"framework": framework, "available": sorted(FRAMEWORK_TEMPLATES)},
        )
    context = {
        "title": title or "Secured application",
        "description": description,
        "config_literal": _config_literal(overrides),
    }
    rendered = _get_env().get_template(template_name).render(context)
    logger.debug("middleware_code_generated", framework=framework, title=context["title"])
    return rendered
