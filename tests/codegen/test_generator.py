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
"""Tests for application code generation."""

import ast

import pytest

from websecure.codegen.generator import generate_middleware_code
from websecure.config.model import Hsts, SecurityConfig
from websecure.config.presets import get_template
from websecure.kernel.exceptions import CodeGenerationException


def _security_config_literal(code: str) -> object:
    """Evaluate the SECURITY_CONFIG assignment of a generated module."""
    for node in ast.parse(code).body:
        if isinstance(node, ast.Assign) and getattr(node.targets[0], "id", None) == "SECURITY_CONFIG":
            return ast.literal_eval(node.value)
    raise AssertionError("SECURITY_CONFIG not found")


class TestGenerateMiddlewareCode:
    def test_starlette_defaults(self):
        code = generate_middleware_code()
        assert "from websecure import create_secure_middleware" in code
        assert "middleware=[create_secure_middleware(SECURITY_CONFIG)]" in code
        assert _security_config_literal(code) == {}

    def test_fastapi(self):
        code = generate_middleware_code({"hsts": {"maxAge": 100}}, framework="fastapi")
        assert "app = FastAPI()" in code
        assert "app.add_middleware(SecurityHeadersMiddleware, config=SECURITY_CONFIG)" in code
        assert _security_config_literal(code) == {"hsts": {"maxAge": 100}}

    def test_template_config_embedded_verbatim(self):
        template = get_template("ecommerce")
        code = generate_middleware_code(template.config, title=template.name, description=template.description)
        assert _security_config_literal(code) == template.config
        assert code.startswith('"""E-commerce Platform.\n\nSecure configuration for online stores')

    def test_security_config_input(self):
        config = SecurityConfig(hsts=Hsts(enabled=True, max_age=100))
        code = generate_middleware_code(config)
        assert _security_config_literal(code) == {
            "hsts": {"enabled": True, "maxAge": 100, "includeSubDomains": False, "preload": False}
        }

    def test_title_without_description(self):
        code = generate_middleware_code({}, title="My app")
        assert code.startswith('"""My app.\n\nGenerated by websecure.')

    @pytest.mark.parametrize("framework", ["starlette", "fastapi"])
    def test_generated_module_compiles(self, framework):
        code = generate_middleware_code(get_template("healthcare").config, framework=framework)
        compile(code, "app.py", "exec")

    def test_unknown_framework(self):
        with pytest.raises(CodeGenerationException) as exc_info:
            generate_middleware_code({}, framework="django")
        assert exc_info.value.code == "CODEGEN_FRAMEWORK"
