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
"""Tests for WebSecureProperties and build_security_config."""

import pytest

from websecure.config.defaults import DEFAULT_CONFIG
from websecure.config.properties import WebSecureProperties, build_security_config
from websecure.core.config import Config
from websecure.kernel.exceptions import TemplateNotFoundException


class TestWebSecureProperties:
    def test_defaults(self):
        props = Config({}).bind(WebSecureProperties)
        assert props.environment == "development"
        assert props.template is None
        assert props.headers == {}
        assert props.is_production is False

    def test_bound_from_config(self):
        config = Config({"websecure": {"environment": "Production", "template": "saas"}})
        props = config.bind(WebSecureProperties)
        assert props.template == "saas"
        assert props.is_production is True

    def test_environment_from_env_var(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WEBSECURE_ENVIRONMENT", "production")
        assert Config({}).bind(WebSecureProperties).is_production is True


class TestBuildSecurityConfig:
    def test_empty_settings_give_defaults(self):
        assert build_security_config(Config({})) == DEFAULT_CONFIG

    def test_template_then_headers(self):
        config = Config({
            "websecure": {
                "template": "strict",
                "headers": {"hsts": {"maxAge": 100}, "contentSecurityPolicy": {"reportOnly": True}},
            }
        })
        merged = build_security_config(config)
        assert merged.hsts is not None
        assert merged.hsts.max_age == 100
        assert merged.hsts.preload is True
        csp = merged.content_security_policy
        assert csp is not None
        assert csp.report_only is True
        assert csp.directives["scriptSrc"] == ("'self'",)

    def test_unknown_template_raises(self):
        with pytest.raises(TemplateNotFoundException):
            build_security_config(Config({"websecure": {"template": "unknown"}}))
