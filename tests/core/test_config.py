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
"""Tests for the settings Config class."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from websecure.core.config import Config, config_properties
from websecure.kernel.exceptions import ConfigurationException


@config_properties(prefix="websecure.report")
@dataclass
class ReportProperties:
    min_score: int = 70
    strict: bool = False
    title: str = "report"


class TestConfigGet:
    def test_dot_notation(self):
        config = Config({"websecure": {"logging": {"format": "json"}}})
        assert config.get("websecure.logging.format") == "json"

    def test_missing_key_returns_default(self):
        assert Config({}).get("websecure.template", "strict") == "strict"

    def test_env_var_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WEBSECURE_LOGGING_FORMAT", "console")
        config = Config({"websecure": {"logging": {"format": "json"}}})
        assert config.get("websecure.logging.format") == "console"

    def test_get_section(self):
        config = Config({"websecure": {"logging": {"level": {"root": "INFO", "websecure.config": "DEBUG"}}}})
        assert config.get_section("websecure.logging.level") == {"root": "INFO", "websecure.config": "DEBUG"}

    def test_get_section_missing(self):
        assert Config({}).get_section("websecure.logging.level") == {}


class TestConfigBind:
    def test_defaults(self):
        props = Config({}).bind(ReportProperties)
        assert props == ReportProperties()

    def test_values(self):
        config = Config({"websecure": {"report": {"min_score": 90, "title": "ci"}}})
        props = config.bind(ReportProperties)
        assert props.min_score == 90
        assert props.title == "ci"

    def test_env_values_are_coerced(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WEBSECURE_REPORT_MIN_SCORE", "80")
        monkeypatch.setenv("WEBSECURE_REPORT_STRICT", "true")
        props = Config({}).bind(ReportProperties)
        assert props.min_score == 80
        assert props.strict is True

    def test_undecorated_class_raises(self):
        @dataclass
        class Plain:
            value: int = 0

        with pytest.raises(ValueError):
            Config({}).bind(Plain)


class TestConfigFiles:
    def test_from_yaml_file(self, tmp_path: Path):
        path = tmp_path / "websecure.yaml"
        path.write_text("websecure:\n  environment: production\n")
        config = Config.from_file(path)
        assert config.get("websecure.environment") == "production"
        assert config.loaded_sources == [str(path)]

    def test_from_toml_file(self, tmp_path: Path):
        path = tmp_path / "websecure.toml"
        path.write_text('[websecure]\ntemplate = "fintech"\n')
        assert Config.from_file(path).get("websecure.template") == "fintech"

    def test_missing_file_is_empty(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "websecure.yaml")
        assert config.to_dict() == {}
        assert config.loaded_sources == []

    def test_discover_prefers_yaml(self, tmp_path: Path):
        (tmp_path / "websecure.yaml").write_text("websecure:\n  template: blog\n")
        (tmp_path / "websecure.json").write_text('{"websecure": {"template": "api"}}')
        assert Config.discover(tmp_path).get("websecure.template") == "blog"

    def test_discover_nothing(self, tmp_path: Path):
        assert Config.discover(tmp_path).to_dict() == {}

    def test_malformed_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "websecure.yaml"
        path.write_text("websecure: [unclosed\n")
        with pytest.raises(ConfigurationException):
            Config.from_file(path)
