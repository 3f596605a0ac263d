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
"""Tests for the websecure exception hierarchy."""

from websecure.kernel.exceptions import (
    CodeGenerationException,
    ConfigurationException,
    InvalidInputException,
    TemplateNotFoundException,
    WebSecureException,
)


class TestWebSecureException:
    def test_basic_creation(self):
        exc = WebSecureException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = WebSecureException("bad config", code="CONFIG_SHAPE", context={"feature": "hsts"})
        assert exc.code == "CONFIG_SHAPE"
        assert exc.context["feature"] == "hsts"

    def test_context_not_shared_between_instances(self):
        exc = WebSecureException("a")
        exc.context["key"] = "value"
        assert WebSecureException("b").context == {}


class TestExceptionHierarchy:
    def test_configuration_is_websecure(self):
        assert issubclass(ConfigurationException, WebSecureException)

    def test_template_not_found_is_configuration(self):
        assert issubclass(TemplateNotFoundException, ConfigurationException)

    def test_invalid_input_is_type_error(self):
        assert issubclass(InvalidInputException, WebSecureException)
        assert issubclass(InvalidInputException, TypeError)

    def test_code_generation_is_websecure(self):
        assert issubclass(CodeGenerationException, WebSecureException)
