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
"""Exception hierarchy for websecure.

All library exceptions inherit from WebSecureException so callers can catch
one type at the edge of their application.

Categories:
- ConfigurationException: a configuration could not be read or merged
- TemplateNotFoundException: unknown preset or template key
- InvalidInputException: a utility received an argument of the wrong type
- CodeGenerationException: middleware code could not be rendered
"""

from __future__ import annotations


class WebSecureException(Exception):
    """Base exception for all websecure errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CONFIG_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(WebSecureException):
    """A security configuration is structurally unusable."""


class TemplateNotFoundException(ConfigurationException):
    """The requested preset or template does not exist."""


class InvalidInputException(WebSecureException, TypeError):
    """A function was called with an argument of the wrong type."""


class CodeGenerationException(WebSecureException):
    """Middleware source code could not be generated."""
