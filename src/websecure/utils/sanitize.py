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
"""HTML entity escaping for untrusted input."""

from __future__ import annotations

from typing import Any

from websecure.kernel.exceptions import InvalidInputException

# Applied in order; "&" must come first or later entities would be re-escaped.
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
    ("/", "&#x2F;"),
)


def sanitize_input(value: Any) -> str:
    """Escape ``& < > " ' /`` as HTML entities.

    Raises:
        InvalidInputException: If *value* is not a ``str``.
    """
    if not isinstance(value, str):
        raise InvalidInputException(
            f"Input must be a string, got {type(value).__name__}",
            code="INPUT_TYPE",
        )
    for char, entity in _ESCAPES:
        value = value.replace(char, entity)
    return value
