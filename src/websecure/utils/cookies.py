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
"""Secure defaults for cookie attributes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def apply_cookie_defaults(options: Mapping[str, Any] | None = None, *, is_production: bool) -> dict[str, Any]:
    """Return cookie options with secure defaults under the caller's values.

    Keys use Starlette's ``Response.set_cookie`` keyword names, so the result
    can be passed straight through::

        response.set_cookie("sid", token, **apply_cookie_defaults({"max_age": 3600}, is_production=True))

    Defaults are ``httponly=True``, ``secure=is_production`` and
    ``samesite="strict"``. Every key in *options* wins.
    """
    return {
        "httponly": True,
        "secure": is_production,
        "samesite": "strict",
        **(options or {}),
    }
