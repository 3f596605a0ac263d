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
"""Name transforms between camelCase, snake_case and kebab-case.

All three work character by character so every future directive or field
name is handled the same way as the ones known today.
"""

from __future__ import annotations

_SEPARATORS = ("-", "_")


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def to_kebab_case(name: str) -> str:
    """Insert ``-`` before each uppercase ASCII letter and lowercase it.

    >>> to_kebab_case("frameAncestors")
    'frame-ancestors'
    """
    out: list[str] = []
    for ch in name:
        if _is_upper(ch):
            out.append("-")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def to_snake_case(name: str) -> str:
    """``includeSubDomains`` -> ``include_sub_domains``; snake input is unchanged."""
    out: list[str] = []
    for ch in name:
        if _is_upper(ch):
            out.append("_")
            out.append(ch.lower())
        elif ch == "-":
            out.append("_")
        else:
            out.append(ch)
    return "".join(out)


def to_camel_case(name: str) -> str:
    """``script-src`` / ``script_src`` -> ``scriptSrc``; camelCase input is unchanged."""
    out: list[str] = []
    upper_next = False
    for ch in name:
        if ch in _SEPARATORS:
            upper_next = bool(out)
            continue
        if upper_next:
            out.append(ch.upper())
            upper_next = False
        else:
            out.append(ch)
    return "".join(out)
