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
"""websecure headers: wire-format synthesis of security response headers."""

from websecure.headers.synthesizer import (
    build_content_security_policy,
    build_expect_ct,
    build_hsts,
    build_permissions_policy,
    build_xss_protection,
    synthesize_headers,
)

__all__ = [
    "build_content_security_policy",
    "build_expect_ct",
    "build_hsts",
    "build_permissions_policy",
    "build_xss_protection",
    "synthesize_headers",
]
