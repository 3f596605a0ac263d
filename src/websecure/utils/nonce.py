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
"""Random nonces for ``'nonce-…'`` CSP sources."""

from __future__ import annotations

import base64
import secrets


def generate_nonce(size: int = 16) -> str:
    """Return *size* random bytes, base64 encoded."""
    if size <= 0:
        raise ValueError("Nonce size must be positive")
    return base64.b64encode(secrets.token_bytes(size)).decode("ascii")


def nonce_source(nonce: str) -> str:
    """Format *nonce* as a CSP source expression: ``'nonce-<value>'``."""
    return f"'nonce-{nonce}'"
