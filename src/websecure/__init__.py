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
"""websecure: security response headers for ASGI applications."""

__version__ = "1.0.0"

from websecure.config.defaults import DEFAULT_CONFIG  # noqa: E402
from websecure.config.merge import merge_config  # noqa: E402
from websecure.config.model import SecurityConfig  # noqa: E402
from websecure.headers.synthesizer import synthesize_headers  # noqa: E402
from websecure.utils.cookies import apply_cookie_defaults  # noqa: E402
from websecure.utils.nonce import generate_nonce  # noqa: E402
from websecure.utils.sanitize import sanitize_input  # noqa: E402
from websecure.web.adapters.starlette.security_headers import (  # noqa: E402
    SecurityHeadersMiddleware,
    create_secure_middleware,
)

__all__ = [
    "DEFAULT_CONFIG",
    "SecurityConfig",
    "SecurityHeadersMiddleware",
    "__version__",
    "apply_cookie_defaults",
    "create_secure_middleware",
    "generate_nonce",
    "merge_config",
    "sanitize_input",
    "synthesize_headers",
]
