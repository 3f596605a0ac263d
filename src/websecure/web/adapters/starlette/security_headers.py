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
"""Security headers middleware for Starlette: pure ASGI."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from starlette.datastructures import MutableHeaders
from starlette.middleware import Middleware
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from websecure.config.defaults import DEFAULT_CONFIG
from websecure.config.merge import merge_config
from websecure.config.model import SecurityConfig
from websecure.headers.synthesizer import synthesize_headers

logger = structlog.get_logger("websecure.web")

SECURE_SCHEMES = frozenset({"https", "wss"})


def resolve_config(config: SecurityConfig | Mapping[str, Any] | None) -> SecurityConfig:
    """A full config is used as is; a partial mapping is merged over the defaults."""
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, SecurityConfig):
        return config
    return merge_config(DEFAULT_CONFIG, config)


class SecurityHeadersMiddleware:
    """Adds the configured security headers to every HTTP response.

    The configuration is resolved once at construction. Both header sets
    (HTTPS and plain HTTP) are computed up front since they only differ in
    transport-gated headers; each response picks one by ``scope["scheme"]``.
    Behind a TLS-terminating proxy the server must rewrite the scheme
    (e.g. uvicorn's ``--proxy-headers``) for HSTS to be sent.
    """

    def __init__(
        self,
        app: ASGIApp,
        config: SecurityConfig | Mapping[str, Any] | None = None,
    ) -> None:
        self.app = app
        self.config = resolve_config(config)
        self._secure_headers = synthesize_headers(self.config, is_secure_transport=True)
        self._plain_headers = synthesize_headers(self.config, is_secure_transport=False)
        logger.info("security_headers_configured", headers=list(self._secure_headers))

    def headers_for(self, scheme: str) -> dict[str, str]:
        return self._secure_headers if scheme in SECURE_SCHEMES else self._plain_headers

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        security_headers = self.headers_for(scope.get("scheme", "http"))

        async def send_with_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in security_headers.items():
                    headers[name] = value
            await send(message)

        await self.app(scope, receive, send_with_headers)


def create_secure_middleware(config: SecurityConfig | Mapping[str, Any] | None = None) -> Middleware:
    """Build a ``Middleware`` entry for ``Starlette(middleware=[...])``.

    Usage:
        app = Starlette(routes=routes, middleware=[create_secure_middleware({"hsts": {"maxAge": 63072000}})])
    """
    return Middleware(SecurityHeadersMiddleware, config=resolve_config(config))
