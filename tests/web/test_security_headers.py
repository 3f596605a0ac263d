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
"""Tests for SecurityHeadersMiddleware."""

from __future__ import annotations

from typing import Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route, WebSocketRoute
from starlette.testclient import TestClient
from starlette.websockets import WebSocket

from websecure.config.defaults import DEFAULT_CONFIG
from websecure.config.model import SecurityConfig
from websecure.web.adapters.starlette.security_headers import (
    SecurityHeadersMiddleware,
    create_secure_middleware,
)


async def _hello(request):  # noqa: ANN001
    return JSONResponse({"msg": "ok"})


async def _framed(request):  # noqa: ANN001
    return PlainTextResponse("framed", headers={"X-Frame-Options": "SAMEORIGIN", "X-Custom": "kept"})


async def _echo(websocket: WebSocket) -> None:
    await websocket.accept()
    await websocket.send_text("hello")
    await websocket.close()


def _make_client(
    config: SecurityConfig | dict[str, Any] | None = None,
    base_url: str = "https://testserver",
) -> TestClient:
    if config is not None:
        middleware = [Middleware(SecurityHeadersMiddleware, config=config)]
    else:
        middleware = [Middleware(SecurityHeadersMiddleware)]
    app = Starlette(
        routes=[Route("/hello", _hello), Route("/framed", _framed), WebSocketRoute("/ws", _echo)],
        middleware=middleware,
    )
    return TestClient(app, base_url=base_url)


class TestSecurityHeadersMiddleware:
    def test_default_headers_applied(self) -> None:
        resp = _make_client().get("/hello")

        assert resp.status_code == 200
        assert resp.json() == {"msg": "ok"}
        assert resp.headers["X-Frame-Options"] == "DENY"
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-XSS-Protection"] == "1; mode=block"
        assert resp.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"
        assert resp.headers["Strict-Transport-Security"] == "max-age=31536000; includeSubDomains; preload"
        assert resp.headers["Content-Security-Policy"].startswith("default-src 'self'; script-src")
        assert resp.headers["Permissions-Policy"].startswith("camera='none', microphone='none'")

    def test_plain_http_has_no_hsts(self) -> None:
        resp = _make_client(base_url="http://testserver").get("/hello")

        assert "Strict-Transport-Security" not in resp.headers
        assert resp.headers["X-Frame-Options"] == "DENY"

    def test_partial_mapping_merged_over_defaults(self) -> None:
        client = _make_client({"xFrameOptions": {"option": "SAMEORIGIN"}, "hsts": {"maxAge": 600}})
        resp = client.get("/hello")

        assert resp.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert resp.headers["Strict-Transport-Security"] == "max-age=600; includeSubDomains; preload"
        assert resp.headers["X-Content-Type-Options"] == "nosniff"

    def test_full_config_used_as_is(self) -> None:
        config = SecurityConfig.from_dict({"xFrameOptions": {"enabled": True, "option": "DENY"}})
        resp = _make_client(config).get("/hello")

        assert resp.headers["X-Frame-Options"] == "DENY"
        assert "Content-Security-Policy" not in resp.headers
        assert "Strict-Transport-Security" not in resp.headers

    def test_report_only_csp(self) -> None:
        resp = _make_client({"contentSecurityPolicy": {"reportOnly": True}}).get("/hello")

        assert "Content-Security-Policy-Report-Only" in resp.headers
        assert "Content-Security-Policy" not in resp.headers

    def test_configured_headers_replace_route_headers(self) -> None:
        resp = _make_client().get("/framed")

        assert resp.headers["X-Frame-Options"] == "DENY"
        assert resp.headers.get_list("X-Frame-Options") == ["DENY"]
        assert resp.headers["X-Custom"] == "kept"

    def test_websocket_passes_through(self) -> None:
        client = _make_client(base_url="http://testserver")
        with client.websocket_connect("/ws") as websocket:
            assert websocket.receive_text() == "hello"

    def test_not_found_response_gets_headers(self) -> None:
        resp = _make_client().get("/missing")

        assert resp.status_code == 404
        assert resp.headers["X-Content-Type-Options"] == "nosniff"


class TestHeadersFor:
    def test_secure_schemes(self) -> None:
        middleware = SecurityHeadersMiddleware(_hello, DEFAULT_CONFIG)

        assert "Strict-Transport-Security" in middleware.headers_for("https")
        assert "Strict-Transport-Security" in middleware.headers_for("wss")
        assert "Strict-Transport-Security" not in middleware.headers_for("http")

    def test_none_config_uses_defaults(self) -> None:
        assert SecurityHeadersMiddleware(_hello).config is DEFAULT_CONFIG


class TestCreateSecureMiddleware:
    def test_builds_middleware_entry(self) -> None:
        app = Starlette(
            routes=[Route("/hello", _hello)],
            middleware=[create_secure_middleware({"referrerPolicy": {"policy": "no-referrer"}})],
        )
        resp = TestClient(app, base_url="https://testserver").get("/hello")

        assert resp.headers["Referrer-Policy"] == "no-referrer"
        assert resp.headers["X-Frame-Options"] == "DENY"

    def test_defaults(self) -> None:
        entry = create_secure_middleware()

        assert entry.cls is SecurityHeadersMiddleware
        assert entry.kwargs == {"config": DEFAULT_CONFIG}
