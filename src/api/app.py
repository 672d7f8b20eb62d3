"""Inbound HTTP API (FastAPI).

Routes:
- GET /api/leetcode/search?name=...        -> search envelope
- GET /api/leetcode/profile/{username}     -> raw upstream profile body
- GET /health

Any raised failure becomes a 400 with `{"error": "<message>"}`.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse, Response
from loguru import logger

from adapters.leetcode_client import LeetCodeGraphQLClient
from core.config import AppSettings
from core.interfaces.transport import GraphQLTransport
from core.services.profile_lookup import lookup_profile
from core.services.user_search import search_users_json


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_transport(request: Request) -> GraphQLTransport:
    return request.app.state.transport


def _error_response(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


def create_app(settings: AppSettings | None = None) -> FastAPI:
    settings = settings or AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with LeetCodeGraphQLClient(settings) as transport:
            app.state.transport = transport
            logger.info("upstream transport ready ({})", settings.base_url)
            yield
        logger.info("upstream transport closed")

    app = FastAPI(title="lc-scout", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/leetcode/search")
    async def search(
        name: str = Query(..., description="Keyword, typically a real name."),
        transport: GraphQLTransport = Depends(get_transport),
        app_settings: AppSettings = Depends(get_settings),
    ) -> Response:
        try:
            body = await search_users_json(name, transport=transport, settings=app_settings)
        except Exception as exc:  # noqa: BLE001
            logger.error("search {!r} failed: {}", name, exc)
            return _error_response(exc)
        return Response(content=body, media_type="application/json")

    @app.get("/api/leetcode/profile/{username}")
    async def profile(
        username: str,
        transport: GraphQLTransport = Depends(get_transport),
        app_settings: AppSettings = Depends(get_settings),
    ) -> Response:
        try:
            body = await lookup_profile(
                username,
                transport=transport,
                timeout=app_settings.http_timeout_seconds,
            )
        except Exception as exc:  # noqa: BLE001
            logger.error("profile {!r} failed: {}", username, exc)
            return _error_response(exc)
        return Response(content=body, media_type="application/json")

    return app
