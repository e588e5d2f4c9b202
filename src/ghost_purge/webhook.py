"""FastAPI application receiving Ghost webhooks.

Usage
-----
Build the app from settings and serve it with uvicorn::

    from ghost_purge.models.settings import load_settings
    from ghost_purge.webhook import create_app

    app = create_app(load_settings())

Webhooks are not authenticated. To check signatures, pass a
``validator`` callable; it receives the request headers and raw body
before the body is parsed, and rejects by raising
``WebhookRejectedError``.
"""
from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import Callable, Mapping

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ghost_purge.errors import MalformedRequestError, PurgeError, WebhookRejectedError
from ghost_purge.models.content_event import ContentEvent
from ghost_purge.models.settings import EnvSettings
from ghost_purge.service import PurgeService

__all__ = ["RequestValidator", "create_app", "parse_event"]

SERVICE_NAME = "ghost-purge"
OTHER_METHODS = ["GET", "PUT", "PATCH", "DELETE", "OPTIONS"]

RequestValidator = Callable[[Mapping[str, str], bytes], None]

log = logging.getLogger(__name__)


def parse_event(body: bytes) -> ContentEvent:
    """Decode a webhook body."""
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise MalformedRequestError(f"Invalid JSON body: {e}") from e
    except RecursionError as e:
        raise MalformedRequestError("Invalid JSON body: nested too deeply") from e

    return ContentEvent.from_payload(payload)


def create_app(
    settings: EnvSettings,
    http_client: httpx.AsyncClient | None = None,
    validator: RequestValidator | None = None,
) -> FastAPI:
    """
    Create the webhook application.
    A client created here is closed on shutdown; a passed client is left open.
    """
    owns_client = http_client is None
    client = http_client or httpx.AsyncClient(timeout=settings.http_timeout)
    service = PurgeService.from_settings(settings, client)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        log.info("Listening for Ghost webhooks on %s", settings.webhook_path)
        yield
        if owns_client:
            await client.aclose()

    app = FastAPI(title=SERVICE_NAME, version="0.1.0", lifespan=lifespan)
    app.state.service = service

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": SERVICE_NAME}

    @app.post(settings.webhook_path)
    async def receive_webhook(request: Request) -> JSONResponse:
        try:
            body = await request.body()
            if validator is not None:
                validator(request.headers, body)
            event = parse_event(body)
            result = await service.handle(event)
        except WebhookRejectedError as e:
            log.warning("Webhook rejected: %s", e)
            return JSONResponse(
                {"error": "Unauthorized", "message": str(e)}, status_code=401
            )
        except PurgeError as e:
            log.error("Error processing webhook: %s", e)
            await service.report_failure(str(e))
            return JSONResponse(
                {"error": "Internal server error", "message": str(e)}, status_code=500
            )

        return JSONResponse(
            {
                "success": True,
                "message": "Cache purged successfully",
                "purgeResult": result,
            }
        )

    @app.api_route(settings.webhook_path, methods=OTHER_METHODS, include_in_schema=False)
    async def method_not_allowed() -> JSONResponse:
        return JSONResponse(
            {"error": "Method not allowed"}, status_code=405, headers={"Allow": "POST"}
        )

    return app
