from __future__ import annotations

from typing import Annotated, Optional

import typer
import uvicorn

from ghost_purge.models.settings import load_settings
from ghost_purge.utils.logs import setup_logging
from ghost_purge.webhook import create_app


def serve(
    host: Annotated[Optional[str], typer.Option("--host")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p")] = None,
):
    """Listen for Ghost webhooks and purge Cloudflare's cache."""
    settings = load_settings()
    setup_logging(settings.log_level)

    if not settings.has_cloudflare_credentials:
        typer.echo("⚠️  Cloudflare credentials are not set, purges will fail.")

    uvicorn.run(
        create_app(settings),
        host=host or settings.server_host,
        port=port or settings.server_port,
        log_config=None,
    )
