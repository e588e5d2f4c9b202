"""Cloudflare API tools."""
from __future__ import annotations

import asyncio
from typing import Annotated, Any, Optional

import httpx
import rich
import typer
from typer import Option

from ghost_purge.models.purge_request import PurgeEverything, PurgeFiles, PurgeRequest
from ghost_purge.models.settings import EnvSettings, load_settings
from ghost_purge.utils.cf_cache import CloudflarePurgeClient
from ghost_purge.utils.console import attempt

app = typer.Typer(no_args_is_help=True)

ConfirmType = Annotated[bool, Option("--yes", "-y", help="Confirm action")]


async def run_purge(settings: EnvSettings, request: PurgeRequest) -> dict[str, Any]:
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        purger = CloudflarePurgeClient.from_settings(settings, client)
        return await purger.purge(request)


@app.command()
def purge(
    urls: Annotated[Optional[list[str]], typer.Argument()] = None,
    everything: Annotated[bool, Option("--everything", help="Purge the whole zone")] = False,
    confirm: ConfirmType = False,
):
    """Purge URLs, or everything, from Cloudflare's cache."""
    if bool(urls) == everything:
        typer.echo("❌  Pass either URLs or --everything.")
        raise SystemExit(1)

    settings = load_settings()

    if everything:
        if not confirm and not typer.confirm("Purge the entire zone?"):
            raise typer.Abort()
        request = PurgeEverything()
        typer.echo("Purging everything from Cloudflare's cache...")
    else:
        request = PurgeFiles(urls=tuple(urls))
        typer.echo(f"Purging {len(urls)} URL(s) from Cloudflare's cache...")

    result = attempt(
        lambda: asyncio.run(run_purge(settings, request)), verbose=settings.verbose
    )
    typer.echo("✅  Purged")
    rich.print_json(data=result)
