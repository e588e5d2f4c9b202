"""Inspect Ghost webhook payloads."""
from __future__ import annotations

import typer
from rich import print as cp, print_json
from rich.markup import escape

from ghost_purge.models.content_event import describe_event
from ghost_purge.models.event_category import format_event_name
from ghost_purge.models.settings import load_settings
from ghost_purge.strategy import select_purge_strategy
from ghost_purge.utils.console import attempt
from ghost_purge.webhook import parse_event

app = typer.Typer(no_args_is_help=True)


@app.command()
def plan(payload: typer.FileText):
    """Show what a webhook payload would purge. Use '-' to read stdin."""
    settings = load_settings()
    event = attempt(parse_event, payload.read().encode("utf-8"), verbose=settings.verbose)

    summary = describe_event(event)
    cp(f"Event: {escape(format_event_name(event.event))}")
    cp(f"{summary.type}: {escape(summary.title)} ({escape(summary.url or 'N/A')})")

    request = select_purge_strategy(event, settings.purge_paths)
    cp("Purge request:")
    print_json(data=request.to_api_payload())
