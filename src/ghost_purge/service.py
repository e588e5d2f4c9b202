"""Handles one Ghost webhook: select, purge, notify."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from ghost_purge.models.content_event import ContentEvent, describe_event
from ghost_purge.models.event_category import format_event_name
from ghost_purge.models.purge_request import DEFAULT_PATHS, PurgePaths
from ghost_purge.models.settings import EnvSettings
from ghost_purge.strategy import select_purge_strategy
from ghost_purge.utils.cf_cache import CloudflarePurgeClient
from ghost_purge.utils.slack import SlackNotifier

log = logging.getLogger(__name__)


class PurgeService:
    def __init__(
        self,
        purger: CloudflarePurgeClient,
        notifier: SlackNotifier,
        paths: PurgePaths = DEFAULT_PATHS,
    ):
        self.purger = purger
        self.notifier = notifier
        self.paths = paths

    @classmethod
    def from_settings(
        cls, settings: EnvSettings, client: httpx.AsyncClient
    ) -> PurgeService:
        return cls(
            purger=CloudflarePurgeClient.from_settings(settings, client),
            notifier=SlackNotifier(settings.slack_webhook_url, client),
            paths=settings.purge_paths,
        )

    async def handle(self, event: ContentEvent) -> dict[str, Any]:
        """Purge the cache for an event, then notify. Returns the purge result."""
        summary = describe_event(event)
        log.info(
            "Ghost webhook received: %s (%s %r, url=%s)",
            format_event_name(event.event),
            summary.type,
            summary.title,
            summary.url or "N/A",
        )

        request = select_purge_strategy(event, self.paths)
        result = await self.purger.purge(request)

        await self.notifier.notify_success()
        return result

    async def report_failure(self, message: str) -> None:
        await self.notifier.notify_failure(message)
