"""Slack webhook notifications. Best effort, errors are only logged."""
from __future__ import annotations

import logging

import httpx

log = logging.getLogger(__name__)

SUCCESS_TEXT = "✅ Cache purged successfully"
FAILURE_TEXT = "❌ Cache purge failed - {message}"


def success_message() -> dict[str, str]:
    return {"text": SUCCESS_TEXT}


def failure_message(message: str) -> dict[str, str]:
    return {"text": FAILURE_TEXT.format(message=message)}


class SlackNotifier:
    def __init__(self, webhook_url: str | None, client: httpx.AsyncClient):
        self.webhook_url = webhook_url
        self.client = client

    async def notify_success(self) -> bool:
        return await self._send(success_message(), "notification")

    async def notify_failure(self, message: str) -> bool:
        return await self._send(failure_message(message), "error notification")

    async def _send(self, body: dict[str, str], kind: str) -> bool:
        """Post a message. Returns whether Slack accepted it."""
        if not self.webhook_url:
            log.info("No Slack webhook URL configured, skipping %s", kind)
            return False

        try:
            res = await self.client.post(self.webhook_url, json=body)
        except httpx.HTTPError as e:
            log.error("Error sending Slack %s: %s", kind, e)
            return False

        if res.is_success:
            log.info("Slack %s sent successfully", kind)
            return True

        log.error("Failed to send Slack %s: %s", kind, res.status_code)
        return False
