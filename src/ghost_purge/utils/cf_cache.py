"""Cloudflare cache management."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from ghost_purge.errors import ConfigurationError, ProviderError
from ghost_purge.models.purge_request import PurgeFiles, PurgeRequest
from ghost_purge.models.settings import EnvSettings
from ghost_purge.utils import uris

CF_API_ROOT = "https://api.cloudflare.com/client/v4/"

log = logging.getLogger(__name__)


class CloudflarePurgeClient:
    def __init__(
        self,
        zone_id: str | None,
        api_token: str | None,
        client: httpx.AsyncClient,
        site_url: str | None = None,
    ):
        """Initializes the purge client. Credentials are checked on purge."""
        self.zone_id = zone_id
        self.api_token = api_token
        self.client = client
        self.site_url = site_url

    @classmethod
    def from_settings(
        cls, settings: EnvSettings, client: httpx.AsyncClient
    ) -> CloudflarePurgeClient:
        return cls(
            zone_id=settings.cloudflare_zone_id,
            api_token=settings.cloudflare_api_token,
            client=client,
            site_url=settings.site_url,
        )

    @property
    def api_url(self) -> str:
        return uris.join(CF_API_ROOT, "zones", self.zone_id or "", "purge_cache", quote=True)

    def encode(self, request: PurgeRequest) -> dict[str, Any]:
        """Cloudflare request body for a purge request."""
        if isinstance(request, PurgeFiles) and self.site_url:
            return {"files": [uris.resolve(self.site_url, url) for url in request.urls]}
        return request.to_api_payload()

    async def purge(self, request: PurgeRequest) -> dict[str, Any]:
        """Purge from Cloudflare's cache. Returns the api result."""
        if not (self.zone_id and self.api_token):
            raise ConfigurationError("CloudFlare credentials not configured")

        payload = self.encode(request)
        headers = {
            "Authorization": f"Bearer {self.api_token}",
        }
        log.info("Purging Cloudflare cache: %s", payload)

        try:
            res = await self.client.post(self.api_url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise ProviderError(f"Could not reach CloudFlare: {e}") from e

        try:
            result = res.json()
        except ValueError:
            result = None

        if not res.is_success:
            raise ProviderError(
                f"CloudFlare API error: {first_error_message(result)}",
                status_code=res.status_code,
            )
        if not isinstance(result, dict):
            raise ProviderError(
                f"CloudFlare API returned an invalid response ({res.status_code})",
                status_code=res.status_code,
            )

        log.info("Cloudflare purge succeeded (%s)", res.status_code)
        return result


def first_error_message(result: Any) -> str:
    """Message of the first error in a Cloudflare error body."""
    if isinstance(result, dict):
        errors = result.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            message = errors[0].get("message")
            if message:
                return str(message)
    return "Unknown error"
