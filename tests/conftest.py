from __future__ import annotations

import json

import httpx
import pytest

from ghost_purge.models.settings import EnvSettings

SLACK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"
CF_SUCCESS = {"success": True, "errors": [], "messages": [], "result": {"id": "zone-1"}}


class FakeUpstream:
    """Stands in for Cloudflare and Slack, recording every request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.cf_status = 200
        self.cf_body: object = CF_SUCCESS
        self.slack_status = 200
        self.fail_hosts: set[str] = set()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.host in self.fail_hosts:
            raise httpx.ConnectError("connection refused", request=request)

        if request.url.host == "api.cloudflare.com":
            if isinstance(self.cf_body, (dict, list)):
                return httpx.Response(self.cf_status, json=self.cf_body)
            return httpx.Response(self.cf_status, text=str(self.cf_body))

        return httpx.Response(self.slack_status, text="ok")

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def sent_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def cloudflare_bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.sent_to("api.cloudflare.com")]

    def slack_texts(self) -> list[str]:
        return [json.loads(r.content)["text"] for r in self.sent_to("hooks.slack.com")]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def settings(monkeypatch) -> EnvSettings:
    for key in ("CLOUDFLARE_ZONE_ID", "CLOUDFLARE_API_TOKEN", "SLACK_WEBHOOK_URL", "SITE_URL"):
        monkeypatch.delenv(key, raising=False)

    return EnvSettings(
        _env_file=None,
        cloudflare_zone_id="zone-1",
        cloudflare_api_token="secret-token",
        slack_webhook_url=SLACK_URL,
    )
