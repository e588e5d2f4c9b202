import pytest
from fastapi.testclient import TestClient

from ghost_purge.errors import WebhookRejectedError
from ghost_purge.webhook import create_app

POST_EVENT = {"event": "post.published", "post": {"url": "/test-post/", "title": "Test Post"}}


@pytest.fixture
def make_client(settings, upstream):
    def factory(settings=settings, validator=None) -> TestClient:
        app = create_app(settings, http_client=upstream.client(), validator=validator)
        return TestClient(app)

    return factory


def test_purges_and_notifies(make_client, upstream):
    res = make_client().post("/", json=POST_EVENT)

    assert res.status_code == 200
    assert res.json() == {
        "success": True,
        "message": "Cache purged successfully",
        "purgeResult": upstream.cf_body,
    }
    assert upstream.cloudflare_bodies() == [
        {"files": ["/", "/rss/", "/sitemap.xml", "/test-post/"]}
    ]
    assert upstream.slack_texts() == ["✅ Cache purged successfully"]


def test_purge_precedes_notification(make_client, upstream):
    make_client().post("/", json={"event": "site.changed"})

    assert [r.url.host for r in upstream.requests] == ["api.cloudflare.com", "hooks.slack.com"]
    assert upstream.cloudflare_bodies() == [{"purge_everything": True}]


@pytest.mark.parametrize("method", ["get", "put", "patch", "delete"])
def test_other_methods_not_allowed(make_client, upstream, method):
    res = getattr(make_client(), method)("/")

    assert res.status_code == 405
    assert res.json() == {"error": "Method not allowed"}
    assert upstream.requests == []


def test_malformed_json(make_client, upstream):
    res = make_client().post(
        "/", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "Internal server error"
    assert body["message"].startswith("Invalid JSON body")
    assert upstream.sent_to("api.cloudflare.com") == []
    assert upstream.slack_texts() == [f"❌ Cache purge failed - {body['message']}"]


def test_deeply_nested_json(make_client, upstream):
    res = make_client().post("/", content=b"[" * 200000)

    assert res.status_code == 500
    assert res.headers["content-type"] == "application/json"
    assert res.json() == {
        "error": "Internal server error",
        "message": "Invalid JSON body: nested too deeply",
    }
    assert upstream.sent_to("api.cloudflare.com") == []
    assert upstream.slack_texts() == [
        "❌ Cache purge failed - Invalid JSON body: nested too deeply"
    ]


def test_missing_credentials(make_client, settings, upstream):
    unconfigured = settings.model_copy(update={"cloudflare_api_token": None})

    res = make_client(settings=unconfigured).post("/", json=POST_EVENT)

    assert res.status_code == 500
    assert res.json() == {
        "error": "Internal server error",
        "message": "CloudFlare credentials not configured",
    }
    assert upstream.sent_to("api.cloudflare.com") == []
    assert upstream.slack_texts() == [
        "❌ Cache purge failed - CloudFlare credentials not configured"
    ]


def test_provider_error(make_client, upstream):
    upstream.cf_status = 400
    upstream.cf_body = {"success": False, "errors": [{"message": "Invalid zone"}]}

    res = make_client().post("/", json=POST_EVENT)

    assert res.status_code == 500
    assert res.json()["message"] == "CloudFlare API error: Invalid zone"
    assert upstream.slack_texts() == ["❌ Cache purge failed - CloudFlare API error: Invalid zone"]


def test_notification_failure_does_not_fail_request(make_client, upstream):
    upstream.fail_hosts.add("hooks.slack.com")

    res = make_client().post("/", json=POST_EVENT)

    assert res.status_code == 200
    assert res.json()["success"] is True


def test_without_slack(make_client, settings, upstream):
    quiet = settings.model_copy(update={"slack_webhook_url": None})

    res = make_client(settings=quiet).post("/", json={"event": "tag.added"})

    assert res.status_code == 200
    assert upstream.cloudflare_bodies() == [
        {"files": ["/", "/rss/", "/sitemap.xml", "/robots.txt"]}
    ]
    assert upstream.sent_to("hooks.slack.com") == []


def test_configured_paths(make_client, settings, upstream):
    custom = settings.model_copy(
        update={"webhook_path": "/hooks/ghost", "purge_rss_path": "/feed/"}
    )

    res = make_client(settings=custom).post("/hooks/ghost", json={"event": "unknown"})

    assert res.status_code == 200
    assert upstream.cloudflare_bodies() == [
        {"files": ["/", "/feed/", "/sitemap.xml", "/robots.txt"]}
    ]


def test_validator_rejects(make_client, upstream):
    def require_signature(headers, body):
        if "x-ghost-signature" not in headers:
            raise WebhookRejectedError("Missing signature")

    client = make_client(validator=require_signature)

    rejected = client.post("/", json=POST_EVENT)
    assert rejected.status_code == 401
    assert rejected.json() == {"error": "Unauthorized", "message": "Missing signature"}
    assert upstream.requests == []

    accepted = client.post("/", json=POST_EVENT, headers={"X-Ghost-Signature": "sha256=abc"})
    assert accepted.status_code == 200


def test_validator_sees_raw_body(make_client):
    seen = []
    client = make_client(validator=lambda headers, body: seen.append(body))

    client.post("/", content=b'{"event": "site.changed"}')

    assert seen == [b'{"event": "site.changed"}']


def test_health(make_client):
    res = make_client().get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "service": "ghost-purge"}
