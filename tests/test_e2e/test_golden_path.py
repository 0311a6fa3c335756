"""Teste E2E do golden path: push Shopee -> store -> Slack -> listagem."""

from __future__ import annotations

import hashlib
import hmac
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from api.connectors.shopee import verify_push_signature
from api.connectors.slack import SlackWebhookForwarder
from api.normalizers.shopee import normalize_payload
from api.routes.notifications import router as notifications_router
from api.routes.shopee import webhook
from app.app import app
from app.infra.stores.memory_stores import MemoryNotificationStore
from app.use_cases.shopee import INVALID_SIGNATURE_WARNING, RelayConfig, RelayNotificationUseCase

KEY = "partner-key"
SLACK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


def _sign(url: str, body: bytes) -> str:
    return hmac.new(KEY.encode("utf-8"), url.encode("utf-8") + b"|" + body, hashlib.sha256).hexdigest()


@pytest.fixture
def slack_posts() -> list[dict[str, object]]:
    return []


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, slack_posts: list[dict[str, object]]) -> TestClient:
    def _slack_handler(request: httpx.Request) -> httpx.Response:
        slack_posts.append(json.loads(request.content))
        return httpx.Response(200, text="ok")

    store = MemoryNotificationStore()
    use_case = RelayNotificationUseCase(
        config=RelayConfig(partner_key=KEY, slack_webhook_url=SLACK_URL),
        verifier=verify_push_signature,
        normalizer=normalize_payload,
        store=store,
        forwarder=SlackWebhookForwarder(transport=httpx.MockTransport(_slack_handler)),
    )
    monkeypatch.setattr(webhook, "_get_relay_use_case", lambda: use_case)
    monkeypatch.setattr(notifications_router, "_get_notification_store", lambda: store)
    return TestClient(app)


def test_signed_chat_push_is_relayed_and_listed(
    client: TestClient,
    slack_posts: list[dict[str, object]],
) -> None:
    body = b'{"code":10,"data":{"content":"hi","from_id":"u1"}}'

    response = client.post(
        "/",
        content=body,
        headers={"Authorization": _sign("http://testserver/", body), "Content-Type": "application/json"},
    )

    assert response.status_code == 200
    assert response.text == "OK"
    assert slack_posts == [{"text": "New Message: hi\nFrom: u1"}]

    listing = client.get("/api/notifications")
    assert listing.status_code == 200
    [item] = listing.json()
    assert item["id"] == 1
    assert item["project"] == "Shopee"
    assert item["content"] == "New Message: hi\nFrom: u1"
    assert item["raw_payload"] == body.decode("utf-8")
    assert item["is_read"] is False


def test_unsigned_push_is_rejected(client: TestClient, slack_posts: list[dict[str, object]]) -> None:
    response = client.post("/", content=b'{"a": 1}')

    assert response.status_code == 401
    assert response.text == "Missing Signature"
    assert slack_posts == []
    assert client.get("/api/notifications").json() == []


def test_tampered_push_is_flagged(client: TestClient, slack_posts: list[dict[str, object]]) -> None:
    body = b'{"code":3,"data":{"ordersn":"2201"}}'
    signature = _sign("http://testserver/", b'{"code":3,"data":{"ordersn":"9999"}}')

    response = client.post("/any/path", content=body, headers={"Authorization": signature})

    assert response.status_code == 200
    text = slack_posts[0]["text"]
    assert isinstance(text, str)
    assert text.startswith(INVALID_SIGNATURE_WARNING + "Received Event: ```")


def test_invalid_json_is_rejected(client: TestClient, slack_posts: list[dict[str, object]]) -> None:
    response = client.post("/", content=b"{oops", headers={"Authorization": "abc"})

    assert response.status_code == 400
    assert response.text == "Invalid JSON"
    assert slack_posts == []


def test_root_and_fallback_routes(client: TestClient) -> None:
    root = client.get("/")
    assert root.status_code == 200
    assert root.text == "Shopee Notification Service Running"

    assert client.get("/unknown").status_code == 405
    assert client.put("/").status_code == 405
    assert client.delete("/api/notifications").status_code == 405


def test_cors(client: TestClient) -> None:
    options = client.options("/api/notifications")
    assert options.status_code == 204
    assert options.headers["access-control-allow-origin"] == "*"
    assert "POST" in options.headers["access-control-allow-methods"]

    preflight = client.options(
        "/",
        headers={"Origin": "https://panel.example.com", "Access-Control-Request-Method": "POST"},
    )
    assert preflight.status_code == 200
    assert preflight.headers["access-control-allow-origin"] == "*"

    listing = client.get("/api/notifications", headers={"Origin": "https://panel.example.com"})
    assert listing.headers["access-control-allow-origin"] == "*"


def test_lone_surrogate_is_relayed_and_listed(
    client: TestClient,
    slack_posts: list[dict[str, object]],
) -> None:
    body = b'{"data":{"content":"hi \\ud83d","from_id":"u1"}}'

    response = client.post("/", content=body, headers={"Authorization": _sign("http://testserver/", body)})

    assert response.status_code == 200
    assert len(slack_posts) == 1
    text = slack_posts[0]["text"]
    assert isinstance(text, str)
    assert text.startswith("New Message: hi �")
    assert text.endswith("From: u1")

    listing = client.get("/api/notifications")
    assert listing.status_code == 200
    [item] = listing.json()
    assert item["content"] == text
    assert item["raw_payload"] == body.decode("utf-8")
