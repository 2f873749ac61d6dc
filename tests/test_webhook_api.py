# tests/test_webhook_api.py
"""Tests for the webhook receiver (ghsync.api)."""

import json

import pytest
from fastapi.testclient import TestClient

from ghsync.api.app import create_app
from ghsync.api.routes.webhook import sign
from ghsync.config.schema import SyncConfig
from ghsync.runtime import SyncRuntime

pytestmark = pytest.mark.tier2

SECRET = "s3cret"


def push_body(after: str = "c1", ref: str = "refs/heads/master", removed=()) -> bytes:
    return json.dumps(
        {
            "ref": ref,
            "after": after,
            "head_commit": {"id": after},
            "commits": [{"id": after, "removed": list(removed)}],
            "repository": {"full_name": "octocat/blog"},
        }
    ).encode("utf-8")


@pytest.fixture
def runtime(tmp_path, github):
    config = SyncConfig(
        repository="octocat/blog",
        token="tok",
        database=tmp_path / "content.db",
        webhook_secret=SECRET,
    )
    with SyncRuntime.from_config(config, transport=github.transport()) as rt:
        yield rt


@pytest.fixture
def client(runtime):
    return TestClient(create_app(runtime))


def deliver(client, body: bytes, event: str = "push", secret: str = SECRET):
    return client.post(
        "/webhook",
        content=body,
        headers={
            "X-GitHub-Event": event,
            "X-Hub-Signature-256": sign(secret, body),
            "Content-Type": "application/json",
        },
    )


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["repository"] == "octocat/blog"


class TestSignature:
    def test_bad_signature_rejected(self, client, runtime):
        response = deliver(client, push_body(), secret="wrong")

        assert response.status_code == 401
        assert runtime.store.count() == 0

    def test_missing_signature_rejected(self, client):
        response = client.post("/webhook", content=push_body(), headers={"X-GitHub-Event": "push"})
        assert response.status_code == 401

    def test_unsigned_when_no_secret(self, runtime):
        runtime.config.webhook_secret = None
        client = TestClient(create_app(runtime))

        response = client.post("/webhook", content=push_body(), headers={"X-GitHub-Event": "push"})

        assert response.status_code == 200


class TestDeliveries:
    def test_ping(self, client):
        response = deliver(client, b'{"zen": "Keep it simple."}', event="ping")

        assert response.status_code == 200
        assert response.json()["status"] == "pong"

    def test_other_events_ignored(self, client):
        response = deliver(client, b"{}", event="issues")

        assert response.status_code == 202
        assert response.json()["status"] == "ignored"

    def test_other_branch_ignored(self, client, runtime):
        response = deliver(client, push_body(ref="refs/heads/feature"))

        assert response.status_code == 202
        assert "feature" in response.json()["message"]
        assert runtime.store.count() == 0

    def test_branch_deletion_ignored(self, client):
        response = deliver(client, push_body(after="0" * 40))
        assert response.status_code == 202

    def test_invalid_payload(self, client):
        response = deliver(client, b'{"commits": "nope"}')
        assert response.status_code == 400

    def test_push_imports_head(self, client, runtime):
        response = deliver(client, push_body())

        assert response.status_code == 200
        assert response.json() == {"status": "processed", "message": "Payload processed", "errors": []}
        assert runtime.store.count() == 2

    def test_redelivery_is_already_synced(self, client):
        deliver(client, push_body())

        response = deliver(client, push_body())

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "synced"
        assert body["errors"][0]["code"] == "commit_synced"

    def test_failures_are_listed(self, client):
        response = deliver(client, push_body(after="missing", removed=["ghost.md"]))

        assert response.status_code == 500
        codes = [e["code"] for e in response.json()["errors"]]
        assert codes == ["fetch_failed", "path_not_found"]
