"""Unit tests for the posts example service endpoints."""

from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

from jsend import Fail, Success, fail, from_dict, success
from jsend_posts.main import create_app
from jsend_posts.settings import PostsSettings
from jsend_posts.store import Post, PostStore


def _create(client: TestClient, title: str = "Hello", body: str = "World") -> str:
    resp = client.post("/posts", json={"title": title, "body": body})
    assert resp.status_code == 200
    return resp.json()["data"]["id"]


class TestPosts:
    def test_list_empty(self, client):
        resp = client.get("/posts")
        assert resp.status_code == 200
        assert resp.json() == {"status": "success", "data": {"posts": []}}

    def test_create_then_get(self, client):
        post_id = _create(client, "Blog Post Title", "Blog post body")

        resp = client.get(f"/posts/{post_id}")
        assert resp.status_code == 200
        envelope = from_dict(resp.json())
        assert isinstance(envelope, Success)
        assert envelope.data == {
            "post": {"id": post_id, "title": "Blog Post Title", "body": "Blog post body"}
        }

    def test_list_contains_created_posts(self, client):
        ids = {_create(client, "a", "1"), _create(client, "b", "2")}
        posts = client.get("/posts").json()["data"]["posts"]
        assert {p["id"] for p in posts} == ids

    def test_get_unknown_post_is_fail(self, client):
        resp = client.get(f"/posts/{uuid.uuid4()}")
        assert resp.status_code == 404
        assert from_dict(resp.json()) == fail({"id": "not found"})

    def test_get_malformed_id_is_fail(self, client):
        resp = client.get("/posts/not-a-uuid")
        assert resp.status_code == 422
        envelope = from_dict(resp.json())
        assert isinstance(envelope, Fail)
        assert "post_id" in envelope.data

    def test_delete(self, client, store: PostStore):
        post_id = _create(client)

        resp = client.delete(f"/posts/{post_id}")
        assert resp.status_code == 200
        assert resp.json() == {"status": "success", "data": None}
        assert from_dict(resp.json()) == success(None)
        assert len(store) == 0

    def test_delete_unknown_post_is_fail(self, client):
        resp = client.delete(f"/posts/{uuid.uuid4()}")
        assert resp.status_code == 404
        assert resp.json() == {"status": "fail", "data": {"id": "not found"}}

    def test_create_missing_title_is_fail(self, client):
        resp = client.post("/posts", json={"body": "no title"})
        assert resp.status_code == 422
        body = resp.json()
        assert body["status"] == "fail"
        assert set(body["data"]) == {"title"}

    def test_create_empty_title_is_fail(self, client):
        resp = client.post("/posts", json={"title": "", "body": "x"})
        assert resp.status_code == 422
        assert "title" in resp.json()["data"]

    def test_create_truncated_json_is_fail_keyed_by_body(self, client):
        resp = client.post(
            "/posts", content=b"{", headers={"Content-Type": "application/json"}
        )
        assert resp.status_code == 422
        body = resp.json()
        assert body["status"] == "fail"
        assert set(body["data"]) == {"body"}

    def test_wrong_method_is_fail(self, client):
        resp = client.put("/posts", json={})
        assert resp.status_code == 405
        assert resp.json()["status"] == "fail"


class TestServiceBehaviour:
    def test_health(self, client, store: PostStore):
        store.add(Post(title="t", body="b"))
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "success", "data": {"status": "healthy", "posts": 1}}

    def test_request_id_is_generated(self, client):
        resp = client.get("/health")
        uuid.UUID(resp.headers["X-Request-ID"])

    def test_request_id_is_propagated(self, client):
        resp = client.get("/health", headers={"X-Request-ID": "req-123"})
        assert resp.headers["X-Request-ID"] == "req-123"

    def test_startup_seeds_a_post(self):
        app = create_app(PostsSettings(seed_posts=True, log_level="WARNING"), PostStore())
        with TestClient(app) as seeded:
            posts = seeded.get("/posts").json()["data"]["posts"]
        assert [p["title"] for p in posts] == ["Blog Post Title"]

    def test_unhandled_error_is_error_envelope(self, settings: PostsSettings):
        app = create_app(settings, PostStore())

        @app.get("/boom")
        def boom():
            raise RuntimeError("kaboom")

        resp = TestClient(app, raise_server_exceptions=False).get(
            "/boom", headers={"X-Request-ID": "req-500"}
        )
        assert resp.status_code == 500
        assert resp.json() == {"status": "error", "message": "Internal server error"}
        assert resp.headers["X-Request-ID"] == "req-500"

    def test_seeding_is_not_repeated_on_restart(self, store: PostStore):
        app = create_app(PostsSettings(seed_posts=True, log_level="WARNING"), store)
        with TestClient(app):
            pass
        with TestClient(app) as restarted:
            resp = restarted.get("/health")
        assert resp.json()["data"]["posts"] == 1
        assert len(store) == 1
