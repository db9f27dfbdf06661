"""Tests for the /posts routes, called with valid credentials."""

import pytest


def test_list_posts_empty_is_not_found(client, auth):
    resp = client.get("/posts", auth=auth)
    assert resp.status_code == 404
    assert resp.json() == {"detail": "No posts found"}


def test_create_post(client, auth, post_payload):
    resp = client.post("/posts", json=post_payload, auth=auth)
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] == 1
    assert data["title"] == post_payload["title"]
    assert data["content"] == post_payload["content"]
    assert data["user_id"] == 1
    assert data["created"]


def test_create_post_unknown_owner_is_accepted(client, auth, post_payload):
    resp = client.post("/posts", json=dict(post_payload, user_id=999), auth=auth)
    assert resp.status_code == 201
    assert resp.json()["user_id"] == 999


def test_create_post_duplicates_are_accepted(client, auth, post_payload):
    client.post("/posts", json=post_payload, auth=auth)
    resp = client.post("/posts", json=post_payload, auth=auth)
    assert resp.status_code == 201
    assert resp.json()["id"] == 2
    assert len(client.get("/posts", auth=auth).json()) == 2


@pytest.mark.parametrize("field", ["title", "content"])
def test_create_post_empty_field_is_rejected(client, api, auth, post_payload, field):
    resp = client.post("/posts", json=dict(post_payload, **{field: ""}), auth=auth)
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid post input"}
    assert len(api.state.posts) == 0


def test_update_post_keeps_owner(client, auth, post_payload):
    created = client.post("/posts", json=post_payload, auth=auth).json()
    resp = client.put(
        f"/posts/{created['id']}",
        json={"title": "New title", "content": "New content", "user_id": 7},
        auth=auth,
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "New title"
    assert data["content"] == "New content"
    assert data["user_id"] == created["user_id"]
    assert data["created"] == created["created"]


def test_update_post_not_found(client, auth):
    resp = client.put("/posts/3", json={"title": "t", "content": "c"}, auth=auth)
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Post not found"}


def test_delete_post(client, auth, post_payload):
    client.post("/posts", json=post_payload, auth=auth)
    resp = client.delete("/posts/1", auth=auth)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Post deleted"}
    assert client.get("/posts", auth=auth).status_code == 404


def test_delete_post_not_found(client, auth):
    resp = client.delete("/posts/1", auth=auth)
    assert resp.status_code == 404


def test_update_missing_post_checked_before_body(client, auth):
    resp = client.put("/posts/9", content=b"[", headers={"Content-Type": "application/json"}, auth=auth)
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Post not found"}


def test_update_post_wrong_type(client, auth, post_payload):
    client.post("/posts", json=post_payload, auth=auth)
    resp = client.put("/posts/1", json={"title": 3, "content": "c"}, auth=auth)
    assert resp.status_code == 400
