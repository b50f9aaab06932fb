"""Feed posts, image uploads and comments."""

import asyncio
import os
import uuid

import pytest
from fastapi.testclient import TestClient

from farmer_network.application.commands.posts import (
    CreatePostCommand,
    CreatePostHandler,
    ImageUpload,
)
from farmer_network.config.settings import Config
from farmer_network.infrastructure.storage import FileStorageService

PNG = b"\x89PNG\r\n\x1a\n" + b"0" * 64


def _post(client, headers, text="Harvest day", files=None, **fields):
    return client.post(
        "/api/posts", headers=headers, data={"text": text, **fields}, files=files
    )


def test_create_and_list_posts(client, register):
    user, headers = register("alice", fullName="Alice")
    res = _post(client, headers, text="First cut of hay", location="Kungälv", community="Valley ")
    assert res.status_code == 201
    post = res.json()["post"]
    assert post["authorId"] == user["id"]
    assert post["author"]["username"] == "alice"
    assert post["community"] == "valley"
    assert post["imageUrls"] == []

    _post(client, headers, text="Elsewhere", community="hills")

    everything = client.get("/api/posts").json()["posts"]
    assert [p["text"] for p in everything] == ["Elsewhere", "First cut of hay"]

    valley = client.get("/api/posts", params={"community": "Valley"}).json()["posts"]
    assert [p["text"] for p in valley] == ["First cut of hay"]


def test_post_with_images_is_served_from_uploads(client, register):
    _, headers = register("alice")
    res = _post(
        client,
        headers,
        files=[
            ("images", ("field.png", PNG, "image/png")),
            ("images", ("barn.jpg", b"jpegdata", "image/jpeg")),
        ],
    )
    assert res.status_code == 201
    urls = res.json()["post"]["imageUrls"]
    assert len(urls) == 2
    assert all(u.startswith("/uploads/") for u in urls)

    served = client.get(urls[0])
    assert served.status_code == 200
    assert served.content == PNG


def test_post_validation(client, register, store):
    _, headers = register("alice")
    assert _post(client, headers, text="   ").status_code == 400

    too_many = [("images", (f"{i}.png", PNG, "image/png")) for i in range(Config.MAX_POST_IMAGES + 1)]
    assert _post(client, headers, files=too_many).status_code == 400

    wrong_type = [("images", ("notes.pdf", b"%PDF", "application/pdf"))]
    res = _post(client, headers, files=wrong_type)
    assert res.status_code == 400
    assert "Unsupported image type" in res.json()["error"]

    assert store.posts.rows == {}
    assert _post(client, {}).status_code == 401


def test_delete_post(client, register, store):
    _, alice = register("alice")
    _, bob = register("bob")
    post = _post(
        client, alice, files=[("images", ("field.png", PNG, "image/png"))]
    ).json()["post"]
    image_path = os.path.join(Config.UPLOAD_BASE, post["imageUrls"][0].rsplit("/", 1)[1])
    assert os.path.exists(image_path)

    assert client.delete(f"/api/posts/{post['id']}", headers=bob).status_code == 403

    res = client.delete(f"/api/posts/{post['id']}", headers=alice)
    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert not os.path.exists(image_path)
    assert client.delete(f"/api/posts/{post['id']}", headers=alice).status_code == 404
    assert client.delete("/api/posts/nope", headers=alice).status_code == 404


def test_comments(client, register):
    _, alice = register("alice")
    _, bob = register("bob", fullName="Bob")
    post_id = _post(client, alice).json()["post"]["id"]

    first = client.post(f"/api/comments/{post_id}", headers=bob, json={"text": "Nice!"})
    assert first.status_code == 201
    assert first.json()["comment"]["author"]["fullName"] == "Bob"
    client.post(f"/api/comments/{post_id}", headers=alice, json={"text": "Thanks"})

    comments = client.get(f"/api/comments/{post_id}").json()["comments"]
    assert [c["text"] for c in comments] == ["Nice!", "Thanks"]

    assert client.post(f"/api/comments/{post_id}", headers=bob, json={"text": " "}).status_code == 400
    missing = str(uuid.uuid4())
    assert client.get(f"/api/comments/{missing}").status_code == 404
    assert client.post(f"/api/comments/{missing}", headers=bob, json={"text": "hi"}).status_code == 404


def test_images_are_removed_when_post_cannot_be_stored(store, tmp_path):
    author = store.seed_user("alice")

    class FailingPostRepository(type(store.posts)):
        async def add(self, post):
            raise RuntimeError("database unavailable")

    storage = FileStorageService(upload_base=str(tmp_path))
    handler = CreatePostHandler(FailingPostRepository(), store.users, storage)
    command = CreatePostCommand(
        author_id=author.id,
        text="Harvest day",
        images=(ImageUpload("a.png", PNG), ImageUpload("b.png", PNG)),
    )

    with pytest.raises(RuntimeError):
        asyncio.run(handler.execute(command))
    assert os.listdir(tmp_path) == []


def test_delete_post_does_not_report_internal_errors_as_missing(
    app, client, register, store, monkeypatch
):
    _, alice = register("alice")
    post = _post(client, alice).json()["post"]

    async def broken_delete(post_id):
        raise ValueError("corrupt row")

    monkeypatch.setattr(store.posts, "delete", broken_delete)
    res = TestClient(app, raise_server_exceptions=False).delete(
        f"/api/posts/{post['id']}", headers=alice
    )
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
