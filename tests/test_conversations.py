"""HTTP tests for /api/conversations and its messages."""

import uuid


def _create(client, headers, participants):
    return client.post(
        "/api/conversations", headers=headers, json={"participants": participants}
    )


def test_requires_bearer_token(client):
    assert client.get("/api/conversations").status_code == 401
    assert _create(client, {}, ["alice", "bob"]).status_code == 401
    res = client.get(
        "/api/conversations", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert res.status_code == 401
    assert res.json()["error"].startswith("Invalid token")


def test_expired_token_is_rejected(client, headers_for):
    res = client.get("/api/conversations", headers=headers_for("alice", ttl=-60))
    assert res.status_code == 401
    assert res.json() == {"error": "Token has expired"}


def test_create_then_find_is_idempotent(client, headers_for):
    alice = headers_for("alice")
    first = _create(client, alice, ["alice", "bob"])
    assert first.status_code == 201
    conversation = first.json()["conversation"]
    assert conversation["participants"] == ["alice", "bob"]
    assert conversation["lastMessage"] == ""
    assert "lastMessageAt" in conversation
    assert conversation["avatarMap"] == {}

    again = _create(client, headers_for("bob"), ["bob", "alice"])
    assert again.status_code == 200
    assert again.json()["conversation"]["id"] == conversation["id"]


def test_different_participant_sets_get_different_conversations(client, auth_headers):
    a = _create(client, auth_headers, ["alice", "bob"]).json()["conversation"]
    b = _create(client, auth_headers, ["alice", "carol"]).json()["conversation"]
    c = _create(client, auth_headers, ["alice", "bob", "carol"]).json()["conversation"]
    assert len({a["id"], b["id"], c["id"]}) == 3


def test_requester_is_added_to_participants(client, auth_headers):
    res = _create(client, auth_headers, ["bob", "carol"])
    assert res.status_code == 201
    assert res.json()["conversation"]["participants"] == ["alice", "bob", "carol"]


def test_fewer_than_two_participants_is_rejected(client, auth_headers):
    for participants in ([], ["bob"], ["bob", "bob"], ["bob", "  "]):
        res = _create(client, auth_headers, participants)
        assert res.status_code == 400, participants
        assert "at least 2" in res.json()["error"]


def test_missing_participants_field_is_a_validation_error(client, auth_headers):
    res = client.post("/api/conversations", headers=auth_headers, json={})
    assert res.status_code == 400
    assert res.json()["error"] == "Validation error"
    assert res.json()["details"]


def test_avatar_map_filled_from_profiles(client, store, auth_headers):
    store.seed_user("alice", avatar_url="/uploads/alice.png")
    store.seed_user("bob")
    res = _create(client, auth_headers, ["alice", "bob"])
    assert res.json()["conversation"]["avatarMap"] == {"alice": "/uploads/alice.png"}


def test_send_and_list_messages(client, headers_for):
    alice, bob = headers_for("alice"), headers_for("bob")
    cid = _create(client, alice, ["alice", "bob"]).json()["conversation"]["id"]

    sent = client.post(
        f"/api/conversations/{cid}/messages", headers=alice, json={"text": "  Hello  "}
    )
    assert sent.status_code == 201
    message = sent.json()["message"]
    assert message["sender"] == "alice"
    assert message["text"] == "Hello"
    assert message["conversationId"] == cid

    client.post(f"/api/conversations/{cid}/messages", headers=bob, json={"text": "Hi!"})

    listed = client.get(f"/api/conversations/{cid}/messages", headers=bob)
    assert listed.status_code == 200
    texts = [(m["sender"], m["text"]) for m in listed.json()["messages"]]
    assert texts == [("alice", "Hello"), ("bob", "Hi!")]

    conversations = client.get("/api/conversations", headers=alice).json()["conversations"]
    assert conversations[0]["id"] == cid
    assert conversations[0]["lastMessage"] == "Hi!"


def test_sender_comes_from_token_not_body(client, headers_for):
    alice = headers_for("alice")
    cid = _create(client, alice, ["alice", "bob"]).json()["conversation"]["id"]
    res = client.post(
        f"/api/conversations/{cid}/messages",
        headers=alice,
        json={"text": "who am I", "sender": "bob"},
    )
    assert res.json()["message"]["sender"] == "alice"


def test_non_participant_cannot_post_or_read(client, store, headers_for):
    cid = _create(client, headers_for("alice"), ["alice", "bob"]).json()["conversation"]["id"]
    carol = headers_for("carol")

    res = client.post(
        f"/api/conversations/{cid}/messages", headers=carol, json={"text": "Hi"}
    )
    assert res.status_code == 403
    assert res.json()["error"] == "You are not a participant in this conversation"
    assert store.messages.rows == []

    assert client.get(f"/api/conversations/{cid}/messages", headers=carol).status_code == 403


def test_blank_message_is_rejected(client, store, auth_headers):
    cid = _create(client, auth_headers, ["alice", "bob"]).json()["conversation"]["id"]
    res = client.post(
        f"/api/conversations/{cid}/messages", headers=auth_headers, json={"text": "   "}
    )
    assert res.status_code == 400
    assert store.messages.rows == []


def test_unknown_conversation_is_404(client, auth_headers):
    missing = str(uuid.uuid4())
    assert client.get(f"/api/conversations/{missing}/messages", headers=auth_headers).status_code == 404
    res = client.post(
        f"/api/conversations/{missing}/messages", headers=auth_headers, json={"text": "x"}
    )
    assert res.status_code == 404
    assert client.get("/api/conversations/not-a-uuid/messages", headers=auth_headers).status_code == 404


def test_list_only_own_conversations(client, headers_for):
    alice = headers_for("alice")
    _create(client, alice, ["alice", "bob"])
    _create(client, headers_for("carol"), ["carol", "dave"])

    res = client.get("/api/conversations?user=alice", headers=alice)
    assert res.status_code == 200
    assert [c["participants"] for c in res.json()["conversations"]] == [["alice", "bob"]]

    assert client.get("/api/conversations?user=carol", headers=alice).status_code == 403


def test_correlation_id_is_echoed(client, auth_headers):
    res = client.get(
        "/api/conversations",
        headers={**auth_headers, "X-Correlation-ID": "req-42"},
    )
    assert res.headers["X-Correlation-ID"] == "req-42"
