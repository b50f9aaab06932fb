"""Value objects and entity rules."""

import pytest

from farmer_network.domain.entities import Conversation, Message, Resource, User
from farmer_network.domain.value_objects import (
    ConversationId,
    ParticipantSet,
    Username,
)


def test_participant_set_is_order_independent():
    a = ParticipantSet.of(["bob", "alice"])
    b = ParticipantSet.of([" alice", "bob", "bob", ""])
    assert a == b
    assert a.key() == "alice,bob"
    assert ParticipantSet.from_key(a.key()) == a
    assert list(a) == ["alice", "bob"]
    assert len(a.with_member("alice")) == 2
    assert "carol" in a.with_member("carol")


def test_username_rules():
    assert Username("farmer_jo.e-1").value == "farmer_jo.e-1"
    for bad in ("", "ab", "x" * 33, "has space", "émile"):
        with pytest.raises(ValueError):
            Username(bad)


def test_conversation_needs_two_participants():
    with pytest.raises(ValueError):
        Conversation.start(ParticipantSet.of(["alice"]), {})


def test_conversation_records_message_and_avatars():
    conversation = Conversation.start(
        ParticipantSet.of(["alice", "bob"]), {"alice": "/a.png", "mallory": "/m.png"}
    )
    assert conversation.avatar_map == {"alice": "/a.png"}

    message = Message.create(conversation.id, "bob", "  hello ")
    conversation.record_message(message)
    assert conversation.last_message == "hello"
    assert conversation.last_message_at == message.created_at

    with pytest.raises(ValueError):
        conversation.cache_avatar("mallory", "/m.png")


def test_message_rejects_blank_text():
    with pytest.raises(ValueError):
        Message.create(ConversationId.generate(), "alice", "   ")


def test_follow_sets_are_idempotent():
    alice = User.register(Username("alice"), "hash")
    bob = User.register(Username("bob"), "hash")
    alice.follow(bob)
    alice.follow(bob)
    assert alice.following == {"bob"}
    assert bob.followers == {"alice"}
    with pytest.raises(ValueError):
        alice.follow(alice)
    alice.unfollow(bob)
    alice.unfollow(bob)
    assert alice.following == set() and bob.followers == set()


def test_resource_update_skips_none_and_rejects_blank():
    resource = Resource.create("Plough", "Available", "Bo", "555", "Barn", "Now")
    resource.update(status="Borrowed", owner=None)
    assert (resource.status, resource.owner) == ("Borrowed", "Bo")
    with pytest.raises(ValueError):
        resource.update(contact="  ")
