"""Handler-level tests for the conversation and message use cases."""

import asyncio
import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from farmer_network.application.commands.conversations import (
    FindOrCreateConversationCommand,
    FindOrCreateConversationHandler,
)
from farmer_network.application.commands.messages import (
    AppendMessageCommand,
    AppendMessageHandler,
)
from farmer_network.application.queries.conversations import (
    ListConversationsHandler,
    ListConversationsQuery,
)
from farmer_network.application.queries.messages import (
    ListMessagesHandler,
    ListMessagesQuery,
)
from farmer_network.application.services.avatar_resolver import AvatarResolver
from farmer_network.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from farmer_network.domain.value_objects import ConversationId


@pytest.fixture()
def resolver(store):
    return AvatarResolver(store.users)


def find_or_create(store, resolver, participants, requester):
    handler = FindOrCreateConversationHandler(store.conversations, resolver)
    return asyncio.run(
        handler.execute(FindOrCreateConversationCommand(tuple(participants), requester))
    )


def append(store, resolver, conversation_id, sender, text):
    handler = AppendMessageHandler(store.conversations, store.messages, resolver)
    return asyncio.run(handler.execute(AppendMessageCommand(conversation_id, sender, text)))


def list_messages(store, conversation_id, requester):
    handler = ListMessagesHandler(store.conversations, store.messages)
    return asyncio.run(handler.execute(ListMessagesQuery(conversation_id, requester)))


def list_conversations(store, resolver, username):
    handler = ListConversationsHandler(store.conversations, resolver)
    return asyncio.run(handler.execute(ListConversationsQuery(username)))


def test_alice_bob_carol_scenario(store, resolver):
    result = find_or_create(store, resolver, ["alice", "bob"], "alice")
    assert result.created
    conversation = result.conversation
    assert set(conversation.participants) == {"alice", "bob"}

    append(store, resolver, conversation.id, "alice", "Hello")
    stored = asyncio.run(store.conversations.get_by_id(conversation.id))
    assert stored.last_message == "Hello"

    with pytest.raises(AccessDeniedError):
        append(store, resolver, conversation.id, "carol", "Hi")
    assert [m.text for m in store.messages.rows] == ["Hello"]


def test_participant_order_does_not_matter(store, resolver):
    first = find_or_create(store, resolver, ["alice", "bob"], "alice")
    second = find_or_create(store, resolver, ["bob", "alice"], "bob")
    assert not second.created
    assert second.conversation.id == first.conversation.id
    assert len(store.conversations.rows) == 1


def test_existing_conversation_is_returned_untouched(store, resolver):
    first = find_or_create(store, resolver, ["alice", "bob"], "alice")
    store.seed_user("alice", avatar_url="/uploads/a.png")
    again = find_or_create(store, resolver, ["alice", "bob"], "alice")
    assert again.conversation.avatar_map == {}
    assert again.conversation.updated_at == first.conversation.updated_at
    assert store.conversations.save_calls == 0


def test_lost_creation_race_returns_winner(store, resolver):
    winner = find_or_create(store, resolver, ["alice", "bob"], "alice").conversation

    class RacingRepository(type(store.conversations)):
        """Misses on lookup, as if the other request had not committed yet."""

        async def get_by_participants(self, participants):
            self.get_by_participants = super().get_by_participants
            return None

    racing = RacingRepository()
    racing.rows = store.conversations.rows
    handler = FindOrCreateConversationHandler(racing, resolver)
    result = asyncio.run(
        handler.execute(FindOrCreateConversationCommand(("bob", "alice"), "bob"))
    )
    assert not result.created
    assert result.conversation.id == winner.id
    assert len(racing.rows) == 1


def test_invalid_participants(store, resolver):
    with pytest.raises(DomainValidationError):
        find_or_create(store, resolver, ["bob"], "alice")
    with pytest.raises(DomainValidationError):
        find_or_create(store, resolver, ["bob", "not a name!"], "alice")
    assert store.conversations.rows == {}


def test_append_validates_text_before_loading(store, resolver):
    # conversation does not exist, but blank text is reported first
    with pytest.raises(DomainValidationError):
        append(store, resolver, ConversationId.generate(), "alice", " \n\t ")
    with pytest.raises(EntityNotFoundError):
        append(store, resolver, ConversationId.generate(), "alice", "hi")


def test_append_updates_summary_and_caches_sender_avatar(store, resolver):
    conversation = find_or_create(store, resolver, ["alice", "bob"], "alice").conversation
    store.seed_user("bob", avatar_url="/uploads/bob.png")

    message = append(store, resolver, conversation.id, "bob", "  fresh eggs  ")

    stored = asyncio.run(store.conversations.get_by_id(conversation.id))
    assert stored.last_message == "fresh eggs"
    assert stored.last_message_at == message.created_at
    assert stored.avatar_map == {"bob": "/uploads/bob.png"}


def test_messages_ordered_with_insertion_tiebreak(store, resolver):
    conversation = find_or_create(store, resolver, ["alice", "bob"], "alice").conversation
    for i in range(5):
        append(store, resolver, conversation.id, "alice" if i % 2 else "bob", f"m{i}")

    # force identical timestamps; sequence must keep insertion order
    same = datetime(2024, 1, 1, tzinfo=timezone.utc)
    store.messages.rows = [
        dataclasses.replace(m, created_at=same)
        for m in reversed(store.messages.rows)
    ]

    messages = list_messages(store, conversation.id, "alice")
    assert [m.text for m in messages] == ["m0", "m1", "m2", "m3", "m4"]
    assert messages[-1].text == "m4"


def test_list_messages_requires_participation(store, resolver):
    conversation = find_or_create(store, resolver, ["alice", "bob"], "alice").conversation
    with pytest.raises(AccessDeniedError):
        list_messages(store, conversation.id, "carol")
    with pytest.raises(EntityNotFoundError):
        list_messages(store, ConversationId.generate(), "alice")


def test_list_conversations_newest_activity_first(store, resolver):
    older = find_or_create(store, resolver, ["alice", "bob"], "alice").conversation
    newer = find_or_create(store, resolver, ["alice", "carol"], "alice").conversation
    find_or_create(store, resolver, ["bob", "carol"], "bob")

    store.conversations.rows[older.id.value].last_message_at = datetime.now(
        timezone.utc
    ) + timedelta(minutes=5)

    result = list_conversations(store, resolver, "alice")
    assert [c.id for c in result] == [older.id, newer.id]


def test_list_conversations_backfills_empty_avatar_maps(store, resolver):
    conversation = find_or_create(store, resolver, ["alice", "bob"], "alice").conversation
    store.seed_user("alice", avatar_url="/uploads/alice.png")

    result = list_conversations(store, resolver, "alice")
    assert result[0].avatar_map == {"alice": "/uploads/alice.png"}
    stored = store.conversations.rows[conversation.id.value]
    assert stored.avatar_map == {"alice": "/uploads/alice.png"}


def test_backfill_failure_does_not_break_listing(store):
    class BrokenResolver(AvatarResolver):
        async def resolve(self, usernames):
            raise RuntimeError("identity store down")

    find_or_create(store, AvatarResolver(store.users), ["alice", "bob"], "alice")
    result = list_conversations(store, BrokenResolver(store.users), "alice")
    assert len(result) == 1
    assert result[0].avatar_map == {}


def test_backfill_keeps_message_appended_while_resolving(store, resolver):
    conversation = find_or_create(
        store, resolver, ["alice", "bob", "carol"], "alice"
    ).conversation
    store.seed_user("bob", avatar_url="/uploads/bob.png")
    appender = AppendMessageHandler(store.conversations, store.messages, resolver)

    class SlowResolver(AvatarResolver):
        """Carol's message lands between the listing read and the backfill write."""

        async def resolve(self, usernames):
            await appender.execute(
                AppendMessageCommand(conversation.id, "carol", "Hello")
            )
            return await super().resolve(usernames)

    list_conversations(store, SlowResolver(store.users), "alice")

    stored = store.conversations.rows[conversation.id.value]
    assert stored.last_message == "Hello"
    assert stored.avatar_map == {"bob": "/uploads/bob.png"}
    assert [m.text for m in store.messages.rows] == ["Hello"]
