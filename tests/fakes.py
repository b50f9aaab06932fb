"""
In-memory repositories for tests.

Entities are deep-copied on the way in and out so handlers only see changes
they explicitly save, the same as with the database.
"""

import copy
import dataclasses
from typing import Iterable, Optional

from dishka import Provider, Scope, provide

from farmer_network.domain.entities import (
    Comment,
    Conversation,
    Message,
    Post,
    Resource,
    User,
)
from farmer_network.domain.ports.repositories import (
    CommentRepository,
    ConversationAlreadyExistsError,
    ConversationRepository,
    MessageRepository,
    PostRepository,
    ResourceRepository,
    UserRepository,
)
from farmer_network.domain.value_objects import (
    ConversationId,
    ParticipantSet,
    PostId,
    ResourceId,
    UserId,
    Username,
)


class InMemoryConversationRepository(ConversationRepository):
    def __init__(self):
        self.rows: dict[str, Conversation] = {}
        self.save_calls = 0

    async def get_by_id(self, conversation_id: ConversationId) -> Optional[Conversation]:
        row = self.rows.get(conversation_id.value)
        return copy.deepcopy(row) if row else None

    async def get_by_participants(
        self, participants: ParticipantSet
    ) -> Optional[Conversation]:
        for row in self.rows.values():
            if row.participants == participants:
                return copy.deepcopy(row)
        return None

    async def get_by_participant(self, username: str) -> list[Conversation]:
        rows = [r for r in self.rows.values() if username in r.participants]
        rows.sort(key=lambda r: r.last_message_at, reverse=True)
        return [copy.deepcopy(r) for r in rows]

    async def add(self, conversation: Conversation) -> None:
        if any(r.participants == conversation.participants for r in self.rows.values()):
            raise ConversationAlreadyExistsError(conversation.participants.key())
        self.rows[conversation.id.value] = copy.deepcopy(conversation)

    async def save(self, conversation: Conversation) -> None:
        self.save_calls += 1
        self.rows[conversation.id.value] = copy.deepcopy(conversation)

    async def save_avatar_map(
        self, conversation_id: ConversationId, avatar_map: dict[str, str]
    ) -> None:
        self.rows[conversation_id.value].avatar_map = dict(avatar_map)


class InMemoryMessageRepository(MessageRepository):
    def __init__(self):
        self.rows: list[Message] = []

    async def add(self, message: Message) -> Message:
        stored = dataclasses.replace(message, sequence=len(self.rows) + 1)
        self.rows.append(stored)
        return stored

    async def get_by_conversation(self, conversation_id: ConversationId) -> list[Message]:
        rows = [m for m in self.rows if m.conversation_id == conversation_id]
        return sorted(rows, key=lambda m: m.sort_key())


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.rows: dict[str, User] = {}

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        row = self.rows.get(user_id.value)
        return copy.deepcopy(row) if row else None

    async def get_by_username(self, username: str) -> Optional[User]:
        for row in self.rows.values():
            if row.name == username:
                return copy.deepcopy(row)
        return None

    async def get_many_by_username(self, usernames: Iterable[str]) -> list[User]:
        wanted = set(usernames)
        return [copy.deepcopy(r) for r in self.rows.values() if r.name in wanted]

    async def get_many_by_id(self, user_ids: Iterable[UserId]) -> list[User]:
        wanted = {u.value for u in user_ids}
        return [copy.deepcopy(r) for r in self.rows.values() if r.id.value in wanted]

    async def list_all(self) -> list[User]:
        rows = sorted(self.rows.values(), key=lambda r: r.created_at, reverse=True)
        return [copy.deepcopy(r) for r in rows]

    async def add(self, user: User) -> None:
        self.rows[user.id.value] = copy.deepcopy(user)

    async def save(self, user: User) -> None:
        stored = self.rows[user.id.value]
        self.rows[user.id.value] = dataclasses.replace(
            copy.deepcopy(user),
            following=set(stored.following),
            followers=set(stored.followers),
        )

    def _rows_named(self, username: str) -> list[User]:
        return [row for row in self.rows.values() if row.name == username]

    async def add_follow_edge(self, follower: str, target: str) -> None:
        for row in self._rows_named(follower):
            row.following.add(target)
        for row in self._rows_named(target):
            row.followers.add(follower)

    async def remove_follow_edge(self, follower: str, target: str) -> None:
        for row in self._rows_named(follower):
            row.following.discard(target)
        for row in self._rows_named(target):
            row.followers.discard(follower)


class InMemoryPostRepository(PostRepository):
    def __init__(self):
        self.rows: dict[str, Post] = {}

    async def get_by_id(self, post_id: PostId) -> Optional[Post]:
        row = self.rows.get(post_id.value)
        return copy.deepcopy(row) if row else None

    async def list_recent(self, community: Optional[str] = None) -> list[Post]:
        rows = [r for r in self.rows.values() if not community or r.community == community]
        rows.sort(key=lambda r: r.created_at, reverse=True)
        return [copy.deepcopy(r) for r in rows]

    async def add(self, post: Post) -> None:
        self.rows[post.id.value] = copy.deepcopy(post)

    async def delete(self, post_id: PostId) -> bool:
        return self.rows.pop(post_id.value, None) is not None


class InMemoryCommentRepository(CommentRepository):
    def __init__(self):
        self.rows: list[Comment] = []

    async def list_by_post(self, post_id: PostId) -> list[Comment]:
        rows = [c for c in self.rows if c.post_id == post_id]
        return sorted(rows, key=lambda c: c.created_at)

    async def add(self, comment: Comment) -> None:
        self.rows.append(comment)


class InMemoryResourceRepository(ResourceRepository):
    def __init__(self):
        self.rows: dict[str, Resource] = {}

    async def get_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        row = self.rows.get(resource_id.value)
        return copy.deepcopy(row) if row else None

    async def list_all(self) -> list[Resource]:
        rows = sorted(self.rows.values(), key=lambda r: r.created_at, reverse=True)
        return [copy.deepcopy(r) for r in rows]

    async def add(self, resource: Resource) -> None:
        self.rows[resource.id.value] = copy.deepcopy(resource)

    async def save(self, resource: Resource) -> None:
        self.rows[resource.id.value] = copy.deepcopy(resource)

    async def delete(self, resource_id: ResourceId) -> bool:
        return self.rows.pop(resource_id.value, None) is not None


class InMemoryStore:
    """One set of repositories shared by every request of a test app."""

    def __init__(self):
        self.conversations = InMemoryConversationRepository()
        self.messages = InMemoryMessageRepository()
        self.users = InMemoryUserRepository()
        self.posts = InMemoryPostRepository()
        self.comments = InMemoryCommentRepository()
        self.resources = InMemoryResourceRepository()

    def seed_user(self, username: str, avatar_url: Optional[str] = None) -> User:
        user = User.register(
            username=Username(username),
            password_hash="not-a-real-hash",
            avatar_url=avatar_url,
        )
        self.users.rows[user.id.value] = user
        return user


class InMemoryRepositoryProvider(Provider):
    """Stands in for PrismaProvider."""

    def __init__(self, store: InMemoryStore):
        super().__init__()
        self._store = store

    @provide(scope=Scope.APP)
    def get_conversation_repository(self) -> ConversationRepository:
        return self._store.conversations

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return self._store.messages

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return self._store.users

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        return self._store.posts

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        return self._store.comments

    @provide(scope=Scope.APP)
    def get_resource_repository(self) -> ResourceRepository:
        return self._store.resources
