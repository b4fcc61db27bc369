"""
Chat Entity - A direct conversation between exactly two users.

The pair (user1_id, user2_id) is unordered: (A, B) and (B, A) are the same
chat. Storage enforces this with a unique index on ``pair_key``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4
from adoption_api.domain.entities.message import Message
from adoption_api.domain.entities.user import UserSummary
from adoption_api.domain.value_objects.chat_id import ChatId
from adoption_api.domain.value_objects.user_id import UserId

PAIR_KEY_SEPARATOR = ":"


def make_pair_key(user_a: UserId, user_b: UserId) -> str:
    """Order-independent key for a pair of users."""
    return PAIR_KEY_SEPARATOR.join(sorted((user_a.value, user_b.value)))


@dataclass
class Chat:
    id: ChatId
    user1_id: UserId
    user2_id: UserId
    created_at: datetime

    def __post_init__(self):
        if self.user1_id == self.user2_id:
            raise ValueError("A chat needs two different users")

    @property
    def pair_key(self) -> str:
        return make_pair_key(self.user1_id, self.user2_id)

    def has_member(self, user_id: UserId) -> bool:
        return user_id in (self.user1_id, self.user2_id)

    @classmethod
    def create(cls, user1_id: UserId, user2_id: UserId) -> Chat:
        """Factory method to create a new Chat, keeping the caller's orientation."""
        return cls(
            id=ChatId(str(uuid4())),
            user1_id=user1_id,
            user2_id=user2_id,
            created_at=datetime.now(timezone.utc),
        )


@dataclass
class ChatPreview:
    """A chat list entry annotated with its most recent message only."""

    chat: Chat
    user1: UserSummary
    user2: UserSummary
    last_message: Optional[Message] = None


@dataclass
class ChatDetail:
    """A single chat with its full history, oldest message first."""

    chat: Chat
    user1: UserSummary
    user2: UserSummary
    messages: list[Message] = field(default_factory=list)
