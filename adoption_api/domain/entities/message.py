"""
Message Entity - A single direct message inside a chat.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4
from adoption_api.domain.value_objects.message_id import MessageId
from adoption_api.domain.value_objects.chat_id import ChatId
from adoption_api.domain.value_objects.user_id import UserId


@dataclass
class Message:
    id: MessageId
    chat_id: ChatId
    sender_id: UserId
    content: str
    created_at: datetime

    @property
    def sort_key(self) -> tuple[datetime, str]:
        """Reading order: created_at, then id for equal timestamps."""
        return (self.created_at, self.id.value)

    @classmethod
    def create(cls, chat_id: ChatId, sender_id: UserId, content: str) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId(str(uuid4())),
            chat_id=chat_id,
            sender_id=sender_id,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
