"""
Prisma Chat Repository Implementation.

Read paths:
- list_with_last_message: every chat of a user, newest message only
  (created_at desc, id desc, take 1)
- get_with_messages: one chat, filtered by id AND membership, full history
  (created_at asc, id asc)

Both expose participants through the same UserSummary projection.
"""

from logging import getLogger
from typing import Any, Optional
from prisma import Prisma
from prisma.errors import ForeignKeyViolationError, UniqueViolationError
from prisma.models import Chat as PrismaChat
from prisma.models import Message as PrismaMessage
from prisma.models import User as PrismaUser
from adoption_api.domain.entities.chat import Chat, ChatDetail, ChatPreview
from adoption_api.domain.entities.message import Message
from adoption_api.domain.entities.user import UserSummary
from adoption_api.domain.exceptions import (
    ChatAlreadyExistsError,
    ReferentialIntegrityError,
)
from adoption_api.domain.ports.repositories import ChatRepository
from adoption_api.domain.value_objects.chat_id import ChatId
from adoption_api.domain.value_objects.message_id import MessageId
from adoption_api.domain.value_objects.user_id import UserId

logger = getLogger(__name__)

# Participants are always loaded and projected the same way
PARTICIPANTS_INCLUDE: dict[str, Any] = {"user1": True, "user2": True}

NEWEST_FIRST = [{"created_at": "desc"}, {"id": "desc"}]
OLDEST_FIRST = [{"created_at": "asc"}, {"id": "asc"}]


def _membership(user_id: UserId) -> list[dict[str, str]]:
    return [{"user1_id": user_id.value}, {"user2_id": user_id.value}]


def to_user_summary(record: PrismaUser) -> UserSummary:
    """The one projection of a user this service exposes: id and name."""
    return UserSummary(id=UserId(record.id), name=record.name)


class PrismaChatRepository(ChatRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaChat) -> Chat:
        return Chat(
            id=ChatId(record.id),
            user1_id=UserId(record.user1_id),
            user2_id=UserId(record.user2_id),
            created_at=record.created_at,
        )

    def _to_message(self, record: PrismaMessage) -> Message:
        return Message(
            id=MessageId(record.id),
            chat_id=ChatId(record.chat_id),
            sender_id=UserId(record.sender_id),
            content=record.content,
            created_at=record.created_at,
        )

    async def find_by_user_pair(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Chat]:
        record = await self._prisma.chat.find_first(
            where={
                "OR": [
                    {"user1_id": user_a.value, "user2_id": user_b.value},
                    {"user1_id": user_b.value, "user2_id": user_a.value},
                ]
            }
        )
        return self._to_entity(record) if record else None

    async def create(self, chat: Chat) -> Chat:
        try:
            record = await self._prisma.chat.create(
                data={
                    "id": chat.id.value,
                    "user1_id": chat.user1_id.value,
                    "user2_id": chat.user2_id.value,
                    "pair_key": chat.pair_key,
                    "created_at": chat.created_at,
                }
            )
        except UniqueViolationError as e:
            raise ChatAlreadyExistsError(chat.pair_key) from e
        except ForeignKeyViolationError as e:
            raise ReferentialIntegrityError(
                f"Unknown user in pair {chat.pair_key}"
            ) from e
        return self._to_entity(record)

    async def list_with_last_message(self, user_id: UserId) -> list[ChatPreview]:
        records = await self._prisma.chat.find_many(
            where={"OR": _membership(user_id)},
            order={"created_at": "desc"},
            include={
                "messages": {"order_by": NEWEST_FIRST, "take": 1},
                **PARTICIPANTS_INCLUDE,
            },
        )
        return [
            ChatPreview(
                chat=self._to_entity(record),
                user1=to_user_summary(record.user1),
                user2=to_user_summary(record.user2),
                last_message=(
                    self._to_message(record.messages[0]) if record.messages else None
                ),
            )
            for record in records
        ]

    async def get_with_messages(
        self, user_id: UserId, chat_id: ChatId
    ) -> Optional[ChatDetail]:
        record = await self._prisma.chat.find_first(
            where={"id": chat_id.value, "OR": _membership(user_id)},
            include={
                "messages": {"order_by": OLDEST_FIRST},
                **PARTICIPANTS_INCLUDE,
            },
        )
        if record is None:
            return None

        return ChatDetail(
            chat=self._to_entity(record),
            user1=to_user_summary(record.user1),
            user2=to_user_summary(record.user2),
            messages=[self._to_message(m) for m in record.messages or []],
        )
