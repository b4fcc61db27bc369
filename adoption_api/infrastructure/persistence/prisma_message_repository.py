"""
Prisma Message Repository Implementation.

Messages are insert-only; ordering is applied by the chat read paths.
"""

from prisma import Prisma
from prisma.errors import ForeignKeyViolationError
from adoption_api.domain.entities.message import Message
from adoption_api.domain.exceptions import ReferentialIntegrityError
from adoption_api.domain.ports.repositories.message_repository import MessageRepository


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    async def save(self, message: Message) -> None:
        """
        Insert a message.

        Args:
            message: Message entity to persist

        Raises:
            ReferentialIntegrityError: if the chat or sender no longer exists
        """
        try:
            await self._prisma.message.create(
                data={
                    "id": message.id.value,
                    "chat_id": message.chat_id.value,
                    "sender_id": message.sender_id.value,
                    "content": message.content,
                    "created_at": message.created_at,
                }
            )
        except ForeignKeyViolationError as e:
            raise ReferentialIntegrityError(
                f"Chat {message.chat_id.value} or sender does not exist"
            ) from e
