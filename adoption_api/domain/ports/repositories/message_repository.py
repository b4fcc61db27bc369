"""
Message Repository Port - Interface for message persistence.
Implementation: adoption_api/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod
from adoption_api.domain.entities.message import Message


class MessageRepository(ABC):
    @abstractmethod
    async def save(self, message: Message) -> None: ...
