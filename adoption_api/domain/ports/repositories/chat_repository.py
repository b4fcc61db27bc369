"""
Chat Repository Port - Interface for chat persistence and the two read paths.
Implementation: adoption_api/infrastructure/persistence/prisma_chat_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from adoption_api.domain.entities.chat import Chat, ChatDetail, ChatPreview
from adoption_api.domain.value_objects.chat_id import ChatId
from adoption_api.domain.value_objects.user_id import UserId


class ChatRepository(ABC):
    @abstractmethod
    async def find_by_user_pair(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Chat]:
        """Find the chat between two users, in either orientation."""
        ...

    @abstractmethod
    async def create(self, chat: Chat) -> Chat:
        """
        Insert a new chat.

        Raises:
            ChatAlreadyExistsError: if a chat for the same unordered pair exists
        """
        ...

    @abstractmethod
    async def list_with_last_message(self, user_id: UserId) -> list[ChatPreview]: ...

    @abstractmethod
    async def get_with_messages(
        self, user_id: UserId, chat_id: ChatId
    ) -> Optional[ChatDetail]: ...
