"""
GetChatDetail Query - one chat with its full message history.

Used by the frontend chat window when a conversation is opened.
"""

from dataclasses import dataclass

from adoption_api.application.common.interfaces import Query, QueryHandler
from adoption_api.domain.entities.chat import ChatDetail
from adoption_api.domain.exceptions import EntityNotFoundError
from adoption_api.domain.ports.repositories import ChatRepository
from adoption_api.domain.value_objects.chat_id import ChatId
from adoption_api.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetChatDetailQuery(Query[ChatDetail]):
    user_id: UserId
    chat_id: ChatId


class GetChatDetailHandler(QueryHandler[ChatDetail]):
    def __init__(self, chat_repository: ChatRepository):
        self._chat_repository = chat_repository

    async def execute(self, query: GetChatDetailQuery) -> ChatDetail:
        """
        Get chat with messages, oldest first.

        Raises:
            EntityNotFoundError: if the chat doesn't exist or the user is not
                one of its two members. Both cases share one message so the
                response never reveals whether the chat exists.
        """
        detail = await self._chat_repository.get_with_messages(
            query.user_id, query.chat_id
        )
        if detail is None:
            raise EntityNotFoundError(f"Chat {query.chat_id.value} not found")
        return detail
