"""List Chats Query - every chat of a user with its latest message."""

from dataclasses import dataclass
from adoption_api.application.common.interfaces import Query, QueryHandler
from adoption_api.domain.entities.chat import ChatPreview
from adoption_api.domain.ports.repositories import ChatRepository
from adoption_api.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListChatsQuery(Query[list[ChatPreview]]):
    user_id: UserId


class ListChatsHandler(QueryHandler[list[ChatPreview]]):
    def __init__(self, chat_repository: ChatRepository):
        self._chat_repository = chat_repository

    async def execute(self, query: ListChatsQuery) -> list[ChatPreview]:
        return await self._chat_repository.list_with_last_message(query.user_id)
