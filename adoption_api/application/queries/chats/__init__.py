"""Chat-related queries."""

from adoption_api.application.queries.chats.list_chats import (
    ListChatsQuery,
    ListChatsHandler,
)
from adoption_api.application.queries.chats.get_chat_detail import (
    GetChatDetailQuery,
    GetChatDetailHandler,
)

__all__ = [
    "ListChatsQuery",
    "ListChatsHandler",
    "GetChatDetailQuery",
    "GetChatDetailHandler",
]
