"""
Resolve Chat Command - return the chat between two users, creating it once.

Flow:
1. Symmetric lookup: (user1, user2) OR (user2, user1)
2. Not found: create in the caller's orientation
3. Creation lost a race (pair-key unique index fired): look up again

The unique index on the normalized pair is what makes concurrent first
contacts converge on a single row; this handler never locks.

Returns:
    Success(Chat) for an existing or newly created chat
    Failure(reason) when both ids are the same user or a user is unknown
"""

from dataclasses import dataclass
from logging import getLogger
from adoption_api.application.common.interfaces import Command, CommandHandler
from adoption_api.domain.entities.chat import Chat
from adoption_api.domain.exceptions import (
    ChatAlreadyExistsError,
    ReferentialIntegrityError,
)
from adoption_api.domain.outcome import Failure, Outcome, Success
from adoption_api.domain.ports.repositories import ChatRepository
from adoption_api.domain.value_objects.user_id import UserId

logger = getLogger(__name__)


@dataclass(frozen=True)
class ResolveChatCommand(Command[Outcome[Chat]]):
    user1_id: UserId
    user2_id: UserId


class ResolveChatHandler(CommandHandler[Outcome[Chat]]):
    def __init__(self, chat_repository: ChatRepository):
        self._chat_repository = chat_repository

    async def execute(self, command: ResolveChatCommand) -> Outcome[Chat]:
        if command.user1_id == command.user2_id:
            return Failure("Cannot start a chat with yourself")

        existing = await self._chat_repository.find_by_user_pair(
            command.user1_id, command.user2_id
        )
        if existing:
            return Success(existing)

        try:
            chat = await self._chat_repository.create(
                Chat.create(user1_id=command.user1_id, user2_id=command.user2_id)
            )
            logger.info(f"[CHATS] Created chat {chat.id.value} ({chat.pair_key})")
            return Success(chat)
        except ReferentialIntegrityError as e:
            logger.warning(f"[CHATS] Rejected chat: {e.message}")
            return Failure(e.message)
        except ChatAlreadyExistsError as e:
            logger.info(f"[CHATS] Concurrent creation for {e.pair_key}, reusing winner")

        winner = await self._chat_repository.find_by_user_pair(
            command.user1_id, command.user2_id
        )
        if winner is None:
            # The unique index fired, so the row must be visible now
            raise RuntimeError(
                f"Chat for {command.user1_id.value}/{command.user2_id.value} "
                "vanished after a unique violation"
            )
        return Success(winner)
