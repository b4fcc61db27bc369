"""
Send Message Command - append a direct message, opening the chat if needed.

Returns Failure for blank content or when the chat cannot be opened.
"""

from dataclasses import dataclass
from logging import getLogger
from adoption_api.application.common.interfaces import Command, CommandHandler
from adoption_api.application.commands.chats.resolve_chat import (
    ResolveChatCommand,
    ResolveChatHandler,
)
from adoption_api.domain.entities.message import Message
from adoption_api.domain.exceptions import ReferentialIntegrityError
from adoption_api.domain.outcome import Failure, Outcome, Success
from adoption_api.domain.ports.repositories import MessageRepository
from adoption_api.domain.value_objects.user_id import UserId

logger = getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[Outcome[Message]]):
    sender_id: UserId
    recipient_id: UserId
    content: str


class SendMessageHandler(CommandHandler[Outcome[Message]]):
    def __init__(
        self,
        resolve_chat_handler: ResolveChatHandler,
        msg_repo: MessageRepository,
    ):
        self._resolve_chat = resolve_chat_handler
        self._msg_repo = msg_repo

    async def execute(self, command: SendMessageCommand) -> Outcome[Message]:
        if not command.content or not command.content.strip():
            return Failure("Message content cannot be empty")

        resolved = await self._resolve_chat.execute(
            ResolveChatCommand(user1_id=command.sender_id, user2_id=command.recipient_id)
        )
        if resolved.is_failure():
            return resolved
        chat = resolved.value

        message = Message.create(
            chat_id=chat.id, sender_id=command.sender_id, content=command.content
        )
        try:
            await self._msg_repo.save(message)
        except ReferentialIntegrityError as e:
            logger.warning(f"[CHATS] Rejected message in chat {chat.id.value}: {e.message}")
            return Failure(e.message)

        logger.info(f"[CHATS] Message {message.id.value} stored in chat {chat.id.value}")
        return Success(message)
