"""Chat commands."""

from .resolve_chat import ResolveChatCommand, ResolveChatHandler
from .send_message import SendMessageCommand, SendMessageHandler

__all__ = [
    "ResolveChatCommand",
    "ResolveChatHandler",
    "SendMessageCommand",
    "SendMessageHandler",
]
