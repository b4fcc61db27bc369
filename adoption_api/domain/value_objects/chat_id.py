"""
ChatId Value Object - UUID wrapper for chat identity.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class ChatId:
    value: str  # chat_id, presented as UUID string

    def __post_init__(self):
        if not self.value:
            raise ValueError("Chat ID cannot be empty")
        UUID(self.value)  # raises ValueError if invalid UUID

    def __str__(self) -> str:
        return self.value
