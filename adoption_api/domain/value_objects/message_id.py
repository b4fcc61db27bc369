"""
MessageId Value Object - identity of a direct message inside a chat.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class MessageId:
    value: str  # generated by Message.create() or the database default

    def __post_init__(self):
        if not self.value:
            raise ValueError("MessageId cannot be empty")
        UUID(self.value)  # must be a UUID string

    def __str__(self) -> str:
        return self.value
