"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from adoption_api.domain.entities.animal import Animal
from adoption_api.domain.entities.chat import Chat, ChatDetail, ChatPreview, make_pair_key
from adoption_api.domain.entities.message import Message
from adoption_api.domain.entities.user import UserSummary

__all__ = [
    "Animal",
    "Chat",
    "ChatDetail",
    "ChatPreview",
    "Message",
    "UserSummary",
    "make_pair_key",
]
