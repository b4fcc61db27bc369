"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)
"""

from adoption_api.domain.ports.repositories.animal_repository import AnimalRepository
from adoption_api.domain.ports.repositories.chat_repository import ChatRepository
from adoption_api.domain.ports.repositories.message_repository import MessageRepository

__all__ = [
    "AnimalRepository",
    "ChatRepository",
    "MessageRepository",
]
