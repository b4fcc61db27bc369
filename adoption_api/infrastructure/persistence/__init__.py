"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from adoption_api.infrastructure.persistence.prisma_animal_repository import (
    PrismaAnimalRepository,
)
from adoption_api.infrastructure.persistence.prisma_chat_repository import (
    PrismaChatRepository,
)
from adoption_api.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)

__all__ = [
    "PrismaAnimalRepository",
    "PrismaChatRepository",
    "PrismaMessageRepository",
]
