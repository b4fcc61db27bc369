"""
Dishka DI Container Setup (production wiring).

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- make_async_container: Creates the container
"""

from typing import AsyncIterable
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from dishka.integrations.fastapi import FastapiProvider
from prisma import Prisma
from adoption_api.domain.ports.repositories import (
    AnimalRepository,
    ChatRepository,
    MessageRepository,
)
from adoption_api.infrastructure.persistence import (
    PrismaAnimalRepository,
    PrismaChatRepository,
    PrismaMessageRepository,
)
from adoption_api.setup.ioc.providers import ApplicationProvider


class PrismaProvider(Provider):
    """Storage provider: Prisma client and the repositories built on it."""

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE, shared across all requests
        - Disconnected when the container is closed on shutdown
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_animal_repository(self, prisma: Prisma) -> AnimalRepository:
        return PrismaAnimalRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_chat_repository(self, prisma: Prisma) -> ChatRepository:
        """
        Provide ChatRepository implementation.

        - Return type is ABSTRACT (ChatRepository)
        - Implementation is CONCRETE (PrismaChatRepository)
        """
        return PrismaChatRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE at app startup.
    """
    return make_async_container(
        PrismaProvider(), ApplicationProvider(), FastapiProvider()
    )
