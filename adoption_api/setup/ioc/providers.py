"""
Dishka providers for the application layer.

Handlers only ask for repository PORTS (abstract classes). Which implementation
answers is decided by whichever storage provider sits next to this one in the
container: PrismaProvider in production, an in-memory provider in tests.

Flow:
  Container → provides → PrismaChatRepository → to → ResolveChatHandler
                                 ↓
                         uses ChatRepository interface
"""

from dishka import Provider, Scope, provide
from adoption_api.domain.ports.repositories import (
    AnimalRepository,
    ChatRepository,
    MessageRepository,
)
from adoption_api.application.commands.animals import CreateAnimalHandler
from adoption_api.application.commands.chats import (
    ResolveChatHandler,
    SendMessageHandler,
)
from adoption_api.application.queries.chats import (
    GetChatDetailHandler,
    ListChatsHandler,
)


class ApplicationProvider(Provider):
    """Registers every command/query handler."""

    # ==================== ANIMAL HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_animal_handler(
        self, animal_repository: AnimalRepository
    ) -> CreateAnimalHandler:
        """
        Provide CreateAnimalHandler.

        - Parameter asks for AnimalRepository (abstract)
        - Dishka resolves it through the storage provider
        """
        return CreateAnimalHandler(animal_repository)

    # ==================== CHAT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_resolve_chat_handler(
        self, chat_repository: ChatRepository
    ) -> ResolveChatHandler:
        return ResolveChatHandler(chat_repository)

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        resolve_chat_handler: ResolveChatHandler,
        message_repository: MessageRepository,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            resolve_chat_handler=resolve_chat_handler,
            msg_repo=message_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_chats_handler(self, chat_repository: ChatRepository) -> ListChatsHandler:
        return ListChatsHandler(chat_repository)

    @provide(scope=Scope.REQUEST)
    def get_chat_detail_handler(
        self, chat_repository: ChatRepository
    ) -> GetChatDetailHandler:
        return GetChatDetailHandler(chat_repository)
