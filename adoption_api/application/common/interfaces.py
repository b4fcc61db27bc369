"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class ResolveChatCommand(Command[Outcome[Chat]]):
        user1_id: UserId
        user2_id: UserId

    class ResolveChatHandler(CommandHandler[Outcome[Chat]]):
        def __init__(self, chat_repository: ChatRepository):
            self._chat_repository = chat_repository

        async def execute(self, command: ResolveChatCommand) -> Outcome[Chat]:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
