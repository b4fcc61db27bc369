"""
In-memory implementations of the repository ports.

They honour the same contracts as the Prisma repositories:
- an animal and its pictures become visible together or not at all
- chats are unique per unordered pair (pair_key), like the unique index
- read paths order messages by (created_at, id)

Every method yields to the event loop once, which is where the Prisma
repositories suspend on I/O, so concurrent tests interleave realistically.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Optional
from dishka import Provider, Scope, provide
from adoption_api.domain.entities import (
    Animal,
    Chat,
    ChatDetail,
    ChatPreview,
    Message,
    UserSummary,
)
from adoption_api.domain.exceptions import (
    ChatAlreadyExistsError,
    ReferentialIntegrityError,
)
from adoption_api.domain.ports.repositories import (
    AnimalRepository,
    ChatRepository,
    MessageRepository,
)
from adoption_api.domain.value_objects import ChatId, UserId


@dataclass
class InMemoryStore:
    users: dict[str, Optional[str]] = field(default_factory=dict)
    animals: list[Animal] = field(default_factory=list)
    # (animal_id, position, data), like the AnimalPicture table
    pictures: list[tuple[str, int, bytes]] = field(default_factory=list)
    chats: list[Chat] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)

    def add_user(self, user_id: str, name: Optional[str] = None) -> UserId:
        self.users[user_id] = name
        return UserId(user_id)

    def summary(self, user_id: UserId) -> UserSummary:
        return UserSummary(id=user_id, name=self.users.get(user_id.value))


class StorageUnavailableError(Exception):
    """Injected fault standing in for a dropped database connection."""


class InMemoryAnimalRepository(AnimalRepository):
    def __init__(self, store: InMemoryStore, fail_at_picture: Optional[int] = None):
        self._store = store
        self._fail_at_picture = fail_at_picture

    async def create(self, animal: Animal) -> Animal:
        await asyncio.sleep(0)
        if animal.user_id.value not in self._store.users:
            raise ReferentialIntegrityError(
                f"User {animal.user_id.value} does not exist"
            )

        # Stage everything, then publish in one step
        staged: list[tuple[str, int, bytes]] = []
        for position, data in enumerate(animal.pictures):
            if position == self._fail_at_picture:
                raise StorageUnavailableError("connection lost mid-write")
            staged.append((animal.id.value, position, bytes(data)))

        self._store.animals.append(animal)
        self._store.pictures.extend(staged)
        return self.read_back(animal.id.value)

    def read_back(self, animal_id: str) -> Animal:
        stored = next(a for a in self._store.animals if a.id.value == animal_id)
        rows = sorted(
            (p for p in self._store.pictures if p[0] == animal_id), key=lambda p: p[1]
        )
        return Animal(
            id=stored.id,
            name=stored.name,
            type=stored.type,
            gender=stored.gender,
            race=stored.race,
            description=stored.description,
            user_id=stored.user_id,
            created_at=stored.created_at,
            pictures=[data for _, _, data in rows],
        )


class InMemoryChatRepository(ChatRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def find_by_user_pair(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Chat]:
        await asyncio.sleep(0)
        for chat in self._store.chats:
            if (chat.user1_id, chat.user2_id) in ((user_a, user_b), (user_b, user_a)):
                return chat
        return None

    async def create(self, chat: Chat) -> Chat:
        await asyncio.sleep(0)
        for user_id in (chat.user1_id, chat.user2_id):
            if user_id.value not in self._store.users:
                raise ReferentialIntegrityError(f"Unknown user {user_id.value}")
        if any(c.pair_key == chat.pair_key for c in self._store.chats):
            raise ChatAlreadyExistsError(chat.pair_key)
        self._store.chats.append(chat)
        return chat

    def _messages_of(self, chat: Chat) -> list[Message]:
        return sorted(
            (m for m in self._store.messages if m.chat_id == chat.id),
            key=lambda m: m.sort_key,
        )

    async def list_with_last_message(self, user_id: UserId) -> list[ChatPreview]:
        await asyncio.sleep(0)
        chats = sorted(
            (c for c in self._store.chats if c.has_member(user_id)),
            key=lambda c: c.created_at,
            reverse=True,
        )
        previews = []
        for chat in chats:
            history = self._messages_of(chat)
            previews.append(
                ChatPreview(
                    chat=chat,
                    user1=self._store.summary(chat.user1_id),
                    user2=self._store.summary(chat.user2_id),
                    last_message=history[-1] if history else None,
                )
            )
        return previews

    async def get_with_messages(
        self, user_id: UserId, chat_id: ChatId
    ) -> Optional[ChatDetail]:
        await asyncio.sleep(0)
        chat = next(
            (c for c in self._store.chats if c.id == chat_id and c.has_member(user_id)),
            None,
        )
        if chat is None:
            return None
        return ChatDetail(
            chat=chat,
            user1=self._store.summary(chat.user1_id),
            user2=self._store.summary(chat.user2_id),
            messages=self._messages_of(chat),
        )


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def save(self, message: Message) -> None:
        await asyncio.sleep(0)
        self._store.messages.append(message)


class InMemoryProvider(Provider):
    """Storage provider for tests; pairs with ApplicationProvider."""

    def __init__(self, store: InMemoryStore):
        super().__init__()
        self._store = store

    @provide(scope=Scope.REQUEST)
    def get_animal_repository(self) -> AnimalRepository:
        return InMemoryAnimalRepository(self._store)

    @provide(scope=Scope.REQUEST)
    def get_chat_repository(self) -> ChatRepository:
        return InMemoryChatRepository(self._store)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self) -> MessageRepository:
        return InMemoryMessageRepository(self._store)
