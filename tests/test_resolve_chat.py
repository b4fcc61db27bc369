"""
Unit tests for chat pair resolution.

Run with: pytest tests/test_resolve_chat.py -v
"""

import asyncio
import pytest
from adoption_api.application.commands.chats import (
    ResolveChatCommand,
    ResolveChatHandler,
)
from adoption_api.domain.value_objects import UserId
from tests.conftest import ALICE, BOB, CAROL
from tests.fakes import InMemoryChatRepository

A, B, C = UserId(ALICE), UserId(BOB), UserId(CAROL)


@pytest.fixture()
def chat_repo(store):
    return InMemoryChatRepository(store)


@pytest.mark.asyncio
async def test_first_contact_creates_chat_in_callers_orientation(store, chat_repo):
    chat = (await ResolveChatHandler(chat_repo).execute(ResolveChatCommand(A, B))).value

    assert (chat.user1_id, chat.user2_id) == (A, B)
    assert store.chats == [chat]


@pytest.mark.asyncio
async def test_lookup_is_symmetric(chat_repo):
    created = (await ResolveChatHandler(chat_repo).execute(ResolveChatCommand(A, B))).value

    assert await chat_repo.find_by_user_pair(A, B) == created
    assert await chat_repo.find_by_user_pair(B, A) == created


@pytest.mark.asyncio
async def test_reverse_orientation_reuses_existing_chat(store, chat_repo):
    handler = ResolveChatHandler(chat_repo)

    first = (await handler.execute(ResolveChatCommand(A, B))).value
    second = (await handler.execute(ResolveChatCommand(B, A))).value

    assert second.id == first.id
    assert len(store.chats) == 1


@pytest.mark.asyncio
async def test_different_pairs_get_different_chats(store, chat_repo):
    handler = ResolveChatHandler(chat_repo)

    ab = (await handler.execute(ResolveChatCommand(A, B))).value
    ac = (await handler.execute(ResolveChatCommand(A, C))).value

    assert ab.id != ac.id
    assert len(store.chats) == 2


@pytest.mark.asyncio
async def test_concurrent_first_contacts_store_exactly_one_chat(store, chat_repo):
    handler = ResolveChatHandler(chat_repo)
    commands = [
        ResolveChatCommand(A, B) if i % 2 else ResolveChatCommand(B, A)
        for i in range(10)
    ]

    outcomes = await asyncio.gather(*(handler.execute(cmd) for cmd in commands))

    assert len(store.chats) == 1
    assert {outcome.value.id for outcome in outcomes} == {store.chats[0].id}


@pytest.mark.asyncio
async def test_chat_with_yourself_is_rejected(store, chat_repo):
    result = await ResolveChatHandler(chat_repo).execute(ResolveChatCommand(A, A))

    assert result.is_failure()
    assert result.reason == "Cannot start a chat with yourself"
    assert store.chats == []


@pytest.mark.asyncio
async def test_unknown_counterpart_is_rejected(store, chat_repo):
    result = await ResolveChatHandler(chat_repo).execute(
        ResolveChatCommand(A, UserId("user-nobody"))
    )

    assert result.is_failure()
    assert "user-nobody" in result.reason
    assert store.chats == []
