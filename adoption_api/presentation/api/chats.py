"""
Chats API Router - direct messages between two users.

Endpoints:
- POST /chats            - open (or reuse) the chat with another user
- GET  /chats            - all chats of the current user, newest message only
- GET  /chats/{chat_id}  - one chat with its full history, oldest first
- POST /chats/messages   - send a message, opening the chat if needed

A chat the current user is not part of answers 404, exactly like a chat that
does not exist.
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from adoption_api.application.commands.chats import (
    ResolveChatCommand,
    ResolveChatHandler,
    SendMessageCommand,
    SendMessageHandler,
)
from adoption_api.application.queries.chats import (
    GetChatDetailHandler,
    GetChatDetailQuery,
    ListChatsHandler,
    ListChatsQuery,
)
from adoption_api.application.dto.chat import (
    ChatDetailDTO,
    ChatDTO,
    ChatPreviewDTO,
    MessageDTO,
)
from adoption_api.application.dto.mappers import (
    chat_to_dto,
    detail_to_dto,
    message_to_dto,
    preview_to_dto,
)
from adoption_api.domain.exceptions import EntityNotFoundError
from adoption_api.domain.value_objects.chat_id import ChatId
from adoption_api.domain.value_objects.user_id import UserId
from adoption_api.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class OpenChatRequest(BaseModel):
    """Request body for opening a chat."""

    user_id: str


class SendMessageRequest(BaseModel):
    recipient_id: str
    content: str


class ListChatsResponse(BaseModel):
    chats: list[ChatPreviewDTO]


# ==================== ROUTER ====================

router = APIRouter(prefix="/chats", tags=["chats"])


def _other_user(raw_id: str) -> UserId:
    try:
        return UserId(raw_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        ) from e


# ==================== ENDPOINTS ====================


@router.post("", response_model=ChatDTO, status_code=status.HTTP_200_OK)
@inject
async def open_chat(
    request: OpenChatRequest,
    handler: FromDishka[ResolveChatHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Return the chat with another user, creating it on first contact."""
    result = await handler.execute(
        ResolveChatCommand(user1_id=current_user.id, user2_id=_other_user(request.user_id))
    )
    if result.is_failure():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.reason)

    return chat_to_dto(result.value)


@router.get("", response_model=ListChatsResponse, status_code=status.HTTP_200_OK)
@inject
async def list_chats(
    handler: FromDishka[ListChatsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    List all chats of the current user.

    {
        "chats": [
            {"id": "uuid", "user1": {...}, "user2": {...}, "last_message": {...} | null},
            ...
        ]
    }
    """
    previews = await handler.execute(ListChatsQuery(user_id=current_user.id))
    return ListChatsResponse(chats=[preview_to_dto(p) for p in previews])


@router.post(
    "/messages", response_model=MessageDTO, status_code=status.HTTP_201_CREATED
)
@inject
async def send_message(
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(
        SendMessageCommand(
            sender_id=current_user.id,
            recipient_id=_other_user(request.recipient_id),
            content=request.content,
        )
    )
    if result.is_failure():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.reason)

    return message_to_dto(result.value)


@router.get("/{chat_id}", response_model=ChatDetailDTO, status_code=status.HTTP_200_OK)
@inject
async def get_chat(
    chat_id: str,
    handler: FromDishka[GetChatDetailHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Get one chat with every message, oldest first."""
    try:
        parsed_id = ChatId(chat_id)
    except ValueError as e:
        # Malformed id: same answer as an unknown chat
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Chat {chat_id} not found"
        ) from e

    try:
        detail = await handler.execute(
            GetChatDetailQuery(user_id=current_user.id, chat_id=parsed_id)
        )
        return detail_to_dto(detail)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
