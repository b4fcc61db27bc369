"""Chat DTOs for API request/response."""

from datetime import datetime
from pydantic import BaseModel
from typing import Optional


class UserSummaryDTO(BaseModel):
    """Minimal identity projection, shared by every chat response."""

    id: str
    name: Optional[str] = None


class MessageDTO(BaseModel):
    """DTO for message data returned to frontend."""

    id: str
    chat_id: str
    sender_id: str
    content: str
    created_at: datetime


class ChatDTO(BaseModel):
    id: str
    user1_id: str
    user2_id: str
    created_at: datetime


class ChatPreviewDTO(BaseModel):
    id: str
    created_at: datetime
    user1: UserSummaryDTO
    user2: UserSummaryDTO
    last_message: Optional[MessageDTO] = None


class ChatDetailDTO(BaseModel):
    id: str
    created_at: datetime
    user1: UserSummaryDTO
    user2: UserSummaryDTO
    messages: list[MessageDTO]
