"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- animal.py → AnimalDTO
- chat.py   → UserSummaryDTO, MessageDTO, ChatDTO, ChatPreviewDTO, ChatDetailDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from adoption_api.application.dto.animal import AnimalDTO
from adoption_api.application.dto.chat import (
    ChatDetailDTO,
    ChatDTO,
    ChatPreviewDTO,
    MessageDTO,
    UserSummaryDTO,
)

__all__ = [
    "AnimalDTO",
    "ChatDetailDTO",
    "ChatDTO",
    "ChatPreviewDTO",
    "MessageDTO",
    "UserSummaryDTO",
]
