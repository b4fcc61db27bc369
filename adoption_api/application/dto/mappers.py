"""Entity → DTO mapping shared by the routers."""

from adoption_api.application.dto.animal import AnimalDTO
from adoption_api.application.dto.chat import (
    ChatDetailDTO,
    ChatDTO,
    ChatPreviewDTO,
    MessageDTO,
    UserSummaryDTO,
)
from adoption_api.domain.entities import (
    Animal,
    Chat,
    ChatDetail,
    ChatPreview,
    Message,
    UserSummary,
)


def animal_to_dto(animal: Animal) -> AnimalDTO:
    return AnimalDTO(
        id=animal.id.value,
        name=animal.name,
        type=animal.type,
        gender=animal.gender,
        race=animal.race,
        description=animal.description,
        user_id=animal.user_id.value,
        created_at=animal.created_at,
        pictures_count=len(animal.pictures),
    )


def user_to_dto(user: UserSummary) -> UserSummaryDTO:
    return UserSummaryDTO(id=user.id.value, name=user.name)


def message_to_dto(message: Message) -> MessageDTO:
    return MessageDTO(
        id=message.id.value,
        chat_id=message.chat_id.value,
        sender_id=message.sender_id.value,
        content=message.content,
        created_at=message.created_at,
    )


def chat_to_dto(chat: Chat) -> ChatDTO:
    return ChatDTO(
        id=chat.id.value,
        user1_id=chat.user1_id.value,
        user2_id=chat.user2_id.value,
        created_at=chat.created_at,
    )


def preview_to_dto(preview: ChatPreview) -> ChatPreviewDTO:
    return ChatPreviewDTO(
        id=preview.chat.id.value,
        created_at=preview.chat.created_at,
        user1=user_to_dto(preview.user1),
        user2=user_to_dto(preview.user2),
        last_message=(
            message_to_dto(preview.last_message) if preview.last_message else None
        ),
    )


def detail_to_dto(detail: ChatDetail) -> ChatDetailDTO:
    return ChatDetailDTO(
        id=detail.chat.id.value,
        created_at=detail.chat.created_at,
        user1=user_to_dto(detail.user1),
        user2=user_to_dto(detail.user2),
        messages=[message_to_dto(m) for m in detail.messages],
    )
