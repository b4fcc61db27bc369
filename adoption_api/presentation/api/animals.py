"""
Animals API Router - publish adoption listings.

Endpoint:
- POST /animals - multipart/form-data
    name, type, gender, race, description: form fields
    pictures: zero or more image files, stored in upload order

Flow:
  HTTP Request → Router → read_attachments → Command → Handler → Repository
                                                          ↓
  HTTP Response ← Router ← Outcome ←
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from dishka.integrations.fastapi import FromDishka, inject

from adoption_api.application.commands.animals import (
    CreateAnimalCommand,
    CreateAnimalHandler,
)
from adoption_api.application.dto.animal import AnimalDTO
from adoption_api.application.dto.mappers import animal_to_dto
from adoption_api.application.services import read_attachments
from adoption_api.presentation.dependencies.auth import AuthUser, get_current_user
from adoption_api.config.settings import Config

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = int(Config.MAX_UPLOAD_MB * 1024 * 1024)

router = APIRouter(prefix="/animals", tags=["animals"])


@router.post("", response_model=AnimalDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_animal(
    handler: FromDishka[CreateAnimalHandler],
    current_user: AuthUser = Depends(get_current_user),
    name: str = Form(...),
    type: str = Form(...),
    gender: str = Form(...),
    race: str = Form(...),
    description: str = Form(default=""),
    pictures: Optional[list[UploadFile]] = File(default=None),
):
    """
    Create an animal listing for the authenticated user.

    Returns 400 when the listing is rejected (e.g. the owner no longer exists).
    """
    uploads = pictures or []
    if len(uploads) > Config.MAX_PICTURES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many pictures. Maximum is {Config.MAX_PICTURES}.",
        )

    buffers = await read_attachments(uploads)

    for index, data in enumerate(buffers):
        if len(data) > MAX_UPLOAD_BYTES:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=(
                    f"Picture {index} too large. "
                    f"Maximum upload size is {Config.MAX_UPLOAD_MB} MB."
                ),
            )

    command = CreateAnimalCommand(
        name=name,
        type=type,
        gender=gender,
        race=race,
        description=description,
        user_id=current_user.id,
        pictures=buffers,
    )

    result = await handler.execute(command)
    if result.is_failure():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.reason)

    return animal_to_dto(result.value)
