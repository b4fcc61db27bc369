"""Animal DTOs for API request/response."""

from datetime import datetime
from pydantic import BaseModel


class AnimalDTO(BaseModel):
    """DTO for a created listing. Pictures are reported by count, not content."""

    id: str
    name: str
    type: str
    gender: str
    race: str
    description: str
    user_id: str
    created_at: datetime
    pictures_count: int
