"""
Animal Entity - An adoption listing published by a user.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4
from adoption_api.domain.value_objects.animal_id import AnimalId
from adoption_api.domain.value_objects.user_id import UserId


@dataclass
class Animal:
    id: AnimalId
    name: str
    type: str
    gender: str
    race: str
    description: str
    user_id: UserId
    created_at: datetime
    # Raw picture payloads, in upload order
    pictures: list[bytes] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        name: str,
        type: str,
        gender: str,
        race: str,
        description: str,
        user_id: UserId,
        pictures: list[bytes],
    ) -> Animal:
        """Factory method to create a new Animal with a generated ID and timestamp."""
        return cls(
            id=AnimalId(str(uuid4())),
            name=name,
            type=type,
            gender=gender,
            race=race,
            description=description,
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
            pictures=list(pictures),
        )
