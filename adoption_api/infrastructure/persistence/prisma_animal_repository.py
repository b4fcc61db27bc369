"""
Prisma Animal Repository Implementation.

The animal row and its pictures are written by ONE nested create, which Prisma
runs in a single transaction: either everything is stored or nothing is.

Mapping:
- Prisma Animal.pictures (AnimalPicture, ordered by position) ←→ Animal.pictures (list[bytes])
- AnimalPicture.data is a Bytes column, exchanged as prisma.Base64
"""

from logging import getLogger
from prisma import Base64, Prisma
from prisma.errors import ForeignKeyViolationError
from prisma.models import Animal as PrismaAnimal
from adoption_api.domain.entities.animal import Animal
from adoption_api.domain.exceptions import ReferentialIntegrityError
from adoption_api.domain.ports.repositories import AnimalRepository
from adoption_api.domain.value_objects.animal_id import AnimalId
from adoption_api.domain.value_objects.user_id import UserId

logger = getLogger(__name__)

PICTURES_IN_ORDER = {"pictures": {"order_by": {"position": "asc"}}}


class PrismaAnimalRepository(AnimalRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaAnimal) -> Animal:
        """Map Prisma record to domain entity."""
        pictures = sorted(record.pictures or [], key=lambda p: p.position)
        return Animal(
            id=AnimalId(record.id),
            name=record.name,
            type=record.type,
            gender=record.gender,
            race=record.race,
            description=record.description,
            user_id=UserId(record.user_id),
            created_at=record.created_at,
            pictures=[p.data.decode() for p in pictures],
        )

    async def create(self, animal: Animal) -> Animal:
        try:
            record = await self._prisma.animal.create(
                data={
                    "id": animal.id.value,
                    "name": animal.name,
                    "type": animal.type,
                    "gender": animal.gender,
                    "race": animal.race,
                    "description": animal.description,
                    "user_id": animal.user_id.value,
                    "created_at": animal.created_at,
                    "pictures": {
                        "create": [
                            {"position": position, "data": Base64.encode(data)}
                            for position, data in enumerate(animal.pictures)
                        ]
                    },
                },
                include=PICTURES_IN_ORDER,
            )
        except ForeignKeyViolationError as e:
            logger.warning(f"[ANIMALS] Foreign key violation: {e}")
            raise ReferentialIntegrityError(
                f"User {animal.user_id.value} does not exist"
            ) from e

        return self._to_entity(record)
