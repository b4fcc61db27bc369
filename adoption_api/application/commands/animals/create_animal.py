"""
Create Animal Command - publish an adoption listing with its pictures.

Precondition: user_id belongs to an authenticated user. The presentation
layer rejects unauthenticated requests before this handler runs.

Returns:
    Success(Animal) when stored
    Failure(reason) for expected rejections (blank name, unknown owner)

Storage faults other than referential integrity propagate unchanged.
"""

from dataclasses import dataclass, field
from logging import getLogger
from adoption_api.application.common.interfaces import Command, CommandHandler
from adoption_api.domain.entities.animal import Animal
from adoption_api.domain.exceptions import ReferentialIntegrityError
from adoption_api.domain.outcome import Failure, Outcome, Success
from adoption_api.domain.ports.repositories import AnimalRepository
from adoption_api.domain.value_objects.user_id import UserId

logger = getLogger(__name__)


@dataclass(frozen=True)
class CreateAnimalCommand(Command[Outcome[Animal]]):
    name: str
    type: str
    gender: str
    race: str
    description: str
    user_id: UserId
    pictures: list[bytes] = field(default_factory=list)


class CreateAnimalHandler(CommandHandler[Outcome[Animal]]):
    _animal_repository: AnimalRepository

    def __init__(self, animal_repository: AnimalRepository):
        self._animal_repository = animal_repository

    async def execute(self, command: CreateAnimalCommand) -> Outcome[Animal]:
        if not command.name or not command.name.strip():
            return Failure("Animal name is required")

        animal = Animal.create(
            name=command.name.strip(),
            type=command.type,
            gender=command.gender,
            race=command.race,
            description=command.description or "",
            user_id=command.user_id,
            pictures=command.pictures,
        )

        try:
            created = await self._animal_repository.create(animal)
        except ReferentialIntegrityError as e:
            logger.warning(
                f"[ANIMALS] Rejected listing for user {command.user_id.value}: {e.message}"
            )
            return Failure(e.message)

        logger.info(
            f"[ANIMALS] Created animal {created.id.value} for user "
            f"{command.user_id.value} with {len(created.pictures)} picture(s)"
        )
        return Success(created)
