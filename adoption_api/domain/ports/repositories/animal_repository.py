"""
Animal Repository Port - Interface for listing persistence.
Implementation: adoption_api/infrastructure/persistence/prisma_animal_repository.py
"""

from abc import ABC, abstractmethod
from adoption_api.domain.entities.animal import Animal


class AnimalRepository(ABC):
    @abstractmethod
    async def create(self, animal: Animal) -> Animal:
        """
        Persist the animal and all of its pictures as one atomic write.

        Raises:
            ReferentialIntegrityError: if the owning user does not exist
        """
        ...
