"""
AnimalId Value Object - UUID wrapper for listing identity.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AnimalId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Animal ID cannot be empty")
        UUID(self.value)

    def __str__(self) -> str:
        return self.value
