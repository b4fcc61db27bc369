"""Animal listing commands."""

from .create_animal import CreateAnimalCommand, CreateAnimalHandler

__all__ = [
    "CreateAnimalCommand",
    "CreateAnimalHandler",
]
