"""
DOMAIN EXCEPTIONS - Business rule violations and storage faults

These exceptions are raised by domain/application logic and repositories.
Presentation layer maps them to HTTP status codes.
"""

from adoption_api.domain.exceptions.entity_not_found import EntityNotFoundError
from adoption_api.domain.exceptions.integrity import (
    ChatAlreadyExistsError,
    ReferentialIntegrityError,
)
from adoption_api.domain.exceptions.attachment import AttachmentReadError

__all__ = [
    "EntityNotFoundError",
    "ChatAlreadyExistsError",
    "ReferentialIntegrityError",
    "AttachmentReadError",
]
