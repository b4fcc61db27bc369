"""Application services shared by several handlers."""

from adoption_api.application.services.attachment_intake import (
    BinaryUpload,
    read_attachments,
)

__all__ = [
    "BinaryUpload",
    "read_attachments",
]
