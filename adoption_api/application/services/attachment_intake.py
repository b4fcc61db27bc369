"""
Attachment Intake - turns uploaded picture handles into raw byte buffers.

Usage:
    pictures = await read_attachments(files)  # files: list[UploadFile]

Order is preserved: pictures[i] is the content of files[i].
"""

import inspect
import logging
from typing import Any, Protocol, Sequence

from adoption_api.domain.exceptions import AttachmentReadError

logger = logging.getLogger(__name__)


class BinaryUpload(Protocol):
    """Anything exposing read(), sync or async, e.g. fastapi.UploadFile."""

    def read(self, size: int = -1) -> Any: ...


async def read_attachments(uploads: Sequence[BinaryUpload]) -> list[bytes]:
    """
    Read every upload fully, in order.

    Raises:
        AttachmentReadError: if an upload has no readable binary content
    """
    buffers: list[bytes] = []
    for index, upload in enumerate(uploads):
        read = getattr(upload, "read", None)
        if not callable(read):
            raise AttachmentReadError(index, "upload has no read()")

        try:
            data = read()
            if inspect.isawaitable(data):
                data = await data
        except (OSError, ValueError) as e:
            # ValueError: read on a closed file
            raise AttachmentReadError(index, f"read failed: {e}") from e

        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise AttachmentReadError(
                index, f"expected bytes, got {type(data).__name__}"
            )
        buffers.append(bytes(data))

    logger.debug(f"[ATTACHMENTS] Read {len(buffers)} picture(s)")
    return buffers
