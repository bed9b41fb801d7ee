"""
Reads user-selected files into base64 attachments.

Read failures are not contained here: they surface as AttachmentReadError
and the caller decides whether to drop the attachment.
"""

from __future__ import annotations

import asyncio
import base64
import logging
import mimetypes
from pathlib import Path
from typing import Protocol

from app.entities.message import Attachment

DEFAULT_MIME_TYPE = "application/octet-stream"


class AttachmentReadError(Exception):
    """Raised when the contents of a file cannot be read."""

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"Could not read attachment {name}: {cause}")
        self.name = name
        self.cause = cause


class FileSource(Protocol):
    """A file picked by the user, with its declared name and type."""

    name: str
    mime_type: str

    async def read(self) -> bytes: ...


class LocalFile:
    """FileSource backed by a path on disk."""

    def __init__(self, path: str | Path, mime_type: str | None = None) -> None:
        self.path = Path(path)
        self.name = self.path.name
        self.mime_type = (
            mime_type or mimetypes.guess_type(self.path.name)[0] or DEFAULT_MIME_TYPE
        )

    async def read(self) -> bytes:
        return await asyncio.to_thread(self.path.read_bytes)


def to_data_url(mime_type: str, content: bytes) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


class AttachmentService:
    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    async def read_attachment(self, file: FileSource) -> Attachment:
        """
        Read a file and encode it as an attachment.

        Args:
            file: The file to read

        Returns:
            Attachment with the base64 payload of the file's data URL

        Raises:
            AttachmentReadError: If the file cannot be read
        """
        try:
            content = await file.read()
        except Exception as e:
            self.logger.warning("Failed to read attachment %s: %s", file.name, e)
            raise AttachmentReadError(file.name, e) from e

        data_url = to_data_url(file.mime_type, content)

        return {
            "mime_type": file.mime_type,
            "data": data_url.split(",", 1)[1],
            "name": file.name,
        }

    async def read_attachments(self, files: list[FileSource]) -> list[Attachment]:
        """Read several files concurrently, keeping their order."""
        return list(await asyncio.gather(*(self.read_attachment(f) for f in files)))
