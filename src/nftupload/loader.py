"""Read image files from disk into memory."""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from pathlib import Path

from nftupload.errors import FileLoadError
from nftupload.models.upload import FileContent

logger = logging.getLogger(__name__)


def guess_mime_type(path: Path) -> str | None:
    """Best-effort MIME type from the file extension; None when unknown.

    Compressed files (photo.png.gz) are not their inner type, so they are unset.
    """
    guessed, encoding = mimetypes.guess_type(path.name)
    if encoding is not None:
        return None
    return guessed


async def load_file(path: Path) -> FileContent:
    """Read the whole file into memory.

    The entire content is held in memory at once, so this is not suitable for
    very large files.

    Raises:
        FileLoadError: If the file is missing or unreadable
    """
    path = Path(path)
    try:
        data = await asyncio.to_thread(path.read_bytes)
    except OSError as exc:
        raise FileLoadError(path, exc) from exc

    content = FileContent(data=data, filename=path.name, mime_type=guess_mime_type(path))
    logger.debug(
        "Loaded file: %s (%d bytes, type=%s)", content.filename, content.size, content.mime_type
    )
    return content
