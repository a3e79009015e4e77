"""Upload input models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class UploadRequest(BaseModel):
    """Positional CLI arguments for a single upload run."""

    model_config = ConfigDict(frozen=True)

    image_path: Path
    name: str
    description: str


class FileContent(BaseModel):
    """In-memory copy of a file read from disk."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    filename: str
    mime_type: str | None = None  # None when the extension is unknown

    @property
    def size(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return (
            f"FileContent(filename={self.filename!r}, mime_type={self.mime_type!r}, "
            f"size={self.size})"
        )
