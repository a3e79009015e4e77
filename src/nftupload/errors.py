"""Error hierarchy for NFT upload stages."""

from __future__ import annotations

from pathlib import Path


class UsageError(Exception):
    """Command line arguments do not match the expected shape."""


class NftUploadError(Exception):
    """Base exception for upload stage errors.

    Compatible with error-as-value pattern: instances can be returned as values
    instead of raised. Preserves stack traces via exception chaining.
    """

    def __init__(self, message: str, stage: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.stage = stage
        self.cause = cause
        self.__cause__ = cause  # Python's exception chaining


class FileLoadError(NftUploadError):
    """Image file could not be read from disk."""

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"Failed to read {path}: {cause}", stage="load", cause=cause)
        self.path = path


class StoreError(NftUploadError):
    """Storage client failed to store the NFT."""

    def __init__(self, name: str, cause: Exception) -> None:
        super().__init__(f"Store failed for {name!r}: {cause}", stage="store", cause=cause)
        self.name = name


class NFTStorageAPIError(RuntimeError):
    """NFT.Storage API rejected a request."""

    def __init__(
        self, message: str, *, status: int | None = None, error_name: str | None = None
    ) -> None:
        super().__init__(message)
        self.status = status
        self.error_name = error_name
