"""Interface definitions for NFT upload components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nftupload.models.metadata import NFTMetadata
    from nftupload.models.storage import StoreResult


class Shutdownable(ABC):
    """Async shutdown interface for managed components."""

    @abstractmethod
    async def shutdown(self, timeout: float | None = None) -> None:
        """Release resources and stop background work."""
        raise NotImplementedError


class NFTStore(Shutdownable, ABC):
    """Stores NFT metadata together with its files.

    Content addressing, chunking and pinning are the implementation's concern.
    """

    @abstractmethod
    async def store(self, metadata: NFTMetadata) -> StoreResult:
        """Upload files and metadata. Returns the stored token reference."""
        raise NotImplementedError

    @abstractmethod
    async def ping(self) -> bool:
        """Health check. Returns True if the storage service is reachable."""
        raise NotImplementedError
