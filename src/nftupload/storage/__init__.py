"""Storage clients for NFT uploads."""

from __future__ import annotations

from nftupload.interfaces import NFTStore
from nftupload.settings import NftUploadSettings
from nftupload.storage.nft_storage import NFTStorageClient, encode_metadata


def create_store(settings: NftUploadSettings) -> NFTStore:
    """Create the storage client from settings.

    Raises:
        ValueError: If no API token is configured
    """
    return NFTStorageClient(
        settings.nft_storage_token,
        api_url=settings.nft_storage_api_url,
        timeout_s=settings.nft_storage_timeout_s,
    )


__all__ = [
    "NFTStorageClient",
    "create_store",
    "encode_metadata",
]
