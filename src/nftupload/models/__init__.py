"""NFT upload data models."""

from nftupload.models.metadata import DEFAULT_ATTRIBUTES, NFTAttribute, NFTMetadata
from nftupload.models.storage import StoreResult
from nftupload.models.upload import FileContent, UploadRequest

__all__ = [
    "DEFAULT_ATTRIBUTES",
    "FileContent",
    "NFTAttribute",
    "NFTMetadata",
    "StoreResult",
    "UploadRequest",
]
