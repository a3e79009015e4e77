"""Store images as NFT assets on NFT.Storage."""

__version__ = "0.1.0"

# Export commonly used types
from nftupload.errors import NftUploadError
from nftupload.models.metadata import NFTAttribute, NFTMetadata
from nftupload.models.storage import StoreResult
from nftupload.models.upload import FileContent, UploadRequest

__all__ = [
    "FileContent",
    "NFTAttribute",
    "NFTMetadata",
    "NftUploadError",
    "StoreResult",
    "UploadRequest",
    "__version__",
]
