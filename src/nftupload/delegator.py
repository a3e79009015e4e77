"""Assemble NFT metadata and hand it to the storage client."""

from __future__ import annotations

import logging
from collections.abc import Callable

from nftupload.errors import FileLoadError, NftUploadError, StoreError
from nftupload.interfaces import NFTStore
from nftupload.loader import load_file
from nftupload.logging_setup import set_image_name
from nftupload.models.metadata import DEFAULT_ATTRIBUTES, NFTAttribute, NFTMetadata
from nftupload.models.storage import StoreResult
from nftupload.models.upload import FileContent, UploadRequest
from nftupload.settings import NftUploadSettings
from nftupload.storage import create_store

logger = logging.getLogger(__name__)

StoreFactory = Callable[[NftUploadSettings], NFTStore]


def build_metadata(
    request: UploadRequest,
    image: FileContent,
    attributes: NFTAttribute | None = None,
) -> NFTMetadata:
    """Build the metadata record; attributes default to DEFAULT_ATTRIBUTES."""
    return NFTMetadata(
        image=image,
        name=request.name,
        description=request.description,
        attributes=attributes if attributes is not None else DEFAULT_ATTRIBUTES,
    )


async def store_nft(
    request: UploadRequest,
    image: FileContent,
    store: NFTStore,
    attributes: NFTAttribute | None = None,
) -> StoreResult:
    """Store one NFT. Errors from the storage client propagate unchanged."""
    metadata = build_metadata(request, image, attributes)
    logger.info(
        "Storing NFT: name=%s image=%s",
        metadata.name,
        image.filename,
        extra={"bytes": image.size, "mime_type": image.mime_type},
    )
    return await store.store(metadata)


async def run_upload(
    request: UploadRequest,
    settings: NftUploadSettings,
    store_factory: StoreFactory = create_store,
) -> StoreResult | NftUploadError:
    """Load the image and store it. Returns StoreResult or an NftUploadError."""
    set_image_name(request.image_path.name)

    try:
        image = await load_file(request.image_path)
    except FileLoadError as e:
        return e

    try:
        store = store_factory(settings)
    except Exception as e:
        return StoreError(request.name, cause=e)

    try:
        return await store_nft(request, image, store, attributes=settings.nft_attributes)
    except Exception as e:
        return StoreError(request.name, cause=e)
    finally:
        try:
            await store.shutdown()
        except Exception as e:
            logger.warning("Store shutdown failed: %s", e, exc_info=True)
