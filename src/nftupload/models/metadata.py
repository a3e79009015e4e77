"""NFT metadata models (OpenSea metadata layout)."""

from __future__ import annotations

from pydantic import BaseModel

from nftupload.models.upload import FileContent


class NFTAttribute(BaseModel):
    """Single trait attached to the NFT."""

    trait_type: str
    value: str


# Placeholder trait used until callers supply their own attributes.
DEFAULT_ATTRIBUTES = NFTAttribute(trait_type="Crayon", value="1")


class NFTMetadata(BaseModel):
    """Metadata record handed to the storage client.

    Fields holding a FileContent are uploaded as files; everything else is
    serialized into the metadata JSON document.
    """

    image: FileContent
    name: str
    description: str
    attributes: NFTAttribute = DEFAULT_ATTRIBUTES
