"""Storage-related data models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

IPFS_SCHEME = "ipfs://"
DEFAULT_GATEWAY = "https://nftstorage.link/ipfs/"


class StoreResult(BaseModel):
    """Result of storing an NFT.

    ipnft is the root CID of the stored asset; url points at its metadata.json
    and data echoes the metadata with files replaced by ipfs:// URLs.
    """

    ipnft: str
    url: str
    data: dict[str, Any] = Field(default_factory=dict)

    def embed(self, gateway: str = DEFAULT_GATEWAY) -> dict[str, Any]:
        """Return the result with every ipfs:// URL rewritten to an HTTP gateway URL."""
        prefix = gateway if gateway.endswith("/") else f"{gateway}/"
        return {
            "ipnft": self.ipnft,
            "url": _to_gateway(self.url, prefix),
            "data": _to_gateway(self.data, prefix),
        }


def _to_gateway(value: Any, prefix: str) -> Any:
    if isinstance(value, str):
        if value.startswith(IPFS_SCHEME):
            return f"{prefix}{value[len(IPFS_SCHEME):]}"
        return value
    if isinstance(value, dict):
        return {key: _to_gateway(item, prefix) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_gateway(item, prefix) for item in value]
    return value
