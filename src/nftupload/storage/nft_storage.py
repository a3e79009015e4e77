"""NFT.Storage HTTP client."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp
from pydantic import BaseModel

from nftupload.errors import NFTStorageAPIError
from nftupload.interfaces import NFTStore
from nftupload.models.metadata import NFTMetadata
from nftupload.models.storage import StoreResult
from nftupload.models.upload import FileContent
from nftupload.settings import DEFAULT_API_URL

logger = logging.getLogger(__name__)


def encode_metadata(metadata: BaseModel) -> tuple[dict[str, Any], list[tuple[str, FileContent]]]:
    """Split metadata into the `meta` JSON document and the file parts.

    File fields are replaced by null in the document and sent as separate
    form parts named after the field.
    """
    meta: dict[str, Any] = {}
    files: list[tuple[str, FileContent]] = []
    for field_name in type(metadata).model_fields:
        value = getattr(metadata, field_name)
        if isinstance(value, FileContent):
            meta[field_name] = None
            files.append((field_name, value))
        elif isinstance(value, BaseModel):
            meta[field_name] = value.model_dump(mode="json")
        else:
            meta[field_name] = value
    return meta, files


class NFTStorageClient(NFTStore):
    """Store NFTs through the NFT.Storage `/store` endpoint.

    Sends one multipart request per call; no retries.
    """

    def __init__(
        self,
        token: str | None,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout_s: float | None = None,
    ) -> None:
        if not token:
            raise ValueError("Missing NFT.Storage API token. Set NFT_STORAGE_TOKEN.")
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._timeout_s = timeout_s
        self._session: aiohttp.ClientSession | None = None
        self._shutdown_called = False

        logger.info("NFTStorageClient initialized: api_url=%s", self._api_url)

    async def store(self, metadata: NFTMetadata) -> StoreResult:
        """Upload files and metadata to NFT.Storage."""
        self._ensure_open()

        url = f"{self._api_url}/store"
        form = self._build_form(metadata)
        session = await self._get_session()

        try:
            async with session.post(url, data=form, headers=self._headers()) as response:
                status = response.status
                body = await response.text()
        except asyncio.TimeoutError as exc:
            raise asyncio.TimeoutError("NFT.Storage store request timed out") from exc

        value = _parse_response(status, body)
        result = StoreResult.model_validate(value)
        logger.info(
            "NFT stored: name=%s",
            metadata.name,
            extra={"ipnft": result.ipnft, "url": result.url, "status": status},
        )
        return result

    async def ping(self) -> bool:
        """Health check - verify the NFT.Storage API is reachable."""
        if self._shutdown_called:
            return False

        session = await self._get_session()
        try:
            async with session.get(f"{self._api_url}/", headers=self._headers()) as response:
                if response.status >= 400:
                    return False
                await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.warning("NFT.Storage ping failed: %s", exc)
            return False

        return True

    async def shutdown(self, timeout: float | None = None) -> None:
        """Cleanup resources - close HTTP session."""
        _ = timeout
        if self._shutdown_called:
            return
        self._shutdown_called = True

        if self._session and not self._session.closed:
            await self._session.close()
        logger.debug("NFTStorageClient closed")

    def _build_form(self, metadata: NFTMetadata) -> aiohttp.FormData:
        meta, files = encode_metadata(metadata)
        form = aiohttp.FormData()
        form.add_field("meta", json.dumps(meta))
        for field_name, content in files:
            form.add_field(
                field_name,
                content.data,
                filename=content.filename,
                content_type=content.mime_type,
            )
        return form

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._timeout_s)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    def _ensure_open(self) -> None:
        if self._shutdown_called:
            raise RuntimeError("NFT.Storage client has been shut down")


def _parse_response(status: int, body: str) -> dict[str, Any]:
    """Return the `value` of a successful response or raise NFTStorageAPIError."""
    try:
        payload = json.loads(body) if body else None
    except ValueError:
        payload = None

    if not isinstance(payload, dict):
        raise NFTStorageAPIError(
            f"NFT.Storage returned an unexpected response: HTTP {status}: {body[:200]}",
            status=status,
        )

    if status >= 400 or not payload.get("ok"):
        error = payload.get("error") or {}
        message = error.get("message") if isinstance(error, dict) else str(error)
        name = error.get("name") if isinstance(error, dict) else None
        raise NFTStorageAPIError(
            f"NFT.Storage store failed: HTTP {status}: {message or 'unknown error'}",
            status=status,
            error_name=name,
        )

    value = payload.get("value")
    if not isinstance(value, dict):
        raise NFTStorageAPIError(
            f"NFT.Storage response is missing a value: HTTP {status}", status=status
        )
    return value
