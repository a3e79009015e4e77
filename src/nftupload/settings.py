"""Environment-driven settings for the upload CLI."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nftupload.models.metadata import DEFAULT_ATTRIBUTES, NFTAttribute

DEFAULT_API_URL = "https://api.nft.storage"


class NftUploadSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    nft_storage_token: str | None = None
    nft_storage_api_url: str = DEFAULT_API_URL
    nft_storage_timeout_s: float | None = None  # None disables the client-side timeout
    nft_attributes: NFTAttribute = DEFAULT_ATTRIBUTES  # JSON, e.g. {"trait_type": "...", "value": "..."}
    log_level: str = "INFO"

    @field_validator("nft_storage_api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return str(value).rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return str(value).upper()
