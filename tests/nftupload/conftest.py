"""Shared pytest fixtures for nftupload tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to sys.path for imports
src_path = Path(__file__).parent.parent.parent / "src"
if str(src_path.resolve()) not in sys.path:
    sys.path.insert(0, str(src_path.resolve()))

import pytest

from nftupload.models.upload import FileContent, UploadRequest
from tests.nftupload.mocks import MockStore

# Smallest valid PNG: signature + IHDR + IDAT + IEND for a 1x1 pixel.
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)

_SETTINGS_ENV_VARS = (
    "NFT_STORAGE_TOKEN",
    "NFT_STORAGE_API_URL",
    "NFT_STORAGE_TIMEOUT_S",
    "NFT_ATTRIBUTES",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from the developer's environment and .env file."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A real PNG image on disk."""
    path = tmp_path / "photo.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def sample_image() -> FileContent:
    """In-memory PNG content."""
    return FileContent(data=PNG_BYTES, filename="photo.png", mime_type="image/png")


@pytest.fixture
def upload_request(png_file: Path) -> UploadRequest:
    """UploadRequest pointing at the PNG fixture."""
    return UploadRequest(image_path=png_file, name="Sunset", description="A crayon sunset")


@pytest.fixture
def mock_store() -> MockStore:
    """Fresh mock storage client."""
    return MockStore()
