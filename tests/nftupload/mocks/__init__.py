"""Mock implementations for testing."""

from tests.nftupload.mocks.store import MockStore

__all__ = ["MockStore"]
