"""CLI entrypoint for storing an image as an NFT."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from nftupload.delegator import run_upload
from nftupload.errors import NftUploadError, UsageError
from nftupload.logging_setup import configure_logging
from nftupload.models.storage import StoreResult
from nftupload.models.upload import UploadRequest
from nftupload.settings import NftUploadSettings
from nftupload.storage import create_store

logger = logging.getLogger(__name__)

USAGE_ARGS = "<image-path> <name> <description>"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for CLI."""
    configure_logging(log_level=level)


def parse_args(argv: Sequence[str]) -> UploadRequest:
    """Build an UploadRequest from exactly three positional arguments.

    Argument content is not checked here; a bad image path fails when loading.

    Raises:
        UsageError: If the argument count is not three
    """
    if len(argv) != 3:
        raise UsageError(f"expected 3 arguments, got {len(argv)}")
    image_path, name, description = argv
    return UploadRequest(image_path=Path(image_path), name=name, description=description)


def usage(prog: str) -> str:
    return f"usage: {prog} {USAGE_ARGS}"


def upload(request: UploadRequest, settings: NftUploadSettings) -> None:
    """Store the image and print the result, exiting 1 on failure."""
    result = asyncio.run(run_upload(request, settings, store_factory=create_store))

    match result:
        case StoreResult():
            print(result.model_dump_json(indent=2))
        case NftUploadError():
            logger.error("Upload failed at %s stage", result.stage, exc_info=result)
            _exit_with_error(str(result))
        case _:
            raise TypeError(f"Unexpected upload result type: {type(result).__name__}")


def _exit_with_error(message: str) -> None:
    print(f"✗ {message}", file=sys.stderr)
    raise SystemExit(1)


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entrypoint."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        request = parse_args(args)
    except UsageError:
        print(usage(Path(sys.argv[0]).name or "nftupload"), file=sys.stderr)
        raise SystemExit(1)

    try:
        settings = NftUploadSettings()
    except ValueError as e:
        _exit_with_error(f"Config invalid: {e}")
        return

    setup_logging(settings.log_level)
    upload(request, settings)


if __name__ == "__main__":
    main()
