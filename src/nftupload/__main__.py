"""Module entrypoint for ``python -m nftupload``."""

from __future__ import annotations

from nftupload.cli import main

if __name__ == "__main__":
    main()
