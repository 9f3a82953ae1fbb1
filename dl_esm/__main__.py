"""
Main entry point for the dl_esm package.

Allows running the downloader as: python -m dl_esm
"""

from dl_esm.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
