"""Core download logic – BFS module crawl and file storage."""

from dl_esm.core.crawler import Downloader
from dl_esm.core.storage import ensure_output_dir, save_module

__all__ = ["Downloader", "ensure_output_dir", "save_module"]
