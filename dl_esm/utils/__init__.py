"""Utility helpers for path naming, version resolution and logging."""

from dl_esm.utils.paths import simplify_path
from dl_esm.utils.version import package_from_url, resolve_package_version, split_package
from dl_esm.utils.log import setup_logging, log

__all__ = [
    "simplify_path",
    "package_from_url",
    "resolve_package_version",
    "split_package",
    "setup_logging",
    "log",
]
