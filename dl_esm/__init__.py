"""
dl_esm
======
Download an ES module and its whole import graph from the jsDelivr ``+esm``
mirror of npm into one flat local directory, with every import rewritten to
a relative sibling file.

Package structure
-----------------
dl_esm/
├── __init__.py       – package init and public API
├── __main__.py       – ``python -m dl_esm``
├── cli.py            – argparse CLI
├── config.py         – CDN host, HTTP tuning, source patterns
├── errors.py         – exception hierarchy
├── session.py        – requests.Session factory and fetch_code()
├── core/
│   ├── crawler.py    – breadth-first Downloader
│   └── storage.py    – writing rewritten modules
├── extraction/
│   └── imports.py    – import/export specifier rewriting
└── utils/
    ├── paths.py      – module path → local filename
    ├── version.py    – package@version resolution
    └── log.py        – colorlog logging setup

Quick start
-----------
    from pathlib import Path
    from dl_esm import Downloader

    Downloader("solid-js@1.7.5", Path("vendor")).run()
"""

from .core import Downloader
from .errors import DlEsmError, FetchError, MalformedPathError, StorageError, VersionNotFoundError
from .extraction import rewrite_code
from .utils import resolve_package_version, simplify_path

__version__ = "1.0.0"

__all__ = [
    "Downloader",
    "DlEsmError",
    "FetchError",
    "MalformedPathError",
    "StorageError",
    "VersionNotFoundError",
    "rewrite_code",
    "resolve_package_version",
    "simplify_path",
]
