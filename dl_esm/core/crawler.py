"""
Breadth-first download of an ES module graph.

Starting from one entry module the downloader fetches every ``/npm/...``
module it imports, rewrites each file so that imports point at flat
siblings, and repeats until no new modules are discovered:

* Entry given as ``name[@version][/subpath]`` or as a full ``https://`` URL
* Version resolved from the request or from the jsDelivr banner comment
* One file per module, named deterministically from its CDN path
* Each module fetched at most once per run
"""

import sys
from pathlib import Path
from typing import TextIO

import requests

from dl_esm.config import CDN_HOST, REQUEST_TIMEOUT
from dl_esm.core.storage import ensure_output_dir, save_module
from dl_esm.extraction.imports import rewrite_code
from dl_esm.session import build_session, fetch_code
from dl_esm.utils.log import log
from dl_esm.utils.paths import simplify_path
from dl_esm.utils.version import package_from_url, resolve_package_version


class Downloader:
    """
    Download *package* and its transitive imports into *output_dir*.
    """

    def __init__(
        self,
        package: str,
        output_dir: Path,
        cdn_host: str = CDN_HOST,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT,
        verify_ssl: bool = True,
        status: TextIO | None = None,
    ) -> None:
        self.package = package
        self.output_dir = Path(output_dir)
        self.cdn_host = cdn_host
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else build_session(verify_ssl=verify_ssl)
        self.status = status

        self._pending: dict[str, str] = {}   # module path -> local filename
        self._completed: set[str] = set()
        self._written: list[Path] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> list[Path]:
        """Download the whole graph and return the written files in order.

        The first element is always the entry module.  Any error aborts the
        run; files written before the failure are left on disk.
        """
        try:
            log.debug("Output directory : %s", self.output_dir.resolve())
            ensure_output_dir(self.output_dir)

            entry_name = self._download_entry()
            log.debug("Entry module %s → %s", self.package, entry_name)

            while self._pending:
                # Oldest first: dicts keep insertion order
                path = next(iter(self._pending))
                filename = self._pending.pop(path)
                self._download_module(path, filename)
        finally:
            if self._owns_session:
                self.session.close()

        # Console logging shares stderr with the status lines
        log.debug(
            "Download complete. %d file(s) saved in %s",
            len(self._written), self.output_dir.resolve(),
        )
        return list(self._written)

    def module_url(self, path: str) -> str:
        """Absolute URL of a ``/npm/...`` module path on the CDN."""
        return f"https://{self.cdn_host}{path}"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _download_entry(self) -> str:
        if self.package.startswith("https://"):
            code = fetch_code(self.session, self.package, self.timeout)
            spec = package_from_url(self.package)
        else:
            code = fetch_code(
                self.session, self.module_url(f"/npm/{self.package}/+esm"), self.timeout
            )
            spec = self.package

        qualified = resolve_package_version(code, spec)
        entry_path = f"/npm/{qualified}/+esm"
        filename = simplify_path(entry_path)

        self._completed.add(entry_path)
        self._save(filename, code)
        return filename

    def _download_module(self, path: str, filename: str) -> None:
        code = fetch_code(self.session, self.module_url(path), self.timeout)
        self._completed.add(path)
        self._save(filename, code)

    def _save(self, filename: str, code: str) -> None:
        rewritten, captured = rewrite_code(code)
        self._written.append(save_module(self.output_dir, filename, rewritten))
        self._emit(filename)

        for path, dep_name in captured.items():
            if path in self._completed:
                log.debug("  already downloaded: %s", path)
                continue
            if path not in self._pending:
                log.debug("  queued %s → %s", path, dep_name)
            self._pending[path] = dep_name

    def _emit(self, filename: str) -> None:
        stream = self.status if self.status is not None else sys.stderr
        stream.write(filename + "\n")
        stream.flush()
