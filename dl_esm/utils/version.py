"""
Package version resolution.

jsDelivr has no API that answers "which version is latest" for an ``+esm``
request, but every bundled response carries a banner such as::

    /**
     * Bundled by jsDelivr using Rollup v2.79.1 and Terser v5.17.1.
     * Original file: /npm/solid-js@1.7.5/dist/solid.js
     */

so the resolved version is scraped from that comment.
"""

import re
import urllib.parse

from dl_esm.config import ESM_SUFFIX, EXPLICIT_VERSION_RE, NPM_MARKER, ORIGINAL_FILE_RE
from dl_esm.errors import MalformedPathError, VersionNotFoundError


def split_package(package: str) -> tuple[str, str]:
    """Split ``name/sub/path`` into ``("name", "/sub/path")``.

    The scope separator of ``@scope/name`` belongs to the name.
    """
    if package.startswith("@"):
        parts = package.split("/", 2)
        name = "/".join(parts[:2])
        subpath = "/" + parts[2] if len(parts) == 3 else ""
        return name, subpath

    name, sep, sub = package.partition("/")
    return name, (sep + sub if sep else "")


def resolve_package_version(code: str, package: str) -> str:
    """
    Return the fully qualified ``name@x.y.z[/subpath]`` for *package*.

    An explicit version in *package* always wins and *code* is not inspected.
    Otherwise the version is read from the ``Original file:`` comment in
    *code*.  Raises ``VersionNotFoundError`` when that is impossible.
    """
    if EXPLICIT_VERSION_RE.search(package):
        return package

    m = ORIGINAL_FILE_RE.search(code)
    if not m:
        raise VersionNotFoundError(
            f"could not determine package version for {package!r}: "
            "no 'Original file' comment in response"
        )
    original = m.group(1)

    name, subpath = split_package(package)
    vm = re.search("/" + re.escape(name) + r"@(\d+\.\d+\.\d+)", original)
    if not vm:
        raise VersionNotFoundError(
            f"could not determine package version for {package!r}: "
            f"{name!r} not found in {original!r}"
        )

    return f"{name}@{vm.group(1)}{subpath}"


def package_from_url(url: str) -> str:
    """Recover the package spec from a CDN module URL.

    ``https://cdn.jsdelivr.net/npm/solid-js@1.7.5/web/+esm`` -> ``solid-js@1.7.5/web``
    """
    path = urllib.parse.urlparse(url).path
    _, marker, rest = path.partition(NPM_MARKER)
    if not marker or not rest:
        raise MalformedPathError(f"not an npm module URL: {url!r}")
    return rest.removesuffix(ESM_SUFFIX).rstrip("/")
