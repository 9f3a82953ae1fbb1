"""
Mapping of absolute CDN module paths to flat local filenames.
"""

from dl_esm.config import ESM_SUFFIX, NPM_MARKER
from dl_esm.errors import MalformedPathError


def simplify_path(path: str) -> str:
    """
    Map an absolute module path to a flat ``.js`` filename.

    ``/npm/solid-js@1.7.5/web/+esm``        -> ``solid-js-1-7-5-web.js``
    ``/npm/@observablehq/plot@0.6.6/+esm``  -> ``observablehq-plot-0-6-6.js``

    Anything after ``/dist`` in the version segment is bundler-internal and
    dropped.  The result depends only on *path*, so every importer of the
    same module refers to the same sibling file.

    Raises ``MalformedPathError`` when *path* has no ``/npm/`` marker or no
    version segment.
    """
    _, marker, rest = path.partition(NPM_MARKER)
    if not marker:
        raise MalformedPathError(f"not an npm module path: {path!r}")

    # Scoped packages start with "@", which is also the version separator
    rest = rest.removeprefix("@")

    package, sep, version = rest.partition("@")
    if not sep:
        raise MalformedPathError(f"module path has no version: {path!r}")

    package_name = package.replace("/", "-")

    version = version.split("/dist")[0]
    version = version.replace(ESM_SUFFIX, "")
    version = version.replace(".", "-").replace("/", "-")

    return f"{package_name}-{version}.js"
