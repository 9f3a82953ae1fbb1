"""Exception types raised while downloading a module graph."""


class DlEsmError(Exception):
    """Base class for every failure that aborts a download."""


class FetchError(DlEsmError):
    """A module could not be retrieved from the CDN."""

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        if status_code is not None:
            msg = f"failed to fetch {url}: HTTP {status_code} {reason}".rstrip()
        else:
            msg = f"failed to fetch {url}: {reason}"
        super().__init__(msg)


class VersionNotFoundError(DlEsmError):
    """The package version could not be determined."""


class MalformedPathError(DlEsmError, ValueError):
    """A module path does not look like ``/npm/<package>@<version>/...``."""


class StorageError(DlEsmError):
    """A rewritten module could not be written to disk."""
