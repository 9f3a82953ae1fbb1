"""
HTTP session creation and module retrieval.

Provides sessions with:
* Automatic retry logic on 5xx errors
* Keep-alive connection reuse across the whole crawl
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from dl_esm.config import (
    MAX_RETRIES,
    REQUEST_TIMEOUT,
    RETRY_BACKOFF,
    RETRY_STATUS_CODES,
    USER_AGENT,
)
from dl_esm.errors import FetchError
from dl_esm.utils.log import log


def build_session(verify_ssl: bool = True) -> requests.Session:
    """Return a ``requests.Session`` with retry logic and keep-alive
    pre-configured."""
    session = requests.Session()
    retry = Retry(
        total=MAX_RETRIES,
        backoff_factor=RETRY_BACKOFF,
        status_forcelist=RETRY_STATUS_CODES,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "application/javascript, text/javascript, */*;q=0.8",
        "Connection": "keep-alive",
    })
    return session


def fetch_code(
    session: requests.Session,
    url: str,
    timeout: float = REQUEST_TIMEOUT,
) -> str:
    """GET *url* and return the response body as text.

    Raises ``FetchError`` on transport errors and non-success statuses.
    """
    log.debug("GET %s", url)
    try:
        resp = session.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(url, str(exc)) from exc

    if not resp.ok:
        raise FetchError(url, resp.reason or "", status_code=resp.status_code)

    # ES modules are always UTF-8; text/javascript would default to latin-1
    resp.encoding = "utf-8"
    log.debug("  %s -> %d bytes", url, len(resp.content))
    return resp.text
