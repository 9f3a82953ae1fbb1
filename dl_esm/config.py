"""
Configuration constants for the ESM downloader.
"""

import re

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
CDN_HOST = "cdn.jsdelivr.net"
DEFAULT_OUTPUT = "."

# ---------------------------------------------------------------------------
# HTTP tuning
# ---------------------------------------------------------------------------
REQUEST_TIMEOUT = 30
MAX_RETRIES = 3
RETRY_BACKOFF = 0.5
RETRY_STATUS_CODES = [500, 502, 503, 504]

USER_AGENT = "dl-esm/1.0 (+https://www.jsdelivr.com/esm)"

# ---------------------------------------------------------------------------
# Module source patterns
# ---------------------------------------------------------------------------

# import {a as b} from "/npm/pkg@1.2.3/+esm"  /  export*from"/npm/..."
IMPORT_RE = re.compile(
    r'(?P<keyword>import|export)\s*(?P<imports>\{?[^}]+?\}?)\s*from\s*"(?P<path>/npm/[^"]+)"'
)

# Remote source maps are meaningless once files are relocated
SOURCE_MAP_RE = re.compile(r"//#\s*sourceMappingURL=.*?\.map")

# jsDelivr provenance banner:  * Original file: /npm/solid-js@1.7.5/dist/solid.js
ORIGINAL_FILE_RE = re.compile(r"Original file: (/npm/\S+)")

# name@1.2.3 with an explicit three-part version
EXPLICIT_VERSION_RE = re.compile(r"([^@]+)@(\d+\.\d+\.\d+)")

NPM_MARKER = "/npm/"
ESM_SUFFIX = "/+esm"
