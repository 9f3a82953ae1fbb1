"""
Command-line interface for the ESM downloader.
"""

import argparse
import logging
import time
from pathlib import Path

from dl_esm.config import CDN_HOST, DEFAULT_OUTPUT, REQUEST_TIMEOUT
from dl_esm.core.crawler import Downloader
from dl_esm.errors import DlEsmError
from dl_esm.utils.log import setup_logging, log


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dl-esm",
        description="Download ESM modules from npm and jsDelivr, rewriting "
                    "their imports so the module graph runs offline.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  # download latest version of solid js\n"
            "  dl-esm solid-js\n"
            "\n"
            "  # download a specific version of solid js\n"
            "  dl-esm solid-js@1.7.5\n"
            "\n"
            "  # download to a specific dir\n"
            "  dl-esm solid-js@1.7.5 /tmp\n"
            "\n"
            "  # download a scoped package or a module URL\n"
            "  dl-esm @observablehq/plot vendor\n"
            "  dl-esm https://cdn.jsdelivr.net/npm/d3@7.8.4/+esm vendor\n"
        ),
    )
    parser.add_argument(
        "package",
        help="Package spec (name[@version][/subpath], @scope/name[@version]) "
             "or an https:// module URL. URLs must be CDN /npm/ URLs "
             "(e.g. https://cdn.jsdelivr.net/npm/d3@7.8.4/+esm).",
    )
    parser.add_argument(
        "output", nargs="?", default=DEFAULT_OUTPUT,
        help=f"Output directory (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--cdn-host", default=CDN_HOST,
        help=f"CDN host serving /npm/<pkg>/+esm (default: {CDN_HOST})",
    )
    parser.add_argument(
        "--timeout", type=float, default=REQUEST_TIMEOUT,
        help=f"Request timeout in seconds (default: {REQUEST_TIMEOUT})",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if not args.verify_ssl:
        import urllib3
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    downloader = Downloader(
        package=args.package,
        output_dir=Path(args.output),
        cdn_host=args.cdn_host,
        timeout=args.timeout,
        verify_ssl=args.verify_ssl,
    )

    t0 = time.monotonic()
    try:
        downloader.run()
    except DlEsmError as exc:
        log.error("%s", exc)
        return 1
    log.debug("Total elapsed time: %.1f s", time.monotonic() - t0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
