"""
Tests for the command-line front end and logging setup.
"""

import io
import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from dl_esm.cli import main, parse_args
from dl_esm.config import CDN_HOST, DEFAULT_OUTPUT, REQUEST_TIMEOUT
from dl_esm.errors import FetchError, VersionNotFoundError
from dl_esm.utils.log import log, setup_logging


class TestParseArgs(unittest.TestCase):
    def test_defaults(self):
        args = parse_args(["solid-js"])
        self.assertEqual(args.package, "solid-js")
        self.assertEqual(args.output, DEFAULT_OUTPUT)
        self.assertEqual(args.cdn_host, CDN_HOST)
        self.assertEqual(args.timeout, REQUEST_TIMEOUT)
        self.assertTrue(args.verify_ssl)
        self.assertFalse(args.debug)

    def test_output_dir_positional(self):
        args = parse_args(["solid-js@1.7.5", "/tmp/vendor"])
        self.assertEqual(args.output, "/tmp/vendor")

    def test_options(self):
        args = parse_args([
            "@observablehq/plot", "--cdn-host", "esm.internal",
            "--timeout", "5", "--no-verify-ssl", "--debug",
        ])
        self.assertEqual(args.cdn_host, "esm.internal")
        self.assertEqual(args.timeout, 5.0)
        self.assertFalse(args.verify_ssl)
        self.assertTrue(args.debug)

    def test_package_required(self):
        with self.assertRaises(SystemExit):
            parse_args([])

    def test_too_many_positionals(self):
        with self.assertRaises(SystemExit):
            parse_args(["a", "b", "c"])


@patch("dl_esm.cli.setup_logging")
class TestMain(unittest.TestCase):
    def test_success(self, _setup):
        with patch("dl_esm.cli.Downloader") as downloader_cls:
            self.assertEqual(main(["solid-js@1.7.5", "vendor"]), 0)
        kwargs = downloader_cls.call_args.kwargs
        self.assertEqual(kwargs["package"], "solid-js@1.7.5")
        self.assertEqual(kwargs["output_dir"], Path("vendor"))
        downloader_cls.return_value.run.assert_called_once_with()

    def test_fetch_error_exit_code(self, _setup):
        with patch("dl_esm.cli.Downloader") as downloader_cls:
            downloader_cls.return_value.run.side_effect = FetchError(
                "https://cdn.jsdelivr.net/npm/x/+esm", "Not Found", status_code=404
            )
            with self.assertLogs("dl-esm", level="ERROR") as logs:
                self.assertEqual(main(["x"]), 1)
        self.assertIn("HTTP 404", logs.output[0])

    def test_version_error_exit_code(self, _setup):
        with patch("dl_esm.cli.Downloader") as downloader_cls:
            downloader_cls.return_value.run.side_effect = VersionNotFoundError(
                "could not determine package version for 'x'"
            )
            with self.assertLogs("dl-esm", level="ERROR"):
                self.assertEqual(main(["x"]), 1)


class TestHelp(unittest.TestCase):
    def test_url_form_documented(self):
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            with self.assertRaises(SystemExit):
                parse_args(["--help"])
        help_text = " ".join(out.getvalue().split())
        self.assertIn("URLs must be CDN /npm/ URLs", help_text)


class TestEndToEnd(unittest.TestCase):
    """Full ``main()`` run against a canned CDN response."""

    BODY = (
        "/**\n"
        " * Original file: /npm/solo@3.0.0/dist/solo.js\n"
        " */\n"
        "export default 1;\n"
    )

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.out = Path(self._tmp.name) / "vendor"

    def tearDown(self):
        for handler in log.handlers:
            handler.close()
        log.handlers.clear()
        self._tmp.cleanup()

    def _session(self):
        resp = MagicMock(ok=True, status_code=200, text=self.BODY, content=self.BODY.encode())
        session = MagicMock()
        session.get.return_value = resp
        return session

    def test_stderr_holds_only_status_lines(self):
        session = self._session()
        with patch("dl_esm.core.crawler.build_session", return_value=session), \
                patch("sys.stderr", new_callable=io.StringIO) as err:
            self.assertEqual(main(["solo@3.0.0", str(self.out)]), 0)
        self.assertEqual(err.getvalue().splitlines(), ["solo-3-0-0.js"])
        self.assertTrue((self.out / "solo-3-0-0.js").is_file())
        session.close.assert_called_once_with()


class TestSetupLogging(unittest.TestCase):
    def tearDown(self):
        for handler in log.handlers:
            handler.close()
        log.handlers.clear()

    def test_levels(self):
        setup_logging()
        self.assertEqual(log.level, logging.INFO)
        setup_logging(debug=True)
        self.assertEqual(log.level, logging.DEBUG)
        self.assertEqual(len(log.handlers), 1)

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "dl.log"
            setup_logging(log_file=str(log_path))
            self.assertEqual(len(log.handlers), 2)
            self.assertEqual(log.level, logging.DEBUG)
            self.assertEqual(log.handlers[0].level, logging.INFO)
            log.debug("detail line")
            for handler in log.handlers:
                handler.flush()
                handler.close()
            log.handlers.clear()
            text = log_path.read_text(encoding="utf-8")
            self.assertIn("Logging to file", text)
            self.assertIn("detail line", text)


if __name__ == "__main__":
    unittest.main()
