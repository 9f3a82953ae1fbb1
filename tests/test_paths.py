"""
Tests for module path → local filename mapping.
"""

import unittest

from dl_esm.errors import MalformedPathError
from dl_esm.utils.paths import simplify_path


class TestSimplifyPath(unittest.TestCase):
    def test_package_root(self):
        self.assertEqual(simplify_path("/npm/solid-js@1.7.5/+esm"), "solid-js-1-7-5.js")

    def test_subpath(self):
        self.assertEqual(
            simplify_path("/npm/solid-js@1.7.5/web/+esm"), "solid-js-1-7-5-web.js"
        )

    def test_nested_subpath(self):
        self.assertEqual(
            simplify_path("/npm/preact@10.19.3/compat/client/+esm"),
            "preact-10-19-3-compat-client.js",
        )

    def test_scoped_package(self):
        self.assertEqual(
            simplify_path("/npm/@observablehq/plot@0.6.6/+esm"),
            "observablehq-plot-0-6-6.js",
        )

    def test_scoped_package_explicit_request(self):
        self.assertEqual(simplify_path("/npm/@scope/name@1.2.3/+esm"), "scope-name-1-2-3.js")

    def test_dist_segment_dropped(self):
        self.assertEqual(
            simplify_path("/npm/d3-array@3.2.3/dist/d3-array.min.js/+esm"),
            "d3-array-3-2-3.js",
        )

    def test_full_url_accepted(self):
        self.assertEqual(
            simplify_path("https://cdn.jsdelivr.net/npm/d3@7.8.4/+esm"), "d3-7-8-4.js"
        )

    def test_deterministic(self):
        path = "/npm/@observablehq/plot@0.6.6/src/marks/+esm"
        self.assertEqual(simplify_path(path), simplify_path(path))

    def test_distinct_subpaths_distinct_names(self):
        self.assertNotEqual(
            simplify_path("/npm/solid-js@1.7.5/web/+esm"),
            simplify_path("/npm/solid-js@1.7.5/html/+esm"),
        )

    def test_missing_marker_rejected(self):
        with self.assertRaises(MalformedPathError):
            simplify_path("/gh/user/repo@1.0.0/+esm")

    def test_missing_version_rejected(self):
        with self.assertRaises(MalformedPathError):
            simplify_path("/npm/solid-js/+esm")

    def test_malformed_is_value_error(self):
        with self.assertRaises(ValueError):
            simplify_path("solid-js@1.7.5")


if __name__ == "__main__":
    unittest.main()
