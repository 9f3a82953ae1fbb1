"""
Rewriting of absolute ``/npm/...`` import/export specifiers.

Only the narrow ``<import|export> <clause> from "/npm/..."`` form emitted by
jsDelivr's ``+esm`` bundles is recognised.  Dynamic ``import()`` calls and
clauses spanning unbalanced braces are left alone.
"""

import re

from dl_esm.config import IMPORT_RE, SOURCE_MAP_RE
from dl_esm.utils.paths import simplify_path


def remove_source_mapping_comments(code: str) -> str:
    """Drop ``//# sourceMappingURL=....map`` references from *code*."""
    return SOURCE_MAP_RE.sub("", code)


def rewrite_code(code: str) -> tuple[str, dict[str, str]]:
    """
    Rewrite every absolute npm specifier in *code* to a sibling file.

    Each matched statement is normalised to
    ``<keyword> <clause> from "./<filename>";``.

    Returns ``(rewritten_code, {absolute_path: filename})``.  A path used by
    several statements appears once in the mapping.
    """
    captured: dict[str, str] = {}

    def _replace(m: re.Match[str]) -> str:
        path = m.group("path")
        filename = simplify_path(path)
        captured[path] = filename
        return f'{m.group("keyword")} {m.group("imports")} from "./{filename}";'

    rewritten = IMPORT_RE.sub(_replace, code)
    rewritten = remove_source_mapping_comments(rewritten)
    return rewritten, captured
