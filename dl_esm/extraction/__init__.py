"""Import/export specifier rewriting for ``+esm`` bundles."""

from dl_esm.extraction.imports import remove_source_mapping_comments, rewrite_code

__all__ = ["remove_source_mapping_comments", "rewrite_code"]
