"""
File storage helpers – writing rewritten modules to the output directory.
"""

import logging
from pathlib import Path

from dl_esm.errors import StorageError

log = logging.getLogger("dl-esm")


def ensure_output_dir(output_dir: Path) -> None:
    """Create *output_dir* and any missing parents."""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(f"could not create {output_dir}: {exc}") from exc


def save_module(output_dir: Path, filename: str, code: str) -> Path:
    """Write *code* to ``output_dir / filename`` and return the path.

    The output directory is flat, so *filename* must not contain separators.
    """
    local_path = output_dir / filename
    try:
        local_path.write_text(code, encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"could not write {local_path}: {exc}") from exc
    log.debug("Saved → %s (%d chars)", local_path, len(code))
    return local_path
