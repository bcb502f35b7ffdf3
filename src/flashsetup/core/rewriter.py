"""In-place rewriting of project name references."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def rewrite_file(file_path: Path, old: str, new: str) -> bool:
    """Replace every literal occurrence of ``old`` with ``new`` in a file.

    The file is written back only if its content changed. Read and write
    errors propagate to the caller.

    Returns:
        True if the file was modified
    """
    content = file_path.read_text(encoding="utf-8")
    updated = content.replace(old, new)
    if updated == content:
        return False

    file_path.write_text(updated, encoding="utf-8")
    logger.info(f"Updated references in {file_path}")
    return True


def rewrite_tree(root: Path, suffixes: Iterable[str], old: str, new: str) -> list[Path]:
    """Rewrite ``old`` to ``new`` in every file under ``root`` matching a suffix.

    Symlinks are skipped, never followed.

    Returns:
        Paths of the files that were modified
    """
    suffixes = tuple(suffixes)
    modified: list[Path] = []

    for entry in root.iterdir():
        if entry.is_symlink():
            continue
        if entry.is_dir():
            modified.extend(rewrite_tree(entry, suffixes, old, new))
        elif entry.name.endswith(suffixes) and rewrite_file(entry, old, new):
            modified.append(entry)

    return modified
