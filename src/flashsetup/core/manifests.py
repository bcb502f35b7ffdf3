"""Updates to the JSON manifests and the iOS bundle identifier."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)


def _write_json(path: Path, data: dict, trailing_newline: bool) -> None:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if trailing_newline:
        text += "\n"
    path.write_text(text, encoding="utf-8")


def update_package_manifest(manifest_path: Path, new_name: str) -> bool:
    """Set ``name`` in package.json. Returns True if the file was written."""
    if not manifest_path.is_file():
        return False

    data = json.loads(manifest_path.read_text(encoding="utf-8"))
    if data.get("name") == new_name:
        return False

    data["name"] = new_name
    _write_json(manifest_path, data, trailing_newline=False)
    logger.info(f'Updated {manifest_path.name} name to "{new_name}"')
    return True


def update_app_manifest(manifest_path: Path, new_name: str) -> bool:
    """Set ``name`` and ``displayName`` in app.json.

    Both fields are rewritten when either one differs.

    Returns:
        True if the file was written
    """
    if not manifest_path.is_file():
        return False

    data = json.loads(manifest_path.read_text(encoding="utf-8"))
    if data.get("name") == new_name and data.get("displayName") == new_name:
        return False

    data["name"] = new_name
    data["displayName"] = new_name
    _write_json(manifest_path, data, trailing_newline=True)
    logger.info(f'Updated {manifest_path.name} name to "{new_name}"')
    return True


def update_bundle_identifier(info_path: Path, bundle_id: str, pattern: str = r"com\.\w+\.\w+") -> bool:
    """Replace the first bundle-identifier-shaped string in an Info.plist.

    This is a best-effort substitution, not a plist rewrite: only the first
    match of ``pattern`` changes.

    Returns:
        True if the file was written
    """
    if not info_path.is_file():
        logger.debug(f"{info_path} not found, skipping bundle identifier update")
        return False

    content = info_path.read_text(encoding="utf-8")
    # Callable replacement so backslashes in bundle_id stay literal
    updated = re.sub(pattern, lambda _match: bundle_id, content, count=1)
    if updated == content:
        return False

    info_path.write_text(updated, encoding="utf-8")
    logger.info(f'Updated {info_path.name} bundle identifier to "{bundle_id}"')
    return True
