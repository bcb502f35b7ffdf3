"""Detection of the current native project name."""

from __future__ import annotations

from pathlib import Path

from flashsetup.config import PlatformLayout


def detect_project_name(platform_dir: Path, layout: PlatformLayout | None = None) -> str | None:
    """Infer the current project name from an iOS platform directory.

    Heuristics, first match wins:
    1. A child directory named ``<name>.xcodeproj``.
    2. A child directory containing ``AppDelegate.swift``.

    Args:
        platform_dir: The platform directory (usually ``ios/``)
        layout: Layout describing the bundle suffix and delegate file

    Returns:
        The detected name, or None if the directory is missing or nothing matches
    """
    layout = layout or PlatformLayout()
    if not platform_dir.is_dir():
        return None

    entries = sorted(platform_dir.iterdir())

    for entry in entries:
        if entry.is_dir() and entry.name.endswith(layout.project_bundle_suffix):
            return entry.name[: -len(layout.project_bundle_suffix)]

    for entry in entries:
        if entry.is_dir() and (entry / layout.app_delegate).is_file():
            return entry.name

    return None
