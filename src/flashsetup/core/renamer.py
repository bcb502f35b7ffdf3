"""Renaming of the native iOS project and its surrounding manifests."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from flashsetup.config import PlatformLayout
from flashsetup.core.detector import detect_project_name
from flashsetup.core.manifests import (
    update_app_manifest,
    update_bundle_identifier,
    update_package_manifest,
)
from flashsetup.core.models import ProjectIdentity
from flashsetup.core.rewriter import rewrite_file, rewrite_tree

logger = logging.getLogger(__name__)


class ProjectRenamer:
    """Renames a React Native app's iOS project in place.

    Nothing is rolled back on failure: an error part way through leaves the
    steps already done in place and is re-raised to the caller.
    """

    def __init__(self, project_root: Path, layout: PlatformLayout | None = None) -> None:
        self.project_root = project_root
        self.layout = layout or PlatformLayout()

    @property
    def platform_dir(self) -> Path:
        return self.project_root / self.layout.platform_dir

    def rename(self, new_name: str, bundle_id: str) -> ProjectIdentity | None:
        """Run the full rename: platform project, manifests, bundle id, caches.

        Args:
            new_name: The new project name
            bundle_id: The new bundle identifier (e.g. com.acme.app)

        Returns:
            The old/new identity, or None if renaming was skipped
        """
        identity = self.rename_platform_project(new_name)
        if identity is None:
            return None

        try:
            update_package_manifest(self.project_root / self.layout.package_manifest, new_name)
            update_app_manifest(self.project_root / self.layout.app_manifest, new_name)
            update_bundle_identifier(
                self.platform_dir / new_name / self.layout.info_file,
                bundle_id,
                self.layout.bundle_id_pattern,
            )
            self.clean_dependency_caches()
        except Exception as e:
            logger.error(f"Error updating project manifests: {e}")
            raise

        return identity

    def rename_platform_project(self, new_name: str) -> ProjectIdentity | None:
        """Rename the iOS folders and rewrite old-name references inside them.

        Returns:
            The old/new identity, or None if the old name could not be
            detected or the platform directory is missing
        """
        old_name = detect_project_name(self.platform_dir, self.layout)
        if not old_name:
            logger.warning("Could not detect current iOS project name. Skipping renaming...")
            return None

        if not self.platform_dir.is_dir():
            logger.warning("iOS folder not found, skipping iOS folder renaming...")
            return None

        identity = ProjectIdentity(old_name=old_name, new_name=new_name)

        try:
            if identity.is_noop:
                logger.info(f'iOS project is already named "{new_name}", skipping folder renames')
            else:
                logger.info(f'Renaming iOS project folders from "{old_name}" to "{new_name}"...')
                self._rename_folders(identity)

            logger.info("Updating iOS configuration files...")
            rewrite_tree(self.platform_dir, self.layout.rewrite_extensions, old_name, new_name)

            if not identity.is_noop:
                self._rename_scheme(identity)
            self._update_dependency_manifest(identity)
        except Exception as e:
            logger.error(f"Error renaming iOS folders: {e}")
            raise

        logger.info("iOS folders and configuration files updated successfully")
        return identity

    def _rename_folders(self, identity: ProjectIdentity) -> None:
        """Rename the main folder, project bundle and workspace bundle, if present."""
        suffixes = ["", self.layout.project_bundle_suffix, self.layout.workspace_suffix]
        for suffix in suffixes:
            old_path = self.platform_dir / f"{identity.old_name}{suffix}"
            new_path = self.platform_dir / f"{identity.new_name}{suffix}"
            if old_path.exists():
                old_path.rename(new_path)
                logger.info(f"Renamed {old_path.name} to {new_path.name}")

    def _rename_scheme(self, identity: ProjectIdentity) -> None:
        """Move the shared scheme to its new file name, rewriting its contents."""
        scheme_dir = (
            self.platform_dir / f"{identity.new_name}{self.layout.project_bundle_suffix}" / self.layout.scheme_dir
        )
        old_scheme = scheme_dir / f"{identity.old_name}{self.layout.scheme_suffix}"
        new_scheme = scheme_dir / f"{identity.new_name}{self.layout.scheme_suffix}"
        if not old_scheme.exists():
            return

        rewrite_file(old_scheme, identity.old_name, identity.new_name)
        # Case-only renames share one file on case-insensitive filesystems
        old_scheme.rename(new_scheme)
        logger.info(f"Renamed and updated {old_scheme.name} to {new_scheme.name}")

    def _update_dependency_manifest(self, identity: ProjectIdentity) -> None:
        podfile = self.platform_dir / self.layout.dependency_manifest
        if podfile.is_file():
            rewrite_file(podfile, identity.old_name, identity.new_name)

    def clean_dependency_caches(self) -> list[Path]:
        """Delete the lock file, Pods and vendor/bundle so the next install is clean.

        Returns:
            Paths that were removed
        """
        targets = [
            self.platform_dir / self.layout.lock_file,
            self.platform_dir / self.layout.dependency_cache,
            self.project_root / self.layout.vendor_cache,
        ]
        removed: list[Path] = []
        for target in targets:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            elif target.exists() or target.is_symlink():
                target.unlink()
            else:
                continue
            removed.append(target)
            logger.info(f"Deleted {target.relative_to(self.project_root)}")
        return removed
