"""Tests for manifest and bundle identifier updates."""

from __future__ import annotations

import json
from pathlib import Path

from flashsetup.core.manifests import (
    update_app_manifest,
    update_bundle_identifier,
    update_package_manifest,
)


class TestUpdatePackageManifest:
    """Tests for update_package_manifest function."""

    def test_updates_name(self, tmp_path: Path) -> None:
        """A different name is written with 2-space indentation and no trailing newline."""
        path = tmp_path / "package.json"
        path.write_text('{"name": "old", "private": true}', encoding="utf-8")

        assert update_package_manifest(path, "NewApp") is True
        assert path.read_text(encoding="utf-8") == '{\n  "name": "NewApp",\n  "private": true\n}'

    def test_same_name_does_not_write(self, tmp_path: Path) -> None:
        """An already-correct manifest is left alone."""
        path = tmp_path / "package.json"
        original = '{"name":"NewApp"}'
        path.write_text(original, encoding="utf-8")

        assert update_package_manifest(path, "NewApp") is False
        assert path.read_text(encoding="utf-8") == original

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing manifest is skipped."""
        assert update_package_manifest(tmp_path / "package.json", "NewApp") is False


class TestUpdateAppManifest:
    """Tests for update_app_manifest function."""

    def test_updates_both_fields_with_trailing_newline(self, tmp_path: Path) -> None:
        """name and displayName are both set."""
        path = tmp_path / "app.json"
        path.write_text('{"name": "NewApp", "displayName": "Old Äpp"}', encoding="utf-8")

        assert update_app_manifest(path, "NewApp") is True
        text = path.read_text(encoding="utf-8")
        assert text.endswith("}\n")
        assert json.loads(text) == {"name": "NewApp", "displayName": "NewApp"}

    def test_preserves_other_keys_and_non_ascii(self, tmp_path: Path) -> None:
        """Other keys survive untouched."""
        path = tmp_path / "app.json"
        path.write_text('{"name": "old", "owner": "Zoë"}', encoding="utf-8")

        update_app_manifest(path, "NewApp")
        text = path.read_text(encoding="utf-8")
        assert '"owner": "Zoë"' in text

    def test_already_correct_does_not_write(self, tmp_path: Path) -> None:
        """No write when both fields already match."""
        path = tmp_path / "app.json"
        original = '{"name": "NewApp", "displayName": "NewApp"}'
        path.write_text(original, encoding="utf-8")

        assert update_app_manifest(path, "NewApp") is False
        assert path.read_text(encoding="utf-8") == original


class TestUpdateBundleIdentifier:
    """Tests for update_bundle_identifier function."""

    def test_replaces_first_match_only(self, tmp_path: Path) -> None:
        """Only the first identifier-shaped string changes."""
        path = tmp_path / "Info.plist"
        path.write_text(
            "<string>com.flash.app</string><string>com.other.thing</string>", encoding="utf-8"
        )

        assert update_bundle_identifier(path, "com.acme.shop") is True
        assert path.read_text(encoding="utf-8") == (
            "<string>com.acme.shop</string><string>com.other.thing</string>"
        )

    def test_no_match_does_not_write(self, tmp_path: Path) -> None:
        """A plist with no identifier is left alone."""
        path = tmp_path / "Info.plist"
        path.write_text("<string>$(PRODUCT_BUNDLE_IDENTIFIER)</string>", encoding="utf-8")

        assert update_bundle_identifier(path, "com.acme.shop") is False

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing Info.plist is skipped."""
        assert update_bundle_identifier(tmp_path / "Info.plist", "com.acme.shop") is False

    def test_custom_pattern(self, tmp_path: Path) -> None:
        """The pattern can be overridden."""
        path = tmp_path / "Info.plist"
        path.write_text("<string>org.flash.app</string>", encoding="utf-8")

        assert update_bundle_identifier(path, "org.acme.shop", r"org\.\w+\.\w+") is True
        assert "org.acme.shop" in path.read_text(encoding="utf-8")
