"""Shared fixtures: a fake React Native project tree."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

INFO_PLIST = """\
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
  <key>CFBundleDisplayName</key>
  <string>OldApp</string>
  <key>CFBundleIdentifier</key>
  <string>com.flash.oldapp</string>
  <key>NSExceptionDomains</key>
  <string>com.example.other</string>
</dict>
</plist>
"""


@pytest.fixture
def rn_project(tmp_path: Path) -> Path:
    """Create a React Native project whose iOS project is named OldApp."""
    ios = tmp_path / "ios"
    app_dir = ios / "OldApp"
    app_dir.mkdir(parents=True)
    (app_dir / "AppDelegate.swift").write_text(
        'self.moduleName = "OldApp"\n// OldAppTests use OldApp\n', encoding="utf-8"
    )
    (app_dir / "Info.plist").write_text(INFO_PLIST, encoding="utf-8")
    (app_dir / "LaunchScreen.storyboard").write_text("<label text=\"OldApp\"/>\n", encoding="utf-8")

    xcodeproj = ios / "OldApp.xcodeproj"
    schemes = xcodeproj / "xcshareddata" / "xcschemes"
    schemes.mkdir(parents=True)
    (xcodeproj / "project.pbxproj").write_text("/* OldApp.app */ PRODUCT_NAME = OldApp;\n", encoding="utf-8")
    (schemes / "OldApp.xcscheme").write_text(
        '<BuildableReference BuildableName = "OldApp.app" BlueprintName = "OldApp">\n', encoding="utf-8"
    )

    (ios / "OldApp.xcworkspace").mkdir()
    (ios / "OldApp.xcworkspace" / "contents.xcworkspacedata").write_text(
        '<FileRef location = "group:OldApp.xcodeproj"/>\n', encoding="utf-8"
    )
    (ios / "Podfile").write_text("target 'OldApp' do\nend\n", encoding="utf-8")
    (ios / "Podfile.lock").write_text("PODS:\n", encoding="utf-8")
    (ios / "Pods" / "Headers").mkdir(parents=True)
    (ios / "Pods" / "Headers" / "x.h").write_text("", encoding="utf-8")
    (tmp_path / "vendor" / "bundle" / "ruby").mkdir(parents=True)

    (tmp_path / "package.json").write_text(
        json.dumps({"name": "oldapp", "version": "0.0.1"}, indent=2), encoding="utf-8"
    )
    (tmp_path / "app.json").write_text(
        json.dumps({"name": "OldApp", "displayName": "OldApp"}, indent=2) + "\n", encoding="utf-8"
    )
    return tmp_path
