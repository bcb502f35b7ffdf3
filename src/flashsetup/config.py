"""Configuration management for flash-setup."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class PlatformLayout(BaseModel):
    """Paths and suffixes of the native iOS project inside a React Native app."""

    platform_dir: str = Field(default="ios", description="Platform directory, relative to the project root")
    project_bundle_suffix: str = Field(default=".xcodeproj", description="Suffix of the Xcode project bundle")
    workspace_suffix: str = Field(default=".xcworkspace", description="Suffix of the Xcode workspace bundle")
    app_delegate: str = Field(default="AppDelegate.swift", description="File marking the main source folder")
    rewrite_extensions: list[str] = Field(
        default_factory=lambda: [".swift", ".plist", ".storyboard", ".xcscheme", ".pbxproj"],
        description="Files whose contents get old-name references rewritten",
    )
    scheme_dir: str = Field(
        default="xcshareddata/xcschemes",
        description="Scheme storage path inside the project bundle",
    )
    scheme_suffix: str = ".xcscheme"
    dependency_manifest: str = Field(default="Podfile", description="Dependency manifest at the platform root")
    lock_file: str = Field(default="Podfile.lock", description="Lock file at the platform root")
    dependency_cache: str = Field(default="Pods", description="Dependency cache directory at the platform root")
    vendor_cache: str = Field(default="vendor/bundle", description="Vendor cache, relative to the project root")
    info_file: str = Field(default="Info.plist", description="Info file inside the main source folder")
    bundle_id_pattern: str = Field(
        default=r"com\.\w+\.\w+",
        description="Regex for the bundle identifier; only the first match is replaced",
    )
    package_manifest: str = "package.json"
    app_manifest: str = "app.json"


class SetupStep(BaseModel):
    """An external command run after the rename phase."""

    name: str
    command: str
    cwd: str | None = Field(default=None, description="Working directory relative to the project root")


def _default_setup_steps() -> list[SetupStep]:
    return [
        SetupStep(name="Installing dependencies", command="yarn install"),
        SetupStep(name="Linking font assets", command="npx react-native-asset"),
        SetupStep(
            name="Installing iOS dependencies",
            command="bundle install && bundle exec pod install",
            cwd="ios",
        ),
    ]


class Config(BaseModel):
    """flash-setup configuration.

    The defaults match the React Native Flash boilerplate, so most projects
    never need a config file.
    """

    layout: PlatformLayout = Field(default_factory=PlatformLayout)
    setup_steps: list[SetupStep] = Field(default_factory=_default_setup_steps)

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file or use defaults."""
        if config_path is None:
            # Look for config in .flashsetup/config.yaml
            config_path = Path(".flashsetup/config.yaml")

        if config_path.exists():
            with config_path.open() as f:
                data = yaml.safe_load(f) or {}
            return cls.model_validate(data)

        return cls()

    def save(self, config_path: Path) -> None:
        """Save configuration to file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with config_path.open("w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)
