"""Core data models for flash-setup."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict


class RenameMode(str, Enum):
    """What the invocation parameters ask for."""

    RENAME = "rename"  # Both flags present
    PARTIAL = "partial"  # Only one flag, warn and continue
    SETUP_ONLY = "setup_only"  # No flags


_FLAG_FIELDS = {"--project-name": "project_name", "--bundle-name": "bundle_name"}


class InvocationParameters(BaseModel):
    """Naming flags supplied on the command line."""

    model_config = ConfigDict(frozen=True)

    project_name: str | None = None
    bundle_name: str | None = None

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> InvocationParameters:
        """Read paired ``--project-name``/``--bundle-name`` tokens.

        A flag with no value after it is dropped; other tokens are ignored.
        """
        values: dict[str, str] = {}
        i = 0
        while i < len(tokens):
            attr = _FLAG_FIELDS.get(tokens[i])
            if attr and i + 1 < len(tokens) and tokens[i + 1]:
                values[attr] = tokens[i + 1]
                i += 1
            i += 1
        return cls(**values)

    @property
    def mode(self) -> RenameMode:
        if self.project_name and self.bundle_name:
            return RenameMode.RENAME
        if self.project_name or self.bundle_name:
            return RenameMode.PARTIAL
        return RenameMode.SETUP_ONLY


class ProjectIdentity(BaseModel):
    """Old and new project names for one rename run."""

    model_config = ConfigDict(frozen=True)

    old_name: str
    new_name: str

    @property
    def is_noop(self) -> bool:
        """True when the project already carries the new name."""
        return self.old_name == self.new_name
