"""Exceptions raised by flash-setup."""

from __future__ import annotations


class SetupError(Exception):
    """Fatal setup failure; the CLI exits non-zero."""
