"""Runners for external setup commands."""

from flashsetup.runners.installer import InstallRunner, SetupStepError

__all__ = ["InstallRunner", "SetupStepError"]
