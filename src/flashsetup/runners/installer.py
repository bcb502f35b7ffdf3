"""Runner for the external install steps that follow a rename."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Iterable
from pathlib import Path

from flashsetup.config import SetupStep
from flashsetup.core.errors import SetupError

logger = logging.getLogger(__name__)


class SetupStepError(SetupError):
    """An external setup command exited with a non-zero status."""

    def __init__(self, step: SetupStep, returncode: int) -> None:
        self.step = step
        self.returncode = returncode
        super().__init__(f"Command failed: {step.command} (exit code {returncode})")


class InstallRunner:
    """Runs setup commands one at a time, inheriting the console."""

    def __init__(self, project_root: Path, on_step: Callable[[SetupStep], None] | None = None) -> None:
        self.project_root = project_root
        self.on_step = on_step

    def run_all(self, steps: Iterable[SetupStep]) -> None:
        """Run each step in order, stopping at the first failure."""
        for step in steps:
            self.run(step)

    def run(self, step: SetupStep) -> None:
        """Run a single step.

        Raises:
            SetupStepError: If the command exits non-zero
        """
        if self.on_step is not None:
            self.on_step(step)

        cwd = self.project_root / step.cwd if step.cwd else self.project_root
        logger.debug(f"Running '{step.command}' in {cwd}")
        result = subprocess.run(step.command, shell=True, cwd=cwd, check=False)

        if result.returncode != 0:
            logger.error(f"{step.name} failed with exit code {result.returncode}")
            raise SetupStepError(step, result.returncode)
