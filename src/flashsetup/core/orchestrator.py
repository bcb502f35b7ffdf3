"""End-to-end setup: optional rename, then the external install steps."""

from __future__ import annotations

import logging
from pathlib import Path

from flashsetup.config import Config
from flashsetup.core.errors import SetupError
from flashsetup.core.models import InvocationParameters, ProjectIdentity, RenameMode
from flashsetup.core.renamer import ProjectRenamer
from flashsetup.runners.installer import InstallRunner

logger = logging.getLogger(__name__)

USAGE_HINT = 'yarn setup --project-name "YourAppName" --bundle-name com.yourcompany.yourapp'


def run_setup(
    params: InvocationParameters,
    project_root: Path,
    config: Config | None = None,
    runner: InstallRunner | None = None,
) -> ProjectIdentity | None:
    """Rename the project when both names are given, then run every setup step.

    Args:
        params: Parsed naming flags
        project_root: Root of the React Native project
        config: Layout and setup steps (defaults if None)
        runner: Runner for the external commands

    Returns:
        The identity used for renaming, or None if no rename happened

    Raises:
        SetupError: If renaming fails or a setup command exits non-zero
    """
    config = config or Config()
    runner = runner or InstallRunner(project_root)
    identity: ProjectIdentity | None = None

    if params.mode is RenameMode.RENAME:
        logger.info(f'Renaming project to "{params.project_name}" with bundle "{params.bundle_name}"...')
        renamer = ProjectRenamer(project_root, config.layout)
        try:
            identity = renamer.rename(params.project_name, params.bundle_name)
        except Exception as e:
            raise SetupError(str(e)) from e
    elif params.mode is RenameMode.PARTIAL:
        logger.warning("Both --project-name and --bundle-name are required for renaming.")
        logger.warning(f"Usage: {USAGE_HINT}")
        logger.warning("Continuing without renaming...")

    runner.run_all(config.setup_steps)
    return identity
