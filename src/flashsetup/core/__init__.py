"""Core rename logic."""

from flashsetup.core.detector import detect_project_name
from flashsetup.core.errors import SetupError
from flashsetup.core.models import InvocationParameters, ProjectIdentity, RenameMode
from flashsetup.core.renamer import ProjectRenamer
from flashsetup.core.rewriter import rewrite_file, rewrite_tree

__all__ = [
    "InvocationParameters",
    "ProjectIdentity",
    "ProjectRenamer",
    "RenameMode",
    "SetupError",
    "detect_project_name",
    "rewrite_file",
    "rewrite_tree",
]
