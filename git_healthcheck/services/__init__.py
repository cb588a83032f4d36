"""Services for git-healthcheck: git access, one service per check, and display."""

from .git_service import GitService
from .version_service import VersionService
from .branch_service import BranchService
from .remote_service import RemoteService
from .lfs_service import LfsService
from .signature_service import SignatureService
from .staged_service import StagedService
from .display_service import DisplayService

__all__ = [
    "GitService",
    "VersionService",
    "BranchService",
    "RemoteService",
    "LfsService",
    "SignatureService",
    "StagedService",
    "DisplayService",
]
