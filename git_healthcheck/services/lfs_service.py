"""Service for auditing Git LFS setup"""

from typing import Union, TYPE_CHECKING

from git_healthcheck.constants import LFS_INSTALL_HINT
from git_healthcheck.exceptions import GitOperationError
from git_healthcheck.logging_config import get_logger
from git_healthcheck.models.check import Severity, Stage, StageResult
from git_healthcheck.parsers.lfs import count_lfs_files, find_lfs_endpoint, is_lfs_initialized

if TYPE_CHECKING:
    from git_healthcheck.config import Config
    from git_healthcheck.services.git_service import GitService

logger = get_logger(__name__)


class LfsService:
    """Checks git-lfs is installed, initialized and where it stores objects."""

    def __init__(self, git_service: "GitService", config: Union["Config", dict]):
        self.git_service = git_service
        self.config = config

    def check(self) -> StageResult:
        result = StageResult(Stage.LFS)

        if not self.git_service.has_lfs():
            result.add(Severity.WARNING, "git-lfs is not installed; skipping LFS checks")
            return result

        try:
            env_output = self.git_service.get_lfs_env()
        except GitOperationError as e:
            result.add(Severity.WARNING, f"Could not read git lfs env: {e}")
            return result

        if not is_lfs_initialized(env_output):
            result.add(
                Severity.WARNING,
                "git-lfs is installed but not initialized",
                [f"Run: {LFS_INSTALL_HINT}"],
            )
            return result
        result.add(Severity.OK, "git-lfs is installed and initialized")

        endpoint = find_lfs_endpoint(env_output)
        if endpoint:
            result.add(Severity.INFO, f"LFS {endpoint}")
        else:
            result.add(Severity.INFO, "No LFS endpoint configured; the main remote URL will be used")

        try:
            tracked = count_lfs_files(self.git_service.get_lfs_files())
        except GitOperationError as e:
            result.add(Severity.WARNING, f"Could not list LFS files: {e}")
            return result

        logger.debug(f"{tracked} file(s) tracked by LFS")
        result.data = tracked
        if tracked:
            result.add(Severity.OK, f"{tracked} file(s) tracked by LFS")
        else:
            result.add(Severity.INFO, "No files are tracked by LFS")
        return result
