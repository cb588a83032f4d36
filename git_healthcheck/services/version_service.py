"""Service for the git version probe"""

from typing import Union, TYPE_CHECKING

from git_healthcheck.exceptions import FatalCheckError, GitOperationError
from git_healthcheck.logging_config import get_logger
from git_healthcheck.models.check import Severity, Stage, StageResult

if TYPE_CHECKING:
    from git_healthcheck.config import Config
    from git_healthcheck.services.git_service import GitService

logger = get_logger(__name__)


class VersionService:
    """Confirms git is installed. Everything after this depends on it."""

    def __init__(self, git_service: "GitService", config: Union["Config", dict]):
        self.git_service = git_service
        self.config = config

    def check(self) -> StageResult:
        result = StageResult(Stage.VERSION)
        try:
            version = self.git_service.get_version()
        except GitOperationError as e:
            raise FatalCheckError.from_operation_error("Version probe", e)
        logger.debug(f"Found {version}")
        result.add(Severity.OK, version)
        result.data = version
        return result
