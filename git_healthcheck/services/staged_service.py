"""Service for auditing the size of staged changes"""

from typing import Union, TYPE_CHECKING

from git_healthcheck.constants import LARGE_DIFF_THRESHOLD
from git_healthcheck.exceptions import GitOperationError
from git_healthcheck.logging_config import get_logger
from git_healthcheck.models.check import Severity, Stage, StageResult
from git_healthcheck.parsers.diffstat import parse_numstat

if TYPE_CHECKING:
    from git_healthcheck.config import Config
    from git_healthcheck.services.git_service import GitService

logger = get_logger(__name__)


class StagedService:
    """Warns when staged additions exceed the threshold. Never blocks."""

    def __init__(self, git_service: "GitService", config: Union["Config", dict]):
        self.git_service = git_service
        self.config = config
        self.threshold = config.get("large_diff_threshold", LARGE_DIFF_THRESHOLD)

    def check(self) -> StageResult:
        result = StageResult(Stage.STAGED)
        try:
            delta = parse_numstat(self.git_service.get_staged_numstat())
        except GitOperationError as e:
            result.add(Severity.WARNING, f"Could not compute staged diff: {e}")
            return result

        result.data = delta
        logger.debug(f"Staged: {delta.files} file(s), +{delta.added} / -{delta.deleted}")
        if delta.added > self.threshold:
            result.add(
                Severity.WARNING,
                f"Large staged diff: +{delta.added} / -{delta.deleted} lines (threshold {self.threshold})",
            )
        elif delta.is_empty:
            result.add(Severity.OK, "No staged changes")
        else:
            result.add(Severity.OK, f"Staged changes: +{delta.added} / -{delta.deleted} lines")
        return result
