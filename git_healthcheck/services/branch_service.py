"""Service for inspecting the current branch against its upstream"""

from typing import Union, TYPE_CHECKING

from git_healthcheck.constants import UPSTREAM_HINTS
from git_healthcheck.exceptions import FatalCheckError, GitOperationError
from git_healthcheck.logging_config import get_logger
from git_healthcheck.models.branch import BranchStatus
from git_healthcheck.models.check import Severity, Stage, StageResult
from git_healthcheck.parsers.status import parse_left_right_count, parse_short_status

if TYPE_CHECKING:
    from git_healthcheck.config import Config
    from git_healthcheck.services.git_service import GitService

logger = get_logger(__name__)


class BranchService:
    """Service for determining branch and upstream status.

    A missing upstream is reported, not fatal. Failing to resolve the branch
    or to fetch the upstream's remote aborts the run.
    """

    def __init__(self, git_service: "GitService", config: Union["Config", dict]):
        self.git_service = git_service
        self.config = config
        self.default_remote = config.get("default_remote", "origin")
        self.fetch_enabled = config.get("fetch", True)

    def check(self) -> StageResult:
        result = StageResult(Stage.BRANCH)

        try:
            name, detached = self.git_service.get_current_branch()
        except GitOperationError as e:
            raise FatalCheckError.from_operation_error("Branch resolution", e)
        branch = BranchStatus(name=name, detached=detached)
        result.data = branch

        if detached:
            result.add(Severity.WARNING, f"HEAD is detached at {name}")
        else:
            result.add(Severity.INFO, f"On branch {name}")

        branch.upstream = self.git_service.get_upstream()
        if branch.has_upstream:
            self._compare_with_upstream(branch, result)
        else:
            self._report_missing_upstream(branch, result)

        self._report_working_tree(branch, result)
        return result

    def _report_missing_upstream(self, branch: BranchStatus, result: StageResult) -> None:
        logger.debug(f"No upstream for {branch.name}")
        hints = [hint.format(remote=self.default_remote, branch=branch.name) for hint in UPSTREAM_HINTS]

        merge = None if branch.detached else self.git_service.get_branch_merge(branch.name)
        if merge:
            # Configured, but @{u} no longer resolves
            remote = self.git_service.get_branch_remote(branch.name) or self.default_remote
            if merge.startswith("refs/heads/"):
                merge = merge[len("refs/heads/"):]
            result.add(
                Severity.WARNING,
                f"Upstream {remote}/{merge} of {branch.name} is gone; skipping ahead/behind check",
                ["Push the branch again or track another one:"] + [f"  {hint}" for hint in hints],
            )
            return

        result.add(
            Severity.WARNING,
            f"No upstream configured for {branch.name}; skipping ahead/behind check",
            ["Set one with:"] + [f"  {hint}" for hint in hints],
        )

    def _compare_with_upstream(self, branch: BranchStatus, result: StageResult) -> None:
        remote = self.git_service.get_branch_remote(branch.name)
        if not remote:
            result.add(
                Severity.WARNING,
                f"Could not resolve the remote of {branch.upstream}; using {self.default_remote}",
            )
            remote = self.default_remote
        branch.remote = remote

        if self.fetch_enabled:
            try:
                self.git_service.fetch(remote)
            except GitOperationError as e:
                raise FatalCheckError.from_operation_error(f"Fetch from {remote}", e)
        else:
            result.add(Severity.INFO, f"Skipped fetch from {remote}; counts may be stale")

        try:
            output = self.git_service.get_left_right_count(branch.upstream)
            branch.ahead, branch.behind = parse_left_right_count(output)
        except (GitOperationError, ValueError) as e:
            raise FatalCheckError("Ahead/behind comparison", f"git rev-list {branch.upstream}...HEAD", str(e))

        logger.debug(f"{branch.name}: ahead {branch.ahead}, behind {branch.behind}")
        result.add(Severity.INFO, f"Ahead/behind {branch.upstream}: {branch.ahead}/{branch.behind}")

    def _report_working_tree(self, branch: BranchStatus, result: StageResult) -> None:
        try:
            status_output = self.git_service.get_short_status()
        except GitOperationError as e:
            result.add(Severity.WARNING, f"Could not read working tree status: {e}")
            return

        _, entries = parse_short_status(status_output)
        branch.status_lines = entries
        branch.dirty = bool(entries)
        if branch.dirty:
            result.add(Severity.INFO, f"Working tree has {len(entries)} uncommitted change(s)", entries)
        else:
            result.add(Severity.OK, "Working tree clean")
