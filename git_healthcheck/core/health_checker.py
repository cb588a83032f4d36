"""Core functionality for git-healthcheck"""

import signal
import sys
from typing import Callable, Dict, Optional, Tuple, Union

from rich.console import Console

from git_healthcheck.config import Config
from git_healthcheck.logging_config import get_logger
from git_healthcheck.models.check import HealthReport, Stage, StageResult
from git_healthcheck.services import (
    BranchService,
    DisplayService,
    GitService,
    LfsService,
    RemoteService,
    SignatureService,
    StagedService,
    VersionService,
)

console = Console()
logger = get_logger(__name__)

# Fixed execution order of the pipeline
STAGE_ORDER: Tuple[Stage, ...] = (
    Stage.VERSION,
    Stage.BRANCH,
    Stage.REMOTES,
    Stage.LFS,
    Stage.SIGNATURE,
    Stage.STAGED,
)


def _signal_handler(signum, frame):
    """Handle interrupt signals. No stage writes anything that needs undoing."""
    if signum == signal.SIGINT:
        print()  # New line after ^C
        console.print("[yellow]Interrupted! Health check aborted.[/yellow]")
        sys.exit(1)


class HealthChecker:
    """Runs the check stages in order against one repository."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict],
        display_service: Optional[DisplayService] = None,
        git_service: Optional[GitService] = None,
    ):
        """Initialize HealthChecker.

        Args:
            repo_path: Path inside the git repository to check
            config: Configuration dict or Config object
            display_service: Where results are printed; None runs silently
            git_service: Git access, replaceable for tests
        """
        self.repo_path = repo_path
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.git_service = git_service or GitService(self.repo_path, self.config)
        self.display_service = display_service

        self.stages: Dict[Stage, Callable[[], StageResult]] = {
            Stage.VERSION: VersionService(self.git_service, self.config).check,
            Stage.BRANCH: BranchService(self.git_service, self.config).check,
            Stage.REMOTES: RemoteService(self.git_service, self.config).check,
            Stage.LFS: LfsService(self.git_service, self.config).check,
            Stage.SIGNATURE: SignatureService(self.git_service, self.config).check,
            Stage.STAGED: StagedService(self.git_service, self.config).check,
        }

    def install_signal_handler(self) -> None:
        signal.signal(signal.SIGINT, _signal_handler)

    def run_stage(self, stage: Stage) -> StageResult:
        logger.info(f"Running stage {stage.value}")
        if self.display_service:
            self.display_service.display_header(stage)
        result = self.stages[stage]()
        if self.display_service:
            self.display_service.display_result(result)
        return result

    def run(self) -> HealthReport:
        """Run every stage in order.

        Raises:
            FatalCheckError: When the version probe, branch resolution or the
                upstream fetch fails; later stages are not run
        """
        report = HealthReport()
        for stage in STAGE_ORDER:
            report.results.append(self.run_stage(stage))

        logger.info(f"Health check finished: {report.errors} error(s), {report.warnings} warning(s)")
        if self.display_service:
            self.display_service.display_summary(report)
        return report
