"""Service for probing configured remotes"""

from typing import List, Union, TYPE_CHECKING

from git_healthcheck.constants import HTTPS_CREDENTIAL_HINT, VERBOSE_SSH_FLAGS
from git_healthcheck.exceptions import GitOperationError
from git_healthcheck.logging_config import get_logger
from git_healthcheck.models.check import Severity, Stage, StageResult
from git_healthcheck.models.remote import Remote, Transport
from git_healthcheck.parsers.remote_url import parse_remote

if TYPE_CHECKING:
    from git_healthcheck.config import Config
    from git_healthcheck.services.git_service import GitService

logger = get_logger(__name__)


class RemoteService:
    """Service for checking every remote is reachable with our credentials.

    A failing remote is reported and the loop moves on to the next one, so a
    repository with several remotes always gets a full report.
    """

    def __init__(self, git_service: "GitService", config: Union["Config", dict]):
        self.git_service = git_service
        self.config = config
        self.diagnostic_lines = config.get("diagnostic_lines", 8)

    def check(self) -> StageResult:
        result = StageResult(Stage.REMOTES)
        remotes: List[Remote] = []
        result.data = remotes

        try:
            names = self.git_service.list_remotes()
        except GitOperationError as e:
            result.add(Severity.ERROR, f"Could not list remotes: {e}")
            return result

        if not names:
            result.add(Severity.WARNING, "No remotes configured; nothing to push to")
            return result

        for name in names:
            try:
                remote = parse_remote(name, self.git_service.get_remote_url(name))
            except GitOperationError as e:
                result.add(Severity.ERROR, f"{name}: could not resolve URL: {e}")
                continue
            remotes.append(remote)

            logger.debug(f"Checking remote {remote.name}: {remote.url} -> {remote.transport.value}")
            if remote.transport == Transport.SSH:
                self._check_ssh(remote, result)
            elif remote.transport == Transport.HTTPS:
                self._check_https(remote, result)
            else:
                result.add(
                    Severity.INFO,
                    f"{remote.name}: {remote.url} uses an unrecognised transport; not probed",
                )
        return result

    def _check_ssh(self, remote: Remote, result: StageResult) -> None:
        ok, _ = self.git_service.probe_remote(remote.name)
        if ok:
            result.add(Severity.OK, f"{remote}: authenticated")
            return

        logger.debug(f"SSH probe of {remote.name} failed, re-running verbosely")
        # Extend the effective ssh command so the diagnostic uses the same identity
        ssh_command = f"{self.git_service.get_ssh_command()} {VERBOSE_SSH_FLAGS}"
        _, diagnostic = self.git_service.probe_remote(remote.name, ssh_command=ssh_command)
        result.add(
            Severity.ERROR,
            f"{remote}: SSH authentication failed",
            self._tail(diagnostic) or [f"Try: ssh -T git@{remote.host}"],
        )

    def _check_https(self, remote: Remote, result: StageResult) -> None:
        ok, stderr = self.git_service.probe_remote(remote.name)
        if ok:
            result.add(Severity.OK, f"{remote}: credentials accepted")
            return

        details = [HTTPS_CREDENTIAL_HINT.format(host=remote.host)]
        details.extend(self._tail(stderr))
        result.add(Severity.ERROR, f"{remote}: could not list remote branches", details)

    def _tail(self, output: str) -> List[str]:
        lines = [line.rstrip() for line in output.splitlines() if line.strip()]
        return lines[-self.diagnostic_lines:]
