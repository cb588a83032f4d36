"""Git operations service"""
import os
import shutil
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple, TYPE_CHECKING, Union

import git

from git_healthcheck.exceptions import GitOperationError, NotARepositoryError
from git_healthcheck.logging_config import get_logger

if TYPE_CHECKING:
    from git_healthcheck.config import Config

logger = get_logger(__name__)


def _command_text(error: git.exc.CommandError) -> Optional[str]:
    """Render the command line carried by a GitPython error."""
    command = getattr(error, "command", None)
    if isinstance(command, (list, tuple)):
        return " ".join(str(part) for part in command)
    return str(command) if command else None


def _stderr_text(error: git.exc.CommandError) -> Optional[str]:
    """Unwrap GitPython's "\\n  stderr: '...'" decoration."""
    text = str(getattr(error, "stderr", "") or "").strip()
    if text.startswith("stderr: "):
        text = text[len("stderr: "):]
    return text.strip("'\" \n") or None


class GitService:
    """Service for Git operations.

    Every method is a single git invocation; only fetch writes anything, and
    then only remote-tracking refs. Failures are raised as GitOperationError
    so each stage decides whether they are fatal.
    """

    def __init__(self, repo_path: str, config: Union['Config', dict]):
        """Initialize the service.

        Args:
            repo_path: Path inside the git repository
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        logger.info("Git service initialized")

    def _get_repo(self) -> git.Repo:
        """Open the repository containing repo_path.

        A fresh instance per call keeps every observation current. Opening a
        repo does not read any objects, so this is cheap.
        """
        try:
            return git.Repo(self.repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError):
            raise NotARepositoryError(self.repo_path)

    @contextmanager
    def _git_operation(self, operation: str) -> Iterator[git.Git]:
        """Yield the repo's command runner, converting command failures."""
        repo = self._get_repo()
        try:
            yield repo.git
        except (git.exc.GitCommandError, git.exc.GitCommandNotFound) as e:
            logger.debug(f"[{operation}] {e}")
            raise GitOperationError(operation, _command_text(e), _stderr_text(e))

    def get_version(self) -> str:
        """Report `git --version`; works outside a repository."""
        try:
            return git.Git().version().strip()
        except git.exc.GitCommandNotFound:
            raise GitOperationError("version", "git version", "git executable not found")
        except git.exc.GitCommandError as e:
            raise GitOperationError("version", _command_text(e), _stderr_text(e))

    def get_current_branch(self) -> Tuple[str, bool]:
        """Get the current branch, or the short commit hash on a detached HEAD.

        Returns:
            (name, detached)
        """
        repo = self._get_repo()
        try:
            return repo.active_branch.name, False
        except TypeError:
            logger.debug("HEAD is detached, using short commit hash")
            with self._git_operation("resolve_branch") as g:
                return g.rev_parse("--short", "HEAD").strip(), True

    def get_upstream(self) -> Optional[str]:
        """Get the upstream of the current branch (e.g. origin/main), if any."""
        try:
            with self._git_operation("resolve_upstream") as g:
                upstream = g.rev_parse("--abbrev-ref", "--symbolic-full-name", "@{u}").strip()
        except GitOperationError:
            return None
        return upstream or None

    def get_config_value(self, key: str) -> Optional[str]:
        """Read a git config value; None when it is unset."""
        try:
            with self._git_operation("read_config") as g:
                value = g.config("--get", key).strip()
        except GitOperationError:
            return None
        return value or None

    def get_branch_remote(self, branch_name: str) -> Optional[str]:
        """Get the remote configured for a branch (branch.<name>.remote)."""
        return self.get_config_value(f"branch.{branch_name}.remote")

    def get_branch_merge(self, branch_name: str) -> Optional[str]:
        """Get the upstream ref configured for a branch (branch.<name>.merge)."""
        return self.get_config_value(f"branch.{branch_name}.merge")

    def get_ssh_command(self) -> str:
        """The ssh command git will run: GIT_SSH_COMMAND, then core.sshCommand, then ssh."""
        return os.environ.get("GIT_SSH_COMMAND") or self.get_config_value("core.sshCommand") or "ssh"

    def fetch(self, remote: str) -> None:
        """Fetch from a remote, updating its remote-tracking refs."""
        logger.debug(f"Fetching from {remote}...")
        with self._git_operation("fetch") as g:
            with g.custom_environment(GIT_TERMINAL_PROMPT="0"):
                g.fetch(remote)

    def get_left_right_count(self, upstream: str) -> str:
        """Raw `rev-list --left-right --count <upstream>...HEAD` output."""
        with self._git_operation("ahead_behind") as g:
            return g.rev_list("--left-right", "--count", f"{upstream}...HEAD")

    def get_short_status(self) -> str:
        with self._git_operation("status") as g:
            return g.status("-sb")

    def list_remotes(self) -> List[str]:
        """Remote names in the order git lists them."""
        with self._git_operation("list_remotes") as g:
            output = g.remote()
        return [line.strip() for line in output.splitlines() if line.strip()]

    def get_remote_url(self, remote: str) -> str:
        with self._git_operation("remote_url") as g:
            return g.remote("get-url", remote).strip()

    def probe_remote(self, remote: str, ssh_command: Optional[str] = None) -> Tuple[bool, str]:
        """List the remote's branches to prove it is reachable with our credentials.

        Terminal prompts are disabled so a hook never hangs on a password
        prompt.

        Args:
            remote: Remote name
            ssh_command: Optional GIT_SSH_COMMAND override, e.g. a verbose ssh

        Returns:
            (success, stderr output)
        """
        env = {"GIT_TERMINAL_PROMPT": "0"}
        if ssh_command:
            env["GIT_SSH_COMMAND"] = ssh_command
        logger.debug(f"Probing remote {remote} (ssh_command={ssh_command})")
        repo = self._get_repo()
        with repo.git.custom_environment(**env):
            status, _, stderr = repo.git.ls_remote(
                "--heads", remote, with_extended_output=True, with_exceptions=False
            )
        logger.debug(f"Probe of {remote} exited with {status}")
        return status == 0, stderr or ""

    def has_commits(self) -> bool:
        """False for a repository whose HEAD points at an unborn branch."""
        return self._get_repo().head.is_valid()

    def get_signature_output(self) -> str:
        """Signature verification text for HEAD, without the commit line."""
        repo = self._get_repo()
        sha = repo.head.commit.hexsha
        with self._git_operation("show_signature") as g:
            output = g.log("-1", "--show-signature", "--format=%H")
        return "\n".join(line for line in output.splitlines() if line.strip() != sha)

    def get_staged_numstat(self) -> str:
        with self._git_operation("staged_diff") as g:
            return g.diff("--cached", "--numstat")

    def has_lfs(self) -> bool:
        """Check whether the git-lfs extension is on PATH."""
        return shutil.which("git-lfs") is not None

    def get_lfs_env(self) -> str:
        with self._git_operation("lfs_env") as g:
            return g.lfs("env")

    def get_lfs_files(self) -> str:
        with self._git_operation("lfs_ls_files") as g:
            return g.lfs("ls-files")
