"""Pytest fixtures for git-healthcheck tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest
import git

from git_healthcheck.services.git_service import GitService


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'default_remote': 'origin',
        'fetch': True,
        'strict': False,
        'large_diff_threshold': 100000,
        'evidence_lines': 3,
        'diagnostic_lines': 8,
        'verbose': False,
        'debug': False,
    }


def _configure(repo):
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")


@pytest.fixture
def empty_repo(temp_dir):
    """Create a Git repository with no commits."""
    repo_path = temp_dir / "empty_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)
    _configure(repo)
    yield repo
    repo.close()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main and no remotes."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure(repo)

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_upstream(temp_dir, git_repo):
    """Create a repository whose main branch tracks origin/main on a local bare repo."""
    origin_path = temp_dir / "origin.git"
    origin = git.Repo.init(origin_path, bare=True)

    git_repo.create_remote('origin', str(origin_path))
    git_repo.git.push('-u', 'origin', 'main')

    yield git_repo

    origin.close()


@pytest.fixture
def mock_git_service():
    """Create a mock GitService describing a healthy repository."""
    service = Mock(spec=GitService)

    service.get_version = Mock(return_value="git version 2.43.0")
    service.get_current_branch = Mock(return_value=("main", False))
    service.get_upstream = Mock(return_value="origin/main")
    service.get_branch_remote = Mock(return_value="origin")
    service.get_branch_merge = Mock(return_value=None)
    service.get_ssh_command = Mock(return_value="ssh")
    service.fetch = Mock(return_value=None)
    service.get_left_right_count = Mock(return_value="0\t0")
    service.get_short_status = Mock(return_value="## main...origin/main")
    service.list_remotes = Mock(return_value=["origin"])
    service.get_remote_url = Mock(return_value="git@github.com:test/repo.git")
    service.probe_remote = Mock(return_value=(True, ""))
    service.has_commits = Mock(return_value=True)
    service.get_signature_output = Mock(return_value="")
    service.get_config_value = Mock(return_value=None)
    service.get_staged_numstat = Mock(return_value="")
    service.has_lfs = Mock(return_value=False)
    service.get_lfs_env = Mock(return_value="")
    service.get_lfs_files = Mock(return_value="")

    return service


# Canned `git log --show-signature` output, commit line removed
SIGNATURE_FIXTURES = {
    "good": (
        "gpg: Signature made Mon Jan  1 12:00:00 2024 UTC\n"
        "gpg:                using RSA key ABCDEF0123456789\n"
        'gpg: Good signature from "Alice <alice@example.com>" [ultimate]\n'
    ),
    "bad": (
        "gpg: Signature made Mon Jan  1 12:00:00 2024 UTC\n"
        "gpg:                using RSA key ABCDEF0123456789\n"
        'gpg: BAD signature from "Alice <alice@example.com>" [ultimate]\n'
    ),
    "expired": (
        "gpg: Signature made Mon Jan  1 12:00:00 2024 UTC\n"
        "gpg:                using RSA key ABCDEF0123456789\n"
        'gpg: Good signature from "Alice <alice@example.com>" [expired]\n'
        "gpg: Note: This key has expired!\n"
    ),
    "unclear": (
        "gpg: Signature made Mon Jan  1 12:00:00 2024 UTC\n"
        "gpg:                using RSA key ABCDEF0123456789\n"
        "gpg: Can't check signature: No public key\n"
    ),
    "absent": "",
}


@pytest.fixture
def signature_fixtures():
    return dict(SIGNATURE_FIXTURES)
