"""Git LFS output parsing."""

from typing import Optional

from git_healthcheck.constants import LFS_FILTER_MARKER


def is_lfs_initialized(env_output: str) -> bool:
    """Check `git lfs env` output for the configured clean filter."""
    return LFS_FILTER_MARKER in env_output


def find_lfs_endpoint(env_output: str) -> Optional[str]:
    """
    Return the first endpoint line of `git lfs env`.

    Lines look like "Endpoint=https://host/repo.git/info/lfs (auth=none)" or
    "Endpoint (upstream)=...". The returned line is stripped.
    """
    for line in env_output.splitlines():
        line = line.strip()
        if line.startswith("Endpoint") and "=" in line:
            return line
    return None


def count_lfs_files(ls_files_output: str) -> int:
    """Count the rows of `git lfs ls-files`."""
    return sum(1 for line in ls_files_output.splitlines() if line.strip())
