"""Diff statistics parsing."""

from git_healthcheck.models.diff import StagedDelta


def parse_numstat(output: str) -> StagedDelta:
    """
    Sum the rows of `git diff --numstat` output.

    Each row is "<added>\\t<deleted>\\t<path>". Binary files report "-" for
    both counts and contribute zero lines, but still count as a file.

    Args:
        output: Raw numstat output

    Returns:
        StagedDelta with the summed counts
    """
    delta = StagedDelta()
    for line in output.splitlines():
        parts = line.split("\t", 2)
        if len(parts) < 3:
            continue
        added, deleted = parts[0].strip(), parts[1].strip()
        delta.files += 1
        if added.isdigit():
            delta.added += int(added)
        if deleted.isdigit():
            delta.deleted += int(deleted)
    return delta
