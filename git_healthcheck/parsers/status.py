"""Branch status parsing."""

from typing import List, Tuple


def parse_short_status(output: str) -> Tuple[str, List[str]]:
    """
    Split `git status -sb` output into the branch line and the file entries.

    Returns:
        (branch line without the leading "## ", list of file entry lines)
    """
    branch_line = ""
    entries = []
    for line in output.splitlines():
        if line.startswith("## "):
            branch_line = line[3:]
        elif line.strip():
            entries.append(line.rstrip())
    return branch_line, entries


def parse_left_right_count(output: str) -> Tuple[int, int]:
    """
    Parse `git rev-list --left-right --count <upstream>...HEAD`.

    The left count is commits only on the upstream (behind), the right count
    commits only on HEAD (ahead).

    Returns:
        (ahead, behind)

    Raises:
        ValueError: If the output is not two integers
    """
    parts = output.split()
    if len(parts) != 2:
        raise ValueError(f"Unexpected rev-list output: {output!r}")
    behind, ahead = int(parts[0]), int(parts[1])
    return ahead, behind
