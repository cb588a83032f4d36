"""Branch model"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class BranchStatus:
    """Current branch compared to its upstream."""
    name: str
    upstream: Optional[str] = None
    ahead: int = 0
    behind: int = 0
    dirty: bool = False
    detached: bool = False  # name is a short commit hash
    remote: Optional[str] = None  # Remote the upstream belongs to
    status_lines: List[str] = field(default_factory=list)  # Entries from `git status -sb`

    @property
    def has_upstream(self) -> bool:
        return self.upstream is not None
