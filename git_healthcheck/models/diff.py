"""Diff statistics model"""
from dataclasses import dataclass


@dataclass
class StagedDelta:
    """Line counts of the index compared to HEAD."""
    added: int = 0
    deleted: int = 0
    files: int = 0

    @property
    def is_empty(self) -> bool:
        return self.added == 0 and self.deleted == 0
