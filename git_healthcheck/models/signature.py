"""Signature models"""
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional


class SignatureState(Enum):
    """Outcome of verifying the latest commit's signature."""
    NO_HISTORY = "no-history"
    UNKNOWN = "unknown"  # Verification output unavailable
    GOOD = "good"
    BAD = "bad"
    EXPIRED = "expired"
    UNCLEAR = "unclear"  # Signature present but not recognised
    ABSENT = "absent"


@dataclass
class SignatureStatus:
    """Signature of the latest commit."""
    state: SignatureState
    key_info: Optional[str] = None
    evidence: List[str] = field(default_factory=list)

    @property
    def present(self) -> bool:
        return self.state in (
            SignatureState.GOOD,
            SignatureState.BAD,
            SignatureState.EXPIRED,
            SignatureState.UNCLEAR,
        )

    @property
    def valid(self) -> Optional[bool]:
        """True/False for a verified outcome, None when it cannot be told."""
        if self.state == SignatureState.GOOD:
            return True
        if self.state in (SignatureState.BAD, SignatureState.EXPIRED):
            return False
        return None
