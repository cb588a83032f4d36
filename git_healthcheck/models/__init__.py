"""Data models for git-healthcheck."""

from .check import Severity, Stage, Finding, StageResult, HealthReport
from .branch import BranchStatus
from .remote import Transport, Remote
from .signature import SignatureState, SignatureStatus
from .diff import StagedDelta

__all__ = [
    "Severity",
    "Stage",
    "Finding",
    "StageResult",
    "HealthReport",
    "BranchStatus",
    "Transport",
    "Remote",
    "SignatureState",
    "SignatureStatus",
    "StagedDelta",
]
