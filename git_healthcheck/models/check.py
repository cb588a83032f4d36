"""Check result models and related enums"""
from enum import Enum
from dataclasses import dataclass, field
from typing import Any, List, Optional


class Severity(Enum):
    """Severity of a single finding, in increasing order."""
    OK = "ok"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Stage(Enum):
    """Pipeline stages, in execution order."""
    VERSION = "version"
    BRANCH = "branch"
    REMOTES = "remotes"
    LFS = "lfs"
    SIGNATURE = "signature"
    STAGED = "staged"


@dataclass
class Finding:
    """One line of the report, with optional evidence shown underneath."""
    severity: Severity
    message: str
    details: List[str] = field(default_factory=list)


@dataclass
class StageResult:
    """Everything a stage observed."""
    stage: Stage
    findings: List[Finding] = field(default_factory=list)
    data: Optional[Any] = None  # Typed payload (BranchStatus, list of Remote, ...)

    def add(self, severity: Severity, message: str, details: Optional[List[str]] = None) -> Finding:
        finding = Finding(severity, message, list(details or []))
        self.findings.append(finding)
        return finding

    def count(self, severity: Severity) -> int:
        return sum(1 for f in self.findings if f.severity == severity)


@dataclass
class HealthReport:
    """Results of one run of the pipeline."""
    results: List[StageResult] = field(default_factory=list)

    def get(self, stage: Stage) -> Optional[StageResult]:
        for result in self.results:
            if result.stage == stage:
                return result
        return None

    @property
    def errors(self) -> int:
        return sum(r.count(Severity.ERROR) for r in self.results)

    @property
    def warnings(self) -> int:
        return sum(r.count(Severity.WARNING) for r in self.results)

    def exit_code(self, strict: bool = False) -> int:
        """0 unless strict mode is on and some finding is an ERROR."""
        if strict and self.errors:
            return 1
        return 0
