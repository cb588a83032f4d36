"""Configuration handling for git-healthcheck"""

from dataclasses import dataclass

from git_healthcheck.constants import DEFAULT_REMOTE, LARGE_DIFF_THRESHOLD


@dataclass
class Config:
    """Configuration for git-healthcheck with validation."""

    # Remote used when the branch config does not name one
    default_remote: str = DEFAULT_REMOTE

    # Pipeline behaviour
    fetch: bool = True
    strict: bool = False  # Exit non-zero on any ERROR finding, not only on aborts

    # Thresholds and output limits
    large_diff_threshold: int = LARGE_DIFF_THRESHOLD
    evidence_lines: int = 3  # Signature verification lines to show
    diagnostic_lines: int = 8  # Tail of verbose ssh output to show on auth failure

    # Logging
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_default_remote()
        self._validate_large_diff_threshold()
        self._validate_line_limits()

    def _validate_default_remote(self):
        """Validate default_remote is a usable remote name."""
        if not self.default_remote or not self.default_remote.strip():
            raise ValueError("default_remote cannot be empty")
        self.default_remote = self.default_remote.strip()
        if any(ch.isspace() for ch in self.default_remote):
            raise ValueError(f"default_remote cannot contain whitespace, got '{self.default_remote}'")

    def _validate_large_diff_threshold(self):
        if self.large_diff_threshold <= 0:
            raise ValueError(f"large_diff_threshold must be positive, got {self.large_diff_threshold}")

    def _validate_line_limits(self):
        if self.evidence_lines <= 0:
            raise ValueError(f"evidence_lines must be positive, got {self.evidence_lines}")
        if self.diagnostic_lines <= 0:
            raise ValueError(f"diagnostic_lines must be positive, got {self.diagnostic_lines}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "default_remote": self.default_remote,
            "fetch": self.fetch,
            "strict": self.strict,
            "large_diff_threshold": self.large_diff_threshold,
            "evidence_lines": self.evidence_lines,
            "diagnostic_lines": self.diagnostic_lines,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = set(cls.__dataclass_fields__)
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
