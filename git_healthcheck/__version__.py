"""Version information for git-healthcheck."""

__version__ = "0.1.0"
