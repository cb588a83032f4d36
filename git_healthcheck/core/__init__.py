"""Core functionality for git-healthcheck"""

from .health_checker import HealthChecker, STAGE_ORDER

__all__ = ["HealthChecker", "STAGE_ORDER"]
