"""
git-healthcheck - A pre-push repository health check
"""

import os

# Let a missing git binary surface through the version probe instead of at import time
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from .__version__ import __version__  # noqa: E402
from .core import HealthChecker  # noqa: E402
from .cli.main import main  # noqa: E402

__all__ = ["HealthChecker", "main", "__version__"]
