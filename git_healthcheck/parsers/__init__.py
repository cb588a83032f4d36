"""Parsers for the text git and its helpers print.

Every function here is pure: it takes command output and returns a model,
so each can be tested against fixture strings without running git.
- remote_url: host extraction and transport classification
- signature: signature verification output classification
- diffstat: `git diff --numstat` summing
- lfs: `git lfs env` / `git lfs ls-files` parsing
- status: `git status -sb` and `rev-list --left-right --count` parsing
"""

from .remote_url import extract_host, classify_transport, parse_remote
from .signature import classify_signature, extract_key_info
from .diffstat import parse_numstat
from .lfs import is_lfs_initialized, find_lfs_endpoint, count_lfs_files
from .status import parse_short_status, parse_left_right_count

__all__ = [
    "extract_host",
    "classify_transport",
    "parse_remote",
    "classify_signature",
    "extract_key_info",
    "parse_numstat",
    "is_lfs_initialized",
    "find_lfs_endpoint",
    "count_lfs_files",
    "parse_short_status",
    "parse_left_right_count",
]
