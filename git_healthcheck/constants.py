"""Shared constants for git-healthcheck."""

from git_healthcheck.models.check import Severity, Stage


DEFAULT_REMOTE = "origin"

# Staged additions above this many lines trigger a size warning
LARGE_DIFF_THRESHOLD = 100_000


# Symbol per severity
SEVERITY_SYMBOLS = {
    Severity.OK: "✅",
    Severity.INFO: "ℹ️ ",
    Severity.WARNING: "⚠️ ",
    Severity.ERROR: "❌",
}

# CLI colors (Rich color names)
SEVERITY_COLORS = {
    Severity.OK: "green",
    Severity.INFO: "blue",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}

SECTION_SYMBOL = "🔍"

STAGE_TITLES = {
    Stage.VERSION: "Checking git version",
    Stage.BRANCH: "Checking branch / upstream",
    Stage.REMOTES: "Checking remotes and credentials",
    Stage.LFS: "Checking Git LFS",
    Stage.SIGNATURE: "Checking latest commit signature",
    Stage.STAGED: "Checking staged changes",
}


# Remediation hints
UPSTREAM_HINTS = (
    "git push -u {remote} {branch}",
    "git branch --set-upstream-to={remote}/{branch}",
)

HTTPS_CREDENTIAL_HINT = (
    "Credentials for {host} were rejected or are missing; "
    "refresh your token or credential helper entry"
)

LFS_INSTALL_HINT = "git lfs install"

SIGNING_SETUP_STEPS = (
    "1. Create or import a signing key (e.g. gpg --full-generate-key)",
    "2. git config user.signingkey <KEY_ID>",
    "3. git config commit.gpgsign true",
)

# Marker written into `git lfs env` once the clean filter is configured
LFS_FILTER_MARKER = "git-lfs clean"

# Appended to the effective ssh command when re-running a failed SSH probe
VERBOSE_SSH_FLAGS = "-v -o BatchMode=yes"
