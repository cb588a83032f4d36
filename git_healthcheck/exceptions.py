"""Custom exceptions for git-healthcheck"""

from typing import Optional


class GitHealthcheckError(Exception):
    """Base exception for all git-healthcheck errors."""
    pass


class GitOperationError(GitHealthcheckError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, command: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.command = command
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if command:
            error_msg += f" ({command})"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class FatalCheckError(GitHealthcheckError):
    """Exception raised when a stage the rest of the pipeline depends on fails."""

    def __init__(self, stage: str, command: Optional[str] = None, message: Optional[str] = None):
        self.stage = stage
        self.command = command
        self.message = message

        error_msg = f"{stage} failed"
        if command:
            error_msg += f": {command}"
        if message:
            error_msg += f" ({message})"

        super().__init__(error_msg)

    @classmethod
    def from_operation_error(cls, stage: str, error: GitOperationError) -> "FatalCheckError":
        return cls(stage, error.command, error.message)


class NotARepositoryError(FatalCheckError):
    """Exception raised when the working directory is not inside a git repository."""

    def __init__(self, path: str):
        super().__init__("Repository discovery", message=f"'{path}' is not a git repository")
