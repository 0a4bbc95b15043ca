"""Error types raised by taskcli."""

from __future__ import annotations


class TaskError(Exception):
    """Base error for taskcli.

    Every subclass carries a machine-readable ``code`` next to the
    human-readable message.
    """

    code: str = "TASK_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ValidationError(TaskError):
    """Raised when user input breaks a config rule."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class StorageError(TaskError):
    """Raised when the config file cannot be read or written."""

    code = "STORAGE_ERROR"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"
