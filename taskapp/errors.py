"""Error types raised by the task repository and configuration loader"""
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from taskapp.models.task import Task


class TaskAppError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(TaskAppError):
    """Raised when required configuration is missing or malformed."""


class ValidationError(TaskAppError):
    """Raised when caller input fails a precondition."""


class NotFoundError(TaskAppError):
    """Raised when an update targets a task that does not exist."""


class StoreError(TaskAppError):
    """Raised when a call to the backing store fails."""


class StoreReadError(StoreError):
    pass


class StoreWriteError(StoreError):
    """
    Raised when a write to the store fails.

    ``task`` holds the task the caller tried to write, if any. It keeps the
    caller's description and has no id because nothing was persisted.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        task: Optional["Task"] = None,
    ):
        super().__init__(message, cause=cause)
        self.task = task
