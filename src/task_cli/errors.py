"""Exception hierarchy for Task CLI."""

from pathlib import Path
from typing import Optional, Union


class TaskCliError(Exception):
    """Base exception for all Task CLI errors."""


class InvalidTaskType(TaskCliError):
    """Raised when a task kind label is not Work or Personal."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Invalid task type: {label!r} (expected Work or Personal)")


class InvalidPriority(TaskCliError):
    """Raised in strict mode when a priority is outside 1-3."""

    def __init__(self, priority: int):
        self.priority = priority
        super().__init__(f"Invalid priority: {priority} (expected 1, 2 or 3)")


class MalformedRecord(TaskCliError):
    """A persisted line could not be decoded into a task."""

    def __init__(self, line: str, reason: str, blank: bool = False):
        self.line = line
        self.reason = reason
        self.blank = blank
        super().__init__(f"{reason}: {line!r}")


class StorageError(TaskCliError):
    """I/O failure against the tasks file."""

    def __init__(self, path: Union[str, Path], error: Optional[Exception] = None):
        self.path = Path(path)
        self.error = error
        detail = f": {error}" if error else ""
        super().__init__(f"{self.action} {self.path}{detail}")

    action = "Storage error on"


class StorageReadFailure(StorageError):
    action = "Error loading tasks from"


class StorageWriteFailure(StorageError):
    action = "Error saving tasks to"
