"""Task CLI - a priority-ordered task list with undo and flat-file storage."""

__version__ = "0.1.0"
__author__ = "Task CLI Team"

from .task import Task, TaskKind, Priority
from .factory import create_task
from .store import TaskStore, OperationResult
from .storage import TaskFile, TaskLineFormat
from .errors import (
    TaskCliError,
    InvalidTaskType,
    InvalidPriority,
    MalformedRecord,
    StorageReadFailure,
    StorageWriteFailure,
)

__all__ = [
    "Task",
    "TaskKind",
    "Priority",
    "create_task",
    "TaskStore",
    "OperationResult",
    "TaskFile",
    "TaskLineFormat",
    "TaskCliError",
    "InvalidTaskType",
    "InvalidPriority",
    "MalformedRecord",
    "StorageReadFailure",
    "StorageWriteFailure",
    "__version__",
]
