"""Priority-ordered task store with undo history and file persistence."""

import bisect
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .errors import StorageReadFailure, StorageWriteFailure
from .factory import create_task
from .storage import TaskFile, TaskLineFormat
from .task import Task

logger = logging.getLogger(__name__)

STARTING_FRESH = "No previous tasks found. Starting fresh."


@dataclass
class OperationResult:
    """Outcome of a store operation, ready for display."""
    success: bool
    message: str
    task: Optional[Task] = None
    warning: Optional[str] = None  # set when the change could not be saved


class TaskStore:
    """Owns the live tasks and the undo history.

    Tasks are kept sorted by ascending priority; a task is placed after any
    live task with the same priority. Every successful add, remove or undo
    rewrites the whole task file.
    """

    def __init__(self, task_file: TaskFile, persist_extra: bool = True,
                 strict_priority: bool = False):
        self.task_file = task_file
        self.persist_extra = persist_extra
        self.strict_priority = strict_priority
        self._tasks: List[Task] = []
        self._undo: List[Task] = []
        self.notices: List[str] = []
        self.skipped = 0
        self.load_from_storage()

    def __len__(self) -> int:
        return len(self._tasks)

    def __bool__(self) -> bool:
        return bool(self._tasks)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    def _insert(self, task: Task):
        priorities = [t.priority for t in self._tasks]
        self._tasks.insert(bisect.bisect_right(priorities, task.priority), task)

    def add(self, kind: str, title: str, description: str, deadline: str,
            priority: int, extra: str = "") -> OperationResult:
        """Create a task and insert it by priority.

        Raises:
            InvalidTaskType: If ``kind`` is not Work or Personal
            InvalidPriority: In strict mode, if ``priority`` is outside 1-3
        """
        task = create_task(
            kind, title, description, deadline, priority, extra,
            strict_priority=self.strict_priority,
        )
        self._insert(task)
        logger.debug(f"Added {task.kind_label} task {task.title!r} (priority {task.priority})")
        return OperationResult(True, "Task added successfully!", task, self.save_to_storage())

    def list(self) -> Iterator[Task]:
        """Iterate over live tasks in priority order.

        Each call iterates a fresh snapshot, so mutations during iteration
        do not affect it.
        """
        return iter(list(self._tasks))

    def remove(self) -> OperationResult:
        """Remove the highest-priority task and push it onto the undo history."""
        if not self._tasks:
            return OperationResult(False, "No tasks to remove.")

        task = self._tasks.pop(0)
        self._undo.append(task)
        logger.debug(f"Removed task {task.title!r}; undo depth {len(self._undo)}")
        return OperationResult(
            True,
            "Task removed successfully! You can undo this action.",
            task,
            self.save_to_storage(),
        )

    def undo(self) -> OperationResult:
        """Restore the most recently removed task."""
        if not self._undo:
            return OperationResult(False, "No actions to undo.")

        task = self._undo.pop()
        self._insert(task)
        logger.debug(f"Restored task {task.title!r}; undo depth {len(self._undo)}")
        return OperationResult(
            True,
            "Undo successful! Task has been restored.",
            task,
            self.save_to_storage(),
        )

    def load_from_storage(self):
        """Populate the live collection from the task file.

        A missing file leaves the store empty. Malformed lines are skipped,
        and an unreadable file is treated like a missing one.
        """
        if not self.task_file.exists():
            logger.info(f"{STARTING_FRESH} ({self.task_file.path})")
            self.notices.append(STARTING_FRESH)
            return

        try:
            lines = self.task_file.read_lines()
        except StorageReadFailure as e:
            logger.warning(str(e))
            self.notices.append(f"{e}. Starting fresh.")
            return

        for line in lines:
            task = TaskLineFormat.from_line(line)
            if task is None:
                if line.strip():
                    self.skipped += 1
                continue
            self._insert(task)

        if self.skipped:
            self.notices.append(f"Skipped {self.skipped} invalid line(s) in {self.task_file.path}")
        logger.info(f"Loaded {len(self._tasks)} task(s) from {self.task_file.path}")

    def save_to_storage(self) -> Optional[str]:
        """Overwrite the task file with the live collection.

        Returns:
            None on success, otherwise a warning message. The in-memory
            state is kept either way.
        """
        lines = [TaskLineFormat.to_line(task, self.persist_extra) for task in self._tasks]
        try:
            self.task_file.write_lines(lines)
        except StorageWriteFailure as e:
            logger.warning(str(e))
            return str(e)
        return None
