"""Task data model for the Task CLI application."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple


class Priority(IntEnum):
    """Task priority levels. Lower values sort first."""
    HIGH = 1
    MEDIUM = 2
    LOW = 3


class TaskKind(Enum):
    """Task variants."""
    WORK = "work"
    PERSONAL = "personal"

    @classmethod
    def from_label(cls, label: str, legacy: bool = False) -> Optional["TaskKind"]:
        """Match a kind label case-insensitively against Work/Personal.

        Args:
            label: Label as typed by the user or read from storage
            legacy: Also trim whitespace and accept the older "Work Task" and
                "Personal Task" display labels found in existing task files

        Returns:
            Matching TaskKind, or None when the label is unknown
        """
        normalized = (label or "").lower()
        if legacy:
            normalized = normalized.strip()
            if normalized.endswith(" task"):
                normalized = normalized[: -len(" task")].rstrip()
        for kind in cls:
            if kind.value == normalized:
                return kind
        return None


KIND_LABELS = {
    TaskKind.WORK: "Work",
    TaskKind.PERSONAL: "Personal",
}

PRIORITY_LABELS = {
    Priority.HIGH: "High",
    Priority.MEDIUM: "Medium",
    Priority.LOW: "Low",
}


def kind_label(kind: TaskKind) -> str:
    """Return the display and storage label for a task kind."""
    return KIND_LABELS[kind]


def priority_label(priority: int) -> str:
    """Return High/Medium/Low for 1/2/3, or P<n> for anything else."""
    try:
        return PRIORITY_LABELS[Priority(priority)]
    except ValueError:
        return f"P{priority}"


@dataclass
class Task:
    """A single task.

    ``extra`` holds the project name for work tasks and the category for
    personal tasks. ``kind`` cannot be reassigned once the task exists and
    ``completed`` only ever moves from False to True.

    Tasks order by priority alone; ``==`` still compares every field.
    """

    title: str
    description: str
    deadline: str  # free-form, never parsed
    priority: int
    kind: TaskKind
    extra: str = ""
    completed: bool = False

    def __setattr__(self, name, value):
        if name == "kind" and "kind" in self.__dict__:
            raise AttributeError("Task kind cannot be changed after creation")
        super().__setattr__(name, value)

    @property
    def kind_label(self) -> str:
        return kind_label(self.kind)

    @property
    def priority_label(self) -> str:
        return priority_label(self.priority)

    @property
    def status_label(self) -> str:
        return "Completed" if self.completed else "Pending"

    @property
    def project_name(self) -> Optional[str]:
        return self.extra if self.kind is TaskKind.WORK else None

    @property
    def category(self) -> Optional[str]:
        return self.extra if self.kind is TaskKind.PERSONAL else None

    def mark_completed(self):
        """Mark the task as completed."""
        self.completed = True

    def to_fields(self) -> Tuple[str, str, str, str, int, str]:
        """Ordered field projection used for display and serialization."""
        return (
            self.kind_label,
            self.title,
            self.description,
            self.deadline,
            self.priority,
            self.extra,
        )

    def __lt__(self, other: "Task") -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.priority < other.priority

    def __le__(self, other: "Task") -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.priority <= other.priority

    def __gt__(self, other: "Task") -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.priority > other.priority

    def __ge__(self, other: "Task") -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.priority >= other.priority
