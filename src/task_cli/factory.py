"""Task construction from user or storage input."""

import logging

from .errors import InvalidPriority, InvalidTaskType
from .task import Priority, Task, TaskKind

logger = logging.getLogger(__name__)

VALID_PRIORITIES = frozenset(p.value for p in Priority)


def create_task(
    kind_label: str,
    title: str,
    description: str,
    deadline: str,
    priority: int,
    extra: str = "",
    *,
    strict_priority: bool = False,
) -> Task:
    """Build a Task of the variant named by ``kind_label``.

    Args:
        kind_label: "Work" or "Personal", matched case-insensitively
        title: Task title
        description: Task description
        deadline: Free-form deadline text
        priority: 1 (High), 2 (Medium) or 3 (Low)
        extra: Project name for work tasks, category for personal tasks
        strict_priority: Reject priorities outside 1-3 instead of accepting them

    Returns:
        New Task instance

    Raises:
        InvalidTaskType: If the kind label is not recognized
        InvalidPriority: If strict_priority is set and priority is out of range
    """
    kind = TaskKind.from_label(kind_label)
    if kind is None:
        raise InvalidTaskType(kind_label)

    if priority not in VALID_PRIORITIES:
        if strict_priority:
            raise InvalidPriority(priority)
        logger.debug(f"Accepting out-of-range priority {priority} for {title!r}")

    return Task(
        title=title,
        description=description,
        deadline=deadline,
        priority=priority,
        kind=kind,
        extra=extra,
    )
