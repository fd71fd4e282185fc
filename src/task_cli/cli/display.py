"""Rendering helpers for tasks and store results."""

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..store import OperationResult
from ..task import Task
from ..theme import get_priority_style, get_status_emoji


def build_task_table(tasks: Iterable[Task], use_emoji: bool = True) -> Table:
    """Build a table of tasks in the order given."""
    table = Table(title="Task List (Sorted by Priority)", title_style="header")
    table.add_column("#", style="muted", justify="right")
    table.add_column("Type")
    table.add_column("Title", style="bright")
    table.add_column("Description")
    table.add_column("Deadline")
    table.add_column("Priority")
    table.add_column("Status")
    table.add_column("Project/Category", style="muted")

    for index, task in enumerate(tasks, start=1):
        status = f"{get_status_emoji(task.completed, use_emoji)} {task.status_label}".strip()
        table.add_row(
            str(index),
            task.kind_label,
            Text(task.title),
            Text(task.description),
            Text(task.deadline),
            Text(task.priority_label, style=get_priority_style(task.priority)),
            status,
            Text(task.extra),
        )
    return table


def print_tasks(console: Console, tasks: Iterable[Task], use_emoji: bool = True):
    """Print the task list, or a notice when there is nothing to show."""
    tasks = list(tasks)
    if not tasks:
        console.print("[warning]No tasks available.[/warning]")
        return
    console.print(build_task_table(tasks, use_emoji))


def print_result(console: Console, result: OperationResult):
    """Print an operation's message followed by any save warning."""
    style = "success" if result.success else "warning"
    console.print(f"[{style}]{result.message}[/{style}]")
    if result.warning:
        console.print(f"[error]Warning: {escape(result.warning)}. Changes are kept in memory only.[/error]")
