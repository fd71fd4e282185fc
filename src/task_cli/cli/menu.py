"""Interactive numbered menu over a TaskStore."""

import logging

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt, Prompt

from ..errors import TaskCliError
from ..store import TaskStore
from .display import print_result, print_tasks

logger = logging.getLogger(__name__)

MENU_ITEMS = (
    ("1", "Add Task"),
    ("2", "View Tasks"),
    ("3", "Remove Task"),
    ("4", "Undo Last Removal"),
    ("5", "Exit"),
)


class TaskMenu:
    """Read-eval loop mapping menu choices 1-5 to store operations."""

    def __init__(self, store: TaskStore, console: Console, use_emoji: bool = True):
        self.store = store
        self.console = console
        self.use_emoji = use_emoji
        self.actions = {
            "1": self.add_task,
            "2": self.view_tasks,
            "3": self.remove_task,
            "4": self.undo_removal,
        }

    def show_menu(self):
        self.console.print("\n[header]Task Management System[/header]")
        for key, label in MENU_ITEMS:
            self.console.print(f"{key}. {label}")

    def run(self):
        """Run until the user picks Exit or input ends."""
        for notice in self.store.notices:
            self.console.print(f"[muted]{escape(notice)}[/muted]")

        while True:
            self.show_menu()
            try:
                choice = Prompt.ask("Enter your choice", console=self.console).strip()
                if choice == "5":
                    break
                action = self.actions.get(choice)
                if action is None:
                    self.console.print("[error]Invalid choice! Please try again.[/error]")
                    continue
                action()
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break

        self.console.print("Exiting Task Manager. Goodbye!")

    def add_task(self):
        kind = Prompt.ask("Enter task type (Work/Personal)", console=self.console)
        title = Prompt.ask("Enter task title", console=self.console)
        description = Prompt.ask("Enter task description", console=self.console)
        deadline = Prompt.ask("Enter deadline (YYYY-MM-DD)", console=self.console)
        priority = IntPrompt.ask("Enter priority (1 = High, 2 = Medium, 3 = Low)", console=self.console)
        extra = Prompt.ask(
            "Enter extra info (Project Name for Work, Category for Personal)",
            console=self.console,
            default="",
            show_default=False,
        )

        try:
            result = self.store.add(kind, title, description, deadline, priority, extra)
        except TaskCliError as e:
            logger.debug(f"Add rejected: {e}")
            self.console.print(f"[error]{escape(str(e))}[/error]")
            return
        print_result(self.console, result)

    def view_tasks(self):
        print_tasks(self.console, self.store.list(), self.use_emoji)

    def remove_task(self):
        print_result(self.console, self.store.remove())

    def undo_removal(self):
        print_result(self.console, self.store.undo())
