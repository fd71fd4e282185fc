"""Command-line interface for Task CLI."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..config import ConfigModel, load_config, save_config
from ..errors import TaskCliError
from ..storage import TaskFile
from ..store import TaskStore
from ..theme import get_themed_console
from .display import print_result, print_tasks
from .menu import TaskMenu


@dataclass
class AppContext:
    config: ConfigModel
    store: TaskStore
    console: Console
    config_path: Path


def setup_logging(level: Union[int, str] = logging.WARNING):
    """Route log records to stderr through rich.

    Args:
        level: Logging level as a number or a name such as "INFO"
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_store(config: ConfigModel, data_file: Optional[Path] = None) -> TaskStore:
    """Create the store for this run; loads the task file."""
    task_file = TaskFile(data_file or config.get_tasks_path())
    return TaskStore(
        task_file,
        persist_extra=config.persist_extra,
        strict_priority=config.strict_priority,
    )


@click.group(invoke_without_command=True)
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--data-file", type=click.Path(dir_okay=False, path_type=Path),
              help="Tasks file to use instead of the configured one")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config_path, data_file, verbose):
    """Task CLI - a priority-ordered task list with undo."""
    config = load_config(config_path)
    setup_logging(logging.DEBUG if verbose else config.log_level)

    store = build_store(config, data_file)
    console = get_themed_console(config)
    ctx.obj = AppContext(
        config=config,
        store=store,
        console=console,
        config_path=config_path or config.get_config_path(),
    )

    if ctx.invoked_subcommand is None:
        TaskMenu(store, console, use_emoji=config.use_emoji).run()


@main.command()
@click.argument("kind")
@click.argument("title")
@click.option("--description", "-d", default="", help="Task description")
@click.option("--deadline", default="", help="Deadline, e.g. 2024-01-01")
@click.option("--priority", "-p", type=int, default=2, show_default=True,
              help="1 = High, 2 = Medium, 3 = Low")
@click.option("--extra", "-e", default="", help="Project name (Work) or category (Personal)")
@click.pass_obj
def add(app: AppContext, kind, title, description, deadline, priority, extra):
    """Add a Work or Personal task."""
    try:
        result = app.store.add(kind, title, description, deadline, priority, extra)
    except TaskCliError as e:
        app.console.print(f"[error]{escape(str(e))}[/error]")
        sys.exit(1)
    print_result(app.console, result)


@main.command(name="list")
@click.pass_obj
def list_tasks(app: AppContext):
    """List tasks in priority order."""
    print_tasks(app.console, app.store.list(), app.config.use_emoji)


@main.command()
@click.pass_obj
def remove(app: AppContext):
    """Remove the highest-priority task."""
    print_result(app.console, app.store.remove())


@main.command()
@click.pass_obj
def undo(app: AppContext):
    """Restore the most recently removed task.

    Undo history is kept in memory for a single run, so a fresh process
    reports that there is nothing to undo. Use the interactive menu.
    """
    print_result(app.console, app.store.undo())


@main.command(name="config")
@click.option("--init", is_flag=True, help="Write the effective configuration to the config file")
@click.pass_obj
def show_config(app: AppContext, init):
    """Show the effective configuration."""
    app.console.print(app.config.to_yaml(), markup=False, soft_wrap=True, end="")
    if init:
        try:
            save_config(app.config, app.config_path)
        except OSError as e:
            app.console.print(f"[error]Failed to save config to {escape(str(app.config_path))}: {escape(str(e))}[/error]")
            sys.exit(1)
        app.console.print(f"[success]Configuration saved to {escape(str(app.config_path))}[/success]")
