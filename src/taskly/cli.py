"""Command-line interface for Taskly."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console

from . import __version__
from .config import ConfigModel, load_config
from .errors import TasklyError
from .logging_setup import setup_logging
from .storage import TaskStore
from .task import Task
from .theme import (
    HELP_LINES,
    INIT_DONE_LINES,
    format_task,
    get_console,
    get_error_console,
    print_lines,
)
from .utils.validation import parse_add_arguments, parse_task_number

logger = logging.getLogger(__name__)

# Stray flags after a command, --help included, reach the command as plain tokens
PASSTHROUGH = {
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "help_option_names": [],
}


@dataclass
class AppContext:
    """Everything a command needs, resolved once in the group callback."""

    config: ConfigModel
    store: TaskStore
    console: Console
    error_console: Console


pass_app = click.make_pass_decorator(AppContext)


class TasklyGroup(click.Group):
    """Click group with Taskly's unknown-command and error reporting."""

    def resolve_command(self, ctx, args):
        cmd_name = click.utils.make_str(args[0])
        if self.get_command(ctx, cmd_name) is None and not ctx.resilient_parsing:
            error_console = get_error_console()
            error_console.print(f"❌ Unknown command: {cmd_name}", style="red")
            get_console().print('Run "taskly help" for available commands.')
            ctx.exit(1)
        return super().resolve_command(ctx, args)

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except TasklyError as e:
            app = ctx.find_object(AppContext)
            error_console = app.error_console if app else get_error_console()
            error_console.print(f"❌ {e}", style="red")
            ctx.exit(e.exit_code)


def show_help(console: Console) -> None:
    print_lines(console, HELP_LINES)


@click.group(
    cls=TasklyGroup,
    invoke_without_command=True,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
@click.option("--help", "-h", "help_requested", is_flag=True, help="Show help and exit")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--verbose", is_flag=True, help="Verbose output")
@click.version_option(__version__, "--version", "-v", prog_name="taskly",
                      message="%(prog)s v%(version)s")
@click.pass_context
def cli(ctx, help_requested, config_path, verbose):
    """Taskly - Simple Task Management."""
    setup_logging(verbose=verbose)
    config = load_config(config_path)
    setup_logging(config.log_level, verbose=verbose)

    console = get_console(no_color=config.no_color)
    error_console = get_error_console(no_color=config.no_color)
    ctx.obj = AppContext(
        config=config,
        store=TaskStore(config.tasks_path, error_console=error_console),
        console=console,
        error_console=error_console,
    )
    logger.debug("Using task file %s", config.tasks_path)

    if help_requested or ctx.invoked_subcommand is None:
        show_help(console)
        ctx.exit(0)


@cli.command(context_settings=PASSTHROUGH)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@pass_app
def add(app: AppContext, args):
    """Add a new task."""
    title, task_priority = parse_add_arguments(args)

    tasks = app.store.load()
    task = Task(id=app.store.generate_id(), title=title, priority=task_priority)
    tasks.append(task)
    app.store.save(tasks)

    app.console.print("✅ Task added successfully!", style="green")
    app.console.print(f'📋 "{title}" ({task_priority.value} priority)')


@cli.command("list", context_settings=PASSTHROUGH)
@click.option("--completed", "only_completed", is_flag=True, help="Show only completed tasks")
@click.option("--pending", "only_pending", is_flag=True, help="Show only pending tasks")
@pass_app
def list_tasks(app: AppContext, only_completed, only_pending):
    """List tasks."""
    tasks = app.store.load()
    console = app.console

    if not tasks:
        console.print('📋 No tasks found. Add some with "taskly add <task>"')
        return

    if only_completed:
        task_filter = "completed"
        shown: List[Task] = [t for t in tasks if t.completed]
    elif only_pending:
        task_filter = "pending"
        shown = [t for t in tasks if not t.completed]
    else:
        task_filter = "all"
        shown = tasks

    console.print(f"📋 Tasks ({task_filter}):")
    console.print()

    if not shown:
        console.print(f"No {task_filter} tasks found.", style="yellow")
        return

    for number, task in enumerate(shown, start=1):
        console.print(format_task(task, number))

    console.print()
    console.print(f"Total: {len(shown)} task(s)")


@cli.command(context_settings=PASSTHROUGH)
@click.argument("number", required=False)
@pass_app
def complete(app: AppContext, number: Optional[str]):
    """Mark a task as completed."""
    tasks = app.store.load()
    task = tasks[parse_task_number(number, len(tasks), "complete")]

    if not task.complete():
        app.console.print("ℹ️  Task is already completed!")
        return

    app.store.save(tasks)

    app.console.print("✅ Task completed!", style="green")
    app.console.print(f'📋 "{task.title}"')


@cli.command(context_settings=PASSTHROUGH)
@click.argument("number", required=False)
@pass_app
def remove(app: AppContext, number: Optional[str]):
    """Remove a task."""
    tasks = app.store.load()
    removed = tasks.pop(parse_task_number(number, len(tasks), "remove"))
    app.store.save(tasks)

    app.console.print("🗑️  Task removed!")
    app.console.print(f'📋 "{removed.title}"')


@cli.command(context_settings=PASSTHROUGH)
@click.argument("project_name", required=False, default="my-tasks")
@pass_app
def init(app: AppContext, project_name):
    """Initialize a new task workspace (cosmetic only)."""
    console = app.console
    console.print("🚀 Initializing Taskly workspace...")
    console.print(f"📁 Project: {project_name}")
    console.print()

    # Nothing is created on disk; the task file location never changes
    with console.status("Setting up workspace..."):
        time.sleep(app.config.init_delay)

    print_lines(console, INIT_DONE_LINES)


@cli.command("help", context_settings=PASSTHROUGH)
@pass_app
def help_command(app: AppContext):
    """Show this help."""
    show_help(app.console)


def main(args=None):
    """Console script entry point."""
    return cli.main(args=args, prog_name="taskly")


if __name__ == "__main__":
    main()
