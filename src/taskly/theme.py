"""Console output helpers for Taskly.

Glyphs, row formatting and the static text blocks printed by the
``help`` and ``init`` commands.
"""

from typing import List

from rich.console import Console

from .task import Priority, Task


STATUS_EMOJI = {
    True: "✅",
    False: "📋",
}

PRIORITY_EMOJI = {
    Priority.HIGH: "🔴",
    Priority.MEDIUM: "🟡",
    Priority.LOW: "🟢",
}

HELP_LINES = [
    "📋 Taskly - Simple Task Management",
    "",
    "Usage:",
    "  taskly <command> [options]",
    "",
    "Commands:",
    "  init [project-name]     Initialize new task workspace",
    "  add <title> [--priority=high|medium|low]   Add new task",
    "  list [--completed|--pending]              List tasks",
    "  complete <number>       Mark task as completed",
    "  remove <number>         Remove task",
    "  help                    Show this help",
    "",
    "Options:",
    "  -h, --help              Show this help",
    "  -v, --version           Show version",
    "  --config PATH           Use another configuration file",
    "  --verbose               Print debug logging",
    "",
    "Examples:",
    "  taskly init my-project",
    '  taskly add "Buy groceries" --priority=high',
    "  taskly list --pending",
    "  taskly complete 1",
    "",
    "📚 Documentation: https://github.com/deepguide-ai/dg-demo",
]

INIT_DONE_LINES = [
    "✅ Created task storage",
    "✅ Set up configuration",
    "✅ Ready to go!",
    "",
    "🎉 Taskly initialized successfully!",
    "",
    "Next steps:",
    '  taskly add "Complete project setup"',
    "  taskly list",
    "  taskly complete 1",
]


def _make_console(stderr: bool, no_color: bool) -> Console:
    # Plain text only; brackets and ":name:" codes in titles print as typed
    return Console(
        stderr=stderr,
        no_color=no_color,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def get_console(no_color: bool = False) -> Console:
    """Console for regular command output (stdout)."""
    return _make_console(stderr=False, no_color=no_color)


def get_error_console(no_color: bool = False) -> Console:
    """Console for error messages (stderr)."""
    return _make_console(stderr=True, no_color=no_color)


def get_status_emoji(completed: bool) -> str:
    return STATUS_EMOJI[bool(completed)]


def get_priority_emoji(priority: Priority) -> str:
    return PRIORITY_EMOJI[priority]


def format_task(task: Task, number: int) -> str:
    """Format a task as a list row, ``<number>. <status> <priority> <title>``."""
    return (
        f"{number}. {get_status_emoji(task.completed)} "
        f"{get_priority_emoji(task.priority)} {task.title}"
    )


def print_lines(console: Console, lines: List[str]) -> None:
    for line in lines:
        console.print(line)
