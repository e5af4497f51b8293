"""Taskly - a simple command-line task manager."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("taskly")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    __version__ = "1.0.0"

__author__ = "Taskly Team"

from .task import Task, Priority
from .storage import TaskStore

__all__ = ["Task", "Priority", "TaskStore", "__version__"]
