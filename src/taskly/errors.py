"""Exceptions for user input errors.

I/O problems with the task file are not exceptions at this level; the
storage layer reports them and carries on.
"""


class TasklyError(Exception):
    """Base class for errors that end a command with exit status 1."""

    exit_code = 1


class UsageError(TasklyError):
    """A required argument is missing."""


class ValidationError(TasklyError):
    """An argument was given but its value is not acceptable."""
