"""Pytest configuration and shared fixtures."""

import json
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from taskly.cli import cli  # noqa: E402
from taskly.config import ConfigModel, save_config  # noqa: E402


@pytest.fixture
def tasks_file(tmp_path):
    """Path of the task file used by the CLI in a test (not created)."""
    return tmp_path / "tasks.json"


@pytest.fixture
def config_file(tmp_path, tasks_file):
    """Config file pointing the CLI at ``tasks_file`` with no init delay."""
    path = tmp_path / "taskly.yaml"
    save_config(ConfigModel(tasks_file=str(tasks_file), init_delay=0), path)
    return path


@pytest.fixture
def run(config_file):
    """Invoke the CLI against the temporary config."""
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, ["--config", str(config_file), *args])

    return _run


@pytest.fixture
def read_tasks(tasks_file):
    """Return the raw JSON array currently on disk."""

    def _read():
        return json.loads(tasks_file.read_text(encoding="utf-8"))

    return _read
