# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskmenu.manager import TaskManager
from taskmenu.schema import Task, TaskFileConfig


@pytest.fixture()
def config(tmp_path: Path) -> TaskFileConfig:
    """Task file inside the per-test tmp directory."""
    return TaskFileConfig(path=str(tmp_path / "tasks.csv"))


@pytest.fixture()
def manager(config: TaskFileConfig) -> TaskManager:
    return TaskManager(config)


@pytest.fixture()
def tasks() -> list[Task]:
    return [
        Task(name="A", description="d1", priority=2),
        Task(name="B", description="d2", priority=1),
    ]
