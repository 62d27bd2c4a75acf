"""
TASKMENU - Interactive Task List Manager
========================================

In-memory task list with a numbered menu, persisted to a CSV file.

Usage:
    from taskmenu import TaskManager, Task

    manager = TaskManager()
    tasks = manager.load()
    tasks = manager.add_task(tasks, Task(name="Report", description="Q3", priority=1))
    tasks = manager.change_order_by_priority(tasks)
    tasks = manager.save(tasks)
"""

from .schema import (
    Task,
    TaskFileConfig,
    MenuChoice,
)

from .codec import TaskFileCodec, TaskFileError, encode_tasks, decode_tasks
from .manager import TaskManager

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "TaskFileCodec",
    "TaskFileError",
    "Task",
    "TaskFileConfig",
    "MenuChoice",
    "encode_tasks",
    "decode_tasks",
]
