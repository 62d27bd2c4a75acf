"""
TASKMENU - Task Manager
=======================
Task list operations, reporting, and persistence through the CSV codec.

Every operation takes the current task list and returns the next one.
Input lists are never mutated.
"""

import logging
from typing import List, Optional

from .codec import TaskFileCodec
from .schema import Task, TaskFileConfig

logger = logging.getLogger("taskmenu")

NO_TASKS_MESSAGE = "No tasks to display."
DIVIDER = "---------"


class TaskManager:
    """
    Task list manager

    Storage: a single CSV file (TaskFileConfig.path), overwritten on save.
    """

    def __init__(self, config: Optional[TaskFileConfig] = None):
        self.config = config or TaskFileConfig()
        self.codec = TaskFileCodec(self.config)

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def load(self) -> List[Task]:
        """Load task list from file"""
        return self.codec.read()

    def save(self, tasks: List[Task]) -> List[Task]:
        """Save task list to file, then continue with what was written"""
        self.codec.write(tasks)

        if self.config.reload_on_save:
            return self.codec.read()
        return list(tasks)

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, tasks: List[Task], task: Task) -> List[Task]:
        """Add a task at the head of the list"""
        logger.debug(f"➕ Added task: {task.name}")
        return [task] + list(tasks)

    def delete_task(self, tasks: List[Task], name: str) -> List[Task]:
        """Remove every task whose name matches exactly"""
        remaining = [task for task in tasks if task.name != name]

        removed = len(tasks) - len(remaining)
        if removed:
            logger.info(f"🗑️ Deleted {removed} task(s) named {name!r}")
        else:
            logger.debug(f"No task named {name!r}")
        return remaining

    def change_order_by_priority(self, tasks: List[Task]) -> List[Task]:
        """Order tasks by ascending priority (ties keep their order)"""
        return sorted(tasks, key=lambda task: task.priority)

    # ========================================
    # REPORTING
    # ========================================

    def format_task_dump(self, task: Task) -> str:
        fields = [
            f"name={task.name!r}",
            f"description={task.description!r}",
            f"priority={task.priority}",
        ]
        if task.date_of_creation is not None:
            fields.append(f"date_of_creation={task.date_of_creation}")
        return f"Task({', '.join(fields)})"

    def format_task_readable(self, task: Task) -> str:
        lines = [
            "Task:",
            f"Name: {task.name}",
            f"Description: {task.description}",
            f"Priority: {task.priority}",
            DIVIDER,
        ]
        return "\n".join(lines)

    def get_dump_report(self, tasks: List[Task]) -> str:
        """One debug-style line per task"""
        if not tasks:
            return NO_TASKS_MESSAGE
        return "\n".join(self.format_task_dump(task) for task in tasks)

    def get_readable_report(self, tasks: List[Task]) -> str:
        """Labeled fields per task, separated by a divider line"""
        if not tasks:
            return NO_TASKS_MESSAGE
        return "\n".join(self.format_task_readable(task) for task in tasks)
