"""
TASKMENU - Task Schema Definition
=================================
Task records, file configuration and menu choices.

A task list is a plain ``List[Task]`` that every operation takes and
returns; nothing here holds the list itself.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MenuChoice(int, Enum):
    """Numbered menu options"""
    LIST = 1       # Debug-style dump
    SHOW = 2       # Labeled, readable listing
    ADD = 3
    DELETE = 4
    SAVE = 5       # Write file (and reload)
    REORDER = 6    # Sort by priority, ascending
    QUIT = 7


MENU_LABELS = {
    MenuChoice.LIST: "List tasks",
    MenuChoice.SHOW: "Show tasks",
    MenuChoice.ADD: "Add task",
    MenuChoice.DELETE: "Delete task",
    MenuChoice.SAVE: "Save tasks to CSV",
    MenuChoice.REORDER: "Change task order by priority",
    MenuChoice.QUIT: "Quit",
}


class Task(BaseModel):
    """Individual task definition"""
    name: str = ""                  # Non-unique; delete matches on it
    description: str = ""
    priority: int = 0               # Lower sorts first
    date_of_creation: Optional[int] = None  # Unix timestamp


class TaskFileConfig(BaseModel):
    """Where the task list is persisted"""
    path: str = "tasks.csv"
    reload_on_save: bool = Field(
        default=True,
        description="Re-read the file after writing and continue with its contents",
    )


EMPTY_TASK = Task(name="", description="", priority=0)
