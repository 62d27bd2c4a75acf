"""
TASKMENU - CSV Codec
====================
Converts a task list to and from the flat, comma-delimited task file.

File format (one task per line, no header, no quoting):

    name,description,priority[,date_of_creation]

Files are UTF-8. Embedded commas are not escaped. Rows where every field
is labeled, such as ``name: A, description: d, priority: 1``, are still
accepted on read.
"""

import logging
from pathlib import Path
from typing import List, Optional

from .schema import EMPTY_TASK, Task, TaskFileConfig

logger = logging.getLogger("taskmenu")

FIELD_LABELS = ("name", "description", "priority", "date_of_creation")


class TaskFileError(Exception):
    """Raised when the task file cannot be written"""


# ========================================
# ENCODE
# ========================================

def encode_task(task: Task) -> str:
    """Format a single task as one CSV row"""
    fields = [task.name, task.description, str(task.priority)]
    if task.date_of_creation is not None:
        fields.append(str(task.date_of_creation))
    return ",".join(fields)


def encode_tasks(tasks: List[Task]) -> str:
    """Format a task list as file text (no trailing newline)"""
    return "\n".join(encode_task(task) for task in tasks)


# ========================================
# DECODE
# ========================================

def _is_labeled(raw_fields: List[str]) -> bool:
    """True when every field carries its own ``label:`` prefix"""
    return all(
        raw.strip().startswith(f"{label}:")
        for raw, label in zip(raw_fields, FIELD_LABELS)
    )


def _clean_field(raw: str, label: str, labeled: bool) -> str:
    """Trim whitespace and, in a labeled row, the ``label:`` prefix"""
    value = raw.strip()
    if labeled:
        value = value[len(label) + 1:].strip()
    return value


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


def decode_task(line: str, line_no: int = 0) -> Optional[Task]:
    """
    Parse one CSV row.

    Returns None for a row that has to be skipped: a field count other than
    3 or 4, or a 4-field row whose priority and date_of_creation are not
    both integers (usually a description with an embedded comma). A row
    made only of blank fields decodes to the empty task.
    """
    raw_fields = line.split(",")

    if all(not f.strip() for f in raw_fields):
        return EMPTY_TASK.model_copy()

    if len(raw_fields) not in (3, 4):
        logger.warning(
            f"⚠️ Skipping line {line_no}: expected 3 or 4 fields, got {len(raw_fields)}"
        )
        return None

    labeled = _is_labeled(raw_fields)
    fields = [
        _clean_field(raw, label, labeled)
        for raw, label in zip(raw_fields, FIELD_LABELS)
    ]
    name, description, raw_priority = fields[:3]
    priority = _parse_int(raw_priority)

    date_of_creation = None
    if len(fields) == 4:
        date_of_creation = _parse_int(fields[3])
        if priority is None or date_of_creation is None:
            logger.warning(
                f"⚠️ Skipping line {line_no}: 4 fields but priority {raw_priority!r} "
                f"and date_of_creation {fields[3]!r} are not both integers"
            )
            return None

    if priority is None:
        logger.warning(f"⚠️ Line {line_no}: invalid priority {raw_priority!r}, using 0")
        priority = 0

    return Task(
        name=name,
        description=description,
        priority=priority,
        date_of_creation=date_of_creation,
    )


def decode_tasks(text: str) -> List[Task]:
    """Parse file text into a task list, dropping blank lines"""
    tasks = []
    for line_no, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        task = decode_task(line, line_no)
        if task is not None:
            tasks.append(task)
    return tasks


# ========================================
# FILE ACCESS
# ========================================

class TaskFileCodec:
    """Reads and overwrites the task file named by a TaskFileConfig"""

    def __init__(self, config: Optional[TaskFileConfig] = None):
        self.config = config or TaskFileConfig()

    @property
    def path(self) -> Path:
        return Path(self.config.path)

    def read(self) -> List[Task]:
        """Load tasks from file; an unreadable file counts as no tasks"""
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Error reading tasks from CSV file {self.path}: {e}")
            return []

        tasks = decode_tasks(text)
        logger.info(f"📂 Loaded {len(tasks)} tasks from {self.path}")
        return tasks

    def write(self, tasks: List[Task]) -> None:
        """Overwrite the whole file with the given tasks"""
        try:
            self.path.write_text(encode_tasks(tasks), encoding="utf-8")
        except (OSError, UnicodeEncodeError) as e:
            raise TaskFileError(f"Could not write {self.path}: {e}") from e

        logger.info(f"✅ Saved {len(tasks)} tasks to {self.path}")
