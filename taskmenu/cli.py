#!/usr/bin/env python3
"""
TASKMENU - CLI Interface
========================
Interactive numbered menu over a task list stored in a CSV file.

Usage:
    taskmenu
    taskmenu --file work.csv
    taskmenu --no-reload -v
    taskmenu --input
"""

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional, Tuple

from .codec import TaskFileError, decode_task
from .manager import TaskManager
from .schema import MENU_LABELS, MenuChoice, Task, TaskFileConfig

logger = logging.getLogger("taskmenu")

INVALID_CHOICE = "Invalid choice. Please try again."
INPUT_END = "exit"
INPUT_ROW_FORMAT = "name,description,priority"

MENU_LINES = ["Task Manager Menu:"] + [
    f"{choice.value}. {label}" for choice, label in MENU_LABELS.items()
]


class TaskMenu:
    """
    Read-dispatch-print loop.

    Input and output are injected so the loop can be driven by scripted
    lines instead of a terminal.
    """

    def __init__(
        self,
        manager: TaskManager,
        read_line: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ):
        self.manager = manager
        self.read_line = read_line or input
        self.write = write or print

    def start(self, read_input: bool = False) -> List[Task]:
        """Load typed-in rows (optionally) and the task file, then run the menu"""
        input_tasks = self.load_tasks_from_input() if read_input else []
        tasks = input_tasks + self.manager.load()
        if tasks:
            self.write("Tasks loaded successfully.")
        else:
            self.write("No tasks loaded from the file.")
        return self.run(tasks)

    def load_tasks_from_input(self) -> List[Task]:
        """
        Read CSV rows typed at the prompt until ``exit`` (or end of input).

        Rows use the task file format; blank and malformed rows are skipped.
        """
        self.write(f"Enter tasks from input (one '{INPUT_ROW_FORMAT}' row per line; type '{INPUT_END}' to finish):")
        tasks = []
        line_no = 0
        while True:
            try:
                row = self.read_line(f"Type '{INPUT_END}' to finish: ").strip()
            except EOFError:
                break
            if row == INPUT_END:
                break
            line_no += 1
            if not row:
                continue
            task = decode_task(row, line_no)
            if task is None:
                self.write(f"Skipped row: {row}")
                continue
            tasks.append(task)

        logger.info(f"⌨️ Read {len(tasks)} tasks from input")
        return tasks

    def run(self, tasks: List[Task]) -> List[Task]:
        """Main loop; returns the final task list on quit or end of input"""
        keep_running = True
        try:
            while keep_running:
                for line in MENU_LINES:
                    self.write(line)
                raw = self.read_line("Enter your choice: ")
                choice = self._parse_choice(raw)
                if choice is None:
                    self.write(INVALID_CHOICE)
                    continue
                tasks, keep_running = self.dispatch(choice, tasks)
        except (KeyboardInterrupt, EOFError):
            self.write("Goodbye!")
        return tasks

    def dispatch(self, choice: MenuChoice, tasks: List[Task]) -> Tuple[List[Task], bool]:
        """Run one menu command; the flag is False once the user quits"""
        if choice == MenuChoice.LIST:
            self.write(self.manager.get_dump_report(tasks))
        elif choice == MenuChoice.SHOW:
            self.write(self.manager.get_readable_report(tasks))
        elif choice == MenuChoice.ADD:
            tasks = self.manager.add_task(tasks, self._prompt_task())
        elif choice == MenuChoice.DELETE:
            name = self.read_line("Enter task name to delete: ").strip()
            tasks = self.manager.delete_task(tasks, name)
            self.write(f"Task '{name}' deleted.")
        elif choice == MenuChoice.SAVE:
            tasks = self.manager.save(tasks)
            self.write(f"Tasks saved to {self.manager.config.path}")
        elif choice == MenuChoice.REORDER:
            tasks = self.manager.change_order_by_priority(tasks)
        elif choice == MenuChoice.QUIT:
            self.write("Goodbye!")
            return tasks, False
        return tasks, True

    # -------------------- prompts --------------------

    def _parse_choice(self, raw: str) -> Optional[MenuChoice]:
        try:
            return MenuChoice(int(raw.strip()))
        except ValueError:
            return None

    def _prompt_task(self) -> Task:
        self.write("Enter task details:")
        name = self.read_line("Name: ").strip()
        description = self.read_line("Description: ").strip()
        while True:
            raw_priority = self.read_line("Priority: ").strip()
            try:
                priority = int(raw_priority)
                break
            except ValueError:
                self.write("Priority must be an integer.")
        return Task(
            name=name,
            description=description,
            priority=priority,
            date_of_creation=int(time.time()),
        )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="taskmenu",
        description="Interactive task list manager backed by a CSV file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  taskmenu                      Use tasks.csv in the current directory
  taskmenu --file work.csv      Use another task file
  taskmenu --no-reload          Keep the in-memory list after saving
  taskmenu --input              Type task rows before the menu starts
        """
    )
    parser.add_argument("-f", "--file", default="tasks.csv", help="Task file path")
    parser.add_argument("--no-reload", action="store_true", help="Don't re-read the file after saving")
    parser.add_argument("-i", "--input", action="store_true", help="Read task rows from input before the file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = TaskFileConfig(path=args.file, reload_on_save=not args.no_reload)
    menu = TaskMenu(TaskManager(config))

    try:
        menu.start(read_input=args.input)
    except TaskFileError as e:
        logger.error(f"❌ {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
