"""Line-based task file persistence.

Each line holds one task: ``name | language | completed_pomodoros``. The
pomodoro phase is not stored; every task loads as idle.
"""

import contextlib
import os
from collections.abc import Iterable
from pathlib import Path

from platformdirs import user_data_dir

from pomotodo_cli.models.exceptions import StorageError
from pomotodo_cli.models.task import DELIMITER, Task
from pomotodo_cli.utils.logger import get_logger

SEPARATOR = f" {DELIMITER} "
DEFAULT_FILE_NAME = "todo_list.txt"
UNKNOWN_LANGUAGE = "Unknown"


def default_data_file() -> Path:
    """Return the default task file inside the user data directory."""
    return Path(user_data_dir("pomotodo-cli")) / DEFAULT_FILE_NAME


def format_line(task: Task) -> str:
    """Serialize a task into one file line (without newline)."""
    return SEPARATOR.join(
        [task.name, task.language, str(task.completed_pomodoros)]
    )


def parse_line(line: str) -> Task:
    """Parse one file line; missing or bad fields fall back to defaults."""
    parts = [part.strip() for part in line.split(DELIMITER)]
    name = parts[0]
    language = parts[1] if len(parts) > 1 else UNKNOWN_LANGUAGE

    completed = 0
    if len(parts) > 2:
        try:
            completed = max(0, int(parts[2]))
        except ValueError:
            completed = 0

    return Task(name=name, language=language, completed_pomodoros=completed)


class TaskFile:
    """Reads and rewrites the task file."""

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path is not None else default_data_file()

    def load(self) -> list[Task]:
        """Load all tasks. A missing file is an empty list."""
        logger = get_logger()
        if not self.path.exists():
            logger.info("No task file at %s, starting empty", self.path)
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read %s: %s", self.path, e)
            raise StorageError(f"Cannot read task file {self.path}: {e}") from e

        tasks = []
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            task = parse_line(line)
            if not task.name:
                logger.warning(
                    "Skipping line %d of %s: empty task name", lineno, self.path
                )
                continue
            tasks.append(task)
        logger.info("Loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Rewrite the whole file; readers never see a partial write."""
        logger = get_logger()
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tasks = list(tasks)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                for task in tasks:
                    f.write(format_line(task) + "\n")
            os.replace(tmp_path, self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            logger.error("Failed to write %s: %s", self.path, e)
            raise StorageError(f"Cannot write task file {self.path}: {e}") from e

        logger.debug("Saved %d task(s) to %s", len(tasks), self.path)
