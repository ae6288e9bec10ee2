"""Ordered task collection with a single optional selection."""

from collections.abc import Iterable, Iterator

from .exceptions import OutOfRangeError, ValidationError
from .task import DELIMITER, PomodoroPhase, Task


class TaskStore:
    """Ordered list of tasks plus the selected index.

    The selection is ``None`` exactly when the store is empty, otherwise it
    always points at an existing task.
    """

    def __init__(self):
        self._tasks: list[Task] = []
        self.selected_index: int | None = None

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> "TaskStore":
        """Build a store from already-loaded tasks, selecting the first one."""
        store = cls()
        store._tasks = list(tasks)
        store.selected_index = 0 if store._tasks else None
        return store

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Tasks in display order."""
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def add(self, name: str, language: str = "") -> int:
        """Append a new idle task, select it and return its index."""
        name = name.strip()
        language = language.strip()
        if not name:
            raise ValidationError("Task name cannot be empty")
        if DELIMITER in name or DELIMITER in language:
            raise ValidationError(f"Task fields cannot contain '{DELIMITER}'")

        self._tasks.append(Task(name=name, language=language))
        self.selected_index = len(self._tasks) - 1
        return self.selected_index

    def remove(self, index: int) -> Task:
        """Remove the task at *index* and keep the selection valid."""
        self._check_index(index)
        removed = self._tasks.pop(index)

        if not self._tasks:
            self.selected_index = None
        elif self.selected_index is not None:
            if self.selected_index > index:
                self.selected_index -= 1
            elif self.selected_index >= len(self._tasks):
                self.selected_index = len(self._tasks) - 1
        return removed

    def select_next(self) -> None:
        if self.selected_index is None:
            return
        self.selected_index = min(self.selected_index + 1, len(self._tasks) - 1)

    def select_previous(self) -> None:
        if self.selected_index is None:
            return
        self.selected_index = max(self.selected_index - 1, 0)

    def current(self) -> Task | None:
        """Return the selected task, or None when the store is empty."""
        if self.selected_index is None:
            return None
        return self._tasks[self.selected_index]

    def mark_pomodoro_complete(self, index: int) -> None:
        """Count one finished work phase for the task at *index*."""
        self._check_index(index)
        self._tasks[index].completed_pomodoros += 1

    def set_pomodoro_state(self, index: int, phase: PomodoroPhase) -> None:
        self._check_index(index)
        self._tasks[index].pomodoro_state = phase

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise OutOfRangeError(
                f"Task index {index} out of range (0..{len(self._tasks) - 1})"
            )
