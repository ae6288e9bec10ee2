"""Application controller: owns the task store, input mode and timer.

Key presses and ticks are delivered here one at a time by the UI event loop.
Every change to the persisted task list is written through to the task file
immediately. The renderer only ever sees an immutable :class:`AppSnapshot`.
"""

from dataclasses import dataclass

from pomotodo_cli.models.exceptions import StorageError, ValidationError
from pomotodo_cli.models.input_mode import InputMode, InputModeMachine
from pomotodo_cli.models.task import PomodoroPhase, Task
from pomotodo_cli.models.task_store import TaskStore
from pomotodo_cli.models.timer import (
    BREAK_DURATION,
    WORK_DURATION,
    PomodoroTimer,
    TimerEvent,
)
from pomotodo_cli.storage import TaskFile
from pomotodo_cli.utils.logger import get_logger

KEY_ADD = "i"
KEY_START_PAUSE = "p"
KEY_QUIT = "q"
KEY_UP = "up"
KEY_DOWN = "down"
KEY_DELETE = "delete"
KEY_CONFIRM = "enter"
KEY_CANCEL = "escape"
KEY_BACKSPACE = "backspace"

NOTICE_TICKS = 4


@dataclass(frozen=True)
class TaskView:
    name: str
    language: str
    pomodoro_state: PomodoroPhase
    completed_pomodoros: int

    @classmethod
    def from_task(cls, task: Task) -> "TaskView":
        return cls(
            name=task.name,
            language=task.language,
            pomodoro_state=task.pomodoro_state,
            completed_pomodoros=task.completed_pomodoros,
        )


@dataclass(frozen=True)
class TimerView:
    phase: PomodoroPhase
    remaining: int
    duration: int
    target_task_index: int | None
    progress: float


@dataclass(frozen=True)
class Notice:
    message: str
    is_error: bool = False


@dataclass(frozen=True)
class AppSnapshot:
    """Read-only view of the whole application state for rendering."""

    tasks: tuple[TaskView, ...]
    selected_index: int | None
    mode: InputMode
    draft_name: str
    draft_language: str
    timer: TimerView
    notice: Notice | None

    @property
    def selected_task(self) -> TaskView | None:
        if self.selected_index is None:
            return None
        return self.tasks[self.selected_index]

    @property
    def target_task(self) -> TaskView | None:
        if self.timer.target_task_index is None:
            return None
        return self.tasks[self.timer.target_task_index]


class AppController:
    """Routes input events to the state machines and persists the task list."""

    def __init__(
        self,
        storage: TaskFile,
        work_duration: int = WORK_DURATION,
        break_duration: int = BREAK_DURATION,
        notice_ticks: int = NOTICE_TICKS,
    ):
        self.storage = storage
        self.store = TaskStore()
        self.input = InputModeMachine()
        self.timer = PomodoroTimer(work_duration, break_duration)
        self.notice_ticks = notice_ticks
        self.notice: Notice | None = None
        self._notice_ticks_left = 0
        self.should_quit = False

    def load(self) -> None:
        """Replace the task list with the persisted one.

        Raises StorageError if the task file exists but cannot be read.
        """
        self.store = TaskStore.from_tasks(self.storage.load())
        self.timer.reset()

    def shutdown(self) -> bool:
        """Final save before the process exits."""
        get_logger().info("Shutting down with %d task(s)", len(self.store))
        return self._save()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle_key(self, key: str, character: str | None = None) -> None:
        """Dispatch one key press.

        ``key`` follows Textual key naming (``"up"``, ``"enter"``, ``"i"``);
        ``character`` is the printable character produced, if any. Single
        character keys imply their own character.
        """
        if character is None and len(key) == 1:
            character = key

        if self.input.mode is InputMode.NORMAL:
            self._handle_normal_key(key)
        else:
            self._handle_editing_key(key, character)

    def handle_tick(self) -> None:
        """Advance the timer by one tick and age the current notice."""
        if self.notice is not None:
            self._notice_ticks_left -= 1
            if self._notice_ticks_left <= 0:
                self.notice = None

        target = self.timer.target_task_index
        event = self.timer.tick(self.store)
        if event is TimerEvent.WORK_COMPLETED:
            task = self.store[target]
            get_logger().info(
                "Work phase complete for '%s' (%d total)",
                task.name,
                task.completed_pomodoros,
            )
            self._save()
            self._notify(f"Work session done! Take a break from '{task.name}'.")
        elif event is TimerEvent.BREAK_COMPLETED:
            get_logger().info("Break finished")
            self._notify("Break finished. Ready for another round?")

    def snapshot(self) -> AppSnapshot:
        draft = self.input.draft
        return AppSnapshot(
            tasks=tuple(TaskView.from_task(task) for task in self.store),
            selected_index=self.store.selected_index,
            mode=self.input.mode,
            draft_name=draft.name if draft else "",
            draft_language=draft.language if draft else "",
            timer=TimerView(
                phase=self.timer.phase,
                remaining=self.timer.remaining,
                duration=self.timer.phase_duration,
                target_task_index=self.timer.target_task_index,
                progress=self.timer.progress,
            ),
            notice=self.notice,
        )

    # ------------------------------------------------------------------
    # Normal mode
    # ------------------------------------------------------------------

    def _handle_normal_key(self, key: str) -> None:
        if key == KEY_ADD:
            self.input.begin_add()
        elif key == KEY_UP:
            self.store.select_previous()
        elif key == KEY_DOWN:
            self.store.select_next()
        elif key == KEY_DELETE:
            self._remove_selected()
        elif key == KEY_START_PAUSE:
            self._toggle_timer()
        elif key == KEY_QUIT:
            self.should_quit = True

    def _remove_selected(self) -> None:
        index = self.store.selected_index
        if index is None:
            return

        target = self.timer.target_task_index
        if target is not None and target >= index:
            get_logger().info("Timer reset: target task index %d invalidated", target)
            self.timer.reset(self.store)

        removed = self.store.remove(index)
        get_logger().info("Removed task '%s'", removed.name)
        if self._save():
            self._notify(f"Removed '{removed.name}'.")

    def _toggle_timer(self) -> None:
        event = self.timer.toggle(self.store)
        if event is TimerEvent.STARTED:
            task = self.store[self.timer.target_task_index]
            get_logger().info("Work phase started for '%s'", task.name)
            self._notify(f"Started focus on '{task.name}'. Stay sharp!")
        elif event is TimerEvent.PAUSED:
            get_logger().info("Timer stopped before completion")
            self._notify("Pomodoro stopped.")

    # ------------------------------------------------------------------
    # Editing modes
    # ------------------------------------------------------------------

    def _handle_editing_key(self, key: str, character: str | None) -> None:
        if key == KEY_CANCEL:
            self.input.cancel()
            self._notify("Creation cancelled.")
        elif key == KEY_CONFIRM:
            if self.input.mode is InputMode.EDITING_NAME:
                if not self.input.advance_to_language():
                    self._notify("Task name cannot be empty", is_error=True)
            else:
                self._commit_draft()
        elif key == KEY_BACKSPACE:
            self.input.backspace()
        elif character is not None and len(character) == 1 and character.isprintable():
            self.input.append(character)

    def _commit_draft(self) -> None:
        draft = self.input.draft
        if draft is None:
            return
        try:
            index = self.store.add(draft.name, draft.language)
        except ValidationError as e:
            get_logger().info("Rejected new task: %s", e)
            self._notify(str(e), is_error=True)
            return

        self.input.finish()
        get_logger().info("Added task '%s'", self.store[index].name)
        if self._save():
            self._notify("New task added. Ready to focus!")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _save(self) -> bool:
        try:
            self.storage.save(self.store)
        except StorageError as e:
            self._notify(f"Could not save tasks: {e}", is_error=True)
            return False
        return True

    def _notify(self, message: str, is_error: bool = False) -> None:
        self.notice = Notice(message=message, is_error=is_error)
        self._notice_ticks_left = self.notice_ticks
