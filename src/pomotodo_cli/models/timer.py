"""Pomodoro timer state machine.

The timer counts down in ticks (one tick per second of wall-clock time) and
drives a single target task through ``work -> break -> idle``. Pressing the
start control again while running drops back to idle; the remaining time is
discarded, there is no resume.
"""

from enum import Enum

from .task import PomodoroPhase
from .task_store import TaskStore

WORK_DURATION = 25 * 60  # ticks
BREAK_DURATION = 5 * 60  # ticks


class TimerEvent(str, Enum):
    """Transitions reported back to the controller."""

    STARTED = "started"
    PAUSED = "paused"
    WORK_COMPLETED = "work_completed"
    BREAK_COMPLETED = "break_completed"


class PomodoroTimer:
    """Countdown for one task at a time."""

    def __init__(
        self,
        work_duration: int = WORK_DURATION,
        break_duration: int = BREAK_DURATION,
    ):
        if work_duration < 1 or break_duration < 1:
            raise ValueError("Durations must be at least one tick")
        self.work_duration = work_duration
        self.break_duration = break_duration
        self.phase = PomodoroPhase.IDLE
        self.remaining = 0
        self.target_task_index: int | None = None

    @property
    def is_running(self) -> bool:
        return self.phase is not PomodoroPhase.IDLE

    @property
    def phase_duration(self) -> int:
        if self.phase is PomodoroPhase.WORK:
            return self.work_duration
        if self.phase is PomodoroPhase.BREAK:
            return self.break_duration
        return 0

    @property
    def progress(self) -> float:
        """Elapsed fraction of the current phase, 0.0 when idle."""
        total = self.phase_duration
        if total == 0:
            return 0.0
        return min(1.0, max(0.0, (total - self.remaining) / total))

    def toggle(self, store: TaskStore) -> TimerEvent | None:
        """Start/pause control: start when idle, otherwise drop back to idle."""
        if self.is_running:
            self.reset(store)
            return TimerEvent.PAUSED
        if self.start(store):
            return TimerEvent.STARTED
        return None

    def start(self, store: TaskStore) -> bool:
        """Begin a work phase on the selected task. No-op without a selection."""
        if self.is_running or store.selected_index is None:
            return False
        self.target_task_index = store.selected_index
        self.phase = PomodoroPhase.WORK
        self.remaining = self.work_duration
        store.set_pomodoro_state(self.target_task_index, self.phase)
        return True

    def tick(self, store: TaskStore) -> TimerEvent | None:
        """Advance the countdown by one tick and report any phase change."""
        if not self.is_running:
            return None

        self.remaining -= 1
        if self.remaining > 0:
            return None

        if self.phase is PomodoroPhase.WORK:
            store.mark_pomodoro_complete(self.target_task_index)
            self.phase = PomodoroPhase.BREAK
            self.remaining = self.break_duration
            store.set_pomodoro_state(self.target_task_index, self.phase)
            return TimerEvent.WORK_COMPLETED

        self.reset(store)
        return TimerEvent.BREAK_COMPLETED

    def reset(self, store: TaskStore | None = None) -> None:
        """Return to idle and forget the target task."""
        if store is not None and self.target_task_index is not None:
            if 0 <= self.target_task_index < len(store):
                store.set_pomodoro_state(self.target_task_index, PomodoroPhase.IDLE)
        self.phase = PomodoroPhase.IDLE
        self.remaining = 0
        self.target_task_index = None
