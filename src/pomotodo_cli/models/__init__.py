"""Pomotodo domain models.

The task store, input mode and Pomodoro timer state machines. The
application controller that ties them together lives in
:mod:`pomotodo_cli.models.app_state`.
"""

from .exceptions import OutOfRangeError, PomotodoError, StorageError, ValidationError
from .input_mode import Draft, InputMode, InputModeMachine
from .task import PomodoroPhase, Task
from .task_store import TaskStore
from .timer import BREAK_DURATION, WORK_DURATION, PomodoroTimer, TimerEvent

__all__ = [
    # Task models
    "Task",
    "TaskStore",
    "PomodoroPhase",
    # State machines
    "InputMode",
    "InputModeMachine",
    "Draft",
    "PomodoroTimer",
    "TimerEvent",
    "WORK_DURATION",
    "BREAK_DURATION",
    # Errors
    "PomotodoError",
    "ValidationError",
    "OutOfRangeError",
    "StorageError",
]
