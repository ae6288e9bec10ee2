"""Task model and Pomodoro phase enum."""

from dataclasses import dataclass
from enum import Enum

# Field delimiter of the task file; tasks may not contain it.
DELIMITER = "|"


class PomodoroPhase(str, Enum):
    """Phase of the Pomodoro timer."""

    IDLE = "idle"
    WORK = "work"
    BREAK = "break"

    @property
    def label(self) -> str:
        """Human-readable label for the phase."""
        return {
            PomodoroPhase.IDLE: "Idle",
            PomodoroPhase.WORK: "Focus",
            PomodoroPhase.BREAK: "Break",
        }[self]


@dataclass
class Task:
    """A single task tracked by the Pomodoro timer."""

    name: str
    language: str = ""
    pomodoro_state: PomodoroPhase = PomodoroPhase.IDLE
    completed_pomodoros: int = 0
