"""Pomotodo CLI - a terminal task list with a Pomodoro focus timer."""

__version__ = "0.1.0"
