"""Input mode state machine for composing new tasks."""

from dataclasses import dataclass
from enum import Enum


class InputMode(str, Enum):
    """What keystrokes currently mean."""

    NORMAL = "normal"
    EDITING_NAME = "editing_name"
    EDITING_LANGUAGE = "editing_language"

    @property
    def is_editing(self) -> bool:
        return self is not InputMode.NORMAL


@dataclass
class Draft:
    """Uncommitted task fields being typed by the user."""

    name: str = ""
    language: str = ""


class InputModeMachine:
    """Tracks the active input mode and the pending draft.

    The draft only exists outside ``NORMAL`` mode; ``draft`` is ``None``
    otherwise. Committing the draft is left to the caller, which passes it
    to the task store and then calls :meth:`finish`.
    """

    def __init__(self):
        self.mode = InputMode.NORMAL
        self.draft: Draft | None = None

    def begin_add(self) -> None:
        """Normal -> EditingName with a fresh draft."""
        if self.mode is not InputMode.NORMAL:
            return
        self.mode = InputMode.EDITING_NAME
        self.draft = Draft()

    def advance_to_language(self) -> bool:
        """EditingName -> EditingLanguage. Refused while the name is blank."""
        if self.mode is not InputMode.EDITING_NAME or self.draft is None:
            return False
        if not self.draft.name.strip():
            return False
        self.mode = InputMode.EDITING_LANGUAGE
        return True

    def append(self, char: str) -> None:
        """Append a character to the buffer of the active field."""
        if self.draft is None:
            return
        if self.mode is InputMode.EDITING_NAME:
            self.draft.name += char
        elif self.mode is InputMode.EDITING_LANGUAGE:
            self.draft.language += char

    def backspace(self) -> None:
        if self.draft is None:
            return
        if self.mode is InputMode.EDITING_NAME:
            self.draft.name = self.draft.name[:-1]
        elif self.mode is InputMode.EDITING_LANGUAGE:
            self.draft.language = self.draft.language[:-1]

    def cancel(self) -> bool:
        """Discard the draft and return to Normal. Returns False if already Normal."""
        if self.mode is InputMode.NORMAL:
            return False
        self.finish()
        return True

    def finish(self) -> None:
        """Return to Normal mode and clear the draft."""
        self.mode = InputMode.NORMAL
        self.draft = None
