"""Unit tests for the input mode state machine."""

from __future__ import annotations

from pomotodo_cli.models.input_mode import Draft, InputMode, InputModeMachine


class TestInputModeMachine:
    def test_starts_normal_without_draft(self):
        machine = InputModeMachine()
        assert machine.mode is InputMode.NORMAL
        assert machine.draft is None
        assert not machine.mode.is_editing

    def test_begin_add_creates_fresh_draft(self):
        machine = InputModeMachine()
        machine.begin_add()
        assert machine.mode is InputMode.EDITING_NAME
        assert machine.draft == Draft()

    def test_begin_add_ignored_while_editing(self):
        machine = InputModeMachine()
        machine.begin_add()
        machine.append("x")
        machine.begin_add()
        assert machine.draft.name == "x"

    def test_append_targets_active_field(self):
        machine = InputModeMachine()
        machine.begin_add()
        for c in "Fix bug":
            machine.append(c)
        assert machine.advance_to_language()
        for c in "rust":
            machine.append(c)
        assert machine.draft == Draft(name="Fix bug", language="rust")
        assert machine.mode is InputMode.EDITING_LANGUAGE

    def test_append_in_normal_mode_is_ignored(self):
        machine = InputModeMachine()
        machine.append("x")
        assert machine.draft is None

    def test_advance_refused_on_blank_name(self):
        machine = InputModeMachine()
        machine.begin_add()
        machine.append(" ")
        assert machine.advance_to_language() is False
        assert machine.mode is InputMode.EDITING_NAME
        assert machine.draft.name == " "

    def test_backspace(self):
        machine = InputModeMachine()
        machine.begin_add()
        machine.append("a")
        machine.append("b")
        machine.backspace()
        assert machine.draft.name == "a"
        machine.backspace()
        machine.backspace()
        assert machine.draft.name == ""

    def test_cancel_discards_draft(self):
        machine = InputModeMachine()
        machine.begin_add()
        machine.append("a")
        assert machine.cancel() is True
        assert machine.mode is InputMode.NORMAL
        assert machine.draft is None

    def test_cancel_in_normal_mode(self):
        assert InputModeMachine().cancel() is False

    def test_finish_returns_to_normal(self):
        machine = InputModeMachine()
        machine.begin_add()
        machine.append("a")
        machine.advance_to_language()
        machine.finish()
        assert machine.mode is InputMode.NORMAL
        assert machine.draft is None
