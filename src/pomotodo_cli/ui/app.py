"""Textual front-end: turns key presses and ticks into controller events.

The app holds no state of its own. After every event it re-renders all
panels from a fresh controller snapshot.
"""

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from pomotodo_cli.models.app_state import AppController
from pomotodo_cli.ui import render


class PomotodoApp(App):
    """Full-screen task list with a Pomodoro timer."""

    TITLE = "Pomodoro Control Center"

    CSS = """
    Screen {
        background: $background;
    }

    #header {
        height: 3;
        border: round $accent;
        content-align: left middle;
        padding: 0 1;
    }

    #main {
        height: 1fr;
    }

    #task-list {
        width: 40%;
        border: round $primary;
        padding: 0 1;
    }

    #side {
        width: 60%;
    }

    #timer {
        height: 4;
        border: round $success;
        padding: 0 1;
    }

    #info {
        height: 4;
        border: round $secondary;
        padding: 0 1;
    }

    #summary {
        height: 1fr;
        border: round $secondary;
        padding: 0 1;
    }

    #input {
        height: 5;
        border: round $warning;
        padding: 0 1;
    }
    """

    def __init__(self, controller: AppController, tick_seconds: float = 1.0):
        super().__init__()
        self.controller = controller
        self.tick_seconds = tick_seconds

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        yield Static(
            "[bold magenta]⚡ Pomodoro Control Center[/bold magenta]"
            " - Stay focused and track your progress",
            id="header",
        )
        with Horizontal(id="main"):
            yield Static(id="task-list")
            with Vertical(id="side"):
                yield Static(id="timer")
                yield Static(id="info")
                yield Static(id="summary")
        yield Static(id="input")

    def on_mount(self) -> None:
        self.query_one("#task-list", Static).border_title = "To-Do List"
        self.query_one("#timer", Static).border_title = "Pomodoro Progress"
        self.query_one("#info", Static).border_title = "Session Overview"
        self.query_one("#summary", Static).border_title = "Task Snapshot"
        self.set_interval(self.tick_seconds, self.handle_tick)
        self.refresh_view()

    def handle_tick(self) -> None:
        self.controller.handle_tick()
        self.refresh_view()

    def on_key(self, event: events.Key) -> None:
        """Forward every key press to the controller."""
        event.stop()
        event.prevent_default()
        self.controller.handle_key(event.key, event.character)
        if self.controller.should_quit:
            self.exit()
            return
        self.refresh_view()

    def refresh_view(self) -> None:
        """Redraw every panel from a fresh snapshot."""
        snapshot = self.controller.snapshot()
        self.query_one("#task-list", Static).update(render.render_task_list(snapshot))
        self.query_one("#timer", Static).update(render.render_timer(snapshot))
        self.query_one("#info", Static).update(render.render_info(snapshot))
        self.query_one("#summary", Static).update(render.render_summary(snapshot))

        input_box = self.query_one("#input", Static)
        input_box.border_title = render.input_title(snapshot.mode)
        input_box.update(render.render_input(snapshot))
