"""Rich renderables built from an :class:`AppSnapshot`.

These helpers only read the snapshot; they never touch the controller.
"""

from rich.console import Group
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from pomotodo_cli.models.app_state import AppSnapshot
from pomotodo_cli.models.input_mode import InputMode
from pomotodo_cli.models.task import PomodoroPhase

PHASE_COLORS = {
    PomodoroPhase.IDLE: "grey62",
    PomodoroPhase.WORK: "green1",
    PomodoroPhase.BREAK: "deep_sky_blue1",
}

CONTROLS_HINT = "i=add task  ↑/↓=navigate  p=start/stop timer  del=remove  q=quit"


def format_remaining(seconds: int) -> str:
    """Format a tick count as MM:SS."""
    seconds = max(0, seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def render_task_list(snapshot: AppSnapshot) -> Table | Text:
    """Task list with per-task phase and completed count."""
    if not snapshot.tasks:
        return Text("No tasks yet. Press 'i' to add one.", style="dim")

    table = Table(show_header=False, box=None, expand=True, padding=(0, 1))
    table.add_column("Task")

    for i, task in enumerate(snapshot.tasks):
        selected = i == snapshot.selected_index
        primary = Text(f"{task.name} · {task.language}" if task.language else task.name)
        if selected:
            primary.stylize("bold yellow")
            primary = Text("▶ ") + primary
        else:
            primary = Text("  ") + primary

        color = PHASE_COLORS[task.pomodoro_state]
        secondary = Text(
            f"  Status: {task.pomodoro_state.label} | Completed: {task.completed_pomodoros}",
            style=color,
        )
        table.add_row(Group(primary, secondary))

    return table


def timer_label(snapshot: AppSnapshot) -> str:
    """One-line description of the timer for the progress panel."""
    timer = snapshot.timer
    if timer.phase is PomodoroPhase.IDLE:
        if snapshot.selected_task is None:
            return "No tasks available"
        return "Press 'p' to start the pomodoro for this task."

    target = snapshot.target_task
    name = f" on '{target.name}'" if target else ""
    return f"{timer.phase.label}{name} - {format_remaining(timer.remaining)} left"


def render_timer(snapshot: AppSnapshot) -> Group:
    """Timer label plus a progress bar coloured by phase."""
    timer = snapshot.timer
    color = PHASE_COLORS[timer.phase]
    bar = ProgressBar(
        total=100,
        completed=round(timer.progress * 100),
        complete_style=color,
        finished_style=color,
    )
    return Group(Text(timer_label(snapshot), style=f"bold {color}"), bar)


def render_info(snapshot: AppSnapshot) -> Text:
    """Key hints and the current notice, if any."""
    text = Text()
    text.append("Controls:", style="bold yellow")
    text.append(f"  {CONTROLS_HINT}")

    if snapshot.notice is not None:
        style = "bold red" if snapshot.notice.is_error else "italic bright_cyan"
        text.append("\n")
        text.append(snapshot.notice.message, style=style)
    return text


def render_summary(snapshot: AppSnapshot) -> Text:
    """Details of the selected task."""
    text = Text()
    text.append("Selected Task:", style="bold")
    task = snapshot.selected_task
    if task is None:
        text.append("\nNo task selected")
        return text

    text.append(
        f"\n{task.name} | {task.language or '-'} | "
        f"Completed focus sessions: {task.completed_pomodoros}"
    )
    return text


def input_title(mode: InputMode) -> str:
    if mode is InputMode.EDITING_NAME:
        return "New Task (Task Input Mode)"
    if mode is InputMode.EDITING_LANGUAGE:
        return "New Task (Language Input Mode)"
    return "New Task (Press 'i' to add)"


def render_input(snapshot: AppSnapshot) -> Text:
    """Draft buffers with a cursor on the active field."""
    cursor_name = "▏" if snapshot.mode is InputMode.EDITING_NAME else ""
    cursor_lang = "▏" if snapshot.mode is InputMode.EDITING_LANGUAGE else ""

    text = Text(style="yellow")
    text.append("Task:", style="bold")
    text.append(f" {snapshot.draft_name}{cursor_name}\n")
    text.append("Language:", style="bold")
    text.append(f" {snapshot.draft_language}{cursor_lang}\n")
    text.append("Enter to confirm, ESC to cancel", style="dim")
    return text
