"""Rich terminal display for clock and lighting readouts."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from daynight.mechanics.time_span import TimeSpan, format_time
from daynight.models.tone import Tone

console = Console()

_PHASE_STYLES = {
    "night": "blue",
    "dawn": "magenta",
    "day": "yellow",
    "dusk": "red",
}


class Display:
    def __init__(self, width: int = 60):
        self.console = console
        self.width = width

    def show_status(self, now: TimeSpan, is_daytime: bool, phase: str, tone: Tone) -> None:
        body = Text()
        body.append("Time  ", style="bold")
        body.append(f"{format_time(now)}\n")
        body.append("Total ", style="bold")
        body.append(f"{now.get_total_minutes()} minutes\n")
        body.append("Light ", style="bold")
        body.append("Daytime" if is_daytime else "Night", style="yellow" if is_daytime else "blue")
        body.append(" | ", style="dim")
        body.append(phase.title(), style=_PHASE_STYLES.get(phase, ""))
        body.append("\nTone  ", style="bold")
        body.append(str(tone), style="cyan")
        self.console.print(Panel(body, title="Day-Night", border_style="cyan", box=box.ROUNDED, width=self.width))

    def show_tone(self, keyword: str, at: TimeSpan, tone: Tone) -> None:
        self.console.print(f"[bold]{keyword}[/bold] at {at}: [cyan]{tone}[/cyan]")

    def show_timeline(self, keyword: str, rows: list[tuple[TimeSpan, str, Tone]]) -> None:
        table = Table(title=f"Lighting: {keyword}", box=box.SIMPLE)
        table.add_column("Time", style="bold")
        table.add_column("Phase")
        table.add_column("Tone", style="cyan")
        for at, phase, tone in rows:
            table.add_row(str(at), Text(phase.title(), style=_PHASE_STYLES.get(phase, "")), str(tone))
        self.console.print(table)

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {message}")
