"""Typer CLI application."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from daynight.config import ConfigError

app = typer.Typer(
    name="daynight",
    help="Inspect an in-universe day-night clock and its screen tones",
    no_args_is_help=True,
)


def _build_app(config: Optional[Path]):
    from daynight.app import DayNightApp
    from daynight.cli.display import Display

    try:
        return DayNightApp(config_path=config)
    except ConfigError as exc:
        Display().show_error(str(exc))
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def status(
    time: Optional[int] = typer.Option(None, "--time", "-t", help="Total minutes since day 0"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.toml"),
) -> None:
    """Show the clock, day/night state and outdoor tone."""
    from daynight.cli.display import Display
    from daynight.mechanics.lighting import get_phase, resolve_tone

    day_night = _build_app(config)
    if time is None:
        day_night.new_game()
    else:
        day_night.load_game(time)

    clock = day_night.clock
    settings = day_night.settings
    now = clock.now()
    phase, _ = get_phase(now, settings)
    tone = resolve_tone(settings.outdoor_lighting_keyword, now, settings)
    Display().show_status(now, clock.is_daytime(), phase, tone)


@app.command()
def tone(
    keyword: str = typer.Argument(..., help="Lighting keyword, e.g. Outside or Fire"),
    at: str = typer.Option("12:00 PM", "--at", "-a", help="Time of day"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.toml"),
) -> None:
    """Show the tone a lighting keyword gives at a time of day."""
    from daynight.cli.display import Display
    from daynight.mechanics.lighting import resolve_tone
    from daynight.mechanics.parsing import ParseError, parse_time_of_day

    display = Display()
    day_night = _build_app(config)
    try:
        when = parse_time_of_day(at)
    except ParseError as exc:
        display.show_error(str(exc))
        raise typer.Exit(code=1)
    display.show_tone(keyword, when, resolve_tone(keyword, when, day_night.settings))


@app.command()
def timeline(
    keyword: Optional[str] = typer.Option(None, "--keyword", "-k", help="Lighting keyword"),
    step: int = typer.Option(30, "--step", "-s", min=1, help="Minutes between rows"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.toml"),
) -> None:
    """Tabulate a lighting keyword's tone across one day."""
    from daynight.cli.display import Display
    from daynight.mechanics.lighting import get_phase, resolve_tone
    from daynight.mechanics.time_span import MINUTES_PER_DAY, TimeSpan

    settings = _build_app(config).settings
    keyword = keyword or settings.outdoor_lighting_keyword
    rows = []
    for minutes in range(0, MINUTES_PER_DAY, step):
        at = TimeSpan.from_minutes(minutes)
        phase, _ = get_phase(at, settings)
        rows.append((at, phase, resolve_tone(keyword, at, settings)))
    Display().show_timeline(keyword, rows)


if __name__ == "__main__":
    app()
