"""
Main CLI application using Typer.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Annotated, List, Optional, Tuple

import pendulum
import typer
from rich.console import Console
from rich.table import Table

from ..adapters.court_lookup import ConfigCourtLookup
from ..adapters.slot_store import JsonFileSlotStore
from ..config import AppConfig, get_default_config_path
from ..domain.calendar import load_court_calendar
from ..domain.exceptions import ConfigurationError, CourtSlotsError
from ..domain.models import SlotResponse, SlotStatus
from ..domain.slot_expander import SlotExpander
from ..services.slot_generation import SlotGenerationService
from ..services.slot_service import SlotService

app = typer.Typer(
    name="courtslots",
    help="Generate court slots and inspect their availability",
    add_completion=False
)

console = Console()

STATUS_STYLES = {
    SlotStatus.AVAILABLE: "green",
    SlotStatus.BOOKED: "red",
    SlotStatus.MAINTENANCE: "yellow",
    SlotStatus.CLOSED: "dim",
    SlotStatus.UNKNOWN: "magenta",
}

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    config_path = config_file or get_default_config_path()
    return AppConfig.load_from_yaml(config_path)


def _build_services(config: AppConfig) -> Tuple[JsonFileSlotStore, ConfigCourtLookup, SlotService]:
    """Wire the JSON slot store and configured courts into the slot service."""
    store = JsonFileSlotStore(config.slot_store_file)
    lookup = ConfigCourtLookup(config.court_configs())
    return store, lookup, SlotService(slot_store=store, court_lookup=lookup, timezone=config.timezone)


def _parse_date(value: str, tz: str) -> date:
    try:
        return pendulum.from_format(value, "YYYY-MM-DD", tz=tz).date()
    except ValueError as e:
        console.print(f"[red]Could not parse date '{value}': {e}[/red]")
        raise typer.Exit(1)


def _print_slots(title: str, slots: List[SlotResponse]) -> None:
    if not slots:
        console.print("[yellow]⚠ No slots found in this range.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", justify="right")
    table.add_column("Court", style="bold yellow")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Status")

    for slot in slots:
        style = STATUS_STYLES[slot.status]
        table.add_row(
            str(slot.id),
            slot.court_name or f"#{slot.court_id}",
            f"{slot.day_of_week.name.capitalize()}, {slot.date.isoformat()}",
            f"{slot.start_time:%H:%M} - {slot.end_time:%H:%M}",
            f"[{style}]{slot.status.value}[/{style}]",
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def courts(
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    List configured courts and their operating calendars.
    """
    _configure_logging(verbose)
    try:
        config = _load_config(config_file)

        if not config.courts:
            console.print("[yellow]No courts defined in the config file.[/yellow]")
            return

        table = Table(
            title="Configured courts",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("ID", justify="right")
        table.add_column("Name", style="bold yellow")
        table.add_column("Location", style="dim")
        table.add_column("Status")
        table.add_column("Days")
        table.add_column("Hours")

        for court in config.court_configs():
            try:
                calendar = load_court_calendar(court)
            except ConfigurationError as e:
                days, hours = "-", f"[red]{e}[/red]"
            else:
                days = ", ".join(
                    day.name.capitalize()[:3]
                    for day in sorted(calendar.day_set, key=lambda d: d.value)
                )
                hours = str(calendar.window)
                if calendar.peak_window:
                    hours += f" (peak {calendar.peak_window})"

            table.add_row(str(court.id), court.name, court.location, court.status, days, hours)

        console.print()
        console.print(table)
        console.print()

    except (FileNotFoundError, ValueError, CourtSlotsError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def generate(
    court_ids: Annotated[Optional[List[int]], typer.Argument(help="Court ids to generate slots for.")] = None,
    all_courts: Annotated[bool, typer.Option("--all", help="Generate slots for every configured court.")] = False,
    start: Annotated[Optional[str], typer.Option("--start", help="First day of the horizon (YYYY-MM-DD). Defaults to today.")] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    Generate slots over the booking horizon and store them.

    Examples:

        courtslots generate 1 2

        courtslots generate --all --start 2024-11-25
    """
    _configure_logging(verbose)
    try:
        config = _load_config(config_file)

        _, lookup, slot_service = _build_services(config)

        if all_courts:
            targets = [court.id for court in lookup.all()]
        else:
            targets = list(court_ids or [])

        if not targets:
            console.print("[red]Error: pass court ids or --all.[/red]")
            raise typer.Exit(1)

        first_day = _parse_date(start, config.timezone) if start else None

        generator = SlotGenerationService(
            court_lookup=lookup,
            slot_service=slot_service,
            expander=SlotExpander(slot_length_hours=config.defaults.slot_length_hours),
            horizon_months=config.defaults.horizon_months,
            timezone=config.timezone,
        )

        for court_id in targets:
            stored = generator.generate_for_court(court_id, start=first_day)
            console.print(f"[green]✓ Court {court_id}: {len(stored)} slot(s) stored[/green]")

    except (FileNotFoundError, ValueError, CourtSlotsError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def slots(
    court_ids: Annotated[Optional[List[int]], typer.Argument(help="Court ids to show. Shows all courts when omitted.")] = None,
    start: Annotated[Optional[str], typer.Option("--start", help="Start date (YYYY-MM-DD)")] = None,
    end: Annotated[Optional[str], typer.Option("--end", help="End date (YYYY-MM-DD), inclusive")] = None,
    available: Annotated[Optional[int], typer.Option("--available", help="Show the upcoming available slots of one court.")] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    Show stored slots with their current status.

    Examples:

        courtslots slots --start 2024-11-25 --end 2024-11-26

        courtslots slots 1 2

        courtslots slots --available 1
    """
    _configure_logging(verbose)
    try:
        config = _load_config(config_file)
        tz = config.timezone
        _, _, slot_service = _build_services(config)

        first_day = _parse_date(start, tz) if start else pendulum.today(tz=tz).date()

        if available is not None:
            results = slot_service.available_slots_for_court(
                available,
                today=first_day,
                days=config.defaults.availability_days,
            )
            _print_slots(f"Available slots for court {available}", results)
            return

        last_day = _parse_date(end, tz) if end else first_day.add(days=7)
        results = slot_service.query_slots(court_ids, first_day, last_day)
        _print_slots(f"Slots {first_day.isoformat()} - {last_day.isoformat()}", results)

    except (FileNotFoundError, ValueError, CourtSlotsError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def book(
    slot_id: Annotated[int, typer.Argument(help="Slot to mark as booked.")],
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    Mark a slot as occupied in the local store.
    """
    _configure_logging(verbose)
    try:
        store, _, _ = _build_services(_load_config(config_file))
        slot = store.mark_booked(slot_id)
        console.print(f"[green]✓ Slot {slot.id} on {slot.date.isoformat()} {slot.start_time:%H:%M} booked[/green]")
    except (FileNotFoundError, ValueError, CourtSlotsError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def release(
    slot_id: Annotated[int, typer.Argument(help="Slot to free again.")],
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    Free a booked slot in the local store.
    """
    _configure_logging(verbose)
    try:
        store, _, _ = _build_services(_load_config(config_file))
        slot = store.release(slot_id)
        console.print(f"[green]✓ Slot {slot.id} on {slot.date.isoformat()} {slot.start_time:%H:%M} released[/green]")
    except (FileNotFoundError, ValueError, CourtSlotsError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]courtslots[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
