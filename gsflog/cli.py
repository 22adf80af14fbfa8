#!/usr/bin/env python3
"""
Command-line interface for the GSF combat log parser.
"""

import csv
import json
import sys
import click
import logging
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.table import Table
from rich.logging import RichHandler

from .config.loader import load_settings
from .config.settings import ParserSettings
from .parser.events import Event
from .parser.parser import CombatLogParser
from .segmentation.matches import MatchSegmenter, get_player_id_list


# Set up rich console for pretty output, logs go to stderr so exports stay clean
console = Console()
log_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(console=log_console, rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)

EXPORT_FIELDS = [
    "timestamp",
    "source_id",
    "target_id",
    "ability_name",
    "effect_type",
    "effect_name",
    "amount",
    "is_critical",
    "raw_line",
]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--config", "config_path", type=click.Path(), help="YAML configuration file")
@click.pass_context
def cli(ctx, verbose, config_path):
    """GSF Combat Log Parser - StarFighter match extraction"""
    settings = load_settings(config_path)
    logging.getLogger().setLevel(logging.DEBUG if verbose else settings.log_level_number)
    ctx.obj = settings


def load_events(log_file: str, settings: ParserSettings) -> List[Event]:
    """Parse a log file, exiting with an error if its name carries no date."""
    parser = CombatLogParser(encoding=settings.encoding, errors=settings.errors)
    events = parser.parse_file(log_file)
    if events is None:
        console.print(
            f"[red]Cannot process {Path(log_file).name}: file name does not match "
            f"combat_YYYY-MM-DD_HH_MM_SS_ffffff.txt[/red]"
        )
        sys.exit(1)

    stats = parser.get_stats()["tokenizer_stats"]
    logger.debug(
        f"{stats['lines_processed']} lines, {stats['errors']} rejected "
        f"({stats['success_rate']:.1%} parsed)"
    )
    return events


@cli.command()
@click.argument("log_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", help="Output file for results")
@click.option("--format", type=click.Choice(["json", "csv", "summary"]), default="summary")
@click.pass_obj
def events(settings, log_file, output, format):
    """Parse a combat log file into events."""
    log_events = load_events(log_file, settings)

    if format == "summary":
        display_events(log_events)
    elif format == "json":
        write_output(json.dumps([e.to_dict() for e in log_events], indent=2), output)
    elif format == "csv":
        export_events_csv(log_events, output)


@cli.command()
@click.argument("log_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", help="Output file for results")
@click.option("--format", type=click.Choice(["json", "summary"]), default="summary")
@click.option(
    "--flush-trailing",
    is_flag=True,
    help="Also report a match that is still open at the end of the log",
)
@click.pass_obj
def matches(settings, log_file, output, format, flush_trailing):
    """Split a combat log file into GSF matches."""
    flush_trailing = flush_trailing or settings.flush_trailing_match

    log_events = load_events(log_file, settings)
    log_matches = MatchSegmenter(flush_trailing=flush_trailing).split(log_events)

    if format == "summary":
        display_matches(log_matches)
    elif format == "json":
        data = [[e.to_dict() for e in match] for match in log_matches]
        write_output(json.dumps(data, indent=2), output)


@cli.command()
@click.argument("log_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def players(settings, log_file):
    """List the player IDs found in a combat log file."""
    player_ids = get_player_id_list(load_events(log_file, settings))
    if not player_ids:
        console.print("[yellow]No player IDs found[/yellow]")
        return

    for player_id in sorted(player_ids):
        click.echo(player_id)


def display_events(log_events: List[Event], limit: int = 20):
    """Display parsed events."""
    console.print(f"[bold cyan]Parsed {len(log_events):,} events[/bold cyan]")
    if not log_events:
        return

    table = Table(title=f"First {min(limit, len(log_events))} events")
    table.add_column("Time", style="dim")
    table.add_column("Source", style="green")
    table.add_column("Target", style="red")
    table.add_column("Ability")
    table.add_column("Effect")
    table.add_column("Amount", justify="right")

    for event in log_events[:limit]:
        amount = f"{event.amount:,}*" if event.is_critical else f"{event.amount:,}"
        table.add_row(
            event.timestamp.strftime("%H:%M:%S"),
            event.source_id,
            event.target_id,
            event.ability_name,
            event.effect_name,
            amount if event.amount else "-",
        )

    console.print(table)


def display_matches(log_matches: List[List[Event]]):
    """Display a summary of the matches found."""
    console.print(f"[bold cyan]Matches found: {len(log_matches)}[/bold cyan]")
    if not log_matches:
        return

    table = Table(title="Matches")
    table.add_column("#", style="dim", width=3)
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Duration")
    table.add_column("Events", justify="right")
    table.add_column("Players", justify="right")

    for i, match in enumerate(log_matches, 1):
        start, end = match[0].timestamp, match[-1].timestamp
        table.add_row(
            str(i),
            start.strftime("%H:%M:%S"),
            end.strftime("%H:%M:%S"),
            get_duration_str((end - start).total_seconds()),
            str(len(match)),
            str(len(get_player_id_list(match))),
        )

    console.print(table)


def get_duration_str(duration: float) -> str:
    """Get human-readable duration string."""
    minutes = int(duration // 60)
    seconds = int(duration % 60)
    return f"{minutes}:{seconds:02d}"


def write_output(text: str, output_file: Optional[str]):
    """Write text to the output file, or stdout if none is given."""
    if not output_file:
        click.echo(text)
        return

    with open(output_file, "w") as f:
        f.write(text)
    console.print(f"[green]Exported results to {output_file}[/green]")


def export_events_csv(log_events: List[Event], output_file: Optional[str]):
    """Export events to CSV format."""
    if not output_file:
        writer = csv.DictWriter(sys.stdout, fieldnames=EXPORT_FIELDS)
        writer.writeheader()
        writer.writerows(e.to_dict() for e in log_events)
        return

    with open(output_file, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=EXPORT_FIELDS)
        writer.writeheader()
        writer.writerows(e.to_dict() for e in log_events)

    console.print(f"[green]Exported {len(log_events)} events to {output_file}[/green]")


if __name__ == "__main__":
    cli()
