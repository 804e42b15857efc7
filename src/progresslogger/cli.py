"""Command line interface for Progress Logger."""

import logging
from typing import TextIO

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from progresslogger import __version__
from progresslogger.core.logger import ProgressLogger
from progresslogger.utils.errors import ConfigurationError
from progresslogger.utils.progress import ConsoleReporter

console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose/--quiet", default=False, help="Show debug logging")
def cli(verbose: bool) -> None:
    """Progress Logger - regular progress reports for long-running work."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@cli.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.option("--step", type=int, default=None, help="Report every N lines")
@click.option("--seconds", type=float, default=None, help="Report every N seconds")
@click.option("--minutes", type=float, default=None, help="Report every N minutes")
@click.option("--hours", type=float, default=None, help="Report every N hours")
@click.option("--max", "max_count", type=int, default=None, help="Expected number of lines, for ETA")
@click.option("--passthrough/--no-passthrough", default=False, help="Echo every line to stdout")
@click.option("--description", type=str, default="Lines", help="Label printed with each report")
def count(
    input_file: TextIO,
    step: int | None,
    seconds: float | None,
    minutes: float | None,
    hours: float | None,
    max_count: int | None,
    passthrough: bool,
    description: str,
) -> None:
    """Count lines from INPUT_FILE (default: stdin), reporting progress as they arrive."""
    try:
        progress = ProgressLogger(
            ConsoleReporter(description, console=console),
            step=step,
            seconds=seconds,
            minutes=minutes,
            hours=hours,
            max_count=max_count,
        )
    except ConfigurationError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise click.Abort()

    try:
        for line in progress.track(input_file):
            if passthrough:
                click.echo(line, nl=False)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        raise click.Abort()

    console.print(f"[green]✓[/green] {escape(description)}: {progress.count:,} total")


if __name__ == "__main__":
    cli()
