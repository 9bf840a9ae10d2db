"""Main CLI entry point and application setup."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
from click.exceptions import Exit
from rich.console import Console
from rich.table import Table

from citekit import __version__
from citekit.citations.renderer import CitationRenderer
from citekit.cli.commands import confidence, library, render
from citekit.core.fields import CitationStyle
from citekit.core.models import Record


@dataclass
class Context:
    """CLI context that holds shared resources."""

    console: Console
    renderer: CitationRenderer
    config: dict[str, Any] = field(default_factory=dict)
    debug: bool = False


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_console(no_color: bool = False, width: int | None = None) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        no_color=no_color,
        width=width or 120,
        highlight=not no_color,
        color_system=None if no_color else "auto",
    )


class CiteKitGroup(click.Group):
    """Custom group that reports errors without tracebacks."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=CiteKitGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(
    version=__version__, prog_name="citekit", message="citekit version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """Citation formatting and source deduplication.

    Render APA, MLA, Chicago and IEEE citations for source records and
    collapse duplicate sources in a library.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    from citekit.cli.config import load_config

    try:
        config_data = load_config(config)
    except ValueError as e:
        if debug:
            raise
        click.echo(f"Error loading config file: {e}", err=True)
        ctx.exit(1)

    ctx.obj = Context(
        console=create_console(no_color=no_color),
        renderer=CitationRenderer(),
        config=config_data,
        debug=debug,
    )


@cli.command()
@click.pass_context
def styles(ctx: click.Context) -> None:
    """List supported citation styles."""
    console = ctx.obj.console
    sample = Record(
        title="Example",
        authors=("A Author", "B Author", "C Author"),
        year=2024,
    )

    table = Table(title="Citation Styles")
    table.add_column("Key", style="cyan")
    table.add_column("Style")
    table.add_column("In-text example")

    for style in CitationStyle:
        table.add_row(style.value, style.label, ctx.obj.renderer.cite(sample, style))

    console.print(table)


cli.add_command(render.render)
cli.add_command(library.dedupe)
cli.add_command(library.keys)
cli.add_command(library.check)
cli.add_command(confidence.confidence)


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
