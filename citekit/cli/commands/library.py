"""Library CLI commands: deduplication, identity keys and validation."""

from pathlib import Path

import click
from rich.table import Table
from rich.text import Text

from citekit.cli.helpers import load_records
from citekit.core.validators import get_validator_registry
from citekit.importers.json import encode_records
from citekit.library.dedupe import SourceDeduplicator
from citekit.library.identity import key_of

SEVERITY_STYLES = {"error": "red", "warning": "yellow", "info": "blue"}


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write unique records to this JSON file",
)
@click.option("--show-dropped", is_flag=True, help="List the dropped duplicates")
@click.pass_context
def dedupe(
    ctx: click.Context, file: Path, output: Path | None, show_dropped: bool
) -> None:
    """Remove duplicate sources, keeping the first occurrence."""
    console = ctx.obj.console
    records = load_records(file)
    result = SourceDeduplicator().run(records)

    if output:
        output.write_bytes(encode_records(result.unique))
        console.print(
            f"[green]✓[/green] Wrote {len(result.unique)} unique record(s) to {output}"
        )
    else:
        table = Table(title="Unique sources")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Key", style="cyan")
        table.add_column("Title")
        table.add_column("Year")
        for i, record in enumerate(result.unique, 1):
            table.add_row(
                str(i),
                Text(key_of(record)),
                Text(record.title),
                str(record.display_year),
            )
        console.print(table)

    console.print(
        f"Removed {result.removed_count} duplicate(s) from {len(records)} record(s)"
    )

    if show_dropped and result.duplicates:
        table = Table(title="Dropped duplicates")
        table.add_column("Key", style="cyan")
        table.add_column("Dropped title")
        table.add_column("Kept title")
        for match in result.duplicates:
            table.add_row(
                Text(match.key), Text(match.dropped.title), Text(match.kept.title)
            )
        console.print(table)


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def keys(file: Path) -> None:
    """Print the identity key of each record, tab-separated from its title."""
    for record in load_records(file):
        click.echo(f"{key_of(record)}\t{record.title}")


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--errors-only", is_flag=True, help="Only show error-level issues")
@click.pass_context
def check(ctx: click.Context, file: Path, errors_only: bool) -> None:
    """Validate records and report problems.

    Exits with status 1 when any record has an error-level issue.
    """
    console = ctx.obj.console
    registry = get_validator_registry()
    records = load_records(file)

    table = Table(title="Validation issues")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Severity")
    table.add_column("Field")
    table.add_column("Message")

    error_count = 0
    issue_count = 0
    for i, record in enumerate(records, 1):
        for issue in registry.validate(record):
            if errors_only and issue.severity != "error":
                continue
            issue_count += 1
            if issue.severity == "error":
                error_count += 1
            color = SEVERITY_STYLES.get(issue.severity, "white")
            table.add_row(
                str(i),
                Text(issue.severity, style=color),
                issue.field or "",
                Text(issue.message),
            )

    if issue_count:
        console.print(table)
    console.print(
        f"Checked {len(records)} record(s): {error_count} error(s), "
        f"{issue_count - error_count} other issue(s)"
    )

    if error_count:
        ctx.exit(1)
