"""Citation rendering CLI command."""

from pathlib import Path

import click
from rich.table import Table
from rich.text import Text

from citekit.cli.helpers import echo_json, load_records, parse_styles
from citekit.library.identity import key_of

FORMS = ("in-text", "reference", "both")


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--style", "-s", help="Style key (apa, mla, chicago, ieee), comma list, or 'all'"
)
@click.option("--form", "-f", type=click.Choice(FORMS), help="Citation form to show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def render(
    ctx: click.Context, file: Path, style: str | None, form: str | None, as_json: bool
) -> None:
    """Render citations for the records in a JSON file."""
    console = ctx.obj.console
    config = ctx.obj.config

    styles = parse_styles(style or config.get("style", "apa"))
    form = form or config.get("form", "both")
    if form not in FORMS:
        raise click.BadParameter(f"Unknown form: {form}", param_hint="--form")
    as_json = as_json or config.get("output") == "json"

    records = ctx.obj.renderer.enrich_all(load_records(file))

    if as_json:
        payload = []
        for record in records:
            citations = {}
            for s in styles:
                rendered = record.citations[s]
                entry = {}
                if form in ("in-text", "both"):
                    entry["inText"] = rendered.in_text
                if form in ("reference", "both"):
                    entry["reference"] = rendered.reference
                citations[s.value] = entry
            payload.append(
                {"key": key_of(record), "title": record.title, "citations": citations}
            )
        echo_json(payload)
        return

    if not records:
        console.print("[yellow]No records found[/yellow]")
        return

    for s in styles:
        table = Table(title=f"{s.label} citations", show_lines=True)
        table.add_column("#", style="dim", justify="right")
        if form in ("in-text", "both"):
            table.add_column("In-text")
        if form in ("reference", "both"):
            table.add_column("Reference")

        for i, record in enumerate(records, 1):
            rendered = record.citations[s]
            cells = [Text(str(i))]
            if form in ("in-text", "both"):
                cells.append(Text(rendered.in_text))
            if form in ("reference", "both"):
                cells.append(Text(rendered.reference))
            table.add_row(*cells)

        console.print(table)
