"""Confidence analysis display command."""

from pathlib import Path

import click
from rich.panel import Panel
from rich.table import Table

from citekit.confidence.models import (
    CitationBreakdown,
    ConfidenceStatus,
    decode_confidence,
    decode_recency,
)

STATUS_STYLES = {
    ConfidenceStatus.STRONG: "green",
    ConfidenceStatus.GOOD: "cyan",
    ConfidenceStatus.WEAK: "yellow",
    ConfidenceStatus.POOR: "red",
}


def _breakdown_table(breakdown: CitationBreakdown) -> Table:
    table = Table(title="Citation age")
    table.add_column("Recent", justify="right")
    table.add_column("Acceptable", justify="right")
    table.add_column("Dated", justify="right")
    table.add_column("Outdated", justify="right")
    table.add_row(
        str(breakdown.recent),
        str(breakdown.acceptable),
        str(breakdown.dated),
        str(breakdown.outdated),
    )
    return table


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--recency", is_flag=True, help="Read the file as a recency-only analysis"
)
@click.pass_context
def confidence(ctx: click.Context, file: Path, recency: bool) -> None:
    """Display a citation confidence analysis saved as JSON."""
    console = ctx.obj.console
    data = file.read_bytes()

    if recency:
        analysis = decode_recency(data)
        console.print(
            f"Total citations: {analysis.total_citations} "
            f"(recent citations: {'yes' if analysis.has_recent_citations else 'no'})"
        )
        console.print(_breakdown_table(analysis.breakdown))
        if analysis.warning:
            console.print(f"[yellow]Warning:[/yellow] {analysis.warning}")
        return

    analysis = decode_confidence(data)
    score = analysis.overall_confidence
    color = STATUS_STYLES[score.status]

    console.print(
        Panel(
            f"[bold {color}]{score.overall:g}/100[/bold {color}] "
            f"({score.status.value}) across {analysis.total_citations} citation(s)",
            title="Citation confidence",
        )
    )

    scores = Table(title="Sub-scores")
    scores.add_column("Factor")
    scores.add_column("Score", justify="right")
    for name, value in score.sub_scores().items():
        scores.add_row(name, f"{value:g}")
    console.print(scores)

    console.print(_breakdown_table(analysis.citation_breakdown))

    for warning in score.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}", highlight=False)
    for suggestion in score.suggestions:
        console.print(f"[blue]Suggestion:[/blue] {suggestion}", highlight=False)
