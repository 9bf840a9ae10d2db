"""CLI helper functions."""

from __future__ import annotations

from pathlib import Path

import click
import msgspec

from citekit.core.exceptions import InvalidStyleError
from citekit.core.fields import CitationStyle
from citekit.core.models import Record
from citekit.importers.json import JsonImporter


def load_records(path: Path, validate: bool = False) -> list[Record]:
    """Load and normalize records from a JSON file.

    Per-record problems are echoed to stderr as warnings; file-level
    problems propagate as ImportFormatError.
    """
    records, errors = JsonImporter(validate=validate).import_file(path)
    for error in errors:
        click.echo(f"Warning: {error}", err=True)
    return records


def parse_styles(value: str) -> list[CitationStyle]:
    """Parse a style option: one style key, a comma list, or ``all``."""
    if value.strip().lower() == "all":
        return list(CitationStyle)
    try:
        return [CitationStyle.parse(part) for part in value.split(",") if part.strip()]
    except InvalidStyleError as e:
        raise click.BadParameter(str(e), param_hint="--style") from e


def echo_json(data: object) -> None:
    """Print data as indented JSON."""
    click.echo(msgspec.json.format(msgspec.json.encode(data), indent=2).decode())
