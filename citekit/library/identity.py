"""Canonical identity keys for citable sources.

Two records with the same key are the same source for listing and
collection purposes, whichever search or import produced them.
"""

from citekit.core.models import Record
from citekit.core.normalize import strip_doi_prefix


def normalize_text(text: str | None) -> str:
    """Lower-case, trim, and collapse runs of whitespace."""
    if not text:
        return ""
    return " ".join(text.lower().split())


def normalize_doi(doi: str | None) -> str:
    """Normalize a DOI for comparison.

    Strips a resolver prefix and lower-cases; DOIs are case-insensitive.
    """
    if not doi:
        return ""
    return strip_doi_prefix(doi).lower()


def key_of(record: Record) -> str:
    """Compute the identity key of a record.

    The normalized DOI when the record has one, otherwise
    ``title-year-first_author`` built from normalized text. A record with
    no DOI, title, year or author still gets a key ("--"), shared with
    every other equally empty record.
    """
    doi = normalize_doi(record.doi)
    if doi:
        return doi

    year = str(record.year) if record.year is not None else ""
    return (
        f"{normalize_text(record.title)}-{year}-{normalize_text(record.first_author)}"
    )
