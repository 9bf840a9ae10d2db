"""Core data models for citable sources.

This module defines the canonical in-memory representation of one citable
source. Records arrive from search results, manual entry and imports in
many loose shapes; they are normalized once at the boundary (see
``citekit.core.normalize``) into the immutable Record defined here, and
every formatter and identity function downstream reads only this shape.

Key components:
- Record: Immutable bibliographic record with an optional citation cache
- FormattedCitation: In-text marker and reference entry for one style
- CitationBundle: Precomputed citations for every supported style
- ValidationError: Structured error reporting for record validation
"""

import hashlib
from typing import Any

import msgspec

from .fields import (
    BIBLIOGRAPHIC_FIELDS,
    NO_DATE,
    UNKNOWN_AUTHOR,
    CitationStyle,
    SourceKind,
)


class FormattedCitation(msgspec.Struct, frozen=True, rename="camel"):
    """Both rendered forms of a record in one style."""

    in_text: str
    reference: str


class CitationBundle(msgspec.Struct, frozen=True, kw_only=True):
    """Precomputed citations for all styles.

    The fingerprint identifies the bibliographic field values the bundle
    was rendered from. A bundle whose fingerprint differs from its record's
    current fingerprint is stale.
    """

    apa: FormattedCitation
    mla: FormattedCitation
    chicago: FormattedCitation
    ieee: FormattedCitation
    fingerprint: str

    def __getitem__(self, style: CitationStyle | str) -> FormattedCitation:
        return getattr(self, CitationStyle.parse(style).value)

    def items(self) -> list[tuple[CitationStyle, FormattedCitation]]:
        """Return (style, citation) pairs in style declaration order."""
        return [(style, getattr(self, style.value)) for style in CitationStyle]

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Convert to the ``styleKey -> {inText, reference}`` wire mapping."""
        return {
            style.value: msgspec.to_builtins(citation)
            for style, citation in self.items()
        }


class Record(msgspec.Struct, frozen=True, kw_only=True):
    """Immutable bibliographic record.

    ``authors`` holds display-ready names in citation order; nothing at
    this layer splits them into given and family names. A missing year is
    stored as None and rendered as ``n.d.``.

    Records are built through ``Record.from_dict`` (or
    ``citekit.core.normalize.normalize_record``) when the input is loosely
    typed external data. The legacy single-string ``author`` field is
    resolved there and never reaches this model.
    """

    title: str
    authors: tuple[str, ...] = ()
    year: int | None = None
    journal: str | None = None
    volume: str | None = None
    issue: str | None = None
    pages: str | None = None
    doi: str | None = None
    url: str | None = None
    kind: SourceKind = msgspec.field(default=SourceKind.ARTICLE, name="sourceKind")

    id: str | None = None
    abstract: str | None = None
    source: str | None = None

    citations: CitationBundle | None = msgspec.field(
        default=None, name="precomputedCitations"
    )

    @property
    def resolved_authors(self) -> tuple[str, ...]:
        """Author names to render, falling back to ``("Unknown",)``."""
        return self.authors or (UNKNOWN_AUTHOR,)

    @property
    def first_author(self) -> str:
        """First non-blank author name, stripped, or an empty string.

        Blank names are skipped the same way the author list renderer
        skips them, so the identity key and the rendered citation agree.
        """
        for name in self.authors:
            if name and name.strip():
                return name.strip()
        return ""

    @property
    def display_year(self) -> int | str:
        """Year for rendering: the integer year or ``"n.d."``."""
        return self.year if self.year is not None else NO_DATE

    @property
    def fingerprint(self) -> str:
        """Stable digest of the bibliographic field values."""
        values = [getattr(self, name) for name in BIBLIOGRAPHIC_FIELDS]
        return hashlib.sha256(msgspec.json.encode(values)).hexdigest()[:16]

    @property
    def has_current_citations(self) -> bool:
        """Check if the attached citation bundle matches the current fields."""
        return (
            self.citations is not None
            and self.citations.fingerprint == self.fingerprint
        )

    def update(self, **changes: Any) -> "Record":
        """Return a copy with fields replaced.

        The citation bundle is dropped when the change touches any
        bibliographic field value.
        """
        updated = msgspec.structs.replace(self, **changes)
        if updated.citations is not None and not updated.has_current_citations:
            updated = msgspec.structs.replace(updated, citations=None)
        return updated

    def validate(self) -> list["ValidationError"]:
        """Validate this record using the validator registry."""
        from .validators import get_validator_registry

        return get_validator_registry().validate(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using wire names, excluding None values."""
        data = msgspec.to_builtins(self)
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Record":
        """Create a Record from a loosely typed mapping.

        Args:
            data: Record fields as produced by a search or import layer.

        Returns:
            New Record instance.
        """
        from .normalize import normalize_record

        return normalize_record(data)


class ValidationError(msgspec.Struct):
    """Structured validation error information."""

    field: str | None
    message: str
    severity: str = "error"
    record_id: str | None = None
