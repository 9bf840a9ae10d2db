"""Normalization of loosely typed source payloads into Records.

Search results, manual entry forms and imports all describe sources with
slightly different keys and value types. RecordNormalizer resolves those
variations exactly once, at the boundary, so that nothing downstream ever
has to re-resolve a legacy field. Normalization never raises for missing
or malformed values; it degrades to empty fields instead.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

import msgspec

from .fields import SOURCE_KIND_ALIASES, SourceKind
from .models import CitationBundle, Record

logger = logging.getLogger(__name__)

DOI_PREFIXES = (
    "https://doi.org/",
    "http://doi.org/",
    "https://dx.doi.org/",
    "http://dx.doi.org/",
    "doi:",
)

_YEAR_PATTERN = re.compile(r"(?<!\d)(\d{4})(?!\d)")


def strip_doi_prefix(doi: str) -> str:
    """Remove a resolver URL or ``doi:`` prefix, keeping the original case."""
    doi = doi.strip()
    lowered = doi.lower()
    for prefix in DOI_PREFIXES:
        if lowered.startswith(prefix):
            return doi[len(prefix) :].strip()
    return doi


def split_author_string(text: str) -> tuple[str, ...]:
    """Split a legacy comma-separated author string.

    This is a best-effort split: a single name without commas yields a
    one-element tuple, and blank segments are dropped.
    """
    return tuple(part.strip() for part in text.split(",") if part.strip())


def resolve_year(value: Any) -> int | None:
    """Extract a publication year from an int, string, or CSL date.

    Returns:
        The year, or None when no plausible four-digit year is present.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float):
        return int(value) if value.is_integer() and value > 0 else None
    if isinstance(value, str):
        match = _YEAR_PATTERN.search(value)
        return int(match.group(1)) if match else None
    if isinstance(value, Mapping):
        # CSL: {"date-parts": [[2015, 5, 28]]}
        parts = value.get("date-parts") or value.get("dateParts")
        if isinstance(parts, list | tuple) and parts:
            return resolve_year(parts[0])
        return None
    if isinstance(value, list | tuple) and value:
        return resolve_year(value[0])
    return None


class RecordNormalizer:
    """Convert external record mappings into Records.

    Accepts camelCase and snake_case keys, CSL and Crossref field names,
    and the legacy single-string ``author`` field.
    """

    TITLE_KEYS = ("title",)
    YEAR_KEYS = ("year", "publication_year", "publicationYear", "issued")
    JOURNAL_KEYS = ("journal", "container-title", "containerTitle", "venue")
    ISSUE_KEYS = ("issue", "number")
    KIND_KEYS = ("sourceKind", "source_kind", "kind", "type")
    CITATION_KEYS = ("precomputedCitations", "precomputed_citations", "citations")

    def normalize(self, data: Mapping[str, Any] | Record) -> Record:
        """Build a Record from a loosely typed mapping.

        Args:
            data: Mapping of record fields. A Record is returned unchanged.

        Returns:
            Normalized Record.

        Raises:
            TypeError: If data is not a mapping.
        """
        if isinstance(data, Record):
            return data
        if not isinstance(data, Mapping):
            raise TypeError(
                f"Record data must be a mapping, not {type(data).__name__}"
            )

        return Record(
            title=self._text(self._first(data, self.TITLE_KEYS)) or "",
            authors=self.resolve_authors(data),
            year=resolve_year(self._first(data, self.YEAR_KEYS)),
            journal=self._text(self._first(data, self.JOURNAL_KEYS)),
            volume=self._text(data.get("volume")),
            issue=self._text(self._first(data, self.ISSUE_KEYS)),
            pages=self._text(data.get("pages") or data.get("page")),
            doi=self._doi(data.get("doi")),
            url=self._text(data.get("url")),
            kind=self._kind(self._first(data, self.KIND_KEYS)),
            id=self._text(data.get("id")),
            abstract=self._text(data.get("abstract")),
            source=self._text(data.get("source")),
            citations=self._citations(self._first(data, self.CITATION_KEYS)),
        )

    def resolve_authors(self, data: Mapping[str, Any]) -> tuple[str, ...]:
        """Resolve the author list.

        A non-empty ``authors`` value is authoritative. Otherwise the
        legacy ``author`` value is used, split on commas when it is a
        string.
        """
        authors = self._author_list(data.get("authors"))
        if authors:
            return authors

        legacy = data.get("author")
        if legacy:
            logger.debug("Resolving authors from legacy 'author' field")
        return self._author_list(legacy)

    def _author_list(self, value: Any) -> tuple[str, ...]:
        if not value:
            return ()
        if isinstance(value, str):
            return split_author_string(value)
        if isinstance(value, list | tuple):
            names = (self._author_name(item) for item in value)
            return tuple(name for name in names if name)
        return ()

    def _author_name(self, item: Any) -> str:
        if isinstance(item, str):
            return item.strip()
        if isinstance(item, Mapping):
            for key in ("literal", "name", "display_name", "displayName"):
                if isinstance(item.get(key), str) and item[key].strip():
                    return item[key].strip()
            # CSL name parts
            parts = [item.get("given"), item.get("family")]
            return " ".join(p.strip() for p in parts if isinstance(p, str) and p.strip())
        return ""

    def _first(self, data: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
        for key in keys:
            value = data.get(key)
            if value is not None and value != "":
                return value
        return None

    def _text(self, value: Any) -> str | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, list | tuple):
            # Crossref wraps titles and container titles in lists
            return self._text(value[0]) if value else None
        if isinstance(value, str | int | float):
            text = str(value).strip()
            return text or None
        return None

    def _doi(self, value: Any) -> str | None:
        text = self._text(value)
        if text is None:
            return None
        return strip_doi_prefix(text) or None

    def _kind(self, value: Any) -> SourceKind:
        if isinstance(value, SourceKind):
            return value
        if isinstance(value, str):
            kind = SOURCE_KIND_ALIASES.get(value.strip().lower())
            if kind is not None:
                return kind
            logger.debug("Unknown source kind %r, using article", value)
        return SourceKind.ARTICLE

    def _citations(self, value: Any) -> CitationBundle | None:
        if value is None:
            return None
        if isinstance(value, CitationBundle):
            return value
        try:
            return msgspec.convert(value, CitationBundle)
        except msgspec.ValidationError as e:
            # Bundles without a fingerprint cannot be trusted; they are
            # re-rendered on demand.
            logger.debug("Discarding precomputed citations: %s", e)
            return None


_default_normalizer = RecordNormalizer()


def normalize_record(data: Mapping[str, Any] | Record) -> Record:
    """Normalize one record mapping with the default normalizer."""
    return _default_normalizer.normalize(data)


def normalize_records(items: list[Mapping[str, Any] | Record]) -> list[Record]:
    """Normalize a list of record mappings, preserving order."""
    return [_default_normalizer.normalize(item) for item in items]
