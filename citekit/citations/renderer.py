"""Precomputed citation bundles.

CitationRenderer renders every (style, form) combination for a record in
one pass and attaches the result to a copy of the record. Consumers that
insert citations into a document should read from the attached bundle so
that what was shown at insertion time is what is shown later.
"""

from __future__ import annotations

import logging

import msgspec

from citekit.citations.styles import StyleRegistry
from citekit.core.fields import CitationContext, CitationStyle
from citekit.core.models import CitationBundle, FormattedCitation, Record

logger = logging.getLogger(__name__)


class CitationRenderer:
    """Render and cache citations for all supported styles."""

    def __init__(self, registry: StyleRegistry | None = None):
        self.registry = registry or StyleRegistry()

    def render_all(self, record: Record) -> CitationBundle:
        """Render in-text and reference forms for every style.

        A record carrying a current bundle returns that bundle unchanged.

        Args:
            record: Record to render

        Returns:
            Bundle mapping each style key to its two citation forms
        """
        if record.has_current_citations:
            logger.debug("Citation cache hit for %r", record.title)
            return record.citations

        logger.debug("Rendering citations for %r", record.title)
        rendered = {}
        for style in CitationStyle:
            formatter = self.registry.get(style)
            rendered[style.value] = FormattedCitation(
                in_text=formatter.format_in_text(record),
                reference=formatter.format_reference(record),
            )

        return CitationBundle(fingerprint=record.fingerprint, **rendered)

    def enrich(self, record: Record) -> Record:
        """Return a copy of the record with its citation bundle attached."""
        if record.has_current_citations:
            return record
        return msgspec.structs.replace(record, citations=self.render_all(record))

    def enrich_all(self, records: list[Record]) -> list[Record]:
        """Enrich each record, preserving order."""
        return [self.enrich(record) for record in records]

    def cite(
        self,
        record: Record,
        style: CitationStyle | str,
        context: CitationContext | str = CitationContext.IN_TEXT,
    ) -> str:
        """Get one citation string, preferring the record's cached bundle.

        Raises:
            InvalidStyleError: If style or context is not recognized
        """
        citation = self.render_all(record)[style]
        if CitationContext.parse(context) is CitationContext.IN_TEXT:
            return citation.in_text
        return citation.reference


_default_renderer = CitationRenderer()


def render_all(record: Record) -> CitationBundle:
    """Render a citation bundle with the default renderer."""
    return _default_renderer.render_all(record)


def enrich(record: Record) -> Record:
    """Attach a citation bundle with the default renderer."""
    return _default_renderer.enrich(record)
