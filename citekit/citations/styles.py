"""Citation style formatting.

Each style class renders the two citation forms for a Record: the short
in-text marker and the full reference-list entry. Optional fields add
their own label and separator only when present, so a missing field
never leaves stray punctuation behind.
"""

from __future__ import annotations

from typing import ClassVar, assert_never

from citekit.citations.authors import IEEE_IN_TEXT_MARKER, AuthorListRenderer
from citekit.core.fields import CitationContext, CitationStyle
from citekit.core.models import Record

TERMINAL_PUNCTUATION = (".", "?", "!")


def terminate(text: str) -> str:
    """End text with a period unless it already ends a sentence."""
    text = text.rstrip()
    if text.endswith(TERMINAL_PUNCTUATION):
        return text
    return f"{text}."


def join_present(parts: list[str | None], separator: str = ", ") -> str:
    """Join the non-empty parts."""
    return separator.join(part for part in parts if part)


class BaseStyle:
    """Base class for citation styles."""

    style: ClassVar[CitationStyle]

    def __init__(self, author_renderer: AuthorListRenderer | None = None):
        """Initialize style with an author list renderer."""
        self.author_renderer = author_renderer or AuthorListRenderer()

    def format_in_text(self, record: Record) -> str:
        """Format in-text citation marker."""
        raise NotImplementedError

    def format_reference(self, record: Record) -> str:
        """Format reference list entry."""
        raise NotImplementedError

    def _authors(self, record: Record, context: CitationContext) -> str:
        return self.author_renderer.render(
            record.resolved_authors, self.style, context
        )


class APAStyle(BaseStyle):
    """APA (American Psychological Association) citation style."""

    style = CitationStyle.APA

    def format_in_text(self, record: Record) -> str:
        """Format APA in-text citation: ``(Authors, Year)``."""
        authors = self._authors(record, CitationContext.IN_TEXT)
        return f"({authors}, {record.display_year})"

    def format_reference(self, record: Record) -> str:
        """Format APA reference entry.

        ``Authors (Year). Title. Journal, Volume(Issue), Pages. https://doi.org/DOI``
        """
        authors = self._authors(record, CitationContext.REFERENCE)
        result = f"{authors} ({record.display_year})."

        if record.title:
            result += f" {terminate(record.title)}"

        volume = record.volume or ""
        if record.issue:
            volume += f"({record.issue})"
        source = join_present([record.journal, volume, record.pages])
        if source:
            result += f" {terminate(source)}"

        if record.doi:
            result += f" https://doi.org/{record.doi}"
        elif record.url:
            result += f" {record.url}"

        return result


class MLAStyle(BaseStyle):
    """MLA (Modern Language Association) citation style."""

    style = CitationStyle.MLA

    def format_in_text(self, record: Record) -> str:
        """Format MLA in-text citation (authors only, no year)."""
        return f"({self._authors(record, CitationContext.IN_TEXT)})"

    def format_reference(self, record: Record) -> str:
        """Format MLA works-cited entry.

        ``Authors. "Title." Journal, vol. Volume, no. Issue, Year, pp. Pages.``
        """
        parts = [terminate(self._authors(record, CitationContext.REFERENCE))]

        if record.title:
            parts.append(f'"{terminate(record.title)}"')

        container = join_present(
            [
                record.journal,
                f"vol. {record.volume}" if record.volume else None,
                f"no. {record.issue}" if record.issue else None,
                str(record.display_year),
                f"pp. {record.pages}" if record.pages else None,
            ]
        )
        parts.append(terminate(container))

        return " ".join(parts)


class ChicagoStyle(BaseStyle):
    """Chicago Manual of Style, author-date system."""

    style = CitationStyle.CHICAGO

    def format_in_text(self, record: Record) -> str:
        """Format Chicago in-text citation: ``(Authors Year)``."""
        authors = self._authors(record, CitationContext.IN_TEXT)
        return f"({authors} {record.display_year})"

    def format_reference(self, record: Record) -> str:
        """Format Chicago reference list entry.

        ``Authors. Year. "Title." Journal Volume (Issue): Pages.``
        """
        parts = [
            terminate(self._authors(record, CitationContext.REFERENCE)),
            terminate(str(record.display_year)),
        ]

        if record.title:
            parts.append(f'"{terminate(record.title)}"')

        source = join_present(
            [
                record.journal,
                record.volume,
                f"({record.issue})" if record.issue else None,
            ],
            separator=" ",
        )
        if record.pages:
            source = f"{source}: {record.pages}" if source else record.pages
        if source:
            parts.append(terminate(source))

        return " ".join(parts)


class IEEEStyle(BaseStyle):
    """IEEE citation style."""

    style = CitationStyle.IEEE

    def format_in_text(self, record: Record) -> str:
        """Format IEEE in-text citation.

        Always the fixed marker ``[1]``; numbering by position in a
        document belongs to the document layer.
        """
        return IEEE_IN_TEXT_MARKER

    def format_reference(self, record: Record) -> str:
        """Format IEEE reference entry.

        ``[1] Authors, "Title," Journal, vol. Volume, no. Issue, pp. Pages, Year.``
        """
        authors = self._authors(record, CitationContext.REFERENCE)
        result = f"{IEEE_IN_TEXT_MARKER} {authors},"

        if record.title:
            title = record.title.rstrip()
            if title.endswith(TERMINAL_PUNCTUATION):
                result += f' "{title}"'
            else:
                result += f' "{title},"'

        details = join_present(
            [
                record.journal,
                f"vol. {record.volume}" if record.volume else None,
                f"no. {record.issue}" if record.issue else None,
                f"pp. {record.pages}" if record.pages else None,
                str(record.display_year),
            ]
        )
        return f"{result} {terminate(details)}"


class StyleRegistry:
    """Registry of style formatter instances, one per CitationStyle."""

    def __init__(self, author_renderer: AuthorListRenderer | None = None):
        self.author_renderer = author_renderer or AuthorListRenderer()
        self._styles: dict[CitationStyle, BaseStyle] = {}

    def get(self, style: CitationStyle | str) -> BaseStyle:
        """Get the formatter for a style.

        Raises:
            InvalidStyleError: If style is not a supported style
        """
        style = CitationStyle.parse(style)
        if style not in self._styles:
            self._styles[style] = self._create(style)
        return self._styles[style]

    def _create(self, style: CitationStyle) -> BaseStyle:
        match style:
            case CitationStyle.APA:
                return APAStyle(self.author_renderer)
            case CitationStyle.MLA:
                return MLAStyle(self.author_renderer)
            case CitationStyle.CHICAGO:
                return ChicagoStyle(self.author_renderer)
            case CitationStyle.IEEE:
                return IEEEStyle(self.author_renderer)
            case _:
                assert_never(style)

    def list_styles(self) -> list[CitationStyle]:
        """List supported styles."""
        return list(CitationStyle)


class InTextMarkerComposer:
    """Compose in-text citation markers."""

    def __init__(self, registry: StyleRegistry | None = None):
        self.registry = registry or StyleRegistry()

    def compose(self, record: Record, style: CitationStyle | str) -> str:
        return self.registry.get(style).format_in_text(record)


class ReferenceEntryComposer:
    """Compose reference list entries."""

    def __init__(self, registry: StyleRegistry | None = None):
        self.registry = registry or StyleRegistry()

    def compose(self, record: Record, style: CitationStyle | str) -> str:
        return self.registry.get(style).format_reference(record)


_default_registry = StyleRegistry()


def format_in_text(record: Record, style: CitationStyle | str) -> str:
    """Format an in-text citation marker with the default styles."""
    return _default_registry.get(style).format_in_text(record)


def format_reference(record: Record, style: CitationStyle | str) -> str:
    """Format a reference list entry with the default styles."""
    return _default_registry.get(style).format_reference(record)


def format_citation(
    record: Record,
    style: CitationStyle | str,
    context: CitationContext | str,
) -> str:
    """Format a record in the given style and context.

    Raises:
        InvalidStyleError: If style or context is not recognized
    """
    match CitationContext.parse(context):
        case CitationContext.IN_TEXT:
            return format_in_text(record, style)
        case CitationContext.REFERENCE:
            return format_reference(record, style)
        case unknown:
            assert_never(unknown)
