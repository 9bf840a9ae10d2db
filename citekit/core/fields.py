"""Record field definitions, source kinds and citation style enums."""

from enum import Enum, unique

from .exceptions import InvalidStyleError

# Fields that feed rendering and identity; a change to any of them
# invalidates a precomputed citation bundle.
BIBLIOGRAPHIC_FIELDS = (
    "title",
    "authors",
    "year",
    "journal",
    "volume",
    "issue",
    "pages",
    "doi",
    "url",
    "kind",
)

UNKNOWN_AUTHOR = "Unknown"
NO_DATE = "n.d."


@unique
class SourceKind(Enum):
    """Kind of citable source."""

    ARTICLE = "article"
    BOOK = "book"
    WEBSITE = "website"
    CONFERENCE = "conference"


# Type names seen in search and import payloads (CSL, Crossref, BibTeX)
SOURCE_KIND_ALIASES = {
    "article": SourceKind.ARTICLE,
    "journal": SourceKind.ARTICLE,
    "journal-article": SourceKind.ARTICLE,
    "article-journal": SourceKind.ARTICLE,
    "preprint": SourceKind.ARTICLE,
    "posted-content": SourceKind.ARTICLE,
    "book": SourceKind.BOOK,
    "book-chapter": SourceKind.BOOK,
    "chapter": SourceKind.BOOK,
    "monograph": SourceKind.BOOK,
    "incollection": SourceKind.BOOK,
    "website": SourceKind.WEBSITE,
    "webpage": SourceKind.WEBSITE,
    "web": SourceKind.WEBSITE,
    "online": SourceKind.WEBSITE,
    "conference": SourceKind.CONFERENCE,
    "inproceedings": SourceKind.CONFERENCE,
    "proceedings-article": SourceKind.CONFERENCE,
    "paper-conference": SourceKind.CONFERENCE,
}


@unique
class CitationStyle(Enum):
    """Supported citation styles. The value is the bundle key."""

    APA = "apa"
    MLA = "mla"
    CHICAGO = "chicago"
    IEEE = "ieee"

    @property
    def label(self) -> str:
        """Human readable style name."""
        return _STYLE_LABELS[self]

    @classmethod
    def parse(cls, value: "CitationStyle | str") -> "CitationStyle":
        """Resolve a style from an enum member or a case-insensitive name.

        Raises:
            InvalidStyleError: If the name is not a supported style.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidStyleError("style", value)


_STYLE_LABELS = {
    CitationStyle.APA: "APA",
    CitationStyle.MLA: "MLA",
    CitationStyle.CHICAGO: "Chicago",
    CitationStyle.IEEE: "IEEE",
}


@unique
class CitationContext(Enum):
    """Where a rendered author list or citation is used."""

    IN_TEXT = "in-text"
    REFERENCE = "reference-entry"

    @classmethod
    def parse(cls, value: "CitationContext | str") -> "CitationContext":
        """Resolve a context from an enum member or its name.

        Accepts ``in-text``/``intext`` and ``reference``/``reference-entry``.

        Raises:
            InvalidStyleError: If the name is not a known context.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower().replace("_", "-")
            if name in ("in-text", "intext", "inline"):
                return cls.IN_TEXT
            if name in ("reference", "reference-entry", "bibliography"):
                return cls.REFERENCE
        raise InvalidStyleError("context", value)
