"""Citation rendering for APA, MLA, Chicago and IEEE styles.

This module provides author list formatting, in-text markers, reference
list entries, and precomputed citation bundles cached on records.
"""

from citekit.citations.authors import (
    ET_AL,
    IEEE_IN_TEXT_MARKER,
    AuthorListRenderer,
    format_author_list,
    join_names,
)
from citekit.citations.renderer import (
    CitationRenderer,
    enrich,
    render_all,
)
from citekit.citations.styles import (
    APAStyle,
    BaseStyle,
    ChicagoStyle,
    IEEEStyle,
    InTextMarkerComposer,
    MLAStyle,
    ReferenceEntryComposer,
    StyleRegistry,
    format_citation,
    format_in_text,
    format_reference,
)

__all__ = [
    # Authors
    "AuthorListRenderer",
    "format_author_list",
    "join_names",
    "ET_AL",
    "IEEE_IN_TEXT_MARKER",
    # Styles
    "BaseStyle",
    "APAStyle",
    "MLAStyle",
    "ChicagoStyle",
    "IEEEStyle",
    "StyleRegistry",
    "InTextMarkerComposer",
    "ReferenceEntryComposer",
    "format_in_text",
    "format_reference",
    "format_citation",
    # Renderer
    "CitationRenderer",
    "render_all",
    "enrich",
]
