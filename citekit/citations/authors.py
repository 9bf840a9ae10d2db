"""Author list formatting for each citation style.

Names are used exactly as given and in the order given. Only the list
grammar changes between styles: the conjunction, the serial comma, and
the point at which the list is truncated with "et al.".
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

from citekit.core.fields import UNKNOWN_AUTHOR, CitationContext, CitationStyle

ET_AL = "et al."

# IEEE in-text markers are numeric; no running counter is kept here.
IEEE_IN_TEXT_MARKER = "[1]"

# APA references list up to 20 authors, then the first 19, an ellipsis
# and the final author.
APA_MAX_AUTHORS = 20
APA_TRUNCATED_HEAD = 19

# Chicago references list up to 10 authors, then the first 7 and et al.
CHICAGO_MAX_AUTHORS = 10
CHICAGO_TRUNCATED_HEAD = 7


def join_names(names: Sequence[str], conjunction: str) -> str:
    """Join names with a serial comma before the conjunction.

    Two names are joined without a comma ("A and B"); three or more get
    the serial comma ("A, B, and C").
    """
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} {conjunction} {names[1]}"
    return f"{', '.join(names[:-1])}, {conjunction} {names[-1]}"


class AuthorListRenderer:
    """Formats an ordered author list according to style rules."""

    def render(
        self,
        authors: Sequence[str],
        style: CitationStyle | str,
        context: CitationContext | str,
    ) -> str:
        """Format an author list fragment.

        Args:
            authors: Display-ready names in citation order. An empty list
                is rendered as "Unknown".
            style: Target citation style
            context: In-text marker or reference entry

        Returns:
            Author fragment without surrounding punctuation

        Raises:
            InvalidStyleError: If style or context is not recognized
        """
        style = CitationStyle.parse(style)
        context = CitationContext.parse(context)
        names = self._clean(authors)
        in_text = context is CitationContext.IN_TEXT

        match style:
            case CitationStyle.APA:
                if len(names) <= 2:
                    return join_names(names, "&")
                if in_text:
                    return f"{names[0]} {ET_AL}"
                if len(names) > APA_MAX_AUTHORS:
                    head = ", ".join(names[:APA_TRUNCATED_HEAD])
                    return f"{head}, ... {names[-1]}"
                return join_names(names, "&")

            case CitationStyle.MLA:
                if len(names) <= 2:
                    return join_names(names, "and")
                return f"{names[0]} {ET_AL}"

            case CitationStyle.CHICAGO:
                if in_text:
                    if len(names) <= 3:
                        return join_names(names, "and")
                    return f"{names[0]} {ET_AL}"
                if len(names) > CHICAGO_MAX_AUTHORS:
                    head = ", ".join(names[:CHICAGO_TRUNCATED_HEAD])
                    return f"{head}, {ET_AL}"
                return join_names(names, "and")

            case CitationStyle.IEEE:
                if in_text:
                    return IEEE_IN_TEXT_MARKER
                return join_names(names, "and")

            case _:
                assert_never(style)

    def _clean(self, authors: Sequence[str]) -> list[str]:
        names = [name.strip() for name in authors if name and name.strip()]
        return names or [UNKNOWN_AUTHOR]


_default_renderer = AuthorListRenderer()


def format_author_list(
    authors: Sequence[str],
    style: CitationStyle | str,
    context: CitationContext | str,
) -> str:
    """Format an author list with the default renderer."""
    return _default_renderer.render(authors, style, context)
