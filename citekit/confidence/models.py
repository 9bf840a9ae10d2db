"""Citation confidence analysis contract.

The scores are computed by a remote service; this module only defines
and validates the shape it returns so that display layers can rely on
it. Field names follow the service's camelCase JSON.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

import msgspec

from citekit.core.exceptions import ConfidenceFormatError

Score = Annotated[float, msgspec.Meta(ge=0, le=100)]
Count = Annotated[int, msgspec.Meta(ge=0)]


class ConfidenceStatus(str, Enum):
    """Overall verdict for a document's citations."""

    STRONG = "strong"
    GOOD = "good"
    WEAK = "weak"
    POOR = "poor"


class ConfidenceScore(msgspec.Struct, frozen=True, rename="camel"):
    """Overall score with its four sub-scores."""

    overall: Score
    recency_score: Score
    coverage_score: Score
    quality_score: Score
    diversity_score: Score
    status: ConfidenceStatus
    warnings: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()

    def sub_scores(self) -> dict[str, float]:
        """Sub-scores keyed by display name."""
        return {
            "Recency": self.recency_score,
            "Coverage": self.coverage_score,
            "Quality": self.quality_score,
            "Diversity": self.diversity_score,
        }


class CitationBreakdown(msgspec.Struct, frozen=True):
    """Citation counts by age bucket."""

    recent: Count = 0
    acceptable: Count = 0
    dated: Count = 0
    outdated: Count = 0

    @property
    def total(self) -> int:
        return self.recent + self.acceptable + self.dated + self.outdated


class ConfidenceAnalysis(msgspec.Struct, frozen=True, rename="camel"):
    """Confidence analysis for one document."""

    total_citations: Count
    overall_confidence: ConfidenceScore
    citation_breakdown: CitationBreakdown


class RecencyAnalysis(msgspec.Struct, frozen=True, rename="camel"):
    """Recency-only analysis for one document."""

    breakdown: CitationBreakdown
    total_citations: Count
    has_recent_citations: bool
    warning: str | None = None


def _decode(data: bytes | str | dict[str, Any], type_: type) -> Any:
    try:
        if isinstance(data, bytes | str):
            return msgspec.json.decode(data, type=type_)
        return msgspec.convert(data, type_)
    except (msgspec.ValidationError, msgspec.DecodeError) as e:
        raise ConfidenceFormatError(str(e)) from e


def decode_confidence(data: bytes | str | dict[str, Any]) -> ConfidenceAnalysis:
    """Decode a confidence analysis from JSON or a parsed mapping.

    Raises:
        ConfidenceFormatError: If the payload does not match the contract
    """
    return _decode(data, ConfidenceAnalysis)


def decode_recency(data: bytes | str | dict[str, Any]) -> RecencyAnalysis:
    """Decode a recency analysis from JSON or a parsed mapping.

    Raises:
        ConfidenceFormatError: If the payload does not match the contract
    """
    return _decode(data, RecencyAnalysis)
