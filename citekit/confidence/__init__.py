"""Citation confidence analysis result shapes."""

from citekit.confidence.models import (
    CitationBreakdown,
    ConfidenceAnalysis,
    ConfidenceScore,
    ConfidenceStatus,
    RecencyAnalysis,
    decode_confidence,
    decode_recency,
)

__all__ = [
    "ConfidenceStatus",
    "ConfidenceScore",
    "CitationBreakdown",
    "ConfidenceAnalysis",
    "RecencyAnalysis",
    "decode_confidence",
    "decode_recency",
]
