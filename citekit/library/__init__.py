"""Source identity, deduplication and saved-source collections."""

from citekit.library.dedupe import (
    DedupeResult,
    DuplicateMatch,
    SourceDeduplicator,
    dedupe,
)
from citekit.library.identity import key_of, normalize_doi, normalize_text
from citekit.library.saved import SavedSources

__all__ = [
    "key_of",
    "normalize_doi",
    "normalize_text",
    "SourceDeduplicator",
    "DedupeResult",
    "DuplicateMatch",
    "dedupe",
    "SavedSources",
]
