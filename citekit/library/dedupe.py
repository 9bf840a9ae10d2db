"""Order-preserving source deduplication."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from citekit.core.models import Record

from .identity import key_of

logger = logging.getLogger(__name__)


@dataclass
class DuplicateMatch:
    """A record dropped in favour of an earlier record with the same key."""

    key: str
    kept: Record
    dropped: Record


@dataclass
class DedupeResult:
    """Outcome of a deduplication pass."""

    unique: list[Record] = field(default_factory=list)
    duplicates: list[DuplicateMatch] = field(default_factory=list)

    @property
    def removed_count(self) -> int:
        return len(self.duplicates)


class SourceDeduplicator:
    """Collapse records that share an identity key.

    The first record seen for a key wins and keeps its position; later
    records with the same key are dropped. This is a set reduction, not
    a sort: relative order of kept records never changes.
    """

    def __init__(self, key_func: Callable[[Record], str] = key_of):
        self.key_func = key_func

    def run(self, records: Iterable[Record]) -> DedupeResult:
        """Deduplicate records and report what was dropped."""
        result = DedupeResult()
        seen: dict[str, Record] = {}

        for record in records:
            key = self.key_func(record)
            if key in seen:
                result.duplicates.append(
                    DuplicateMatch(key=key, kept=seen[key], dropped=record)
                )
                continue
            seen[key] = record
            result.unique.append(record)

        if result.duplicates:
            logger.info(
                "Removed %d duplicate source(s), %d unique",
                result.removed_count,
                len(result.unique),
            )
        return result

    def dedupe(self, records: Iterable[Record]) -> list[Record]:
        """Return the unique records in first-seen order."""
        return self.run(records).unique

    def groups(self, records: Iterable[Record]) -> dict[str, list[Record]]:
        """Find groups of records sharing a key.

        Returns:
            Mapping of key to records in input order, for keys with more
            than one record only.
        """
        by_key: dict[str, list[Record]] = {}
        for record in records:
            by_key.setdefault(self.key_func(record), []).append(record)
        return {key: group for key, group in by_key.items() if len(group) > 1}


_default_deduplicator = SourceDeduplicator()


def dedupe(records: Iterable[Record]) -> list[Record]:
    """Deduplicate records by identity key, first occurrence wins."""
    return _default_deduplicator.dedupe(records)
