"""Saved-source collections keyed by canonical identity.

Membership is tracked by identity key rather than by record object or
backend id, so the same paper fetched once from search and once from the
library is one addressable entry for add, remove and toggle.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from datetime import datetime

import msgspec

from citekit.core.models import Record

from .identity import key_of


class SavedSources(msgspec.Struct, frozen=True, kw_only=True):
    """Immutable named set of saved sources.

    Every mutating operation returns a new instance; keys keep the order
    in which sources were saved.
    """

    id: uuid.UUID = msgspec.field(default_factory=uuid.uuid4)
    name: str
    keys: tuple[str, ...] = ()

    created: datetime = msgspec.field(default_factory=datetime.now)
    modified: datetime = msgspec.field(default_factory=datetime.now)

    def __len__(self) -> int:
        return len(self.keys)

    def contains(self, record: Record) -> bool:
        """Check if a source is saved."""
        return key_of(record) in self.keys

    def add(self, record: Record) -> SavedSources:
        """Save a source. Saving an already saved source is a no-op."""
        key = key_of(record)
        if key in self.keys:
            return self
        return msgspec.structs.replace(
            self, keys=self.keys + (key,), modified=datetime.now()
        )

    def remove(self, record: Record) -> SavedSources:
        """Unsave a source. Removing an unsaved source is a no-op."""
        key = key_of(record)
        if key not in self.keys:
            return self
        return msgspec.structs.replace(
            self,
            keys=tuple(k for k in self.keys if k != key),
            modified=datetime.now(),
        )

    def toggle(self, record: Record) -> SavedSources:
        """Save the source if unsaved, otherwise unsave it."""
        if self.contains(record):
            return self.remove(record)
        return self.add(record)

    def filter(self, records: Iterable[Record]) -> list[Record]:
        """Return the saved records among ``records``, in input order."""
        return [record for record in records if key_of(record) in self.keys]
