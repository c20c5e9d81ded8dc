"""Keyed lookups against a record store."""

from __future__ import annotations

from typing import Iterable

from ..core import Record
from .store import RecordStore


class LookupQuery:
    """Resolve raw user input to a record."""

    def find(self, store: RecordStore, raw_input: str) -> Record | None:
        """Return the record for ``raw_input`` or ``None`` when absent.

        Raises :class:`~montana_counties.core.exceptions.InvalidUserInput` when
        the input cannot be normalized into a key for the store's schema.
        """

        key = store.schema.normalize_key(raw_input)
        return store.get(key)

    @staticmethod
    def project(store: RecordStore, record: Record, fields: Iterable[str]) -> list[tuple[str, str]]:
        """Return ``(label, value)`` pairs for the requested fields."""

        schema = store.schema
        return [(schema.label(name), record[name]) for name in fields]
