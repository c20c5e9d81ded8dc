"""In-memory record store keyed by a normalized field."""

from __future__ import annotations

from typing import Hashable, Iterator

from ..core import DatasetSchema, Record
from ..utils import fold_key


class RecordStore:
    """Map normalized keys to :class:`Record` objects.

    A store is built by :class:`~montana_counties.services.loader.DatasetLoader`
    and treated as read-only afterwards; a write to the backing file produces a
    new store rather than patching this one.
    """

    def __init__(self, schema: DatasetSchema):
        self.schema = schema
        self._records: dict[Hashable, Record] = {}

    def insert(self, key: Hashable, record: Record) -> None:
        # last write wins on duplicate keys
        self._records[key] = record

    def get(self, key: Hashable) -> Record | None:
        return self._records.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[tuple[Hashable, Record]]:
        return iter(self._records.items())

    def keys(self) -> list[Hashable]:
        return list(self._records)

    def county_set(self) -> frozenset[str]:
        """Return the folded county names present in the store."""

        field = self.schema.county_field
        return frozenset(fold_key(record[field]) for record in self._records.values())

    def find_by_county(self, county: str) -> Record | None:
        """Return the first record whose county matches ``county``."""

        wanted = fold_key(county)
        field = self.schema.county_field
        for record in self._records.values():
            if fold_key(record[field]) == wanted:
                return record
        return None
