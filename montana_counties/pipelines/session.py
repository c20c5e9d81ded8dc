"""Own the current record store for one backing file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..core import AddOutcome, DatasetSchema, Record
from ..services import (
    AddRecordFlow,
    DatasetLoader,
    DatasetWriter,
    LookupQuery,
    RecordStore,
)
from ..utils import title_case

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DatasetSession:
    """Hold one store at a time and swap it wholesale after a write."""

    path: Path
    loader: DatasetLoader
    writer: DatasetWriter
    lookup: LookupQuery
    add_flow: AddRecordFlow
    store: RecordStore
    county_set: frozenset[str]

    @property
    def schema(self) -> DatasetSchema:
        return self.store.schema

    def find(self, raw_input: str) -> Record | None:
        return self.lookup.find(self.store, raw_input)

    def add(self, new_key: str, county: str) -> AddOutcome:
        outcome = self.add_flow.add(self.store, self.county_set, self.path, new_key, county)
        if outcome.added:
            self.store = outcome.store
            self.county_set = outcome.county_set
        return outcome

    def counties(self) -> list[str]:
        """Return the known county names for display, sorted."""
        return [title_case(name) for name in sorted(self.county_set)]

    @classmethod
    def open(
        cls,
        schema: DatasetSchema,
        path: Path | str,
        *,
        encoding: str | None = None,
        skip_malformed: bool = False,
    ) -> "DatasetSession":
        path = Path(path)
        loader = DatasetLoader(schema, encoding=encoding, skip_malformed=skip_malformed)
        writer = DatasetWriter(schema, encoding=loader.encoding)
        store = loader.load(path)
        logger.info("Opened %s dataset at %s (%d records)", schema.name, path, len(store))
        return cls(
            path=path,
            loader=loader,
            writer=writer,
            lookup=LookupQuery(),
            add_flow=AddRecordFlow(loader=loader, writer=writer),
            store=store,
            county_set=store.county_set(),
        )
