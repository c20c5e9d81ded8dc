"""Append-then-reload flow for adding records to an editable dataset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..core import AddOutcome, AddStatus
from ..core.exceptions import DatasetError
from ..utils import fold_key, require_text
from .loader import DatasetLoader
from .store import RecordStore
from .writer import DatasetWriter

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AddRecordFlow:
    """Validate, append and reload a new key/county association.

    The live store is never modified. A successful outcome carries a store
    freshly parsed from the backing file so the file stays the single source
    of truth.
    """

    loader: DatasetLoader
    writer: DatasetWriter

    def add(
        self,
        store: RecordStore,
        county_set: frozenset[str],
        path: Path | str,
        new_key: str,
        candidate_county: str,
    ) -> AddOutcome:
        schema = store.schema
        if not schema.editable:
            raise DatasetError(f"The {schema.name} dataset does not accept new records")

        county = fold_key(candidate_county)
        if county not in county_set:
            logger.info("Rejected unknown county %r", candidate_county)
            return AddOutcome(status=AddStatus.NOT_A_VALID_COUNTY)

        key = schema.normalize_key(new_key)
        if key in store:
            return AddOutcome(status=AddStatus.ALREADY_PRESENT, key=key, record=store.get(key))

        template = store.find_by_county(county)
        if template is None:
            logger.error("County %r is in the county set but matches no record", county)
            return AddOutcome(status=AddStatus.INTERNAL_INCONSISTENCY, key=key)

        record = template.replace(**{schema.key_field: require_text(new_key)})
        self.writer.append(path, record)

        reloaded = self.loader.load(path)
        added = reloaded.get(key)
        if added is None:
            logger.error("Appended %r to %s but it is missing after reload", key, path)
            return AddOutcome(status=AddStatus.INTERNAL_INCONSISTENCY, key=key, record=record)

        logger.info("Added %r to the %s dataset", key, schema.name)
        return AddOutcome(
            status=AddStatus.ADDED,
            key=key,
            record=added,
            store=reloaded,
            county_set=reloaded.county_set(),
        )
