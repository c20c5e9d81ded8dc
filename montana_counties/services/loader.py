"""Dataset loading service."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from ..core import DatasetSchema, Record
from ..core.exceptions import DatasetError, DatasetIOError, ParseFailure
from ..utils import check_encoding, resolve_encoding
from .schemas import HEADER_MARKER
from .store import RecordStore

logger = logging.getLogger(__name__)


class DatasetLoader:
    """Parse a comma separated dataset into a :class:`RecordStore`.

    Lines are split on commas with no quote handling. Any row whose first
    field equals ``header_marker`` is treated as a header and skipped, even
    when it is not the first line of the file.
    """

    def __init__(
        self,
        schema: DatasetSchema,
        *,
        encoding: str | None = None,
        header_marker: str = HEADER_MARKER,
        skip_malformed: bool = False,
    ):
        self.schema = schema
        try:
            self.encoding = check_encoding(encoding or "utf-8-sig")
        except LookupError as exc:
            raise DatasetError(f"Unknown encoding: {encoding}", details={"encoding": encoding}) from exc
        self.header_marker = header_marker
        self.skip_malformed = skip_malformed

    def load(self, path: Path | str) -> RecordStore:
        path = Path(path)
        store = RecordStore(self.schema)

        try:
            encoding = resolve_encoding(path, self.encoding)
            with path.open("r", encoding=encoding, newline="") as handle:
                reader = csv.reader(handle, quoting=csv.QUOTE_NONE)
                for values in reader:
                    self._load_row(store, values, path, reader.line_num)
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            raise DatasetIOError(
                f"Error reading file: {exc}", details={"path": str(path)}
            ) from exc

        logger.debug("Loaded %d %s records from %s", len(store), self.schema.name, path)
        return store

    def _load_row(self, store: RecordStore, values: list[str], path: Path, line_num: int) -> None:
        if not any(value.strip() for value in values):
            return
        if values[0] == self.header_marker:
            return

        try:
            record = Record.from_values(self.schema, values)
            key = self.schema.normalize_key(record[self.schema.key_field])
        except (ValueError, DatasetError) as exc:
            failure = ParseFailure(
                f"Malformed line {line_num} in {path}: {exc}",
                details={"path": str(path), "line": line_num, "values": values},
            )
            if not self.skip_malformed:
                raise failure from exc
            logger.warning("Skipping %s", failure)
            return

        store.insert(key, record)
