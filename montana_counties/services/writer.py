"""Append records to a dataset file."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core import DatasetSchema, Record
from ..core.exceptions import DatasetError, DatasetIOError, InvalidUserInput
from ..utils import check_encoding, ends_with_newline, resolve_encoding, title_case

logger = logging.getLogger(__name__)

_FORBIDDEN = (",", "\n", "\r")


class DatasetWriter:
    """Write single records to the end of a backing file."""

    def __init__(self, schema: DatasetSchema, *, encoding: str = "utf-8"):
        self.schema = schema
        try:
            self.encoding = check_encoding(encoding)
        except LookupError as exc:
            raise DatasetError(f"Unknown encoding: {encoding}", details={"encoding": encoding}) from exc

    def format_line(self, record: Record) -> str:
        values = []
        for name in self.schema.fields:
            value = record[name]
            if any(token in value for token in _FORBIDDEN):
                raise InvalidUserInput(
                    f"{self.schema.label(name)} may not contain commas or line breaks",
                    details={"field": name, "value": value},
                )
            if name in self.schema.display_fields:
                value = title_case(value)
            values.append(value)
        return ",".join(values) + "\n"

    def append(self, path: Path | str, record: Record) -> None:
        path = Path(path)
        line = self.format_line(record)

        try:
            encoding = resolve_encoding(path, self.encoding)
            if path.exists() and not ends_with_newline(path):
                line = "\n" + line
            try:
                line.encode(encoding)
            except UnicodeEncodeError as exc:
                raise InvalidUserInput(
                    f"Record cannot be written in the {encoding} encoding of {path.name}",
                    details={"path": str(path), "encoding": encoding},
                ) from exc
            with path.open("a", encoding=encoding, newline="") as handle:
                handle.write(line)
        except (OSError, LookupError) as exc:
            raise DatasetIOError(
                f"Error writing to file: {exc}", details={"path": str(path)}
            ) from exc

        logger.info("Appended %s record to %s", self.schema.name, path)
