"""Domain models shared by the loader, writer and lookup services."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Hashable, Iterator, Mapping, Sequence

if TYPE_CHECKING:
    from ..services.store import RecordStore


@dataclass(frozen=True, slots=True)
class DatasetSchema:
    """Describe the layout of one comma separated dataset.

    ``fields`` lists the column names in file order. ``key_field`` names the
    column used to index records and ``normalize_key`` turns raw text from that
    column (or from the user) into the stored key. ``display_fields`` are
    written back in title case; every other field is written as stored.
    """

    name: str
    fields: tuple[str, ...]
    key_field: str
    normalize_key: Callable[[str], Hashable]
    county_field: str = "county"
    display_fields: frozenset[str] = frozenset()
    labels: Mapping[str, str] = field(default_factory=dict)
    editable: bool = False

    def __post_init__(self) -> None:
        for name in (self.key_field, self.county_field, *self.display_fields):
            if name not in self.fields:
                raise ValueError(f"{name!r} is not a field of schema {self.name!r}")

    @property
    def width(self) -> int:
        return len(self.fields)

    def label(self, name: str) -> str:
        return self.labels.get(name, name)


@dataclass(frozen=True, slots=True)
class Record:
    """Immutable set of named string fields describing one dataset entry."""

    values: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @classmethod
    def from_values(cls, schema: DatasetSchema, values: Sequence[str]) -> "Record":
        if len(values) < schema.width:
            raise ValueError(
                f"expected {schema.width} fields, got {len(values)}"
            )
        return cls(values=dict(zip(schema.fields, values)))

    def __hash__(self) -> int:
        return hash(frozenset(self.values.items()))

    def __getitem__(self, name: str) -> str:
        return self.values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.values.get(name, default)

    def replace(self, **changes: str) -> "Record":
        """Return a new record with ``changes`` applied."""
        merged = dict(self.values)
        merged.update(changes)
        return Record(values=merged)

    def as_dict(self) -> dict[str, str]:
        return dict(self.values)


class AddStatus(str, enum.Enum):
    ADDED = "added"
    NOT_A_VALID_COUNTY = "not_a_valid_county"
    ALREADY_PRESENT = "already_present"
    INTERNAL_INCONSISTENCY = "internal_inconsistency"


@dataclass(slots=True)
class AddOutcome:
    """Result of an attempt to append a record to a dataset.

    On ``ADDED`` the outcome carries the store and county set reloaded from
    the backing file; callers replace their own copies with them.
    """

    status: AddStatus
    key: Hashable | None = None
    record: Record | None = None
    store: RecordStore | None = None
    county_set: frozenset[str] | None = None

    @property
    def added(self) -> bool:
        return self.status is AddStatus.ADDED
