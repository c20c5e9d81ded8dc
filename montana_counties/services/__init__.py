"""Service layer exports."""

from .schemas import CITY_SCHEMA, COUNTY_CODE_SCHEMA, HEADER_MARKER, SCHEMAS
from .store import RecordStore
from .loader import DatasetLoader
from .writer import DatasetWriter
from .lookup import LookupQuery
from .add_record import AddRecordFlow

__all__ = [
    "CITY_SCHEMA",
    "COUNTY_CODE_SCHEMA",
    "HEADER_MARKER",
    "SCHEMAS",
    "RecordStore",
    "DatasetLoader",
    "DatasetWriter",
    "LookupQuery",
    "AddRecordFlow",
]
