"""Core domain primitives for the county lookup tool."""

from .models import AddOutcome, AddStatus, DatasetSchema, Record
from .exceptions import DatasetError, DatasetIOError, InvalidUserInput, ParseFailure

__all__ = [
    "AddOutcome",
    "AddStatus",
    "DatasetSchema",
    "Record",
    "DatasetError",
    "DatasetIOError",
    "InvalidUserInput",
    "ParseFailure",
]
