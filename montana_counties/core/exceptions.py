"""Exception hierarchy for the county dataset domain."""

from __future__ import annotations


class DatasetError(RuntimeError):
    """Raised when a dataset operation cannot be completed."""

    fatal = True

    def __init__(self, message: str, *, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}

    def as_dict(self) -> dict:
        """Return a serializable representation."""
        payload = {"message": str(self)}
        if self.details:
            payload["details"] = self.details
        return payload


class DatasetIOError(DatasetError):
    """The backing file could not be read or written."""


class ParseFailure(DatasetError):
    """A line of the backing file does not match the schema."""


class InvalidUserInput(DatasetError):
    """User supplied text that cannot be used as a key or value."""

    fatal = False
