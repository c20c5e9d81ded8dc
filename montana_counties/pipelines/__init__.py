"""Pipeline exports."""

from .session import DatasetSession

__all__ = ["DatasetSession"]
