"""Montana county lookup tool."""

from .pipelines import DatasetSession
from .services import CITY_SCHEMA, COUNTY_CODE_SCHEMA

__all__ = ["DatasetSession", "CITY_SCHEMA", "COUNTY_CODE_SCHEMA"]
