"""Schemas for the bundled Montana datasets."""

from __future__ import annotations

from ..core import DatasetSchema
from ..utils import parse_county_code, require_text

HEADER_MARKER = "County"

# CountyName,CountySeat,CountyCode
COUNTY_CODE_SCHEMA = DatasetSchema(
    name="county codes",
    fields=("county", "seat", "code"),
    key_field="code",
    normalize_key=parse_county_code,
    display_fields=frozenset({"county", "seat"}),
    labels={"county": "County", "seat": "County Seat", "code": "County Code"},
)

# CountyName,CityName,LicensePlatePrefix
CITY_SCHEMA = DatasetSchema(
    name="cities",
    fields=("county", "city", "prefix"),
    key_field="city",
    normalize_key=require_text,
    display_fields=frozenset({"county", "city"}),
    labels={"county": "County", "city": "City", "prefix": "License Plate Prefix"},
    editable=True,
)

SCHEMAS = {
    "codes": COUNTY_CODE_SCHEMA,
    "cities": CITY_SCHEMA,
}
