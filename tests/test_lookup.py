from __future__ import annotations

from pathlib import Path

import pytest

from montana_counties.core import InvalidUserInput, Record
from montana_counties.services import CITY_SCHEMA, COUNTY_CODE_SCHEMA, DatasetLoader, LookupQuery


def test_find_by_code(codes_csv: Path):
    store = DatasetLoader(COUNTY_CODE_SCHEMA).load(codes_csv)
    query = LookupQuery()

    assert query.find(store, "56")["county"] == "Yellowstone"
    assert query.find(store, " 56 ")["seat"] == "Billings"
    assert query.find(store, "999") is None


def test_find_code_rejects_non_numeric_input(codes_csv: Path):
    store = DatasetLoader(COUNTY_CODE_SCHEMA).load(codes_csv)

    with pytest.raises(InvalidUserInput):
        LookupQuery().find(store, "yellowstone")


def test_find_city_is_case_insensitive(cities_csv: Path):
    store = DatasetLoader(CITY_SCHEMA).load(cities_csv)

    record = LookupQuery().find(store, "  GREAT falls ")

    assert record == Record({"county": "Cascade", "city": "Great Falls", "prefix": "2"})
    assert LookupQuery().find(store, "Helena") is None


def test_find_rejects_blank_input(cities_csv: Path):
    store = DatasetLoader(CITY_SCHEMA).load(cities_csv)

    with pytest.raises(InvalidUserInput):
        LookupQuery().find(store, "   ")


def test_find_does_not_change_store(cities_csv: Path):
    store = DatasetLoader(CITY_SCHEMA).load(cities_csv)
    before = list(store)

    LookupQuery().find(store, "missoula")

    assert list(store) == before


def test_project_returns_labelled_values(cities_csv: Path):
    store = DatasetLoader(CITY_SCHEMA).load(cities_csv)
    record = store.get("butte")

    assert LookupQuery.project(store, record, ("county", "prefix")) == [
        ("County", "Silver Bow"),
        ("License Plate Prefix", "1"),
    ]


def test_records_are_immutable():
    record = Record({"county": "Cascade", "city": "Belt", "prefix": "2"})

    with pytest.raises(TypeError):
        record.values["city"] = "Great Falls"  # type: ignore[index]

    replaced = record.replace(city="Great Falls")
    assert record["city"] == "Belt"
    assert replaced["city"] == "Great Falls"


def test_equal_records_hash_equally():
    first = Record({"county": "Cascade", "city": "Belt", "prefix": "2"})
    second = Record({"prefix": "2", "city": "Belt", "county": "Cascade"})

    assert first == second
    assert len({first, second}) == 1
