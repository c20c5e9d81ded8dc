from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def codes_csv(tmp_path: Path) -> Path:
    path = tmp_path / "codes.csv"
    path.write_text(
        "County,County Seat,County Code\n"
        "Yellowstone,Billings,56\n"
        "Silver Bow,Butte,1\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def cities_csv(tmp_path: Path) -> Path:
    path = tmp_path / "cities.csv"
    path.write_text(
        "County,City,License Plate Prefix\n"
        "Silver Bow,Butte,1\n"
        "Cascade,Great Falls,2\n"
        "Cascade,Belt,2\n",
        encoding="utf-8",
    )
    return path


