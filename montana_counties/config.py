"""Runtime configuration for the county lookup tool."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DatasetConfig:
    """Locations and read options for the backing files."""

    codes_path: Path = Path("data/montana_county_codes.csv")
    cities_path: Path = Path("data/montana_cities.csv")
    encoding: str = "utf-8-sig"
    skip_malformed: bool = False

    def path_for(self, dataset: str) -> Path:
        """Return the backing file for ``dataset`` (``"codes"`` or ``"cities"``)."""
        if dataset == "codes":
            return self.codes_path
        if dataset == "cities":
            return self.cities_path
        raise KeyError(dataset)


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


DATASET_CONFIG = DatasetConfig(
    codes_path=Path(os.environ.get("MONTANA_COUNTIES_CODES_PATH", DatasetConfig.codes_path)),
    cities_path=Path(os.environ.get("MONTANA_COUNTIES_CITIES_PATH", DatasetConfig.cities_path)),
    encoding=os.environ.get("MONTANA_COUNTIES_ENCODING", DatasetConfig.encoding),
    skip_malformed=_env_flag("MONTANA_COUNTIES_SKIP_MALFORMED", DatasetConfig.skip_malformed),
)
