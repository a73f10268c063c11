import json
import os
from pathlib import Path

import pytest

from landtemp.data.models import Dataset

BASE_TEMPERATURE = 8.66
FIRST_YEAR = 1758
LAST_YEAR = 1771


def sample_payload(
    *, first_year: int = FIRST_YEAR, last_year: int = LAST_YEAR
) -> dict:
    """Document shaped like the public source: 12 months per year, rising variance."""
    records = []
    for year in range(first_year, last_year + 1):
        for month in range(1, 13):
            step = (year - first_year) * 12 + month
            records.append(
                {"year": year, "month": month, "variance": round(step * 0.05 - 4.0, 3)}
            )
    return {"baseTemperature": BASE_TEMPERATURE, "monthlyVariance": records}


@pytest.fixture
def payload() -> dict:
    return sample_payload()


@pytest.fixture
def dataset(payload) -> Dataset:
    return Dataset.model_validate(payload)


@pytest.fixture
def empty_dataset() -> Dataset:
    return Dataset.model_validate({"baseTemperature": 8.0, "monthlyVariance": []})


@pytest.fixture
def dataset_file(tmp_path: Path, payload) -> Path:
    path = tmp_path / "global-temperature.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clear_landtemp_env(monkeypatch):
    for key in (
        "LANDTEMP_DATA_URL",
        "LANDTEMP_HTTP_TIMEOUT",
        "LANDTEMP_HTTP_RETRIES",
        "LANDTEMP_VERBOSITY",
    ):
        monkeypatch.delenv(key, raising=False)
    yield
    # The CLI writes LANDTEMP_VERBOSITY straight into os.environ.
    os.environ.pop("LANDTEMP_VERBOSITY", None)
