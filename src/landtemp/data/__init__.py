# SPDX-License-Identifier: Apache-2.0
from .loader import (
    DEFAULT_DATA_URL,
    DatasetLoadError,
    fetch_dataset,
    load_dataset,
    parse_dataset,
    read_dataset,
)
from .models import Dataset, VarianceRecord

__all__ = [
    "DEFAULT_DATA_URL",
    "Dataset",
    "DatasetLoadError",
    "VarianceRecord",
    "fetch_dataset",
    "load_dataset",
    "parse_dataset",
    "read_dataset",
]
