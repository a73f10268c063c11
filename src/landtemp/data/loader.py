# SPDX-License-Identifier: Apache-2.0
"""Dataset loader: one fetch (or file read) of the variance document.

Loading either yields a validated :class:`Dataset` or fails as a whole. The
pipeline entry point :func:`load_dataset` logs the failure and returns
``None`` so that nothing gets rendered.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from landtemp.connectors.backends.http import HttpRequestError, fetch_json
from landtemp.data.models import Dataset
from landtemp.utils.env import env, env_float, env_int
from landtemp.utils.io_utils import open_input

DEFAULT_DATA_URL = (
    "https://raw.githubusercontent.com/FreeCodeCamp/ProjectReferenceData/"
    "master/global-temperature.json"
)

logger = logging.getLogger(__name__)


class DatasetLoadError(RuntimeError):
    """Raised when the dataset cannot be fetched, decoded or validated."""


def parse_dataset(payload: bytes | str | Mapping[str, Any]) -> Dataset:
    """Validate ``payload`` (raw JSON or decoded mapping) into a ``Dataset``."""

    try:
        if isinstance(payload, (bytes, str)):
            return Dataset.model_validate_json(payload)
        return Dataset.model_validate(payload)
    except ValidationError as exc:
        raise DatasetLoadError(f"invalid dataset: {exc}") from exc


def fetch_dataset(
    url: str | None = None,
    *,
    timeout: float | None = None,
    max_retries: int | None = None,
) -> Dataset:
    """Fetch and validate the dataset from ``url`` (default: public source)."""

    url = url or env("DATA_URL", DEFAULT_DATA_URL)
    if timeout is None:
        timeout = env_float("HTTP_TIMEOUT", 60.0, positive=True)
    if max_retries is None:
        max_retries = env_int("HTTP_RETRIES", 0)
    if not timeout > 0:
        raise ValueError(f"timeout must be positive, got {timeout!r}")
    logger.debug("Fetching dataset from %s", url)
    try:
        doc = fetch_json(url, timeout=timeout, max_retries=max_retries)
    except HttpRequestError as exc:
        raise DatasetLoadError(str(exc)) from exc
    except ValueError as exc:
        raise DatasetLoadError(f"malformed JSON from {url}: {exc}") from exc
    if not isinstance(doc, Mapping):
        raise DatasetLoadError(f"expected a JSON object from {url}")
    return parse_dataset(doc)


def read_dataset(path_or_dash: str) -> Dataset:
    """Read the dataset from a local file, or stdin when given ``-``."""

    try:
        with open_input(path_or_dash) as fh:
            raw = fh.read()
    except OSError as exc:
        raise DatasetLoadError(f"cannot read {path_or_dash}: {exc}") from exc
    try:
        doc = json.loads(raw.decode("utf-8"))
    except ValueError as exc:
        raise DatasetLoadError(f"malformed JSON in {path_or_dash}: {exc}") from exc
    if not isinstance(doc, Mapping):
        raise DatasetLoadError(f"expected a JSON object in {path_or_dash}")
    return parse_dataset(doc)


def load_dataset(
    *,
    url: str | None = None,
    input_path: str | None = None,
    timeout: float | None = None,
    max_retries: int | None = None,
) -> Dataset | None:
    """Load the dataset for one render; ``None`` means abort rendering."""

    try:
        if input_path:
            dataset = read_dataset(input_path)
        else:
            dataset = fetch_dataset(url, timeout=timeout, max_retries=max_retries)
    except DatasetLoadError as exc:
        logger.error("Error: %s", exc)
        return None
    logger.info(
        "Loaded %d monthly records (base temperature %.2f ℃)",
        len(dataset.monthly_variance),
        dataset.base_temperature,
    )
    return dataset
