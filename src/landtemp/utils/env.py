# SPDX-License-Identifier: Apache-2.0
"""Environment helpers for ``LANDTEMP_*`` configuration variables."""

from __future__ import annotations

import logging
import os

ENV_PREFIX = "LANDTEMP_"


def env(key: str, default: str | None = None) -> str | None:
    """Return ``LANDTEMP_<KEY>`` or ``default`` when unset or blank."""

    value = os.environ.get(f"{ENV_PREFIX}{key}")
    if value is None or not value.strip():
        return default
    return value.strip()


def env_int(key: str, default: int) -> int:
    """Return ``LANDTEMP_<KEY>`` parsed as ``int``; falls back on bad values."""

    raw = env(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Ignoring non-integer %s%s=%r; using %s", ENV_PREFIX, key, raw, default
        )
        return default


def env_float(key: str, default: float, *, positive: bool = False) -> float:
    """Return ``LANDTEMP_<KEY>`` parsed as ``float``.

    Unparsable values, and with ``positive`` values <= 0, fall back to ``default``.
    """

    raw = env(key)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Ignoring non-numeric %s%s=%r; using %s", ENV_PREFIX, key, raw, default
        )
        return default
    if positive and not value > 0:
        logging.getLogger(__name__).warning(
            "Ignoring non-positive %s%s=%r; using %s", ENV_PREFIX, key, raw, default
        )
        return default
    return value
