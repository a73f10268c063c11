# SPDX-License-Identifier: Apache-2.0
"""Color and positional scales for the heat map.

``QuantizeScale`` partitions a continuous temperature domain into equal-width
buckets, one per palette color. ``BandScale`` splits a pixel extent evenly
across discrete categories (years on x, month indices on y) with no padding.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Generic, Hashable, Iterable, Sequence, TypeVar

import numpy as np

from landtemp.data.models import Dataset
from landtemp.visualization.styles import (
    DEFAULT_LAYOUT,
    DEGREE_SUFFIX,
    HeatmapLayout,
    resolve_palette,
)

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTH_INDICES: tuple[int, ...] = tuple(range(12))

_K = TypeVar("_K", bound=Hashable)


class QuantizeScale:
    """Map ``[lo, hi]`` onto ``len(colors)`` equal-width buckets."""

    def __init__(self, domain: tuple[float, float], colors: Sequence[str]) -> None:
        lo, hi = float(domain[0]), float(domain[1])
        if hi < lo:
            lo, hi = hi, lo
        if not colors:
            raise ValueError("quantize scale needs at least one color")
        self.domain = (lo, hi)
        self.colors: tuple[str, ...] = tuple(colors)
        n = len(self.colors)
        self.thresholds = np.linspace(lo, hi, n + 1)[1:-1]

    @property
    def degenerate(self) -> bool:
        return self.domain[0] == self.domain[1]

    def bucket(self, value: float) -> int:
        if self.degenerate:
            return len(self.colors) // 2
        return int(np.searchsorted(self.thresholds, value, side="right"))

    def buckets(self, values: Iterable[float]) -> np.ndarray:
        arr = np.asarray(list(values), dtype=float)
        if self.degenerate:
            return np.full(arr.shape, len(self.colors) // 2, dtype=int)
        return np.searchsorted(self.thresholds, arr, side="right")

    def __call__(self, value: float) -> str:
        return self.colors[self.bucket(value)]

    def invert_extent(self, color: str) -> tuple[float, float]:
        """Return the ``[start, end)`` domain slice mapped to ``color``."""
        i = self.colors.index(color)
        lo, hi = self.domain
        edges = [lo, *self.thresholds.tolist(), hi]
        return edges[i], edges[i + 1]


class BandScale(Generic[_K]):
    """Evenly sized bands over ``[start, stop]``; unknown keys map to ``None``."""

    def __init__(self, domain: Iterable[_K], extent: tuple[float, float]) -> None:
        self.domain: tuple[_K, ...] = tuple(dict.fromkeys(domain))
        self.extent = (float(extent[0]), float(extent[1]))
        self._index = {key: i for i, key in enumerate(self.domain)}
        span = self.extent[1] - self.extent[0]
        self.step = span / len(self.domain) if self.domain else span

    @property
    def bandwidth(self) -> float:
        return self.step

    def __call__(self, key: _K) -> float | None:
        i = self._index.get(key)
        if i is None:
            return None
        return self.extent[0] + i * self.step

    def center(self, key: _K) -> float | None:
        start = self(key)
        return None if start is None else start + self.bandwidth / 2


@dataclass(frozen=True)
class HeatmapScales:
    color: QuantizeScale
    x: BandScale[int]
    y: BandScale[int]

    @property
    def min_temp(self) -> float:
        return self.color.domain[0]

    @property
    def max_temp(self) -> float:
        return self.color.domain[1]


def temperature_extent(dataset: Dataset) -> tuple[float, float]:
    """Return ``(base + min(variance), base + max(variance))``.

    An empty dataset collapses to ``(base, base)``.
    """
    base = dataset.base_temperature
    if dataset.is_empty:
        return base, base
    variances = np.fromiter(
        (r.variance for r in dataset.monthly_variance),
        dtype=float,
        count=len(dataset.monthly_variance),
    )
    return base + float(variances.min()), base + float(variances.max())


def build_scales(
    dataset: Dataset,
    *,
    layout: HeatmapLayout = DEFAULT_LAYOUT,
    palette: str | Sequence[str] | None = None,
) -> HeatmapScales:
    colors = resolve_palette(palette)
    return HeatmapScales(
        color=QuantizeScale(temperature_extent(dataset), colors),
        x=BandScale(dataset.years(), (0, layout.width)),
        y=BandScale(MONTH_INDICES, (0, layout.height)),
    )


def x_tick_values(x: BandScale[int]) -> list[int]:
    """Years on the axis: only decades."""
    return [year for year in x.domain if year % 10 == 0]


def format_year(year: int) -> str:
    return str(int(year))


def month_name(index: int) -> str:
    """Full month name for a 0-based month index."""
    return MONTH_NAMES[index]


def format_fixed(value: float, digits: int = 1) -> str:
    """Fixed-point text with ties rounded away from zero, as the page script does.

    ``Decimal(value)`` is the exact binary value, so 0.25 rounds up while 0.15
    (stored as 0.1499...) rounds down.
    """
    step = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(step, rounding=ROUND_HALF_UP))


def format_temperature(value: float) -> str:
    return f"{format_fixed(value)} {DEGREE_SUFFIX}"
