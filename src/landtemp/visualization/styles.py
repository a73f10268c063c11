# SPDX-License-Identifier: Apache-2.0
"""Palette and layout defaults for the heat map."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

import numpy as np
from matplotlib import colormaps
from matplotlib.colors import is_color_like, to_hex

# Diverging blue -> red, coolest first.
DEFAULT_PALETTE: tuple[str, ...] = (
    "#053061",
    "#2166ac",
    "#4393c3",
    "#92c5de",
    "#d1e5f0",
    "#fddbc7",
    "#f4a582",
    "#d6604d",
    "#b2182b",
)
PALETTE_SIZE = len(DEFAULT_PALETTE)

TITLE = "Monthly Global Land-Surface Temperature"
DEGREE_SUFFIX = "℃"


@dataclass(frozen=True, slots=True)
class Margin:
    top: float = 20
    right: float = 20
    bottom: float = 50
    left: float = 60


@dataclass(frozen=True, slots=True)
class HeatmapLayout:
    """Pixel geometry of the plot area, axes and legend."""

    width: float = 1080
    height: float = 540
    margin: Margin = Margin()
    legend_width: float = 400
    legend_height: float = 20
    legend_padding: float = 10
    tick_size: float = 6
    tick_padding: float = 3

    @property
    def outer_width(self) -> float:
        return self.width + self.margin.left + self.margin.right

    @property
    def outer_height(self) -> float:
        return self.height + self.margin.top + self.margin.bottom

    def resized(self, *, width: float | None = None, height: float | None = None):
        """Return a copy with the plot area resized; ``None`` keeps the value."""
        if width is not None and width <= 0:
            raise ValueError("width must be positive")
        if height is not None and height <= 0:
            raise ValueError("height must be positive")
        return replace(
            self,
            width=self.width if width is None else width,
            height=self.height if height is None else height,
        )


DEFAULT_LAYOUT = HeatmapLayout()


def resolve_palette(palette: str | Sequence[str] | None = None) -> tuple[str, ...]:
    """Return the nine bucket colors as hex strings, coolest first.

    ``palette`` may be ``None`` (default diverging palette), a matplotlib
    colormap name sampled evenly, or an explicit sequence of colors.
    """
    if palette is None:
        return DEFAULT_PALETTE
    if isinstance(palette, str):
        try:
            cmap = colormaps[palette]
        except KeyError as exc:
            raise ValueError(f"Unknown colormap: {palette}") from exc
        return tuple(to_hex(c) for c in cmap(np.linspace(0.0, 1.0, PALETTE_SIZE)))
    colors = list(palette)
    if len(colors) != PALETTE_SIZE:
        raise ValueError(f"palette must have {PALETTE_SIZE} colors, got {len(colors)}")
    bad = [c for c in colors if not is_color_like(c)]
    if bad:
        raise ValueError(f"Invalid palette colors: {', '.join(map(str, bad))}")
    return tuple(to_hex(c) for c in colors)
