# SPDX-License-Identifier: Apache-2.0
"""Heat map renderer registry and built-in targets."""

from __future__ import annotations

from . import heatmap_page as _heatmap_page  # noqa: F401
from . import heatmap_svg as _heatmap_svg  # noqa: F401
from .base import HeatmapRenderer, RenderBundle
from .registry import available, create, get, register, slugs

__all__ = [
    "HeatmapRenderer",
    "RenderBundle",
    "available",
    "create",
    "get",
    "register",
    "slugs",
]
