# SPDX-License-Identifier: Apache-2.0
from .scales import (
    MONTH_NAMES,
    BandScale,
    HeatmapScales,
    QuantizeScale,
    build_scales,
    temperature_extent,
)
from .scene import HeatmapScene, build_scene
from .styles import DEFAULT_LAYOUT, DEFAULT_PALETTE, HeatmapLayout, resolve_palette
from .svg import scene_to_svg
from .tooltip import TooltipController, TooltipState

__all__ = [
    "MONTH_NAMES",
    "BandScale",
    "HeatmapScales",
    "QuantizeScale",
    "build_scales",
    "temperature_extent",
    "HeatmapScene",
    "build_scene",
    "DEFAULT_LAYOUT",
    "DEFAULT_PALETTE",
    "HeatmapLayout",
    "resolve_palette",
    "scene_to_svg",
    "TooltipController",
    "TooltipState",
]
