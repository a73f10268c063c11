# SPDX-License-Identifier: Apache-2.0
"""Standalone SVG renderer (no tooltip)."""

from __future__ import annotations

from pathlib import Path

from landtemp.utils.io_utils import write_text
from landtemp.visualization.scene import HeatmapScene
from landtemp.visualization.svg import scene_to_svg

from .base import HeatmapRenderer, RenderBundle
from .registry import register


@register
class HeatmapSvgRenderer(HeatmapRenderer):
    slug = "heatmap-svg"
    description = "Single SVG file with axes, cells and legend."

    def build(self, scene: HeatmapScene, *, output_dir: Path) -> RenderBundle:
        output_dir = Path(output_dir)
        filename = self._options.get("filename") or "heatmap.svg"
        svg_path = write_text(
            output_dir / filename, scene_to_svg(scene, standalone=True)
        )
        return RenderBundle(output_dir=output_dir, entrypoint=svg_path)
