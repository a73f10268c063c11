# SPDX-License-Identifier: Apache-2.0
"""Base interfaces for heat map renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from landtemp.visualization.scene import HeatmapScene


@dataclass(slots=True)
class RenderBundle:
    """Describes the output artifacts produced by a renderer."""

    output_dir: Path
    entrypoint: Path
    assets: Sequence[Path] = field(default_factory=tuple)


class HeatmapRenderer(ABC):
    """Contract for renderers that write a scene into an output directory."""

    slug: str = "heatmap"
    description: str = ""

    def __init__(self, **options: Any) -> None:
        self._options: dict[str, Any] = dict(options)

    @abstractmethod
    def build(self, scene: HeatmapScene, *, output_dir: Path) -> RenderBundle:
        """Write ``scene`` inside ``output_dir``."""
