# SPDX-License-Identifier: Apache-2.0
"""One-shot pipeline: load -> scales -> scene -> render."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Sequence

from landtemp.data.loader import load_dataset
from landtemp.data.models import Dataset
from landtemp.visualization.renderers import RenderBundle, create
from landtemp.visualization.scene import build_scene
from landtemp.visualization.styles import DEFAULT_LAYOUT, HeatmapLayout

DEFAULT_TARGET = "heatmap-page"

logger = logging.getLogger(__name__)


def render_dataset(
    dataset: Dataset,
    *,
    output_dir: Path,
    target: str = DEFAULT_TARGET,
    layout: HeatmapLayout = DEFAULT_LAYOUT,
    palette: str | Sequence[str] | None = None,
    **options: Any,
) -> RenderBundle:
    """Render an already loaded dataset with the renderer named ``target``."""

    scene = build_scene(dataset, layout=layout, palette=palette)
    renderer = create(target, **options)
    bundle = renderer.build(scene, output_dir=Path(output_dir))
    logger.info("Rendered %d cells to %s", len(scene.cells()), bundle.entrypoint)
    return bundle


def run(
    *,
    output_dir: Path,
    url: str | None = None,
    input_path: str | None = None,
    target: str = DEFAULT_TARGET,
    layout: HeatmapLayout = DEFAULT_LAYOUT,
    palette: str | Sequence[str] | None = None,
    timeout: float | None = None,
    max_retries: int | None = None,
    **options: Any,
) -> RenderBundle | None:
    """Load the dataset and render it; ``None`` when loading failed."""

    dataset = load_dataset(
        url=url, input_path=input_path, timeout=timeout, max_retries=max_retries
    )
    if dataset is None:
        return None
    return render_dataset(
        dataset,
        output_dir=output_dir,
        target=target,
        layout=layout,
        palette=palette,
        **options,
    )
