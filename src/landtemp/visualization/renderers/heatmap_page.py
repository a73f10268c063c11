# SPDX-License-Identifier: Apache-2.0
"""HTML page renderer: header, inline SVG heat map and hover tooltip.

The bundle is self-contained apart from the browser: ``index.html`` embeds
the SVG and the page config, ``assets/heatmap.js`` attaches the hover
listeners once on load.
"""

from __future__ import annotations

import html
import json
from pathlib import Path
from textwrap import dedent

from landtemp.utils.io_utils import write_text
from landtemp.visualization.scales import MONTH_NAMES
from landtemp.visualization.scene import HeatmapScene
from landtemp.visualization.svg import scene_to_svg
from landtemp.visualization.tooltip import (
    TOOLTIP_OFFSET,
    VISIBLE_OPACITY,
    script_config,
)

from .base import HeatmapRenderer, RenderBundle
from .registry import register


@register
class HeatmapPageRenderer(HeatmapRenderer):
    slug = "heatmap-page"
    description = "Standalone HTML page with the heat map and a hover tooltip."

    def build(self, scene: HeatmapScene, *, output_dir: Path) -> RenderBundle:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        assets_dir = output_dir / "assets"
        assets_dir.mkdir(parents=True, exist_ok=True)

        config = self._page_config()
        config_path = write_text(
            assets_dir / "config.json", json.dumps(config, indent=2) + "\n"
        )
        script_path = write_text(assets_dir / "heatmap.js", self._render_script())
        style_path = write_text(assets_dir / "heatmap.css", self._render_style())
        index_html = write_text(
            output_dir / "index.html", self._render_index_html(scene, config)
        )

        return RenderBundle(
            output_dir=output_dir,
            entrypoint=index_html,
            assets=(script_path, style_path, config_path),
        )

    def _page_config(self) -> dict[str, object]:
        """Return the page config; unset options are dropped."""

        config: dict[str, object] = {
            key: value
            for key, value in self._options.items()
            if value is not None and key not in {"tooltip_offset", "tooltip_opacity"}
        }
        config["month_names"] = list(MONTH_NAMES)
        offset = self._options.get("tooltip_offset")
        opacity = self._options.get("tooltip_opacity")
        config.update(
            script_config(
                offset=TOOLTIP_OFFSET if offset is None else tuple(offset),
                opacity=VISIBLE_OPACITY if opacity is None else float(opacity),
            )
        )
        return config

    def _render_index_html(
        self, scene: HeatmapScene, config: dict[str, object]
    ) -> str:
        # "</" inside inline JSON must not close the script element.
        config_json = json.dumps(config, indent=2, ensure_ascii=False).replace(
            "</", "<\\/"
        )
        title = html.escape(scene.header.title)
        description = html.escape(scene.header.description)
        page_title = html.escape(
            str(self._options.get("page_title") or scene.header.title)
        )
        svg = scene_to_svg(scene)
        head = dedent(
            f"""
            <!DOCTYPE html>
            <html lang="en">
              <head>
                <meta charset="utf-8" />
                <meta name="viewport" content="width=device-width, initial-scale=1" />
                <title>{page_title}</title>
                <link rel="stylesheet" href="assets/heatmap.css" />
              </head>
              <body>
                <header>
                  <h1 id="title">{title}</h1>
                  <h3 id="description">{description}</h3>
                </header>
                <main>
            """
        ).strip()
        tail = dedent(
            """
                </main>
                <div id="tooltip" style="opacity: 0"></div>
                <script>
                  window.LANDTEMP_HEATMAP_CONFIG = {config_json};
                </script>
                <script src="assets/heatmap.js"></script>
              </body>
            </html>
            """
        ).strip().format(config_json=config_json)
        return "\n".join([head, svg, tail]) + "\n"

    def _render_style(self) -> str:
        return (
            dedent(
                """
            body { margin: 0; padding: 16px 24px; font-family: system-ui, sans-serif; color: #1b1f24; background: #fafbfc; }
            header { text-align: center; }
            header h1 { margin: 0 0 4px; font-size: 1.6rem; }
            header h3 { margin: 0 0 12px; font-weight: 400; }
            main { display: flex; justify-content: center; }
            svg text { font-size: 10px; fill: currentColor; }
            rect.cell:hover { stroke: #000; stroke-width: 1; }
            #legend text { font-size: 12px; }
            #tooltip { position: absolute; pointer-events: none; padding: 8px 10px; border-radius: 4px; background: rgba(20, 24, 28, 0.85); color: #f5f7fa; font-size: 0.8rem; line-height: 1.35; transition: opacity 0.1s; }
            """
            ).strip()
            + "\n"
        )

    def _render_script(self) -> str:
        return (
            dedent(
                """
            (function () {
              const config = window.LANDTEMP_HEATMAP_CONFIG || {};
              const tooltip = document.getElementById("tooltip");
              if (!tooltip) {
                return;
              }

              const months = config.month_names || [];
              const template = config.tooltip_template || "";
              const offset = config.tooltip_offset || [10, -30];
              const opacity = config.tooltip_opacity ?? 0.9;

              function fields(cell) {
                const year = cell.getAttribute("data-year");
                const month = Number(cell.getAttribute("data-month"));
                const variance = Number(cell.getAttribute("data-variance"));
                const temp = Number(cell.getAttribute("data-temp"));
                return {
                  date: `${months[month]} ${year}`,
                  variance: variance.toFixed(1),
                  temperature: temp.toFixed(1),
                  year: year,
                };
              }

              function render(values) {
                return template.replace(/\\{(\\w+)\\}/g, (match, key) =>
                  key in values ? values[key] : match,
                );
              }

              document.querySelectorAll("rect.cell").forEach((cell) => {
                cell.addEventListener("mouseover", (event) => {
                  const values = fields(cell);
                  tooltip.innerHTML = render(values);
                  tooltip.setAttribute("data-year", values.year);
                  tooltip.style.left = `${event.pageX + offset[0]}px`;
                  tooltip.style.top = `${event.pageY + offset[1]}px`;
                  tooltip.style.opacity = opacity;
                });
                cell.addEventListener("mouseout", () => {
                  tooltip.style.opacity = 0;
                });
              });
            })();
            """
            ).strip()
            + "\n"
        )
