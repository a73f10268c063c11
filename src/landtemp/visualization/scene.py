# SPDX-License-Identifier: Apache-2.0
"""Map a dataset onto drawable primitives.

Everything here is pure: a :class:`Dataset` plus layout and palette go in,
a :class:`HeatmapScene` of plain dataclasses comes out. Serializers (SVG,
HTML page) never look at the dataset directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from landtemp.data.models import Dataset
from landtemp.visualization.scales import (
    HeatmapScales,
    build_scales,
    format_temperature,
    format_year,
    month_name,
    x_tick_values,
)
from landtemp.visualization.styles import (
    DEFAULT_LAYOUT,
    TITLE,
    HeatmapLayout,
)

# ----------------------------------------------------------------------------
# Primitives


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str
    css_class: str | None = None
    data: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True, slots=True)
class Text:
    x: float
    y: float
    text: str
    anchor: str = "middle"
    dy: str | None = None
    css_class: str | None = None


@dataclass(frozen=True, slots=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True, slots=True)
class Path:
    d: str
    css_class: str | None = None


@dataclass(frozen=True, slots=True)
class GradientStop:
    offset: float
    color: str


@dataclass(frozen=True, slots=True)
class LinearGradient:
    id: str
    stops: tuple[GradientStop, ...]


Primitive = Union[Rect, Text, Line, Path, LinearGradient, "Group"]


@dataclass(frozen=True, slots=True)
class Group:
    id: str | None = None
    transform: tuple[float, float] | None = None
    css_class: str | None = None
    children: tuple[Primitive, ...] = ()


@dataclass(frozen=True, slots=True)
class Header:
    title: str
    description: str


@dataclass(frozen=True)
class HeatmapScene:
    width: float
    height: float
    origin: tuple[float, float]
    header: Header
    layers: tuple[Group, ...] = field(default_factory=tuple)

    def find(self, group_id: str) -> Group | None:
        """Depth-first lookup of a group by id."""
        stack: list[Primitive] = list(self.layers)
        while stack:
            node = stack.pop()
            if isinstance(node, Group):
                if node.id == group_id:
                    return node
                stack.extend(node.children)
        return None

    def cells(self) -> list[Rect]:
        group = self.find("cells")
        if group is None:
            return []
        return [c for c in group.children if isinstance(c, Rect)]


# ----------------------------------------------------------------------------
# Builders


def fmt(value: float) -> str:
    """Compact coordinate text: at most three decimals, no trailing zeros."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def build_header(dataset: Dataset) -> Header:
    base = f"base temperature {format_temperature(dataset.base_temperature)}"
    span = dataset.year_span()
    if span is None:
        return Header(title=TITLE, description=base)
    first, last = span
    return Header(title=TITLE, description=f"{first} - {last}: {base}")


def build_x_axis(scales: HeatmapScales, layout: HeatmapLayout) -> Group:
    x = scales.x
    size, pad = layout.tick_size, layout.tick_padding
    ticks: list[Primitive] = [
        Path(
            f"M{fmt(x.extent[0])},{fmt(size)}V0H{fmt(x.extent[1])}V{fmt(size)}",
            css_class="domain",
        )
    ]
    for year in x_tick_values(x):
        cx = x.center(year)
        ticks.append(
            Group(
                css_class="tick",
                transform=(cx, 0),
                children=(
                    Line(0, 0, 0, size),
                    Text(0, size + pad, format_year(year), dy="0.71em"),
                ),
            )
        )
    return Group(id="x-axis", transform=(0, layout.height), children=tuple(ticks))


def build_y_axis(scales: HeatmapScales, layout: HeatmapLayout) -> Group:
    y = scales.y
    size, pad = layout.tick_size, layout.tick_padding
    ticks: list[Primitive] = [
        Path(
            f"M{fmt(-size)},{fmt(y.extent[0])}H0V{fmt(y.extent[1])}H{fmt(-size)}",
            css_class="domain",
        )
    ]
    for index in y.domain:
        cy = y.center(index)
        ticks.append(
            Group(
                css_class="tick",
                transform=(0, cy),
                children=(
                    Line(0, 0, -size, 0),
                    Text(
                        -(size + pad), 0, month_name(index), anchor="end", dy="0.32em"
                    ),
                ),
            )
        )
    return Group(id="y-axis", children=tuple(ticks))


def build_cells(dataset: Dataset, scales: HeatmapScales) -> Group:
    base = dataset.base_temperature
    temps = [r.temperature(base) for r in dataset.monthly_variance]
    buckets = scales.color.buckets(temps)
    colors = scales.color.colors
    width, height = scales.x.bandwidth, scales.y.bandwidth
    cells: list[Primitive] = []
    for record, temp, bucket in zip(dataset.monthly_variance, temps, buckets):
        cells.append(
            Rect(
                x=scales.x(record.year),
                y=scales.y(record.month_index),
                width=width,
                height=height,
                fill=colors[int(bucket)],
                css_class="cell",
                data=(
                    ("month", str(record.month_index)),
                    ("year", str(record.year)),
                    ("temp", repr(temp)),
                    ("variance", repr(record.variance)),
                ),
            )
        )
    return Group(id="cells", children=tuple(cells))


def build_legend(scales: HeatmapScales, layout: HeatmapLayout) -> Group:
    colors = scales.color.colors
    n = len(colors)
    stops = tuple(
        GradientStop(offset=i / (n - 1) if n > 1 else 0.0, color=c)
        for i, c in enumerate(colors)
    )
    lw, lh, pad = layout.legend_width, layout.legend_height, layout.legend_padding
    swatch = lw / n
    children: list[Primitive] = [
        LinearGradient(id="color-gradient", stops=stops),
        Rect(0, 0, lw, lh, fill="url(#color-gradient)", css_class="legend-gradient"),
    ]
    children.extend(
        Rect(i * swatch, 0, swatch, lh, fill=c, css_class="legend-swatch")
        for i, c in enumerate(colors)
    )
    low = format_temperature(scales.min_temp)
    high = format_temperature(scales.max_temp)
    children.append(Text(-pad, lh / 2, low, anchor="end", dy="0.35em"))
    children.append(Text(lw + pad, lh / 2, high, anchor="start", dy="0.35em"))
    return Group(
        id="legend",
        transform=(layout.margin.left, layout.height + layout.margin.top + pad),
        children=tuple(children),
    )


def build_scene(
    dataset: Dataset,
    *,
    layout: HeatmapLayout = DEFAULT_LAYOUT,
    palette: str | Sequence[str] | None = None,
) -> HeatmapScene:
    """Compute scales and lay out axes, cells and legend in drawing order."""

    scales = build_scales(dataset, layout=layout, palette=palette)
    return HeatmapScene(
        width=layout.outer_width,
        height=layout.outer_height,
        origin=(layout.margin.left, layout.margin.top),
        header=build_header(dataset),
        layers=(
            build_x_axis(scales, layout),
            build_y_axis(scales, layout),
            build_cells(dataset, scales),
            build_legend(scales, layout),
        ),
    )
