# SPDX-License-Identifier: Apache-2.0
"""Serialize a :class:`HeatmapScene` into SVG markup."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from landtemp.visualization.scene import (
    Group,
    HeatmapScene,
    Line,
    LinearGradient,
    Path,
    Primitive,
    Rect,
    Text,
    fmt,
)

SVG_NS = "http://www.w3.org/2000/svg"


def _translate(offset: tuple[float, float]) -> str:
    return f"translate({fmt(offset[0])},{fmt(offset[1])})"


def _append(parent: ET.Element, node: Primitive) -> None:
    if isinstance(node, Group):
        attrs: dict[str, str] = {}
        if node.id:
            attrs["id"] = node.id
        if node.css_class:
            attrs["class"] = node.css_class
        if node.transform is not None:
            attrs["transform"] = _translate(node.transform)
        el = ET.SubElement(parent, "g", attrs)
        for child in node.children:
            _append(el, child)
    elif isinstance(node, Rect):
        attrs = {
            "x": fmt(node.x),
            "y": fmt(node.y),
            "width": fmt(node.width),
            "height": fmt(node.height),
            "fill": node.fill,
        }
        if node.css_class:
            attrs["class"] = node.css_class
        for key, value in node.data:
            attrs[f"data-{key}"] = value
        ET.SubElement(parent, "rect", attrs)
    elif isinstance(node, Text):
        attrs = {"x": fmt(node.x), "y": fmt(node.y), "text-anchor": node.anchor}
        if node.dy:
            attrs["dy"] = node.dy
        if node.css_class:
            attrs["class"] = node.css_class
        ET.SubElement(parent, "text", attrs).text = node.text
    elif isinstance(node, Line):
        ET.SubElement(
            parent,
            "line",
            {
                "x1": fmt(node.x1),
                "y1": fmt(node.y1),
                "x2": fmt(node.x2),
                "y2": fmt(node.y2),
                "stroke": "currentColor",
            },
        )
    elif isinstance(node, Path):
        attrs = {"d": node.d, "fill": "none", "stroke": "currentColor"}
        if node.css_class:
            attrs["class"] = node.css_class
        ET.SubElement(parent, "path", attrs)
    elif isinstance(node, LinearGradient):
        defs = ET.SubElement(parent, "defs")
        grad = ET.SubElement(
            defs,
            "linearGradient",
            {"id": node.id, "x1": "0%", "y1": "0%", "x2": "100%", "y2": "0%"},
        )
        for stop in node.stops:
            ET.SubElement(
                grad, "stop", {"offset": fmt(stop.offset), "stop-color": stop.color}
            )
    else:
        raise TypeError(f"Unsupported primitive: {type(node).__name__}")


def scene_to_element(scene: HeatmapScene, *, standalone: bool = False) -> ET.Element:
    """Build the ``<svg>`` element tree for ``scene``.

    ``standalone`` adds ``<title>``/``<desc>`` from the header, for SVG files
    viewed outside the HTML page.
    """
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": fmt(scene.width),
            "height": fmt(scene.height),
            "viewBox": f"0 0 {fmt(scene.width)} {fmt(scene.height)}",
        },
    )
    if standalone:
        ET.SubElement(root, "title").text = scene.header.title
        ET.SubElement(root, "desc").text = scene.header.description
    plot = ET.SubElement(root, "g", {"transform": _translate(scene.origin)})
    for layer in scene.layers:
        _append(plot, layer)
    return root


def scene_to_svg(scene: HeatmapScene, *, standalone: bool = False) -> str:
    root = scene_to_element(scene, standalone=standalone)
    markup = ET.tostring(root, encoding="unicode")
    if standalone:
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + markup + "\n"
    return markup
