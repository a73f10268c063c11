# SPDX-License-Identifier: Apache-2.0
"""Hover tooltip: a two-state (hidden/visible) toggle.

The same template, pointer offset and opacity are shipped to the page script
through the bundle config, so the browser and :class:`TooltipController`
produce identical content.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from landtemp.data.models import VarianceRecord
from landtemp.visualization.scales import format_fixed, month_name
from landtemp.visualization.styles import DEGREE_SUFFIX

TOOLTIP_TEMPLATE = (
    "<strong>Date:</strong> {date}<br>"
    "<strong>Variance:</strong> {variance}<br>"
    f"<strong>Temperature:</strong> {{temperature}} {DEGREE_SUFFIX}<br>"
    "<strong>Data Year:</strong> {year}"
)
TOOLTIP_OFFSET: tuple[float, float] = (10, -30)
VISIBLE_OPACITY = 0.9
HIDDEN_OPACITY = 0.0

_TAG_RE = re.compile(r"<[^>]+>")


def tooltip_fields(record: VarianceRecord, base_temperature: float) -> dict[str, str]:
    return {
        "date": f"{month_name(record.month_index)} {record.year}",
        "variance": format_fixed(record.variance),
        "temperature": format_fixed(record.temperature(base_temperature)),
        "year": str(record.year),
    }


def tooltip_html(record: VarianceRecord, base_temperature: float) -> str:
    return TOOLTIP_TEMPLATE.format(**tooltip_fields(record, base_temperature))


@dataclass(frozen=True)
class TooltipState:
    visible: bool = False
    opacity: float = HIDDEN_OPACITY
    left: float | None = None
    top: float | None = None
    html: str = ""
    data_year: int | None = None

    @property
    def text(self) -> str:
        """Content with markup stripped and line breaks kept."""
        return _TAG_RE.sub("", self.html.replace("<br>", "\n"))


class TooltipController:
    """Drive the tooltip from pointer enter/leave events over cells."""

    def __init__(
        self,
        base_temperature: float,
        *,
        offset: tuple[float, float] = TOOLTIP_OFFSET,
        opacity: float = VISIBLE_OPACITY,
    ) -> None:
        self.base_temperature = base_temperature
        self.offset = offset
        self.opacity = opacity
        self._state = TooltipState()

    @property
    def state(self) -> TooltipState:
        return self._state

    def enter(
        self, record: VarianceRecord, page_x: float, page_y: float
    ) -> TooltipState:
        dx, dy = self.offset
        self._state = TooltipState(
            visible=True,
            opacity=self.opacity,
            left=page_x + dx,
            top=page_y + dy,
            html=tooltip_html(record, self.base_temperature),
            data_year=record.year,
        )
        return self._state

    def leave(self) -> TooltipState:
        # Content and position stay; only visibility changes.
        self._state = replace(self._state, visible=False, opacity=HIDDEN_OPACITY)
        return self._state

    def script_config(self) -> dict[str, object]:
        return script_config(offset=self.offset, opacity=self.opacity)


def script_config(
    *,
    offset: tuple[float, float] = TOOLTIP_OFFSET,
    opacity: float = VISIBLE_OPACITY,
) -> dict[str, object]:
    """Settings the page script needs to mirror :class:`TooltipController`."""
    return {
        "tooltip_template": TOOLTIP_TEMPLATE,
        "tooltip_offset": list(offset),
        "tooltip_opacity": opacity,
    }
