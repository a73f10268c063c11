# SPDX-License-Identifier: Apache-2.0
"""Slug-keyed registry of heat map renderers.

Renderer modules register their class at import time with ``@register``;
the CLI and the pipeline look targets up by slug.
"""

from __future__ import annotations

from typing import Any, TypeVar

from .base import HeatmapRenderer

_RendererT = TypeVar("_RendererT", bound=HeatmapRenderer)

_RENDERERS: dict[str, type[HeatmapRenderer]] = {}


def register(renderer_cls: type[_RendererT]) -> type[_RendererT]:
    if not issubclass(renderer_cls, HeatmapRenderer):
        raise TypeError(f"{renderer_cls!r} is not a HeatmapRenderer")
    slug = renderer_cls.slug
    if not slug:
        raise ValueError(f"{renderer_cls.__name__} has an empty slug")
    if slug in _RENDERERS:
        raise ValueError(f"renderer target already registered: {slug}")
    _RENDERERS[slug] = renderer_cls
    return renderer_cls


def slugs() -> list[str]:
    return sorted(_RENDERERS)


def available() -> list[type[HeatmapRenderer]]:
    """Registered renderer classes ordered by slug."""
    return [_RENDERERS[slug] for slug in slugs()]


def get(slug: str) -> type[HeatmapRenderer]:
    """Renderer class for ``slug``.

    Raises ``KeyError`` naming the registered targets when ``slug`` is unknown.
    """
    try:
        return _RENDERERS[slug]
    except KeyError:
        raise KeyError(
            f"Unknown renderer target '{slug}'. Available: {', '.join(slugs())}"
        ) from None


def create(slug: str, **options: Any) -> HeatmapRenderer:
    return get(slug)(**options)
