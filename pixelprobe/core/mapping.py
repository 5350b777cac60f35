"""Coordinate mapping — widget-space points to source-image pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pixelprobe.config.constants import MIN_LETTERBOX_SCALE, NEAR_UNIFORM_TOLERANCE
from pixelprobe.core.geometry import Point, Rect, scale_factors


@dataclass(frozen=True)
class MappingContext:
    """Everything needed to map one pointer position.

    ``surface_bounds`` is the area of the surface that displays the image,
    already letterboxed by :func:`compute_display_rectangle` when needed.
    """

    surface_bounds: Rect
    image_width: int
    image_height: int
    explicit_zoom: float | None = None


def _is_near_uniform(zx: float, zy: float) -> bool:
    return zx > 0 and zy > 0 and abs(zx - zy) <= NEAR_UNIFORM_TOLERANCE * max(zx, zy)


def map_to_pixel(point: Point, ctx: MappingContext) -> tuple[int, int] | None:
    """Return the image pixel under *point*, or ``None`` if it is off the image.

    Nearest/floor lookup: the fractional image coordinate is truncated, so
    each pixel covers a half-open block of screen positions.
    """
    bounds = ctx.surface_bounds.clamped(1)
    if not bounds.contains(point):
        return None

    image_width = max(1, ctx.image_width)
    image_height = max(1, ctx.image_height)
    sx, sy = scale_factors(bounds.width, bounds.height, image_width, image_height)
    fx = (point.x - bounds.x) / sx
    fy = (point.y - bounds.y) / sy
    px = min(image_width - 1, max(0, int(fx)))
    py = min(image_height - 1, max(0, int(fy)))
    return px, py


def compute_display_rectangle(
    surface: Rect, image_width: int, image_height: int, explicit_zoom: float | None = None
) -> Rect:
    """Locate the image content area inside *surface*.

    With a known zoom the scaled image is centred when it fits and anchored
    at the origin when it overflows (scrolled or cropped display).  Without
    one, a surface that is already a uniform scale of the image is used as
    is; otherwise the image is fitted inside it and centred.
    """
    if explicit_zoom is not None and explicit_zoom > 0:
        scaled_w = max(1, round(image_width * explicit_zoom))
        scaled_h = max(1, round(image_height * explicit_zoom))
        if scaled_w <= surface.width and scaled_h <= surface.height:
            x = int(surface.width - scaled_w) // 2
            y = int(surface.height - scaled_h) // 2
            return Rect(x, y, scaled_w, scaled_h)
        return Rect(0, 0, scaled_w, scaled_h)

    zx, zy = scale_factors(surface.width, surface.height, image_width, image_height)
    if _is_near_uniform(zx, zy):
        return Rect(0, 0, surface.width, surface.height)

    scale = max(MIN_LETTERBOX_SCALE, min(zx, zy))
    w = max(1, math.floor(image_width * scale))
    h = max(1, math.floor(image_height * scale))
    x = int(surface.width - w) // 2
    y = int(surface.height - h) // 2
    return Rect(x, y, w, h)


def estimate_zoom(
    surface_width: float, surface_height: float, image_width: int, image_height: int
) -> float | None:
    """Infer the display zoom from a surface that is a near-uniform scale of the image."""
    if surface_width <= 0 or surface_height <= 0:
        return None
    zx, zy = scale_factors(surface_width, surface_height, image_width, image_height)
    if not _is_near_uniform(zx, zy):
        return None
    return (zx + zy) / 2.0
