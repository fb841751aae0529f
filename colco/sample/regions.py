# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
Region clipping and guide-square geometry.

Turns caller regions (fractional, possibly outside the frame) into
integral pixel rectangles inside the frame.
"""

from __future__ import annotations

import math

from colco.errors import EmptyRegionError
from colco.schema import PixelRect, Region


def _integral_span(origin: float, length: float) -> tuple[int, int]:
    """
    Round a 1-D span outward to whole pixels.

    A zero-length span (or one too thin to survive float rounding) becomes
    the single pixel containing ``origin``.
    """
    lo = math.floor(origin)
    hi = max(math.ceil(origin + length), lo + 1)
    return lo, hi


def clip_region(region: Region, frame_width: int, frame_height: int) -> PixelRect:
    """
    Clip a region to the frame and align it to whole pixels.

    Edges are rounded outward (floor of the minimum edge, ceiling of the
    maximum edge) and the result is intersected with
    ``[0, frame_width) x [0, frame_height)``. The mapping is a pure function
    of its inputs, so overlapping input regions traverse consistent pixel
    ranges from call to call.

    Args:
        region: Region in frame pixel coordinates
        frame_width: Frame width in pixels
        frame_height: Frame height in pixels

    Returns:
        Non-empty PixelRect inside the frame

    Raises:
        EmptyRegionError: If nothing of the region lies inside the frame
    """
    r = region.standardized()

    x0, x1 = _integral_span(r.x, r.width)
    y0, y1 = _integral_span(r.y, r.height)

    x0, x1 = max(x0, 0), min(x1, frame_width)
    y0, y1 = max(y0, 0), min(y1, frame_height)

    if x1 <= x0 or y1 <= y0:
        raise EmptyRegionError(
            f"Region (x={region.x}, y={region.y}, w={region.width}, h={region.height}) "
            f"does not intersect the {frame_width}x{frame_height} frame"
        )

    return PixelRect(x=x0, y=y0, width=x1 - x0, height=y1 - y0)


def center_pixel(region: Region, frame_width: int, frame_height: int) -> PixelRect:
    """
    The single pixel at the center of a region.

    The center is taken from the region clipped to the frame, before any
    outward rounding, and floored: region ``[0.2, 1.2)`` has center 0.7
    and selects pixel 0. A point selects the pixel containing it.

    Raises:
        EmptyRegionError: If nothing of the region lies inside the frame
    """
    rect = clip_region(region, frame_width, frame_height)
    r = region.standardized()

    x0, x1 = max(r.x, 0.0), min(r.x + r.width, float(frame_width))
    y0, y1 = max(r.y, 0.0), min(r.y + r.height, float(frame_height))

    # Clamp into the clipped rect for slivers lost to float rounding
    cx = min(max(math.floor((x0 + x1) / 2), rect.x), rect.x_max - 1)
    cy = min(max(math.floor((y0 + y1) / 2), rect.y), rect.y_max - 1)

    return PixelRect(x=cx, y=cy, width=1, height=1)


def guide_region(
    frame_width: int,
    frame_height: int,
    guide_width: float,
    guide_height: float,
    scale: float = 1.0,
) -> Region:
    """
    Region under an on-screen guide square centered in the frame.

    The presentation layer knows how its preview maps onto the frame and
    passes that mapping in as ``scale`` (frame pixels per screen point).
    Nothing here inspects screen geometry.

    Args:
        frame_width: Frame width in pixels
        frame_height: Frame height in pixels
        guide_width: Guide width in screen points
        guide_height: Guide height in screen points
        scale: Frame pixels per screen point

    Returns:
        Region centered on the frame center (may be fractional)
    """
    if guide_width <= 0 or guide_height <= 0:
        raise ValueError(
            f"Guide size must be positive, got {guide_width}x{guide_height}"
        )
    if not scale > 0:
        raise ValueError(f"Scale must be positive, got {scale}")

    return Region.centered(
        frame_width / 2,
        frame_height / 2,
        guide_width * scale,
        guide_height * scale,
    )
