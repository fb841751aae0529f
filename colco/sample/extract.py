# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
Main sampling API.

This is the primary entry point for ColCo's sampling core: one frame
and one region in, one color out. No I/O, no shared state.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Final, Optional, Union

import numpy as np
from numpy.lib.stride_tricks import as_strided
from numpy.typing import NDArray

from colco.errors import OutOfBoundsError
from colco.schema import AlphaInfo, Frame, PixelFormat, PixelRect, Region, RGBAColor, SampleMode
from colco.sample.colorspace import unpremultiply
from colco.sample.formats import normalize_pixels, resolve_format
from colco.sample.regions import center_pixel, clip_region

LOG: Final = logging.getLogger(__name__)


def sample(
    frame: Frame,
    region: Region,
    mode: SampleMode = SampleMode.AVERAGE_REGION,
) -> RGBAColor:
    """
    Sample one representative color from a region of a frame.

    Steps:
    1. Resolve the frame's pixel format (unsupported → error, nothing read)
    2. Clip the region to the frame and round it outward to whole pixels
       (CENTER_PIXEL: floor the clipped region's center instead)
    3. Bounds-check the frame's stride and height against the buffer
    4. Normalize the region's pixels to RGBA lane order
    5. Reduce to one color according to ``mode`` and un-premultiply

    Args:
        frame: Frame to read. Not retained after the call.
        region: Region in frame pixel coordinates. A point selects the
            pixel containing it.
        mode: CENTER_PIXEL reads the pixel at the floor of the center of
            the region clipped to the frame, taken before rounding.
            AVERAGE_REGION averages every pixel in premultiplied space and un-premultiplies once, so
            near-transparent pixels are not overweighted. DOMINANT_PIXEL
            picks the most frequent exact pixel (first in raster order
            on ties).

    Returns:
        Un-premultiplied RGBAColor. Fully transparent input yields
        RGBAColor(0, 0, 0, 0).

    Raises:
        UnsupportedFormatError: Pixel format not in the supported set
        EmptyRegionError: Region does not intersect the frame
        OutOfBoundsError: Stride or dimensions would read past the buffer

    Example:
        >>> frame = Frame(bytes([128, 0, 0, 128]), 1, 1, 4, BGRA8_PREMULTIPLIED)
        >>> sample(frame, Region.point(0, 0), SampleMode.CENTER_PIXEL)
        RGBAColor(r=0.0, g=0.0, b=1.0, a=0.5019607843137255)
    """
    fmt = resolve_format(frame.pixel_format)

    if not isinstance(mode, SampleMode):
        raise ValueError(f"Expected SampleMode, got {mode!r}")

    if mode is SampleMode.CENTER_PIXEL:
        rect = center_pixel(region, frame.width, frame.height)
    else:
        rect = clip_region(region, frame.width, frame.height)

    LOG.debug(
        "Sampling %s over %dx%d at (%d, %d) from %dx%d frame",
        mode.value, rect.width, rect.height, rect.x, rect.y, frame.width, frame.height,
    )

    pixels = read_pixels(frame, rect, pixel_format=fmt).reshape(-1, 4)

    if mode is SampleMode.DOMINANT_PIXEL:
        pixels = _dominant_pixel(pixels)

    return _average(pixels, fmt.alpha)


def read_pixels(
    frame: Frame,
    rect: PixelRect,
    pixel_format: Optional[Union[PixelFormat, str]] = None,
) -> NDArray[np.uint8]:
    """
    Read a rectangle of pixels in RGBA lane order.

    The buffer must hold every row the frame declares (the last row may
    omit its padding); this is checked before any access, whichever
    rows the rect covers. Stride and dimensions come from the capture
    layer and are not trusted blindly.

    Args:
        frame: Source frame
        rect: Pixel rectangle to read
        pixel_format: Override for ``frame.pixel_format``

    Returns:
        Array of shape (rect.height, rect.width, 4), dtype uint8, RGBA.
        Premultiplication is as stored in the frame.

    Raises:
        OutOfBoundsError: If the rect leaves the frame, the stride is
            shorter than a row of pixels, or the buffer is too short
    """
    fmt = resolve_format(frame.pixel_format if pixel_format is None else pixel_format)
    bpp = fmt.bytes_per_pixel
    stride = frame.bytes_per_row

    if stride < frame.width * bpp:
        raise OutOfBoundsError(
            f"bytes_per_row {stride} is shorter than one row of "
            f"{frame.width} pixels at {bpp} bytes each"
        )

    if rect.x_max > frame.width or rect.y_max > frame.height:
        raise OutOfBoundsError(
            f"Rect {rect.width}x{rect.height} at ({rect.x}, {rect.y}) "
            f"exceeds the {frame.width}x{frame.height} frame"
        )

    buffer = _as_byte_array(frame.data)

    # The last row may omit its padding
    required = (frame.height - 1) * stride + frame.width * bpp
    if buffer.size < required:
        raise OutOfBoundsError(
            f"A {frame.width}x{frame.height} frame needs {required} bytes, "
            f"but the buffer holds {buffer.size} "
            f"(bytes_per_row={stride}, height={frame.height})"
        )

    start = rect.y * stride + rect.x * bpp
    end = (rect.y_max - 1) * stride + rect.x_max * bpp
    window = buffer[start:end]
    raw = as_strided(
        window,
        shape=(rect.height, rect.width, bpp),
        strides=(stride, bpp, 1),
        writeable=False,
    )
    return normalize_pixels(raw, fmt)


def _as_byte_array(data) -> NDArray[np.uint8]:
    """Flat read-only uint8 view over a buffer-protocol object."""
    try:
        view = memoryview(data)
    except TypeError as e:
        raise TypeError(
            f"Frame data must support the buffer protocol, got {type(data).__name__}"
        ) from e

    if not view.c_contiguous:
        raise ValueError("Frame data must be C-contiguous")

    return np.frombuffer(view.cast("B"), dtype=np.uint8)


def _dominant_pixel(pixels: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Most frequent exact pixel; ties go to the first in raster order."""
    counter = Counter(tuple(p) for p in pixels.tolist())
    (value, _count), = counter.most_common(1)
    return np.array([value], dtype=np.uint8)


def _average(pixels: NDArray[np.uint8], alpha_info: AlphaInfo) -> RGBAColor:
    """
    Mean color of (N, 4) RGBA pixels, averaged in premultiplied space.

    Channel and alpha sums are divided by the pixel count first and the
    result is un-premultiplied once. Straight-alpha input is weighted by
    its alpha before summing so it averages the same way.
    """
    n = len(pixels)
    alpha = pixels[:, 3].astype(np.int64)

    if alpha_info is AlphaInfo.STRAIGHT:
        # Integer products keep the sums exact before the single division
        weighted = pixels[:, :3].astype(np.int64) * alpha[:, np.newaxis]
        premultiplied_mean = weighted.sum(axis=0) / (255.0 * n)
    else:
        premultiplied_mean = pixels[:, :3].astype(np.int64).sum(axis=0) / n

    alpha_mean = alpha.sum() / n

    r, g, b, a = unpremultiply(premultiplied_mean, np.float64(alpha_mean)).tolist()
    if a == 0.0:
        return RGBAColor.transparent()
    return RGBAColor(r=r, g=g, b=b, a=a)
