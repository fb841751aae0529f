# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
Pixel format resolution and byte-lane normalization.

Every supported layout is a packed 32-bit pixel with one byte per lane.
Normalization reorders the lanes of raw pixels into (R, G, B, A) so the
rest of the sampler works on a single known layout.
"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import NDArray

from colco.errors import UnsupportedFormatError
from colco.schema import AlphaInfo, ByteOrder, ChannelOrder, PixelFormat


def resolve_format(pixel_format: Union[PixelFormat, str]) -> PixelFormat:
    """
    Validate a pixel format descriptor (or registered name) for reading.

    Raises:
        UnsupportedFormatError: If the descriptor is outside the supported
            set: 8 bits per component, 32 bits per pixel, a known channel
            order, alpha kind and byte order.
    """
    if isinstance(pixel_format, str):
        return PixelFormat.from_name(pixel_format)

    if not isinstance(pixel_format, PixelFormat):
        raise UnsupportedFormatError(
            f"Expected PixelFormat or format name, got {type(pixel_format).__name__}"
        )

    if not isinstance(pixel_format.order, ChannelOrder):
        raise UnsupportedFormatError(f"Unsupported channel order {pixel_format.order!r}")
    if not isinstance(pixel_format.alpha, AlphaInfo):
        raise UnsupportedFormatError(f"Unsupported alpha info {pixel_format.alpha!r}")
    if not isinstance(pixel_format.byte_order, ByteOrder):
        raise UnsupportedFormatError(f"Unsupported byte order {pixel_format.byte_order!r}")
    if pixel_format.bits_per_component != 8 or pixel_format.bits_per_pixel != 32:
        raise UnsupportedFormatError(
            f"Unsupported depth: {pixel_format.bits_per_component} bits per component, "
            f"{pixel_format.bits_per_pixel} bits per pixel (expected 8/32)"
        )

    return pixel_format


def lane_indices(pixel_format: Union[PixelFormat, str]) -> tuple[int, int, int, int]:
    """
    Byte offsets of the R, G, B and A lanes within one pixel.

    Example:
        >>> lane_indices(BGRA8_PREMULTIPLIED)
        (2, 1, 0, 3)
    """
    memory_order = resolve_format(pixel_format).memory_order
    r, g, b, a = (memory_order.index(lane) for lane in "RGBA")
    return r, g, b, a


def normalize_pixels(
    raw: NDArray[np.uint8],
    pixel_format: Union[PixelFormat, str],
) -> NDArray[np.uint8]:
    """
    Reorder raw pixel lanes into (R, G, B, A).

    Args:
        raw: Array of shape (..., 4) with pixel bytes in memory order
        pixel_format: Layout of ``raw``

    Returns:
        New array of shape (..., 4) in RGBA lane order. For formats without
        alpha the A lane is 255. Premultiplication is left untouched.
    """
    fmt = resolve_format(pixel_format)

    if raw.shape[-1] != fmt.bytes_per_pixel:
        raise ValueError(
            f"Expected {fmt.bytes_per_pixel} bytes per pixel, got shape {raw.shape}"
        )

    rgba = raw[..., list(lane_indices(fmt))]

    if fmt.alpha is AlphaInfo.NONE:
        rgba[..., 3] = 255

    return rgba
