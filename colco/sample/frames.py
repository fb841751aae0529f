# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""Frame construction helpers for numpy arrays and image files."""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray

from colco.schema import RGBA8, Frame, PixelFormat
from colco.sample.formats import resolve_format


def frame_from_array(
    pixels: NDArray[np.uint8],
    pixel_format: Union[PixelFormat, str] = RGBA8,
) -> Frame:
    """
    Wrap an (H, W, 4) uint8 array as a Frame.

    Non-contiguous arrays (slices, transposes) are copied to a packed
    buffer first; contiguous arrays are wrapped without copying.

    Args:
        pixels: Array of shape (H, W, 4) with pixel bytes in the memory
            order described by ``pixel_format``
        pixel_format: Layout of the array's last axis (default: straight RGBA)
    """
    if not isinstance(pixels, np.ndarray):
        raise TypeError(f"Expected numpy array, got {type(pixels)}")

    fmt = resolve_format(pixel_format)

    if pixels.ndim != 3 or pixels.shape[2] != fmt.bytes_per_pixel:
        raise ValueError(
            f"Expected (H, W, {fmt.bytes_per_pixel}) array, got shape {pixels.shape}"
        )

    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected uint8 array, got {pixels.dtype}")

    pixels = np.ascontiguousarray(pixels)
    height, width = pixels.shape[:2]

    return Frame(
        data=pixels,
        width=int(width),
        height=int(height),
        bytes_per_row=int(width) * fmt.bytes_per_pixel,
        pixel_format=fmt,
    )


def frame_from_image(path: Union[str, Path]) -> Frame:
    """
    Load an image file as a straight-alpha RGBA8 Frame.

    Requires Pillow. Embedded color profiles are not applied; the frame
    carries the file's nominal color values.
    """
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install colco[image]"
        ) from e

    with Image.open(path) as img:
        if img.mode != "RGBA":
            img = img.convert("RGBA")
        pixels = np.array(img, dtype=np.uint8)

    return frame_from_array(pixels, RGBA8)
