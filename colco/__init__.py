# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
ColCo -- Frame color sampler for camera color pickers.

Reads one representative color out of a raw video frame: a guide
square (or any region) in frame pixel coordinates goes in, an
un-premultiplied RGBA color comes out.

Quick start::

    from colco import Frame, Region, SampleMode, sample, BGRA8_PREMULTIPLIED

    frame = Frame(buffer, width, height, bytes_per_row, BGRA8_PREMULTIPLIED)
    color = sample(frame, Region(940, 520, 40, 40), SampleMode.AVERAGE_REGION)
    color.hex        # "#3941C8"
"""

from __future__ import annotations

__version__ = "1.0.0"

from colco.errors import (
    EmptyRegionError,
    OutOfBoundsError,
    SamplerError,
    UnsupportedFormatError,
)
from colco.sample import guide_region, sample
from colco.schema import (
    BGRA8,
    BGRA8_PREMULTIPLIED,
    RGBA8,
    RGBA8_PREMULTIPLIED,
    Frame,
    PixelFormat,
    Region,
    RGBAColor,
    SampleMode,
)

__all__ = [
    # Core API
    "sample",
    "guide_region",
    # Types (commonly needed)
    "Frame",
    "Region",
    "RGBAColor",
    "SampleMode",
    "PixelFormat",
    "BGRA8_PREMULTIPLIED",
    "RGBA8_PREMULTIPLIED",
    "BGRA8",
    "RGBA8",
    # Errors
    "SamplerError",
    "EmptyRegionError",
    "UnsupportedFormatError",
    "OutOfBoundsError",
    # Version
    "__version__",
]
