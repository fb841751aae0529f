# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
Schema definitions for frame color sampling.

All types in this module are immutable (frozen dataclasses).
A Frame is only a view over caller-owned bytes; colors and regions are
plain values that can be handed across threads freely.
"""

from colco.schema.sampling import (
    ABGR8_PREMULTIPLIED,
    ARGB8_PREMULTIPLIED,
    BGRA8,
    BGRA8_PREMULTIPLIED,
    BGRX8,
    NAMED_FORMATS,
    RGBA8,
    RGBA8_PREMULTIPLIED,
    RGBX8,
    AlphaInfo,
    ByteOrder,
    ChannelOrder,
    Frame,
    PixelFormat,
    PixelRect,
    Region,
    RGBAColor,
    SampleMode,
)

__all__ = [
    # Pixel format descriptors
    "ChannelOrder",
    "AlphaInfo",
    "ByteOrder",
    "PixelFormat",
    "NAMED_FORMATS",
    "BGRA8_PREMULTIPLIED",
    "RGBA8_PREMULTIPLIED",
    "ARGB8_PREMULTIPLIED",
    "ABGR8_PREMULTIPLIED",
    "BGRA8",
    "RGBA8",
    "BGRX8",
    "RGBX8",
    # Inputs
    "Frame",
    "Region",
    "PixelRect",
    # Outputs
    "SampleMode",
    "RGBAColor",
]
