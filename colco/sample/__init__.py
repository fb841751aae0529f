# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
Sampling core for ColCo.

This module provides deterministic color sampling from raw frame buffers.
All operations are pure and safe to call concurrently on separate frames.
"""

from colco.sample.extract import read_pixels, sample
from colco.sample.frames import frame_from_array, frame_from_image
from colco.sample.regions import center_pixel, clip_region, guide_region

__all__ = [
    "sample",
    "read_pixels",
    "clip_region",
    "center_pixel",
    "guide_region",
    "frame_from_array",
    "frame_from_image",
]
