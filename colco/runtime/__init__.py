# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
Delivery runtime for ColCo.

Connects the pure sampler to a live frame feed and formats the result
for display:

1. Snap Session -- one-shot latch fed from a capture callback
2. Serializers -- hex, CSS and JSON swatch strings

The runtime never modifies sampled values.
"""

from colco.runtime.serializers import SerializerFormat, to_swatch
from colco.runtime.snap import SnapConfig, SnapSession

__all__ = [
    "SnapConfig",
    "SnapSession",
    "to_swatch",
    "SerializerFormat",
]
