# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
Serializers for sampled colors.

Each serializer formats an RGBAColor for a presentation surface.
All serializers preserve the sampled value -- no color management.
"""

from colco.runtime.serializers.base import SerializerFormat
from colco.runtime.serializers.swatch import to_swatch

__all__ = [
    "SerializerFormat",
    "to_swatch",
]
