# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
Swatch serializer for presentation layers.

Formats an RGBAColor as the string a UI, stylesheet or log line wants.
"""

from __future__ import annotations

import json

from colco.runtime.serializers.base import SerializerFormat
from colco.schema import RGBAColor


def to_swatch(
    color: RGBAColor,
    *,
    format: SerializerFormat = SerializerFormat.HEX,
    precision: int = 3,
) -> str:
    """Serialize a sampled color.

    Args:
        color: The RGBAColor to serialize.
        format: Output format.
        precision: Decimal places for alpha in CSS and for channels in JSON.

    Returns:
        One of::

            HEX          #0000FF
            HEX_RGBA     #0000FF80
            CSS          rgba(0, 0, 255, 0.502)
            JSON         {"r":0.0,"g":0.0,"b":1.0,"a":0.502,"hex":"#0000FF"}
    """
    if format == SerializerFormat.HEX:
        return color.hex

    if format == SerializerFormat.HEX_RGBA:
        return color.hex_rgba

    if format == SerializerFormat.CSS:
        r, g, b, _ = color.to_uint8()
        return f"rgba({r}, {g}, {b}, {_format_alpha(color.a, precision)})"

    data = {
        "r": round(color.r, precision),
        "g": round(color.g, precision),
        "b": round(color.b, precision),
        "a": round(color.a, precision),
        "hex": color.hex,
    }

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    elif format == SerializerFormat.JSON:
        return json.dumps(data, separators=(",", ":"))
    else:
        raise ValueError(f"Unknown serializer format: {format!r}")


def _format_alpha(alpha: float, precision: int) -> str:
    """Alpha without trailing zeros: 1, 0, 0.502."""
    text = f"{alpha:.{precision}f}".rstrip("0").rstrip(".")
    return text or "0"
