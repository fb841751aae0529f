# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
Alpha and channel-scale conversions.

Conversion: premultiplied bytes [0,255] → straight unit RGBA [0,1]

Values stay in the buffer's nominal color space. Gamma, wide-gamut
mapping and any other display adaptation belong to the presentation
layer, not here.

All conversions are pure NumPy for determinism.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Premultiplied ↔ Straight Alpha
# =============================================================================


def unpremultiply(
    premultiplied: NDArray[np.float64],
    alpha: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Recover straight unit RGBA from premultiplied byte-scale values.

    For each pixel, channel = (c / 255) / (a / 255), clamped to [0, 1].
    The clamp absorbs encoder noise where a channel byte exceeds its
    alpha byte. Where alpha is 0 every output channel is 0.0; no NaN or
    Inf is produced.

    Args:
        premultiplied: Array of shape (..., 3) with premultiplied R, G, B
            in byte scale [0, 255] (may be fractional after averaging)
        alpha: Array of shape (...) with alpha in byte scale [0, 255]

    Returns:
        Array of shape (..., 4) with straight R, G, B, A in [0, 1]
    """
    premultiplied = np.asarray(premultiplied, dtype=np.float64)
    alpha = np.asarray(alpha, dtype=np.float64)

    a_unit = (alpha / 255.0)[..., np.newaxis]
    opaque_enough = a_unit > 0.0

    # Divide only where alpha is non-zero
    safe_alpha = np.where(opaque_enough, a_unit, 1.0)
    rgb = (premultiplied / 255.0) / safe_alpha
    rgb = np.where(opaque_enough, np.clip(rgb, 0.0, 1.0), 0.0)

    return np.concatenate([rgb, np.clip(a_unit, 0.0, 1.0)], axis=-1)


# =============================================================================
# Unit ↔ Byte Scale
# =============================================================================


def unit_to_uint8(values: Sequence[float]) -> tuple[int, ...]:
    """Scale unit-range channels to 0-255 integers (round half to even)."""
    scaled = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0) * 255.0
    return tuple(int(v) for v in scaled.round())


def uint8_to_unit(values: Sequence[int]) -> tuple[float, ...]:
    """Scale 0-255 channel bytes to [0, 1]."""
    return tuple(int(v) / 255.0 for v in values)


def hex_to_rgba(hex_color: str) -> tuple[float, float, float, float]:
    """
    Parse a hex color string to unit RGBA.

    Args:
        hex_color: ``#RRGGBB`` or ``#RRGGBBAA`` (leading ``#`` optional)

    Returns:
        Tuple of (r, g, b, a) in [0, 1]; alpha is 1.0 when omitted
    """
    hex_color = hex_color.lstrip("#")
    if len(hex_color) not in (6, 8):
        raise ValueError(f"Expected 6 or 8 hex digits, got {hex_color!r}")

    channels = [int(hex_color[i:i + 2], 16) for i in range(0, len(hex_color), 2)]
    if len(channels) == 3:
        channels.append(255)

    r, g, b, a = uint8_to_unit(channels)
    if a == 0.0:
        return 0.0, 0.0, 0.0, 0.0
    return r, g, b, a
