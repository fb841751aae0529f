# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
Value types for frame color sampling.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same (frame, region, mode) → same color
- Transient frames: a Frame is a view the caller owns; nothing here
  copies or retains the pixel buffer

Coordinates are frame pixel coordinates: origin at the top-left of the
buffer, x to the right, y down. Colors are normalized RGBA in [0, 1] in
the buffer's nominal color space; no color management is applied.
"""

from __future__ import annotations

import math
from numbers import Integral
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from colco.errors import UnsupportedFormatError


# =============================================================================
# Pixel Format Descriptors
# =============================================================================


class ChannelOrder(Enum):
    """
    Lane order of a packed 32-bit pixel word, most significant lane first.

    With ByteOrder.BIG the lanes appear in memory in this order; with
    ByteOrder.LITTLE they appear reversed.
    """
    RGBA = "RGBA"
    BGRA = "BGRA"
    ARGB = "ARGB"
    ABGR = "ABGR"


class AlphaInfo(Enum):
    """How the alpha lane relates to the color lanes."""
    PREMULTIPLIED = "premultiplied"  # Color lanes already scaled by alpha
    STRAIGHT = "straight"            # Color lanes independent of alpha
    NONE = "none"                    # Alpha lane is padding; pixel is opaque


class ByteOrder(Enum):
    """Byte order of the 32-bit pixel word."""
    BIG = "big"        # Memory order matches ChannelOrder
    LITTLE = "little"  # Memory order is ChannelOrder reversed


@dataclass(frozen=True, slots=True)
class PixelFormat:
    """
    Explicit descriptor of a packed pixel layout.

    The sampler reads lanes according to this descriptor and never assumes
    a fixed in-memory order. Descriptors can be built freely; whether the
    sampler supports one is decided when it is resolved for reading.

    Attributes:
        order: Lane order of the pixel word
        alpha: Alpha interpretation
        byte_order: Whether memory order follows or reverses ``order``
        bits_per_component: Bits per lane (only 8 is readable)
        bits_per_pixel: Bits per pixel (only 32 is readable)
    """
    order: ChannelOrder
    alpha: AlphaInfo
    byte_order: ByteOrder = ByteOrder.BIG
    bits_per_component: int = 8
    bits_per_pixel: int = 32

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def memory_order(self) -> str:
        """Lane letters in the order they appear in memory, e.g. ``"BGRA"``."""
        lanes = self.order.value
        return lanes if self.byte_order is ByteOrder.BIG else lanes[::-1]

    @property
    def name(self) -> str | None:
        """Registered name of this descriptor, if it has one."""
        for name, fmt in NAMED_FORMATS.items():
            if fmt == self:
                return name
        return None

    @classmethod
    def from_name(cls, name: str) -> PixelFormat:
        """
        Resolve a registered format name such as ``"BGRA8_PREMULTIPLIED"``.

        Raises:
            UnsupportedFormatError: If the name is not registered
        """
        fmt = NAMED_FORMATS.get(name.strip().upper())
        if fmt is None:
            raise UnsupportedFormatError(
                f"Unknown pixel format {name!r}; "
                f"expected one of {', '.join(sorted(NAMED_FORMATS))}"
            )
        return fmt

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "order": self.order.value,
            "alpha": self.alpha.value,
            "byte_order": self.byte_order.value,
            "bits_per_component": self.bits_per_component,
            "bits_per_pixel": self.bits_per_pixel,
        }

    @classmethod
    def from_dict(cls, data: dict) -> PixelFormat:
        """Deserialize from dictionary."""
        return cls(
            order=ChannelOrder(data["order"]),
            alpha=AlphaInfo(data["alpha"]),
            byte_order=ByteOrder(data.get("byte_order", "big")),
            bits_per_component=data.get("bits_per_component", 8),
            bits_per_pixel=data.get("bits_per_pixel", 32),
        )


# Common capture layouts, named by their in-memory byte order.
BGRA8_PREMULTIPLIED = PixelFormat(ChannelOrder.BGRA, AlphaInfo.PREMULTIPLIED)
RGBA8_PREMULTIPLIED = PixelFormat(ChannelOrder.RGBA, AlphaInfo.PREMULTIPLIED)
ARGB8_PREMULTIPLIED = PixelFormat(ChannelOrder.ARGB, AlphaInfo.PREMULTIPLIED)
ABGR8_PREMULTIPLIED = PixelFormat(ChannelOrder.ABGR, AlphaInfo.PREMULTIPLIED)
BGRA8 = PixelFormat(ChannelOrder.BGRA, AlphaInfo.STRAIGHT)
RGBA8 = PixelFormat(ChannelOrder.RGBA, AlphaInfo.STRAIGHT)
BGRX8 = PixelFormat(ChannelOrder.BGRA, AlphaInfo.NONE)
RGBX8 = PixelFormat(ChannelOrder.RGBA, AlphaInfo.NONE)

NAMED_FORMATS: dict[str, PixelFormat] = {
    "BGRA8_PREMULTIPLIED": BGRA8_PREMULTIPLIED,
    "RGBA8_PREMULTIPLIED": RGBA8_PREMULTIPLIED,
    "ARGB8_PREMULTIPLIED": ARGB8_PREMULTIPLIED,
    "ABGR8_PREMULTIPLIED": ABGR8_PREMULTIPLIED,
    "BGRA8": BGRA8,
    "RGBA8": RGBA8,
    "BGRX8": BGRX8,
    "RGBX8": RGBX8,
}


# =============================================================================
# Frame
# =============================================================================


@dataclass(frozen=True, slots=True, eq=False)
class Frame:
    """
    Immutable view over a decoded video frame.

    The buffer is owned by the caller for the duration of a sampling call
    only. Capture layers reuse their buffers, so nothing in ColCo keeps a
    reference to ``data`` after returning.

    Attributes:
        data: Any buffer-protocol object (bytes, bytearray, memoryview,
            C-contiguous numpy array) holding the pixel bytes
        width: Frame width in pixels
        height: Frame height in pixels
        bytes_per_row: Row stride in bytes (may include padding)
        pixel_format: PixelFormat descriptor or a registered format name
    """
    data: Any
    width: int
    height: int
    bytes_per_row: int
    pixel_format: Union[PixelFormat, str]

    def __post_init__(self) -> None:
        """Validate frame dimensions."""
        if not isinstance(self.width, Integral) or self.width <= 0:
            raise ValueError(f"Frame width must be a positive integer, got {self.width!r}")
        if not isinstance(self.height, Integral) or self.height <= 0:
            raise ValueError(f"Frame height must be a positive integer, got {self.height!r}")
        if not isinstance(self.bytes_per_row, Integral) or self.bytes_per_row <= 0:
            raise ValueError(
                f"bytes_per_row must be a positive integer, got {self.bytes_per_row!r}"
            )

    @property
    def bounds(self) -> Region:
        """The whole frame as a Region."""
        return Region(0.0, 0.0, float(self.width), float(self.height))


# =============================================================================
# Regions
# =============================================================================


@dataclass(frozen=True, slots=True)
class Region:
    """
    A region of interest in frame pixel coordinates.

    Boundaries may be fractional. A zero-size region is a point and
    requests the single pixel containing it.
    """
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        """Reject NaN and infinite coordinates."""
        for name in ("x", "y", "width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"Region {name} must be finite, got {value!r}")

    @classmethod
    def point(cls, x: float, y: float) -> Region:
        """A degenerate region selecting the pixel that contains (x, y)."""
        return cls(x, y, 0.0, 0.0)

    @classmethod
    def centered(cls, cx: float, cy: float, width: float, height: float) -> Region:
        """A region of the given size centered on (cx, cy)."""
        return cls(cx - width / 2, cy - height / 2, width, height)

    @property
    def is_point(self) -> bool:
        return self.width == 0 and self.height == 0

    def standardized(self) -> Region:
        """Equivalent region with non-negative width and height."""
        x, width = (self.x + self.width, -self.width) if self.width < 0 else (self.x, self.width)
        y, height = (self.y + self.height, -self.height) if self.height < 0 else (self.y, self.height)
        return Region(x, y, width, height)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> Region:
        """Deserialize from dictionary."""
        return cls(
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
        )


@dataclass(frozen=True, slots=True)
class PixelRect:
    """
    An integral, non-empty rectangle of pixels inside a frame.

    Produced by clipping a Region; covers columns ``[x, x_max)`` and rows
    ``[y, y_max)``.
    """
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate the rectangle is integral and non-empty."""
        for name in ("x", "y", "width", "height"):
            value = getattr(self, name)
            if not isinstance(value, Integral):
                raise ValueError(f"PixelRect {name} must be an integer, got {value!r}")
        if self.x < 0 or self.y < 0:
            raise ValueError(f"PixelRect origin must be >= 0, got ({self.x}, {self.y})")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"PixelRect must be non-empty, got {self.width}x{self.height}"
            )

    @property
    def x_max(self) -> int:
        return self.x + self.width

    @property
    def y_max(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height


# =============================================================================
# Sampling Results
# =============================================================================


class SampleMode(Enum):
    """
    How a region is reduced to one color.

    CENTER_PIXEL is cheapest; AVERAGE_REGION is the most stable on a noisy
    camera feed; DOMINANT_PIXEL returns a color that actually occurs in the
    region (the most frequent one).
    """
    CENTER_PIXEL = "center_pixel"
    AVERAGE_REGION = "average_region"
    DOMINANT_PIXEL = "dominant_pixel"


@dataclass(frozen=True, slots=True)
class RGBAColor:
    """
    An un-premultiplied RGBA color with channels in [0.0, 1.0].

    Invariant: a fully transparent color has all channels at 0.0.

    Attributes:
        r: Red
        g: Green
        b: Blue
        a: Alpha (0.0 = transparent, 1.0 = opaque)
    """
    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        """Validate channel ranges and the transparent-is-zero invariant."""
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Channel {name} must be 0-1, got {value!r}")
        if self.a == 0.0 and (self.r or self.g or self.b):
            raise ValueError(
                f"Transparent color must have zero channels, got "
                f"({self.r}, {self.g}, {self.b})"
            )

    @classmethod
    def transparent(cls) -> RGBAColor:
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_hex(cls, hex_color: str) -> RGBAColor:
        """Parse ``#RRGGBB`` or ``#RRGGBBAA``."""
        from colco.sample.colorspace import hex_to_rgba
        return cls(*hex_to_rgba(hex_color))

    @property
    def is_transparent(self) -> bool:
        return self.a == 0.0

    def to_uint8(self) -> tuple[int, int, int, int]:
        """Channels scaled to 0-255 and rounded."""
        from colco.sample.colorspace import unit_to_uint8
        return unit_to_uint8((self.r, self.g, self.b, self.a))

    @property
    def hex(self) -> str:
        """
        Hex string of the color channels, alpha dropped.

        Returns:
            Hex string like "#3941C8"
        """
        r, g, b, _ = self.to_uint8()
        return f"#{r:02X}{g:02X}{b:02X}"

    @property
    def hex_rgba(self) -> str:
        """Hex string including alpha, like "#3941C880"."""
        r, g, b, a = self.to_uint8()
        return f"#{r:02X}{g:02X}{b:02X}{a:02X}"

    def to_dict(self, include_hex: bool = False) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_hex: If True, include the ``#RRGGBB`` hex value
        """
        d = {"r": self.r, "g": self.g, "b": self.b, "a": self.a}
        if include_hex:
            d["hex"] = self.hex
        return d

    @classmethod
    def from_dict(cls, data: dict) -> RGBAColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data.get("a", 1.0))
