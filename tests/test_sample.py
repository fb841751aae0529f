# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""Integration tests for the sample() entry point."""

import numpy as np
import pytest

from colco import (
    BGRA8,
    BGRA8_PREMULTIPLIED,
    RGBA8,
    RGBA8_PREMULTIPLIED,
    EmptyRegionError,
    Frame,
    OutOfBoundsError,
    PixelFormat,
    Region,
    RGBAColor,
    SampleMode,
    UnsupportedFormatError,
    sample,
)
from colco.schema import BGRX8, AlphaInfo, ByteOrder, ChannelOrder


def _solid_frame(lanes, width=8, height=8, pixel_format=BGRA8_PREMULTIPLIED, padding=0):
    """Frame where every pixel has the same four memory-order bytes."""
    row = bytes(lanes) * width + bytes(padding)
    return Frame(
        data=row * height,
        width=width,
        height=height,
        bytes_per_row=width * 4 + padding,
        pixel_format=pixel_format,
    )


def _gradient_frame(width=4, height=4):
    """Opaque RGBA frame where pixel (x, y) is R=10x, G=10y, B=0."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            pixels[y, x] = [10 * x, 10 * y, 0, 255]
    return Frame(pixels, width, height, width * 4, RGBA8_PREMULTIPLIED)


def _row_frame(pixels, pixel_format=RGBA8_PREMULTIPLIED):
    """One-row frame from a list of memory-order 4-byte pixels."""
    data = b"".join(bytes(p) for p in pixels)
    return Frame(data, len(pixels), 1, 4 * len(pixels), pixel_format)


class TestCenterPixel:

    def test_premultiplied_bgra_blue(self):
        frame = _solid_frame((128, 0, 0, 128), width=1, height=1)
        color = sample(frame, Region.point(0, 0), SampleMode.CENTER_PIXEL)
        assert color.r == 0.0
        assert color.g == 0.0
        assert color.b == 1.0
        assert color.a == pytest.approx(0.5, abs=0.005)
        assert color.a == 128 / 255

    def test_floor_of_center(self):
        frame = _gradient_frame()
        color = sample(frame, Region(0, 0, 4, 4), SampleMode.CENTER_PIXEL)
        assert color.to_uint8() == (20, 20, 0, 255)

    def test_center_of_offset_region(self):
        frame = _gradient_frame()
        # Columns 1-2, rows 1-3 -> center pixel (2, 2)
        color = sample(frame, Region(1, 1, 2, 3), SampleMode.CENTER_PIXEL)
        assert color.to_uint8() == (20, 20, 0, 255)

    def test_fractional_center_on_pixel_edge(self):
        frame = _gradient_frame()
        # [0.5, 1.5) has center 1.0 -> pixel (1, 1)
        color = sample(frame, Region(0.5, 0.5, 1.0, 1.0), SampleMode.CENTER_PIXEL)
        assert color.to_uint8() == (10, 10, 0, 255)

    @pytest.mark.parametrize("x, expected", [
        (0.2, 0),   # [0.2, 1.2) center 0.7
        (0.9, 1),   # [0.9, 1.9) center 1.4
        (1.6, 2),   # [1.6, 2.6) center 2.1
    ])
    def test_fractional_center_is_not_rounded_first(self, x, expected):
        frame = _gradient_frame(width=4, height=1)
        color = sample(frame, Region(x, 0, 1.0, 1.0), SampleMode.CENTER_PIXEL)
        assert color.to_uint8() == (10 * expected, 0, 0, 255)

    def test_center_of_partly_outside_region(self):
        frame = _gradient_frame(width=4, height=1)
        # Clipped to [0, 2) -> center 1.0
        color = sample(frame, Region(-10, 0, 12, 1), SampleMode.CENTER_PIXEL)
        assert color.to_uint8() == (10, 0, 0, 255)

    def test_point_selects_containing_pixel(self):
        frame = _gradient_frame()
        color = sample(frame, Region.point(3.9, 1.2), SampleMode.CENTER_PIXEL)
        assert color.to_uint8() == (30, 10, 0, 255)

    def test_channel_above_alpha_is_clamped(self):
        frame = _solid_frame((200, 10, 0, 100), width=1, height=1,
                             pixel_format=RGBA8_PREMULTIPLIED)
        color = sample(frame, Region.point(0, 0), SampleMode.CENTER_PIXEL)
        assert color.r == 1.0
        assert color.g == pytest.approx(0.1)
        assert color.a == pytest.approx(100 / 255)


class TestTransparentPixels:

    @pytest.mark.parametrize("mode", list(SampleMode))
    def test_zero_alpha_is_all_zero(self, mode):
        frame = _solid_frame((200, 100, 50, 0), width=3, height=3)
        color = sample(frame, Region(0, 0, 3, 3), mode)
        assert color == RGBAColor(0.0, 0.0, 0.0, 0.0)
        assert color.is_transparent

    def test_straight_zero_alpha_is_all_zero(self):
        frame = _solid_frame((255, 255, 255, 0), width=2, height=2, pixel_format=RGBA8)
        color = sample(frame, Region(0, 0, 2, 2))
        assert color == RGBAColor.transparent()

    def test_no_nan(self):
        frame = _row_frame([(255, 0, 0, 0), (0, 255, 0, 0)])
        color = sample(frame, Region(0, 0, 2, 1))
        assert not any(np.isnan([color.r, color.g, color.b, color.a]))


class TestAverageRegion:

    @pytest.mark.parametrize("size", [1, 2, 5, 8])
    def test_uniform_region_returns_exact_color(self, size):
        frame = _solid_frame((30, 60, 90, 200))
        single = sample(frame, Region.point(0, 0), SampleMode.CENTER_PIXEL)
        averaged = sample(frame, Region(0, 0, size, size), SampleMode.AVERAGE_REGION)
        assert averaged == single

    @pytest.mark.parametrize("origin", [(0, 0), (3, 2), (4.5, 6.25)])
    def test_uniform_region_independent_of_position(self, origin):
        frame = _solid_frame((17, 34, 51, 255))
        color = sample(frame, Region(origin[0], origin[1], 2, 2))
        assert color.to_uint8() == (51, 34, 17, 255)

    def test_mean_of_gradient_row(self):
        frame = _gradient_frame()
        color = sample(frame, Region(0, 0, 2, 1))
        assert color.r == pytest.approx(5 / 255)
        assert color.g == 0.0
        assert color.a == 1.0

    def test_averages_in_premultiplied_space(self):
        """A nearly transparent pixel barely tints an opaque one."""
        frame = _row_frame([(255, 0, 0, 255), (0, 0, 2, 2)])
        color = sample(frame, Region(0, 0, 2, 1))

        assert color.r == pytest.approx(127.5 / 128.5)
        assert color.b == pytest.approx(1.0 / 128.5)
        assert color.a == pytest.approx(128.5 / 255)
        # Averaging already un-premultiplied colors would give 0.5 / 0.5
        assert color.r > 0.99
        assert color.b < 0.01

    def test_straight_alpha_weighted_like_premultiplied(self):
        premultiplied = sample(
            _row_frame([(255, 0, 0, 255), (0, 0, 2, 2)]), Region(0, 0, 2, 1)
        )
        straight = sample(
            _row_frame([(255, 0, 0, 255), (0, 0, 255, 2)], pixel_format=RGBA8),
            Region(0, 0, 2, 1),
        )
        assert straight.r == pytest.approx(premultiplied.r)
        assert straight.b == pytest.approx(premultiplied.b)
        assert straight.a == pytest.approx(premultiplied.a)

    def test_whole_frame(self):
        frame = _solid_frame((0, 0, 255, 255), width=16, height=9)
        color = sample(frame, frame.bounds)
        assert color.hex == "#FF0000"

    def test_region_larger_than_frame_is_clipped(self):
        frame = _solid_frame((0, 255, 0, 255), width=4, height=4)
        color = sample(frame, Region(-100, -100, 1000, 1000))
        assert color.hex == "#00FF00"


class TestDominantPixel:

    def test_most_frequent_wins(self):
        frame = _row_frame([(255, 0, 0, 255), (0, 0, 255, 255), (0, 0, 255, 255)])
        color = sample(frame, Region(0, 0, 3, 1), SampleMode.DOMINANT_PIXEL)
        assert color.hex == "#0000FF"

    def test_tie_goes_to_first_in_raster_order(self):
        frame = _row_frame([(0, 255, 0, 255), (255, 0, 0, 255)])
        color = sample(frame, Region(0, 0, 2, 1), SampleMode.DOMINANT_PIXEL)
        assert color.hex == "#00FF00"

    def test_result_is_unpremultiplied(self):
        frame = _row_frame([(64, 0, 0, 128), (64, 0, 0, 128), (0, 0, 0, 255)])
        color = sample(frame, Region(0, 0, 3, 1), SampleMode.DOMINANT_PIXEL)
        assert color.r == pytest.approx(0.5)
        assert color.a == 128 / 255


class TestPixelFormats:

    def test_bgra_and_rgba_agree(self):
        bgra = _solid_frame((10, 20, 30, 255), pixel_format=BGRA8_PREMULTIPLIED)
        rgba = _solid_frame((30, 20, 10, 255), pixel_format=RGBA8_PREMULTIPLIED)
        assert sample(bgra, Region(0, 0, 4, 4)) == sample(rgba, Region(0, 0, 4, 4))

    def test_little_endian_argb_reads_as_bgra(self):
        argb_little = PixelFormat(
            ChannelOrder.ARGB, AlphaInfo.PREMULTIPLIED, byte_order=ByteOrder.LITTLE
        )
        lanes = (10, 20, 30, 200)
        expected = sample(_solid_frame(lanes), Region(0, 0, 2, 2))
        actual = sample(_solid_frame(lanes, pixel_format=argb_little), Region(0, 0, 2, 2))
        assert actual == expected

    def test_padding_alpha_lane_is_ignored(self):
        frame = _solid_frame((10, 20, 30, 0), pixel_format=BGRX8)
        color = sample(frame, Region(0, 0, 2, 2))
        assert color.to_uint8() == (30, 20, 10, 255)

    def test_straight_bgra(self):
        frame = _solid_frame((255, 0, 0, 128), pixel_format=BGRA8)
        color = sample(frame, Region(0, 0, 2, 2))
        assert color.b == 1.0
        assert color.a == 128 / 255

    def test_format_by_name(self):
        frame = _solid_frame((0, 0, 255, 255), pixel_format="bgra8_premultiplied")
        assert sample(frame, Region(0, 0, 1, 1)).hex == "#FF0000"

    def test_row_padding(self):
        pixels = [
            # Row 0: two pixels then 8 padding bytes
            (255, 0, 0, 255), (0, 255, 0, 255), (9, 9, 9, 9), (9, 9, 9, 9),
            # Row 1
            (0, 0, 255, 255), (128, 128, 128, 255), (9, 9, 9, 9), (9, 9, 9, 9),
        ]
        data = b"".join(bytes(p) for p in pixels)
        frame = Frame(data, 2, 2, 16, RGBA8_PREMULTIPLIED)
        assert sample(frame, Region.point(1, 1), SampleMode.CENTER_PIXEL).hex == "#808080"
        assert sample(frame, Region.point(0, 1), SampleMode.CENTER_PIXEL).hex == "#0000FF"

    def test_numpy_buffer(self):
        pixels = np.full((3, 5, 4), [0, 0, 255, 255], dtype=np.uint8)
        frame = Frame(pixels, 5, 3, 20, BGRA8_PREMULTIPLIED)
        assert sample(frame, Region(1, 1, 2, 2)).hex == "#FF0000"


class TestErrors:

    @pytest.mark.parametrize("region", [
        Region(100, 100, 5, 5),
        Region(-10, -10, 5, 5),
        Region(8, 0, 4, 4),
        Region(0, -4, 8, 4),
        Region.point(8, 3),
    ])
    def test_region_outside_frame(self, region):
        frame = _solid_frame((1, 2, 3, 255))
        with pytest.raises(EmptyRegionError):
            sample(frame, region)

    def test_empty_region_for_every_mode(self):
        frame = _solid_frame((1, 2, 3, 255))
        for mode in SampleMode:
            with pytest.raises(EmptyRegionError):
                sample(frame, Region(50, 50, 1, 1), mode)

    def test_unsupported_depth(self):
        fmt = PixelFormat(
            ChannelOrder.RGBA, AlphaInfo.PREMULTIPLIED,
            bits_per_component=16, bits_per_pixel=64,
        )
        frame = _solid_frame((1, 2, 3, 255), pixel_format=fmt)
        with pytest.raises(UnsupportedFormatError, match="depth"):
            sample(frame, Region(0, 0, 1, 1))

    def test_unknown_format_name(self):
        frame = _solid_frame((1, 2, 3, 255), pixel_format="YUV420_BIPLANAR")
        with pytest.raises(UnsupportedFormatError, match="Unknown pixel format"):
            sample(frame, Region(0, 0, 1, 1))

    def test_unknown_channel_order(self):
        fmt = PixelFormat("YCbCr", AlphaInfo.NONE)
        frame = _solid_frame((1, 2, 3, 255), pixel_format=fmt)
        with pytest.raises(UnsupportedFormatError, match="channel order"):
            sample(frame, Region(0, 0, 1, 1))

    def test_unsupported_format_checked_before_region(self):
        frame = _solid_frame((1, 2, 3, 255), pixel_format="RGB565")
        with pytest.raises(UnsupportedFormatError):
            sample(frame, Region(100, 100, 1, 1))

    def test_buffer_shorter_than_declared_height(self):
        frame = Frame(bytes(40), 4, 4, 16, RGBA8_PREMULTIPLIED)
        with pytest.raises(OutOfBoundsError, match="buffer holds 40"):
            sample(frame, Region(0, 0, 4, 4))

    @pytest.mark.parametrize("mode", list(SampleMode))
    def test_short_buffer_rejected_for_rows_it_has(self, mode):
        frame = Frame(bytes([0, 0, 255, 255]) * 10, 4, 4, 16, RGBA8_PREMULTIPLIED)
        with pytest.raises(OutOfBoundsError, match="needs 64 bytes"):
            sample(frame, Region(0, 0, 4, 2), mode)

    def test_last_row_may_omit_padding(self):
        # Two 2-pixel rows at stride 16: 16 + 8 bytes
        data = bytes([0, 0, 255, 255]) * 2 + bytes(8) + bytes([0, 0, 255, 255]) * 2
        frame = Frame(data, 2, 2, 16, RGBA8_PREMULTIPLIED)
        assert sample(frame, frame.bounds).hex == "#0000FF"

    def test_stride_shorter_than_row(self):
        frame = Frame(bytes(64), 4, 4, 8, RGBA8_PREMULTIPLIED)
        with pytest.raises(OutOfBoundsError, match="bytes_per_row"):
            sample(frame, Region(0, 0, 1, 1))

    def test_oversized_stride(self):
        frame = Frame(bytes(64), 4, 4, 1024, RGBA8_PREMULTIPLIED)
        with pytest.raises(OutOfBoundsError):
            sample(frame, Region(0, 2, 1, 1), SampleMode.CENTER_PIXEL)

    def test_errors_are_value_errors(self):
        frame = _solid_frame((1, 2, 3, 255))
        with pytest.raises(ValueError):
            sample(frame, Region(100, 100, 1, 1))

    def test_invalid_mode(self):
        frame = _solid_frame((1, 2, 3, 255))
        with pytest.raises(ValueError, match="Expected SampleMode"):
            sample(frame, Region(0, 0, 1, 1), "average")

    def test_non_buffer_data(self):
        frame = Frame(12345, 1, 1, 4, RGBA8_PREMULTIPLIED)
        with pytest.raises(TypeError, match="buffer protocol"):
            sample(frame, Region(0, 0, 1, 1))

    def test_non_contiguous_array(self):
        pixels = np.zeros((4, 8, 4), dtype=np.uint8)[:, ::2]
        frame = Frame(pixels, 4, 4, 16, RGBA8_PREMULTIPLIED)
        with pytest.raises(ValueError, match="C-contiguous"):
            sample(frame, Region(0, 0, 1, 1))


class TestSampleDeterminism:

    def test_same_input_same_output(self):
        frame = _gradient_frame()
        region = Region(0.3, 1.7, 2.2, 1.9)
        for mode in SampleMode:
            assert sample(frame, region, mode) == sample(frame, region, mode)

    def test_buffer_not_modified(self):
        data = bytearray(bytes([10, 20, 30, 0]) * 16)
        frame = Frame(data, 4, 4, 16, BGRX8)
        before = bytes(data)
        sample(frame, Region(0, 0, 4, 4))
        assert bytes(data) == before
