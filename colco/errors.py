# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
Sampler error taxonomy.

All errors are synchronous, non-retryable caller contract violations:
the same inputs always produce the same error. They subclass ValueError
so callers that already guard against bad input keep working.
"""


class SamplerError(ValueError):
    """Base class for every failure raised by the frame color sampler."""


class EmptyRegionError(SamplerError):
    """The region, once clipped to the frame, covers no pixels."""


class UnsupportedFormatError(SamplerError):
    """The pixel format descriptor is not one the sampler can read."""


class OutOfBoundsError(SamplerError):
    """Frame metadata would make the sampler read past the end of its buffer."""
