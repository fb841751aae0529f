# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""
One-shot color snapping for a live frame feed.

The shutter arms a latch; the next frame that can be sampled produces a
color, disarms the latch and is handed to the caller. Frames that fail
to sample are logged and skipped, since another frame arrives a moment
later.

The session computes values and hands them over. It never touches UI
state itself: ``on_color`` runs on the thread that delivered the frame,
and the caller marshals it wherever presentation state lives.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Final, Optional

from colco.errors import SamplerError
from colco.schema import Frame, RGBAColor, SampleMode
from colco.sample.extract import sample
from colco.sample.regions import guide_region

LOG: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapConfig:
    """Configuration for guide-square snapping."""

    # Guide square size in screen points
    guide_width: float = 50.0
    guide_height: float = 50.0

    # Frame pixels per screen point, supplied by the presentation layer
    # from its own preview geometry
    scale: float = 1.0

    mode: SampleMode = SampleMode.AVERAGE_REGION


class SnapSession:
    """
    Latch that turns the next sampleable frame into a color.

    Thread-safe: ``request``/``cancel`` may be called from a UI thread
    while ``process_frame`` runs on a capture thread. Each request yields
    at most one color.

    Example:
        >>> session = SnapSession(on_color=swatch.set)
        >>> session.request()
        >>> for frame in feed:
        ...     session.process_frame(frame)
    """

    def __init__(
        self,
        config: Optional[SnapConfig] = None,
        on_color: Optional[Callable[[RGBAColor], None]] = None,
    ) -> None:
        self.config = config or SnapConfig()
        self._on_color = on_color
        self._lock = threading.Lock()
        self._armed = False
        self._last_color: Optional[RGBAColor] = None
        self._skipped = 0
        self._request_id = 0

    @property
    def armed(self) -> bool:
        with self._lock:
            return self._armed

    @property
    def last_color(self) -> Optional[RGBAColor]:
        """Most recently delivered color, or None before the first snap."""
        with self._lock:
            return self._last_color

    @property
    def skipped(self) -> int:
        """Frames skipped because sampling failed while armed."""
        with self._lock:
            return self._skipped

    def request(self) -> None:
        """Arm the latch; the next sampleable frame produces a color."""
        with self._lock:
            self._armed = True
            self._request_id += 1

    def cancel(self) -> None:
        """Disarm without producing a color."""
        with self._lock:
            self._armed = False

    def process_frame(self, frame: Frame) -> Optional[RGBAColor]:
        """
        Offer a frame to the session.

        Sampling runs outside the lock, so ``request``/``cancel`` never
        wait on a frame being read. A color is kept only if the request
        it was sampled for is still armed when sampling finishes; a
        cancel or a newer request in the meantime discards it.

        Returns:
            The sampled color if the latch was armed and sampling
            succeeded, otherwise None. Frames offered while disarmed are
            not read at all.
        """
        cfg = self.config

        with self._lock:
            if not self._armed:
                return None
            request_id = self._request_id

        try:
            region = guide_region(
                frame.width,
                frame.height,
                cfg.guide_width,
                cfg.guide_height,
                scale=cfg.scale,
            )
            color = sample(frame, region, mode=cfg.mode)
        except SamplerError as e:
            with self._lock:
                self._skipped += 1
            LOG.warning("Skipping %dx%d frame: %s", frame.width, frame.height, e)
            return None

        with self._lock:
            if not self._armed or self._request_id != request_id:
                return None
            self._armed = False
            self._last_color = color

        LOG.debug("Snapped %s (alpha %.3f)", color.hex, color.a)

        if self._on_color is not None:
            self._on_color(color)

        return color
