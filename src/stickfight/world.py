"""Game world: the ground line and the view the arena is drawn in."""

from __future__ import annotations

import logging
from typing import NamedTuple

from stickfight.config import WorldSettings

logger = logging.getLogger(__name__)


class Bounds(NamedTuple):
    width: float
    height: float


class GameWorld:
    """Shared arena geometry read by every controller and animator.

    The ground line is kept inside ``[0, view_height]``.  Controllers cache it
    and must call their own refresh after :meth:`set_ground_y` or a resize.
    """

    def __init__(
        self,
        view_width: float,
        view_height: float,
        ground_y: float | None = None,
    ) -> None:
        self._view_width = view_width
        self._view_height = view_height
        self._ground_y = self._clamp(view_height * 0.85 if ground_y is None else ground_y)

    @classmethod
    def from_settings(cls, settings: WorldSettings) -> GameWorld:
        return cls(settings.view_width, settings.view_height, settings.resolved_ground_y())

    @property
    def view_width(self) -> float:
        return self._view_width

    @property
    def view_height(self) -> float:
        return self._view_height

    def ground_y(self) -> float:
        return self._ground_y

    def set_ground_y(self, y: float) -> None:
        self._ground_y = self._clamp(y)
        logger.debug("Ground line moved to %.2f", self._ground_y)

    def bounds(self) -> Bounds:
        return Bounds(self._view_width, self._view_height)

    def update_view_size(self, width: float, height: float) -> None:
        """Record a viewport resize.  The ground line is clamped, not rescaled."""
        self._view_width = width
        self._view_height = height
        self._ground_y = self._clamp(self._ground_y)
        logger.debug("View resized to %.0fx%.0f (ground %.2f)", width, height, self._ground_y)

    def is_on_ground(self, y: float, tolerance: float = 1.0) -> bool:
        return abs(y - self._ground_y) <= tolerance

    def clamp_to_ground(self, y: float) -> float:
        return min(y, self._ground_y)

    def _clamp(self, y: float) -> float:
        return max(0.0, min(self._view_height, y))
