"""Pillow drawing backend for the stick figure."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw, ImageFont

from stickfight.models.keypoints import bounding_box
from stickfight.pose.layout import KEYPOINT_LABELS, SKELETON_CONNECTIONS
from stickfight.render.base import RendererDestroyedError

if TYPE_CHECKING:
    from stickfight.config import SkeletonMetrics
    from stickfight.models.keypoints import Point

logger = logging.getLogger(__name__)

_LABEL_FILL = (255, 255, 255)
_LABEL_BACKGROUND = (0, 0, 0, 178)


class PillowRenderer:
    """Draws one stick figure with Pillow ``ImageDraw``.

    Keypoints live in group-local coordinates.  The group's bounding-box
    centre is placed at :meth:`set_position`, and facing mirrors the group
    about that centre.
    """

    def __init__(self, metrics: SkeletonMetrics) -> None:
        self.metrics = metrics
        self._keypoints: dict[str, Point] = {}
        self._position: tuple[float, float] = (0.0, 0.0)
        self._facing = 1
        self._visible = True
        self._destroyed = False
        self._font = _load_font(int(metrics.label_font_size))

    @property
    def visible(self) -> bool:
        return self._visible

    def set_keypoints(self, keypoints: Mapping[str, Point]) -> None:
        self._check_alive()
        self._keypoints.update(keypoints)

    def set_position(self, x: float, y: float) -> None:
        self._check_alive()
        self._position = (x, y)

    def set_facing(self, sign: int) -> None:
        self._check_alive()
        self._facing = -1 if sign < 0 else 1

    def set_visible(self, visible: bool) -> None:
        self._check_alive()
        self._visible = visible

    def bounds_height(self) -> float:
        _, min_y, _, max_y = bounding_box(self._keypoints.values())
        return max_y - min_y

    def destroy(self) -> None:
        self._check_alive()
        self._destroyed = True
        self._keypoints.clear()

    # -- drawing ------------------------------------------------------------

    def screen_points(self) -> dict[str, tuple[float, float]]:
        """Map every known keypoint to image coordinates."""
        min_x, min_y, max_x, max_y = bounding_box(self._keypoints.values())
        cx = (min_x + max_x) / 2
        cy = (min_y + max_y) / 2
        px, py = self._position
        return {
            name: (px + self._facing * (p.x - cx), py + (p.y - cy))
            for name, p in self._keypoints.items()
        }

    def draw(self, image: Image.Image) -> Image.Image:
        """Draw the figure onto *image* in place and return it."""
        self._check_alive()
        if not self._visible or not self._keypoints:
            return image

        canvas = ImageDraw.Draw(image, "RGBA")
        points = self.screen_points()
        width = max(1, round(self.metrics.stroke_width))
        cap = width / 2

        for connection in SKELETON_CONNECTIONS:
            if connection.start not in points or connection.end not in points:
                continue
            start = points[connection.start]
            end = points[connection.end]
            canvas.line([start, end], fill=connection.colour, width=width)
            # Round caps.
            for x, y in (start, end):
                canvas.ellipse([x - cap, y - cap, x + cap, y + cap], fill=connection.colour)

        if self.metrics.show_labels:
            self._draw_labels(canvas, points)
        return image

    def render(
        self,
        width: int,
        height: int,
        *,
        background: str | tuple[int, int, int] = "#FFFFFF",
    ) -> Image.Image:
        """Render the figure alone on a fresh RGB image."""
        img = Image.new("RGB", (width, height), background)
        return self.draw(img)

    def _draw_labels(
        self,
        canvas: ImageDraw.ImageDraw,
        points: dict[str, tuple[float, float]],
    ) -> None:
        lift = self.metrics.label_font_size * 1.5
        padding = self.metrics.label_font_size * 0.3
        for name, (x, y) in points.items():
            label = KEYPOINT_LABELS[name]
            text = f"{label.index} {label.code}"
            # Centre the text box on a point above the keypoint.
            left, top, right, bottom = canvas.textbbox((0, 0), text, font=self._font)
            origin = (x - (left + right) / 2, y - lift - (top + bottom) / 2)
            canvas.rectangle(
                [
                    origin[0] + left - padding,
                    origin[1] + top - padding,
                    origin[0] + right + padding,
                    origin[1] + bottom + padding,
                ],
                fill=_LABEL_BACKGROUND,
                outline=_LABEL_FILL,
            )
            canvas.text(origin, text, fill=_LABEL_FILL, font=self._font)

    def _check_alive(self) -> None:
        if self._destroyed:
            msg = "renderer has been destroyed"
            raise RendererDestroyedError(msg)


def _load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        logger.debug("DejaVuSans not available, using Pillow's default font")
        return ImageFont.load_default()
