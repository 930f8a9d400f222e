"""Recording renderer for testing and dry runs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from stickfight.models.keypoints import bounding_box
from stickfight.render.base import RendererDestroyedError

if TYPE_CHECKING:
    from stickfight.models.keypoints import Point


class RecordingRenderer:
    """A renderer that draws nothing and remembers what it was told.

    Useful for exercising the animator without producing images.
    """

    def __init__(self) -> None:
        self.keypoints: dict[str, Point] = {}
        self.position: tuple[float, float] = (0.0, 0.0)
        self.facing: int = 1
        self.visible: bool = True
        self.destroyed: bool = False
        self.calls: list[str] = []

    def set_keypoints(self, keypoints: Mapping[str, Point]) -> None:
        self._record("set_keypoints")
        self.keypoints.update(keypoints)

    def set_position(self, x: float, y: float) -> None:
        self._record("set_position")
        self.position = (x, y)

    def set_facing(self, sign: int) -> None:
        self._record("set_facing")
        self.facing = sign

    def set_visible(self, visible: bool) -> None:
        self._record("set_visible")
        self.visible = visible

    def bounds_height(self) -> float:
        _, min_y, _, max_y = bounding_box(self.keypoints.values())
        return max_y - min_y

    def destroy(self) -> None:
        self._record("destroy")
        self.destroyed = True
        self.keypoints.clear()

    def _record(self, name: str) -> None:
        if self.destroyed:
            msg = f"{name}() called on a destroyed renderer"
            raise RendererDestroyedError(msg)
        self.calls.append(name)
