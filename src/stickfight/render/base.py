"""Renderer protocol consumed by the pose animator."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stickfight.models.keypoints import Point


class RendererDestroyedError(RuntimeError):
    """Raised when a renderer is used after :meth:`SkeletonRenderer.destroy`."""


@runtime_checkable
class SkeletonRenderer(Protocol):
    """Drawing backend for one stick figure.

    The figure is a group: keypoints are in group-local coordinates, and the
    group is placed and mirrored as a whole.
    """

    def set_keypoints(self, keypoints: Mapping[str, Point]) -> None:
        """Update only the named points and refresh the drawn geometry."""
        ...

    def set_position(self, x: float, y: float) -> None:
        """Move the group so its bounding-box centre is at ``(x, y)``."""
        ...

    def set_facing(self, sign: int) -> None:
        """Set the group's horizontal scale to ``+1`` or ``-1``."""
        ...

    def set_visible(self, visible: bool) -> None:
        ...

    def bounds_height(self) -> float:
        """Height of the drawn group."""
        ...

    def destroy(self) -> None:
        """Release the group; further calls raise :class:`RendererDestroyedError`."""
        ...
