"""Named 18-point skeleton keypoint set."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from pydantic import BaseModel, ConfigDict


class Point(BaseModel):
    """Immutable 2D point; Y grows downward."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> Point:
        return Point(x=self.x + dx, y=self.y + dy)

    def lerp(self, other: Point, t: float) -> Point:
        return Point(x=self.x + (other.x - self.x) * t, y=self.y + (other.y - self.y) * t)


class Keypoints(BaseModel):
    """The full skeleton.  Field order is the keypoint index (0-17)."""

    model_config = ConfigDict(frozen=True)

    neck: Point
    hip: Point
    left_shoulder: Point
    left_elbow: Point
    left_wrist: Point
    right_shoulder: Point
    right_elbow: Point
    right_wrist: Point
    left_hip: Point
    left_knee: Point
    left_ankle: Point
    right_hip: Point
    right_knee: Point
    right_ankle: Point
    head_top: Point
    head_right: Point
    head_left: Point
    head_bottom: Point

    @classmethod
    def names(cls) -> list[str]:
        return list(cls.model_fields)

    def items(self) -> Iterator[tuple[str, Point]]:
        for name in type(self).model_fields:
            yield name, getattr(self, name)

    def to_dict(self) -> dict[str, Point]:
        return dict(self.items())

    def replace(self, **points: Point) -> Keypoints:
        """Return a copy with the given points swapped in."""
        unknown = set(points) - set(type(self).model_fields)
        if unknown:
            msg = f"Unknown keypoint(s): {', '.join(sorted(unknown))}"
            raise KeyError(msg)
        return self.model_copy(update=points)

    def with_offsets(self, offsets: Mapping[str, tuple[float, float]]) -> Keypoints:
        """Return a copy with additive (dx, dy) offsets applied per keypoint."""
        return self.replace(
            **{name: getattr(self, name).offset(dx, dy) for name, (dx, dy) in offsets.items()}
        )

    def lerp(self, target: Keypoints, t: float) -> Keypoints:
        """Interpolate every keypoint independently toward *target*."""
        return Keypoints(**{name: point.lerp(getattr(target, name), t) for name, point in self.items()})

    def bounds(self) -> tuple[float, float, float, float]:
        return bounding_box(point for _, point in self.items())


def bounding_box(points: Iterable[Point]) -> tuple[float, float, float, float]:
    """Return ``(min_x, min_y, max_x, max_y)`` of *points*."""
    xs: list[float] = []
    ys: list[float] = []
    for p in points:
        xs.append(p.x)
        ys.append(p.y)
    if not xs:
        return (0.0, 0.0, 0.0, 0.0)
    return (min(xs), min(ys), max(xs), max(ys))
