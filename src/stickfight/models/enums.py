"""Enumerations used throughout stickfight."""

from enum import StrEnum


class PoseVariant(StrEnum):
    IDLE = "idle"
    CROUCH = "crouch"
    JUMP = "jump"
    WALK_LEFT = "walk_left"
    WALK_RIGHT = "walk_right"

    @property
    def is_walking(self) -> bool:
        return self in (PoseVariant.WALK_LEFT, PoseVariant.WALK_RIGHT)


class Facing(StrEnum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def sign(self) -> int:
        """Horizontal scale applied to the drawn skeleton."""
        return -1 if self is Facing.LEFT else 1


class Intent(StrEnum):
    """Player intents delivered by the input layer."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    STOP_HORIZONTAL_MOVEMENT = "stop_horizontal_movement"
    JUMP = "jump"
    START_CROUCH = "start_crouch"
    STOP_CROUCH = "stop_crouch"
