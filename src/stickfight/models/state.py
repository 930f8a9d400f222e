"""Runtime state models for the controller and the animator."""

from __future__ import annotations

from pydantic import BaseModel, Field

from stickfight.models.enums import Facing, PoseVariant
from stickfight.models.keypoints import Keypoints


class PlayerState(BaseModel):
    """Kinematic state of one player in world coordinates (Y grows downward)."""

    x: float
    y: float
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    is_jumping: bool = False
    is_crouching: bool = False
    is_on_ground: bool = True
    ground_y: float
    scale: float = 1.25  # reserved, always the normal scale


class AnimatorState(BaseModel):
    """Visual state owned by the pose animator."""

    current_pose: PoseVariant = PoseVariant.IDLE
    target_pose: PoseVariant = PoseVariant.IDLE
    blend_factor: float = Field(default=1.0, ge=0.0, le=1.0)
    current_keypoints: Keypoints
    walk_phase: int = 0
    facing: Facing = Facing.RIGHT
