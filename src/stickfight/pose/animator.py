"""Pose animator: picks a target pose from player state and blends toward it.

Each call to :meth:`PoseAnimator.update` is one tick:

1. select the target pose (crouch > jump > walk left > walk right > idle);
2. on a target change, reset the blend factor to 0;
3. build the live target keypoints, layering the walk cycle on walking poses;
4. advance the blend with an ease-out curve, or copy the live target once
   the blend has arrived;
5. push keypoints, facing, and placement to the renderer.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from stickfight.config import AnimationSettings
from stickfight.models.enums import Facing, PoseVariant
from stickfight.models.state import AnimatorState
from stickfight.pose.model import standing_pose, variant_pose

if TYPE_CHECKING:
    from stickfight.config import SkeletonMetrics
    from stickfight.models.keypoints import Keypoints
    from stickfight.models.state import PlayerState
    from stickfight.render.base import SkeletonRenderer

logger = logging.getLogger(__name__)

# Blend factors this close to 1 count as arrived.
_BLEND_EPSILON = 1e-9

# Per-limb walk swing as (horizontal, vertical) fractions of the swing amount.
WALK_SWING: dict[str, tuple[float, float]] = {
    "elbow": (0.5, 0.3),
    "wrist": (1.0, 0.4),
    "knee": (0.4, 0.2),
    "ankle": (0.6, 0.3),
}


def ease_out(t: float) -> float:
    """Quadratic ease-out: fast start, gentle arrival."""
    return t * (2 - t)


def select_pose(state: PlayerState, facing: Facing) -> tuple[PoseVariant, Facing]:
    """Pick the target pose for *state*; facing is kept unless walking.

    Crouch only counts while grounded, so a crouch held through a jump yields
    the jump pose.
    """
    if state.is_crouching and state.is_on_ground:
        return PoseVariant.CROUCH, facing
    if state.is_jumping:
        return PoseVariant.JUMP, facing
    if state.velocity_x < 0:
        return PoseVariant.WALK_LEFT, Facing.LEFT
    if state.velocity_x > 0:
        return PoseVariant.WALK_RIGHT, Facing.RIGHT
    return PoseVariant.IDLE, facing


def walk_cycle(
    keypoints: Keypoints,
    phase: int,
    size: float,
    *,
    frequency: float = 0.025,
    swing_ratio: float = 0.15,
) -> Keypoints:
    """Swing the limbs for walk *phase*.

    Left and right limbs run in antiphase.  Horizontal swing follows the
    signed sine; vertical swing uses its magnitude, so joints only ever move
    downward on screen (Y grows down).
    """
    swing = size * swing_ratio
    left = math.sin(phase * frequency)
    right = math.sin(phase * frequency + math.pi)

    offsets: dict[str, tuple[float, float]] = {}
    for side, s in (("left", left), ("right", right)):
        for joint, (kx, ky) in WALK_SWING.items():
            offsets[f"{side}_{joint}"] = (s * swing * kx, abs(s) * swing * ky)
    return keypoints.with_offsets(offsets)


class PoseAnimator:
    """Owns the skeleton's visual state and drives a renderer with it."""

    def __init__(
        self,
        renderer: SkeletonRenderer,
        metrics: SkeletonMetrics,
        settings: AnimationSettings | None = None,
    ) -> None:
        self.renderer = renderer
        self.metrics = metrics
        self.settings = settings or AnimationSettings()
        self._standing = standing_pose(metrics.size, metrics.head_radius)
        self._poses: dict[PoseVariant, Keypoints] = {}
        self._state = AnimatorState(current_keypoints=self.pose_keypoints(PoseVariant.IDLE))
        self.renderer.set_keypoints(self._state.current_keypoints.to_dict())

    @property
    def state(self) -> AnimatorState:
        return self._state.model_copy()

    @property
    def standing(self) -> Keypoints:
        return self._standing

    def pose_keypoints(self, pose: PoseVariant) -> Keypoints:
        """Static keypoints of *pose* (no walk cycle)."""
        if pose not in self._poses:
            self._poses[pose] = variant_pose(pose, self._standing, self.metrics.size)
        return self._poses[pose]

    def target_keypoints(self) -> Keypoints:
        """Live target for this tick, walk cycle included."""
        state = self._state
        keypoints = self.pose_keypoints(state.target_pose)
        if state.target_pose.is_walking:
            keypoints = walk_cycle(
                keypoints,
                state.walk_phase,
                self.metrics.size,
                frequency=self.settings.walk_frequency,
                swing_ratio=self.settings.swing_ratio,
            )
        return keypoints

    def update(self, player: PlayerState) -> Keypoints:
        """Advance one tick from *player* and return the keypoints drawn."""
        state = self._state

        pose, facing = select_pose(player, state.facing)
        if pose != state.target_pose:
            logger.debug("Pose target %s -> %s", state.target_pose, pose)
            state.target_pose = pose
            state.blend_factor = 0.0

        if facing != state.facing:
            state.facing = facing
            self.renderer.set_facing(facing.sign)

        state.walk_phase = state.walk_phase + 1 if pose.is_walking else 0
        target = self.target_keypoints()

        if state.blend_factor < 1.0:
            state.blend_factor = min(1.0, state.blend_factor + self.settings.blend_step)
            if state.blend_factor >= 1.0 - _BLEND_EPSILON:
                state.blend_factor = 1.0
            if state.blend_factor >= 1.0:
                state.current_pose = state.target_pose
                state.current_keypoints = target
                logger.debug("Pose %s reached", state.current_pose)
            else:
                state.current_keypoints = state.current_keypoints.lerp(
                    target, ease_out(state.blend_factor)
                )
        else:
            state.current_keypoints = target

        self.renderer.set_keypoints(state.current_keypoints.to_dict())
        self._place(player)
        return state.current_keypoints

    def _place(self, player: PlayerState) -> None:
        # The player's y is the foot line; the renderer positions by centre.
        height = self.renderer.bounds_height()
        self.renderer.set_position(player.x, player.y - height / 2)

    def set_visible(self, visible: bool) -> None:
        self.renderer.set_visible(visible)

    def destroy(self) -> None:
        self.renderer.destroy()
