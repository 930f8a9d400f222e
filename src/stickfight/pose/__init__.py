"""Skeleton geometry and the pose animator."""

from stickfight.pose.animator import PoseAnimator, ease_out, select_pose, walk_cycle
from stickfight.pose.layout import KEYPOINT_LABELS, KEYPOINT_NAMES, SKELETON_CONNECTIONS
from stickfight.pose.model import (
    POSE_TRANSFORMS,
    crouch_pose,
    jump_pose,
    standing_pose,
    variant_pose,
)

__all__ = [
    "KEYPOINT_LABELS",
    "KEYPOINT_NAMES",
    "POSE_TRANSFORMS",
    "SKELETON_CONNECTIONS",
    "PoseAnimator",
    "crouch_pose",
    "ease_out",
    "jump_pose",
    "select_pose",
    "standing_pose",
    "variant_pose",
    "walk_cycle",
]
