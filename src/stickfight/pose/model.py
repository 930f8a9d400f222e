"""Stateless skeleton geometry: the standing layout and its pose variants.

Every layout is centred on the origin with Y growing downward, so the head
sits at negative Y and the feet at positive Y.  Variants are additive
offsets on top of the standing layout, never a full re-derivation.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from stickfight.models.enums import PoseVariant
from stickfight.models.keypoints import Keypoints, Point

PoseTransform = Callable[[Keypoints, float], Keypoints]


def _polar(origin: Point, angle: float, length: float) -> Point:
    return Point(x=origin.x + math.cos(angle) * length, y=origin.y + math.sin(angle) * length)


def standing_pose(size: float, head_radius: float | None = None) -> Keypoints:
    """Compute the canonical idle layout for a figure *size* units tall."""
    r = size * 0.1 if head_radius is None else head_radius

    neck_y = -size / 2 + r * 2.2
    neck = Point(x=0.0, y=neck_y)

    body_length = size * 0.4
    hip_y = neck_y + body_length
    hip = Point(x=0.0, y=hip_y)

    shoulder_y = hip_y - body_length * 0.9
    shoulder_width = size * 0.08
    left_shoulder = Point(x=-shoulder_width, y=shoulder_y)
    right_shoulder = Point(x=shoulder_width, y=shoulder_y)

    # Arms hang slightly outward, forearms tilt a little forward.
    upper_arm = size * 0.2
    forearm = size * 0.18
    left_arm_angle = math.pi * 0.55
    right_arm_angle = math.pi * 0.45
    left_elbow = _polar(left_shoulder, left_arm_angle, upper_arm)
    right_elbow = _polar(right_shoulder, right_arm_angle, upper_arm)
    left_wrist = _polar(left_elbow, left_arm_angle + math.pi * 0.05, forearm)
    right_wrist = _polar(right_elbow, right_arm_angle - math.pi * 0.05, forearm)

    hip_distance = size * 0.13
    hip_angle = math.pi * 0.35
    left_hip = Point(x=-math.cos(hip_angle) * hip_distance, y=hip_y + math.sin(hip_angle) * hip_distance)
    right_hip = Point(x=math.cos(hip_angle) * hip_distance, y=hip_y + math.sin(hip_angle) * hip_distance)

    thigh = size * 0.24
    shin = size * 0.24
    left_thigh_angle = math.pi * 0.52
    right_thigh_angle = math.pi * 0.48
    left_knee = _polar(left_hip, left_thigh_angle, thigh)
    right_knee = _polar(right_hip, right_thigh_angle, thigh)
    left_ankle = _polar(left_knee, left_thigh_angle + math.pi * 0.02, shin)
    right_ankle = _polar(right_knee, right_thigh_angle - math.pi * 0.02, shin)

    head_centre_y = -size / 2 + r
    return Keypoints(
        neck=neck,
        hip=hip,
        left_shoulder=left_shoulder,
        left_elbow=left_elbow,
        left_wrist=left_wrist,
        right_shoulder=right_shoulder,
        right_elbow=right_elbow,
        right_wrist=right_wrist,
        left_hip=left_hip,
        left_knee=left_knee,
        left_ankle=left_ankle,
        right_hip=right_hip,
        right_knee=right_knee,
        right_ankle=right_ankle,
        head_top=Point(x=0.0, y=head_centre_y - r * 0.9),
        head_right=Point(x=r * 0.75, y=head_centre_y - r * 0.15),
        head_left=Point(x=-r * 0.75, y=head_centre_y - r * 0.15),
        head_bottom=Point(x=0.0, y=head_centre_y + r * 0.6),
    )


def crouch_pose(standing: Keypoints, size: float) -> Keypoints:
    """Lower the hips, bend the knees outward, drop the head."""
    drop = size * 0.1
    knee_bend = size * 0.15
    head_drop = size * 0.05

    lowered = standing.with_offsets(
        {
            "hip": (0.0, drop),
            "left_hip": (0.0, drop),
            "right_hip": (0.0, drop),
            "neck": (0.0, head_drop),
            "head_top": (0.0, head_drop),
            "head_left": (0.0, head_drop),
            "head_right": (0.0, head_drop),
            "head_bottom": (0.0, head_drop),
        }
    )
    # Knees hang a fixed distance below the lowered hips, ankles below the knees.
    left_knee = Point(x=lowered.left_hip.x - knee_bend * 0.3, y=lowered.left_hip.y + size * 0.15)
    right_knee = Point(x=lowered.right_hip.x + knee_bend * 0.3, y=lowered.right_hip.y + size * 0.15)
    return lowered.replace(
        left_knee=left_knee,
        right_knee=right_knee,
        left_ankle=Point(x=standing.left_ankle.x, y=left_knee.y + size * 0.12),
        right_ankle=Point(x=standing.right_ankle.x, y=right_knee.y + size * 0.12),
    )


def jump_pose(standing: Keypoints, size: float) -> Keypoints:
    """Throw both arms up and out, tuck both legs."""
    arm_lift = size * 0.2
    leg_lift = size * 0.15
    return standing.with_offsets(
        {
            "left_elbow": (-size * 0.1, -arm_lift),
            "left_wrist": (-size * 0.15, -arm_lift * 1.2),
            "right_elbow": (size * 0.1, -arm_lift),
            "right_wrist": (size * 0.15, -arm_lift * 1.2),
            "left_knee": (-size * 0.05, -leg_lift),
            "left_ankle": (-size * 0.08, -leg_lift * 1.5),
            "right_knee": (size * 0.05, -leg_lift),
            "right_ankle": (size * 0.08, -leg_lift * 1.5),
        }
    )


def _unchanged(standing: Keypoints, size: float) -> Keypoints:
    return standing


# Walking limb motion is layered on by the animator, not baked in here.
POSE_TRANSFORMS: dict[PoseVariant, PoseTransform] = {
    PoseVariant.IDLE: _unchanged,
    PoseVariant.CROUCH: crouch_pose,
    PoseVariant.JUMP: jump_pose,
    PoseVariant.WALK_LEFT: _unchanged,
    PoseVariant.WALK_RIGHT: _unchanged,
}


def variant_pose(pose: PoseVariant, standing: Keypoints, size: float) -> Keypoints:
    """Return the keypoints of *pose* derived from the *standing* layout."""
    return POSE_TRANSFORMS[pose](standing, size)
