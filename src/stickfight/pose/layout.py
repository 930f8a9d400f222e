"""Keypoint index/label table and the skeleton connection list."""

from __future__ import annotations

from typing import NamedTuple

from stickfight.models.keypoints import Keypoints


class KeypointLabel(NamedTuple):
    index: int
    code: str  # two-letter tag drawn by the label overlay


class Connection(NamedTuple):
    start: str
    end: str
    colour: str


KEYPOINT_NAMES: tuple[str, ...] = tuple(Keypoints.names())

_CODES = {
    "neck": "NK",
    "hip": "HP",
    "left_shoulder": "LS",
    "left_elbow": "LE",
    "left_wrist": "LW",
    "right_shoulder": "RS",
    "right_elbow": "RE",
    "right_wrist": "RW",
    "left_hip": "LH",
    "left_knee": "LK",
    "left_ankle": "LA",
    "right_hip": "RH",
    "right_knee": "RK",
    "right_ankle": "RA",
    "head_top": "HT",
    "head_right": "HR",
    "head_left": "HL",
    "head_bottom": "CH",
}

KEYPOINT_LABELS: dict[str, KeypointLabel] = {
    name: KeypointLabel(index, _CODES[name]) for index, name in enumerate(KEYPOINT_NAMES)
}

SKELETON_CONNECTIONS: tuple[Connection, ...] = (
    # Head outline.
    Connection("neck", "head_top", "#0000FF"),
    Connection("head_top", "head_left", "#FF00FF"),
    Connection("head_top", "head_right", "#FF00FF"),
    Connection("head_left", "head_bottom", "#FF00FF"),
    Connection("head_right", "head_bottom", "#FF00FF"),
    Connection("neck", "head_bottom", "#FF00FF"),
    # Spine.
    Connection("neck", "hip", "#00FF00"),
    # Shoulder girdle.
    Connection("neck", "left_shoulder", "#FF0000"),
    Connection("neck", "right_shoulder", "#FF0000"),
    Connection("left_shoulder", "hip", "#FF8000"),
    Connection("right_shoulder", "hip", "#FF8000"),
    # Arms.
    Connection("left_shoulder", "left_elbow", "#FFA500"),
    Connection("left_elbow", "left_wrist", "#ADFF2F"),
    Connection("right_shoulder", "right_elbow", "#90EE90"),
    Connection("right_elbow", "right_wrist", "#00FF00"),
    # Pelvis.
    Connection("hip", "left_hip", "#00FF00"),
    Connection("hip", "right_hip", "#00FFFF"),
    # Legs.
    Connection("left_hip", "left_knee", "#00CED1"),
    Connection("left_knee", "left_ankle", "#008B8B"),
    Connection("right_hip", "right_knee", "#0000FF"),
    Connection("right_knee", "right_ankle", "#4B0082"),
)
