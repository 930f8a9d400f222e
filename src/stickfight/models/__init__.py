"""stickfight data models - pure Pydantic, no I/O beyond script files."""

from stickfight.models.enums import Facing, Intent, PoseVariant
from stickfight.models.keypoints import Keypoints, Point, bounding_box
from stickfight.models.script import IntentEvent, IntentScript, ScriptLoadError
from stickfight.models.state import AnimatorState, PlayerState

__all__ = [
    "AnimatorState",
    "Facing",
    "Intent",
    "IntentEvent",
    "IntentScript",
    "Keypoints",
    "PlayerState",
    "Point",
    "PoseVariant",
    "ScriptLoadError",
    "bounding_box",
]
