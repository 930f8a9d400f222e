"""One on-screen fighter: kinematics, pose animation, and its renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stickfight.config import AppConfig
from stickfight.player import PlayerController
from stickfight.pose.animator import PoseAnimator
from stickfight.render.pillow import PillowRenderer

if TYPE_CHECKING:
    from stickfight.models.enums import Intent
    from stickfight.models.keypoints import Keypoints
    from stickfight.models.state import AnimatorState, PlayerState
    from stickfight.render.base import SkeletonRenderer
    from stickfight.world import GameWorld


class Fighter:
    """Binds a :class:`PlayerController` to a :class:`PoseAnimator`.

    Intents may arrive at any time between ticks; :meth:`tick` is the single
    per-frame entry point and must not be called concurrently with them.
    """

    def __init__(
        self,
        world: GameWorld,
        initial_x: float,
        config: AppConfig | None = None,
        renderer: SkeletonRenderer | None = None,
    ) -> None:
        self.config = config or AppConfig()
        metrics = self.config.skeleton.resolve(world.view_height)
        self.world = world
        self.controller = PlayerController(world, initial_x, self.config.player)
        self.renderer = renderer or PillowRenderer(metrics)
        self.animator = PoseAnimator(self.renderer, metrics, self.config.animation)

    # Intents pass straight through to the controller.
    def move_left(self) -> None:
        self.controller.move_left()

    def move_right(self) -> None:
        self.controller.move_right()

    def stop_horizontal_movement(self) -> None:
        self.controller.stop_horizontal_movement()

    def jump(self) -> None:
        self.controller.jump()

    def start_crouch(self) -> None:
        self.controller.start_crouch()

    def stop_crouch(self) -> None:
        self.controller.stop_crouch()

    def apply(self, intent: Intent) -> None:
        self.controller.apply(intent)

    @property
    def player_state(self) -> PlayerState:
        return self.controller.get_state()

    @property
    def animator_state(self) -> AnimatorState:
        return self.animator.state

    def tick(self) -> Keypoints:
        """Compute one frame: integrate motion, then animate the skeleton."""
        self.controller.update()
        return self.animator.update(self.controller.get_state())

    def reset(self, x: float) -> None:
        self.controller.reset_position(x)

    def sync_ground(self) -> None:
        self.controller.update_ground_y()

    def set_visible(self, visible: bool) -> None:
        self.animator.set_visible(visible)

    def destroy(self) -> None:
        self.animator.destroy()
