"""Kinematic player controller.

Coordinates follow the screen convention: X grows to the right, Y grows
downward, so a jump starts with a negative vertical velocity and gravity adds
to it every tick.  All speeds are per tick.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stickfight.config import PlayerSettings
from stickfight.models.enums import Intent
from stickfight.models.state import PlayerState

if TYPE_CHECKING:
    from stickfight.world import GameWorld

logger = logging.getLogger(__name__)


class PlayerController:
    """Owns one player's kinematic state and turns intents into motion.

    The player is confined to the left half of the arena; the right half is
    reserved for the opponent.
    """

    def __init__(
        self,
        world: GameWorld,
        initial_x: float,
        settings: PlayerSettings | None = None,
    ) -> None:
        self.world = world
        self.settings = settings or PlayerSettings()
        ground_y = world.ground_y()
        self._state = PlayerState(
            x=initial_x,
            y=ground_y,
            ground_y=ground_y,
            scale=self.settings.normal_scale,
        )

    def get_state(self) -> PlayerState:
        """Return a snapshot; mutating it does not affect the controller."""
        return self._state.model_copy()

    # -- intents ------------------------------------------------------------

    def move_left(self) -> None:
        self._state.velocity_x = -self.settings.move_speed

    def move_right(self) -> None:
        self._state.velocity_x = self.settings.move_speed

    def stop_horizontal_movement(self) -> None:
        self._state.velocity_x = 0.0

    def jump(self) -> None:
        state = self._state
        if state.is_on_ground and not state.is_jumping:
            state.is_jumping = True
            state.is_on_ground = False
            state.velocity_y = -self.settings.jump_speed

    def start_crouch(self) -> None:
        self._state.is_crouching = True

    def stop_crouch(self) -> None:
        self._state.is_crouching = False

    def apply(self, intent: Intent) -> None:
        """Dispatch an :class:`Intent` to the matching method."""
        getattr(self, intent.value)()

    # -- simulation ---------------------------------------------------------

    def horizontal_limits(self) -> tuple[float, float]:
        """Return the ``(left, right)`` range the player's centre may occupy."""
        half_width = self.settings.player_width / 2
        return half_width, self.world.bounds().width / 2 - half_width

    def update(self) -> None:
        """Advance one tick: move, apply gravity, land."""
        state = self._state

        left, right = self.horizontal_limits()
        state.x = max(left, min(right, state.x + state.velocity_x))

        if state.is_jumping:
            state.velocity_y += self.settings.gravity
            state.y += state.velocity_y
            if state.y >= state.ground_y:
                state.y = state.ground_y
                state.velocity_y = 0.0
                state.is_jumping = False
                state.is_on_ground = True
                logger.debug("Landed at x=%.2f", state.x)

        # Crouch is drawn by the animator; physical scale never changes.
        state.scale = self.settings.normal_scale

    def reset_position(self, x: float) -> None:
        """Replace the state: grounded at *x*, motionless, not crouching."""
        ground_y = self.world.ground_y()
        self._state = PlayerState(
            x=x,
            y=ground_y,
            ground_y=ground_y,
            scale=self.settings.normal_scale,
        )

    def update_ground_y(self) -> None:
        """Re-read the ground line; a grounded player follows it."""
        new_ground_y = self.world.ground_y()
        state = self._state
        if state.is_on_ground and not state.is_jumping:
            state.y = new_ground_y
        state.ground_y = new_ground_y
        logger.debug("Ground line synced to %.2f", new_ground_y)
