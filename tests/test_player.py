"""Tests for the kinematic player controller."""

import pytest

from stickfight.config import PlayerSettings
from stickfight.models.enums import Intent
from stickfight.player import PlayerController
from stickfight.world import GameWorld


def test_initial_state(controller):
    state = controller.get_state()
    assert state.x == 250
    assert state.y == 700
    assert state.ground_y == 700
    assert state.velocity_x == 0
    assert state.velocity_y == 0
    assert state.is_on_ground is True
    assert state.is_jumping is False
    assert state.is_crouching is False
    assert state.scale == 1.25


def test_get_state_is_a_snapshot(controller):
    snapshot = controller.get_state()
    snapshot.x = -999
    assert controller.get_state().x == 250


def test_move_left_right_stop(controller):
    controller.move_left()
    assert controller.get_state().velocity_x == -5
    controller.move_right()
    assert controller.get_state().velocity_x == 5
    controller.stop_horizontal_movement()
    assert controller.get_state().velocity_x == 0


def test_move_does_not_touch_jump_or_crouch(controller):
    controller.start_crouch()
    controller.move_left()
    state = controller.get_state()
    assert state.is_crouching is True
    assert state.is_on_ground is True
    assert state.is_jumping is False


def test_jump_sets_upward_velocity(controller):
    controller.jump()
    state = controller.get_state()
    assert state.velocity_y == -15
    assert state.is_jumping is True
    assert state.is_on_ground is False


def test_second_jump_is_ignored(controller):
    controller.jump()
    controller.update()
    before = controller.get_state()
    controller.jump()
    assert controller.get_state() == before


def test_double_jump_before_tick_only_first_counts(controller):
    controller.jump()
    controller.jump()
    assert controller.get_state().velocity_y == -15


def test_jump_arc_scenario(controller):
    controller.jump()
    controller.update()
    state = controller.get_state()
    assert state.velocity_y == pytest.approx(-14.2)
    assert state.y == pytest.approx(685.8)

    for _ in range(35):
        controller.update()
    state = controller.get_state()
    assert state.is_jumping is True
    assert state.y < 700

    controller.update()
    state = controller.get_state()
    assert state.y == 700
    assert state.velocity_y == 0
    assert state.is_jumping is False
    assert state.is_on_ground is True


def test_ground_and_jump_flags_never_both_true(controller):
    controller.jump()
    for _ in range(60):
        controller.update()
        state = controller.get_state()
        assert not (state.is_on_ground and state.is_jumping)
        if state.is_jumping:
            assert state.y <= state.ground_y
        if state.is_on_ground:
            assert state.y == state.ground_y


def test_move_left_clamps_at_left_bound(controller):
    controller.reset_position(120)
    controller.move_left()
    xs = []
    for _ in range(10):
        controller.update()
        xs.append(controller.get_state().x)
    assert xs[:4] == [115, 110, 105, 100]
    assert all(x == 100 for x in xs[4:])


def test_move_right_clamps_to_left_half(controller):
    controller.move_right()
    for _ in range(100):
        controller.update()
    # viewWidth / 2 - playerWidth / 2
    assert controller.get_state().x == 400


def test_position_always_within_limits(controller):
    left, right = controller.horizontal_limits()
    assert (left, right) == (100, 400)
    for intent in (Intent.MOVE_LEFT, Intent.MOVE_RIGHT):
        controller.apply(intent)
        for _ in range(80):
            controller.update()
            assert left <= controller.get_state().x <= right


def test_update_is_idempotent_when_idle(controller):
    controller.update()
    first = controller.get_state()
    controller.update()
    assert controller.get_state() == first


def test_crouch_toggles_flag_only(controller):
    controller.start_crouch()
    controller.update()
    state = controller.get_state()
    assert state.is_crouching is True
    assert state.scale == 1.25
    assert state.y == 700
    controller.stop_crouch()
    assert controller.get_state().is_crouching is False


def test_reset_position_round_trip(controller):
    controller.move_right()
    controller.jump()
    for _ in range(5):
        controller.update()
    controller.reset_position(300)
    state = controller.get_state()
    assert (state.x, state.y) == (300, 700)
    assert (state.velocity_x, state.velocity_y) == (0, 0)
    assert state.is_jumping is False
    assert state.is_on_ground is True


def test_update_ground_y_moves_grounded_player(world, controller):
    world.set_ground_y(650)
    assert controller.get_state().y == 700
    controller.update_ground_y()
    state = controller.get_state()
    assert state.y == 650
    assert state.ground_y == 650


def test_update_ground_y_leaves_airborne_player(world, controller):
    controller.jump()
    controller.update()
    y = controller.get_state().y
    world.set_ground_y(650)
    controller.update_ground_y()
    state = controller.get_state()
    assert state.y == y
    assert state.ground_y == 650


def test_custom_settings():
    world = GameWorld(view_width=2000, view_height=1000, ground_y=900)
    controller = PlayerController(
        world, 500, PlayerSettings(move_speed=10, jump_speed=20, normal_scale=1.0)
    )
    controller.move_right()
    controller.jump()
    controller.update()
    state = controller.get_state()
    assert state.x == 510
    assert state.velocity_y == pytest.approx(-19.2)
    assert state.scale == 1.0


@pytest.mark.parametrize(
    ("intent", "attr", "value"),
    [
        (Intent.MOVE_LEFT, "velocity_x", -5),
        (Intent.MOVE_RIGHT, "velocity_x", 5),
        (Intent.JUMP, "is_jumping", True),
        (Intent.START_CROUCH, "is_crouching", True),
    ],
)
def test_apply_dispatches_intents(controller, intent, attr, value):
    controller.apply(intent)
    assert getattr(controller.get_state(), attr) == value
