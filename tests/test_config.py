"""Tests for configuration system."""

import pytest
from pydantic import ValidationError

from stickfight.config import (
    AnimationSettings,
    AppConfig,
    PlayerSettings,
    RenderSettings,
    SkeletonSettings,
    WorldSettings,
)


def test_player_settings_defaults():
    p = PlayerSettings()
    assert p.move_speed == 5
    assert p.jump_speed == 15
    assert p.gravity == 0.8
    assert p.crouch_scale == 0.7
    assert p.normal_scale == 1.25
    assert p.player_width == 200


def test_world_settings_ground():
    assert WorldSettings(view_height=1000).resolved_ground_y() == 850
    assert WorldSettings(ground_y=640).resolved_ground_y() == 640


def test_skeleton_metrics_derive_from_view_height():
    m = SkeletonSettings().resolve(1000)
    assert m.size == pytest.approx(400)
    assert m.head_radius == pytest.approx(40)
    assert m.stroke_width == 4  # max(4, 2.0)
    assert m.label_font_size == 10
    assert m.show_labels is False


def test_skeleton_metrics_large_view():
    m = SkeletonSettings().resolve(4000)
    assert m.stroke_width == pytest.approx(8)
    assert m.label_font_size == pytest.approx(24)


def test_skeleton_explicit_values_win():
    m = SkeletonSettings(size=100, head_radius=12, stroke_width=2).resolve(822)
    assert m.size == 100
    assert m.head_radius == 12
    assert m.stroke_width == 2


def test_animation_defaults():
    a = AnimationSettings()
    assert a.blend_step == 0.2
    assert a.walk_frequency == 0.025
    assert a.swing_ratio == 0.15


def test_app_config_defaults():
    config = AppConfig()
    assert config.config_dir.name == ".stickfight"
    assert config.world.view_height == 822
    assert config.skeleton_metrics().size == pytest.approx(822 * 0.4)


def test_app_config_env_override(monkeypatch):
    monkeypatch.setenv("STICKFIGHT_PLAYER__MOVE_SPEED", "8")
    monkeypatch.setenv("STICKFIGHT_WORLD__VIEW_WIDTH", "1600")
    config = AppConfig()
    assert config.player.move_speed == 8
    assert config.world.view_width == 1600


@pytest.mark.parametrize("bad", [0, -1])
def test_render_fps_rejected(bad: int) -> None:
    with pytest.raises(ValidationError):
        RenderSettings(fps=bad)


def test_bare_env_vars_do_not_leak_into_groups(monkeypatch, world):
    from stickfight.player import PlayerController

    monkeypatch.setenv("GRAVITY", "5")
    monkeypatch.setenv("MOVE_SPEED", "9")
    monkeypatch.setenv("FPS", "0")
    assert PlayerSettings().gravity == 0.8
    config = AppConfig()
    assert config.player.gravity == 0.8
    assert config.player.move_speed == 5
    assert config.render.fps == 30
    assert PlayerController(world, 250).settings.gravity == 0.8


def test_app_config_reads_toml(tmp_path):
    config_dir = tmp_path / ".stickfight"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text("[player]\ngravity = 1.5\n")
    assert AppConfig().player.gravity == 1.5
