"""Shared fixtures for stickfight tests."""

import os

import pytest

from stickfight.config import AnimationSettings, PlayerSettings, SkeletonSettings
from stickfight.player import PlayerController
from stickfight.pose.animator import PoseAnimator
from stickfight.render.recording import RecordingRenderer
from stickfight.world import GameWorld


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep the user's config file and STICKFIGHT_ variables out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in list(os.environ):
        if name.startswith("STICKFIGHT_"):
            monkeypatch.delenv(name)
    return tmp_path


@pytest.fixture
def world() -> GameWorld:
    return GameWorld(view_width=1000, view_height=822, ground_y=700)


@pytest.fixture
def controller(world: GameWorld) -> PlayerController:
    return PlayerController(world, initial_x=250, settings=PlayerSettings())


@pytest.fixture
def metrics():
    return SkeletonSettings().resolve(822)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def animator(renderer: RecordingRenderer, metrics) -> PoseAnimator:
    return PoseAnimator(renderer, metrics, AnimationSettings())
