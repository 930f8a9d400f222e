"""Scripted playback: feed timed intents to a fighter and collect frames."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from stickfight.config import AppConfig, load_config
from stickfight.fighter import Fighter
from stickfight.render.assembly import assemble_gif, assemble_sprite_sheet
from stickfight.render.pillow import PillowRenderer
from stickfight.render.recording import RecordingRenderer
from stickfight.world import GameWorld

if TYPE_CHECKING:
    from collections.abc import Callable

    from stickfight.models.enums import PoseVariant
    from stickfight.models.keypoints import Keypoints
    from stickfight.models.script import IntentScript
    from stickfight.models.state import PlayerState

logger = logging.getLogger(__name__)


@dataclass
class FrameRecord:
    """Snapshot taken after one tick."""

    tick: int
    state: PlayerState
    pose: PoseVariant
    target_pose: PoseVariant
    blend_factor: float
    keypoints: Keypoints


@dataclass
class RenderResult:
    """Files written by :func:`render_script`."""

    frames: list[Path] = field(default_factory=list)
    sprite_sheet: Path | None = None
    gif: Path | None = None


def default_start_x(world: GameWorld) -> float:
    """Centre of the player's half of the arena."""
    return world.view_width / 4


def run_script(
    script: IntentScript,
    config: AppConfig | None = None,
    *,
    fighter: Fighter | None = None,
    on_frame: Callable[[FrameRecord, Fighter], None] | None = None,
) -> list[FrameRecord]:
    """Play *script* tick by tick and return a record per tick.

    Intents scheduled for tick ``n`` are delivered just before tick ``n`` is
    computed.  Without a *fighter*, one is built with a recording renderer.
    """
    if config is None:
        config = load_config()
    if fighter is None:
        world = GameWorld.from_settings(config.world)
        start_x = script.start_x if script.start_x is not None else default_start_x(world)
        fighter = Fighter(world, start_x, config, renderer=RecordingRenderer())

    records: list[FrameRecord] = []
    for tick in range(script.ticks):
        for intent in script.events_at(tick):
            fighter.apply(intent)
        keypoints = fighter.tick()
        animator = fighter.animator_state
        record = FrameRecord(
            tick=tick,
            state=fighter.player_state,
            pose=animator.current_pose,
            target_pose=animator.target_pose,
            blend_factor=animator.blend_factor,
            keypoints=keypoints,
        )
        records.append(record)
        if on_frame is not None:
            on_frame(record, fighter)

    logger.debug("Script '%s' played for %d ticks", script.name, script.ticks)
    return records


def render_script(
    script: IntentScript,
    output_dir: Path,
    config: AppConfig | None = None,
    *,
    sprite_sheet: bool = False,
    gif: bool = False,
) -> RenderResult:
    """Play *script* and write one PNG per tick, plus optional sheet and GIF."""
    if config is None:
        config = load_config()
    world = GameWorld.from_settings(config.world)
    renderer = PillowRenderer(config.skeleton.resolve(world.view_height))
    start_x = script.start_x if script.start_x is not None else default_start_x(world)
    fighter = Fighter(world, start_x, config, renderer=renderer)

    width = round(world.view_width)
    height = round(world.view_height)
    output_dir.mkdir(parents=True, exist_ok=True)
    result = RenderResult()

    def _save(record: FrameRecord, _fighter: Fighter) -> None:
        img = Image.new("RGB", (width, height), config.render.background)
        if config.render.draw_ground:
            ground = world.ground_y()
            ImageDraw.Draw(img).line([(0, ground), (width, ground)], fill=config.render.ground_color, width=2)
        renderer.draw(img)
        path = output_dir / f"frame_{record.tick:04d}.png"
        img.save(path, "PNG")
        result.frames.append(path)

    run_script(script, config, fighter=fighter, on_frame=_save)
    logger.info("Rendered %d frames to %s", len(result.frames), output_dir)

    if sprite_sheet and result.frames:
        cell = (max(1, width // 4), max(1, height // 4))
        result.sprite_sheet = assemble_sprite_sheet(
            result.frames, output_dir / f"{script.name}_sheet.png", frame_size=cell
        )
    if gif and result.frames:
        result.gif = assemble_gif(result.frames, output_dir / f"{script.name}.gif", fps=config.render.fps)
    return result
