"""CLI entry point using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from stickfight.models.enums import PoseVariant

app = typer.Typer(
    name="stickfight",
    help="Stick-figure fighter: kinematics and procedural pose animation.",
    no_args_is_help=True,
)


@app.command()
def pose(
    variant: Annotated[PoseVariant, typer.Argument(help="Pose to draw")] = PoseVariant.IDLE,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="PNG file to write"),
    ] = Path("pose.png"),
    labels: Annotated[bool, typer.Option("--labels", help="Draw keypoint labels")] = False,
    facing_left: Annotated[bool, typer.Option("--left", help="Mirror to face left")] = False,
) -> None:
    """Render a single static pose."""
    from stickfight.config import load_config
    from stickfight.pose.model import standing_pose, variant_pose
    from stickfight.render.pillow import PillowRenderer

    config = load_config()
    config.skeleton.show_labels = config.skeleton.show_labels or labels
    metrics = config.skeleton_metrics()

    width = round(config.world.view_width)
    height = round(config.world.view_height)
    renderer = PillowRenderer(metrics)
    keypoints = variant_pose(variant, standing_pose(metrics.size, metrics.head_radius), metrics.size)
    renderer.set_keypoints(keypoints.to_dict())
    renderer.set_facing(-1 if facing_left else 1)
    renderer.set_position(width / 2, height / 2)

    output.parent.mkdir(parents=True, exist_ok=True)
    renderer.render(width, height, background=config.render.background).save(output, "PNG")
    typer.echo(f"Saved: {output}")


@app.command()
def simulate(
    script_path: Annotated[Path, typer.Argument(help="Intent script (JSON)")],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output directory for frames"),
    ] = Path("frames"),
    sheet: Annotated[bool, typer.Option("--sheet", help="Also write a sprite sheet")] = False,
    gif: Annotated[bool, typer.Option("--gif", help="Also write an animated GIF")] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Print per-tick state instead of drawing"),
    ] = False,
) -> None:
    """Play back an intent script."""
    from stickfight.config import load_config
    from stickfight.models.script import IntentScript, ScriptLoadError
    from stickfight.render.assembly import AssemblyError

    try:
        script = IntentScript.load(script_path)
    except ScriptLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    config = load_config()

    if dry_run:
        from stickfight.simulation import run_script

        typer.echo(f"Dry run: {script.name} ({script.ticks} ticks)")
        for record in run_script(script, config):
            s = record.state
            typer.echo(
                f"  {record.tick:4d}  x={s.x:7.1f} y={s.y:7.1f} "
                f"vx={s.velocity_x:5.1f} vy={s.velocity_y:6.1f}  "
                f"{record.target_pose.value:<10} blend={record.blend_factor:.2f}"
            )
        return

    from stickfight.simulation import render_script

    try:
        result = render_script(script, output, config, sprite_sheet=sheet, gif=gif)
    except AssemblyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(f"Rendered {len(result.frames)} frames to {output}")
    if result.sprite_sheet:
        typer.echo(f"Sprite sheet: {result.sprite_sheet}")
    if result.gif:
        typer.echo(f"GIF: {result.gif}")


@app.command()
def info() -> None:
    """Show the resolved configuration and the keypoint table."""
    from stickfight.config import load_config
    from stickfight.pose.layout import KEYPOINT_LABELS
    from stickfight.world import GameWorld

    config = load_config()
    world = GameWorld.from_settings(config.world)
    metrics = config.skeleton_metrics()
    player = config.player

    typer.echo(f"View: {world.view_width:.0f}x{world.view_height:.0f}  ground_y={world.ground_y():.1f}")
    typer.echo(
        f"Player: move_speed={player.move_speed} jump_speed={player.jump_speed} "
        f"gravity={player.gravity} width={player.player_width}"
    )
    typer.echo(
        f"Skeleton: size={metrics.size:.1f} head_radius={metrics.head_radius:.1f} "
        f"stroke={metrics.stroke_width:.1f}"
    )
    typer.echo("Keypoints:")
    for name, label in KEYPOINT_LABELS.items():
        typer.echo(f"  {label.index:2d} {label.code}  {name}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool, typer.Option("--version", "-v", help="Show version")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """stickfight - stick-figure fighter toolkit."""
    if version:
        from stickfight import __version__

        typer.echo(f"stickfight {__version__}")
        raise typer.Exit()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
