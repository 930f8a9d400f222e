"""Tests for the CLI entry point."""

from PIL import Image
from typer.testing import CliRunner

from stickfight import __version__
from stickfight.cli import app
from stickfight.models import Intent, IntentEvent, IntentScript

runner = CliRunner()


def _script(tmp_path):
    script = IntentScript(
        name="hop",
        ticks=6,
        events=[IntentEvent(tick=0, intent=Intent.MOVE_RIGHT), IntentEvent(tick=2, intent=Intent.JUMP)],
    )
    return script.save(tmp_path / "hop.json")


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"stickfight {__version__}"


def test_pose_command(tmp_path):
    out = tmp_path / "crouch.png"
    result = runner.invoke(app, ["pose", "crouch", "-o", str(out), "--labels"])
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert Image.open(out).size == (1280, 822)


def test_pose_command_rejects_unknown_variant(tmp_path):
    result = runner.invoke(app, ["pose", "backflip", "-o", str(tmp_path / "x.png")])
    assert result.exit_code != 0


def test_simulate_dry_run(tmp_path):
    result = runner.invoke(app, ["simulate", str(_script(tmp_path)), "--dry-run"])
    assert result.exit_code == 0, result.output
    assert "Dry run: hop (6 ticks)" in result.output
    assert "walk_right" in result.output
    assert "jump" in result.output


def test_simulate_writes_frames(tmp_path):
    out = tmp_path / "frames"
    result = runner.invoke(app, ["simulate", str(_script(tmp_path)), "-o", str(out), "--gif"])
    assert result.exit_code == 0, result.output
    assert "Rendered 6 frames" in result.output
    assert len(list(out.glob("frame_*.png"))) == 6
    assert (out / "hop.gif").exists()


def test_simulate_missing_script(tmp_path):
    result = runner.invoke(app, ["simulate", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_info_command():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "ground_y=" in result.output
    assert " 0 NK  neck" in result.output
    assert "17 CH  head_bottom" in result.output
