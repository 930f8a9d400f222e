"""Sprite sheet and animated GIF assembly from rendered frames."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PIL import Image, UnidentifiedImageError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class AssemblyError(RuntimeError):
    """Raised when frames cannot be combined."""


def _open_frame(idx: int, frame_path: Path) -> Image.Image:
    try:
        img = Image.open(frame_path)
        img.load()
    except FileNotFoundError:
        msg = f"Frame {idx} not found: {frame_path}"
        raise AssemblyError(msg) from None
    except (UnidentifiedImageError, OSError) as exc:
        msg = f"Frame {idx} could not be read ({frame_path}): {exc}"
        raise AssemblyError(msg) from None
    return img


def assemble_sprite_sheet(
    frames: list[Path],
    output: Path,
    frame_size: tuple[int, int],
    *,
    direction: str = "horizontal",
    padding: int = 0,
) -> Path:
    """Combine individual frame images into a single sprite sheet.

    Parameters
    ----------
    frames:
        Ordered list of paths to individual frame PNGs.
    output:
        Path where the assembled sheet will be saved.
    frame_size:
        ``(width, height)`` of each cell.  Frames are resized to fit.
    direction:
        ``"horizontal"`` for a single-row strip (default) or ``"vertical"``
        for a single-column strip.
    padding:
        Extra transparent pixels between each frame.

    Returns
    -------
    Path
        The *output* path, for chaining convenience.
    """
    if not frames:
        msg = "No frames provided for sprite sheet assembly"
        raise AssemblyError(msg)

    fw, fh = frame_size
    n = len(frames)

    if direction == "horizontal":
        sheet_w = fw * n + padding * max(n - 1, 0)
        sheet_h = fh
    else:
        sheet_w = fw
        sheet_h = fh * n + padding * max(n - 1, 0)

    sheet = Image.new("RGBA", (sheet_w, sheet_h), (0, 0, 0, 0))

    for idx, frame_path in enumerate(frames):
        img = _open_frame(idx, frame_path).convert("RGBA")
        if img.size != (fw, fh):
            img = img.resize((fw, fh), Image.LANCZOS)

        if direction == "horizontal":
            position = (idx * (fw + padding), 0)
        else:
            position = (0, idx * (fh + padding))
        sheet.paste(img, position, img)

    output.parent.mkdir(parents=True, exist_ok=True)
    sheet.save(output, "PNG")
    logger.info(
        "Assembled sprite sheet: %s (%d frames, %dx%d)",
        output, n, sheet_w, sheet_h,
    )
    return output


def assemble_gif(
    frames: list[Path],
    output: Path,
    *,
    fps: int = 30,
    loop: bool = True,
) -> Path:
    """Combine frame images into an animated GIF played at *fps*."""
    if not frames:
        msg = "No frames provided for GIF assembly"
        raise AssemblyError(msg)

    images = [_open_frame(idx, path).convert("RGB") for idx, path in enumerate(frames)]
    duration_ms = max(1, round(1000 / fps))

    output.parent.mkdir(parents=True, exist_ok=True)
    save_kwargs: dict[str, object] = {
        "save_all": True,
        "append_images": images[1:],
        "duration": duration_ms,
    }
    if loop:
        save_kwargs["loop"] = 0
    images[0].save(output, "GIF", **save_kwargs)
    logger.info("Assembled GIF: %s (%d frames, %d ms/frame)", output, len(images), duration_ms)
    return output
