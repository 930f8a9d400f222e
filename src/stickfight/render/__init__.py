"""Drawing backends for the stick figure."""

from stickfight.render.assembly import AssemblyError, assemble_gif, assemble_sprite_sheet
from stickfight.render.base import RendererDestroyedError, SkeletonRenderer
from stickfight.render.pillow import PillowRenderer
from stickfight.render.recording import RecordingRenderer

__all__ = [
    "AssemblyError",
    "PillowRenderer",
    "RecordingRenderer",
    "RendererDestroyedError",
    "SkeletonRenderer",
    "assemble_gif",
    "assemble_sprite_sheet",
]
