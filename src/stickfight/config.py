"""Application configuration with pydantic-settings + TOML."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource

# Height of the view the original layout was tuned against.
DEFAULT_VIEW_HEIGHT = 822.0


def _default_config_dir() -> Path:
    return Path.home() / ".stickfight"


class WorldSettings(BaseModel):
    """Arena dimensions and the ground line."""

    view_width: float = 1280.0
    view_height: float = DEFAULT_VIEW_HEIGHT
    ground_ratio: float = 0.85
    ground_y: float | None = None

    def resolved_ground_y(self) -> float:
        if self.ground_y is not None:
            return self.ground_y
        return self.view_height * self.ground_ratio


class PlayerSettings(BaseModel):
    """Kinematic tuning for one player, in units per tick."""

    move_speed: float = 5.0
    jump_speed: float = 15.0
    gravity: float = 0.8
    crouch_scale: float = 0.7
    normal_scale: float = 1.25
    scale_transition_speed: float = 0.15
    player_width: float = 200.0


@dataclass(frozen=True)
class SkeletonMetrics:
    """Fully resolved skeleton sizing."""

    size: float
    head_radius: float
    stroke_width: float
    label_font_size: float
    color: str
    show_labels: bool


class SkeletonSettings(BaseModel):
    """Stick figure sizing and appearance.

    Unset sizes are derived from the view height when resolved.
    """

    size: float | None = None
    head_radius: float | None = None
    stroke_width: float | None = None
    label_font_size: float | None = None
    color: str = "#000000"
    show_labels: bool = False

    def resolve(self, view_height: float | None = None) -> SkeletonMetrics:
        """Fill every derived value from *view_height*."""
        auto_size = (view_height or DEFAULT_VIEW_HEIGHT) * 0.4
        size = self.size or auto_size
        return SkeletonMetrics(
            size=size,
            head_radius=self.head_radius or auto_size * 0.1,
            stroke_width=self.stroke_width or max(4.0, auto_size * 0.005),
            label_font_size=self.label_font_size or max(10.0, auto_size * 0.015),
            color=self.color,
            show_labels=self.show_labels,
        )


class AnimationSettings(BaseModel):
    """Pose blending and walk-cycle tuning."""

    blend_step: float = 0.2
    walk_frequency: float = 0.025
    swing_ratio: float = 0.15


class RenderSettings(BaseModel):
    """Frame output for the Pillow renderer."""

    background: str = "#FFFFFF"
    ground_color: str = "#808080"
    draw_ground: bool = True
    fps: int = Field(default=30, gt=0)


class AppConfig(BaseSettings):
    """Root application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STICKFIGHT_",
        env_nested_delimiter="__",
    )

    config_dir: Path = Field(default_factory=_default_config_dir)
    world: WorldSettings = Field(default_factory=WorldSettings)
    player: PlayerSettings = Field(default_factory=PlayerSettings)
    skeleton: SkeletonSettings = Field(default_factory=SkeletonSettings)
    animation: AnimationSettings = Field(default_factory=AnimationSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)

    @classmethod
    def settings_customise_sources(cls, settings_cls, **kwargs):  # type: ignore[override]
        toml_path = _default_config_dir() / "config.toml"
        sources = (
            kwargs.get("init_settings"),
            kwargs.get("env_settings"),
        )
        if toml_path.exists():
            sources = (*sources, TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return (*sources, kwargs.get("dotenv_settings"), kwargs.get("file_secret_settings"))

    def skeleton_metrics(self) -> SkeletonMetrics:
        return self.skeleton.resolve(self.world.view_height)


def load_config() -> AppConfig:
    """Load application config from env vars and the optional TOML file."""
    return AppConfig()
