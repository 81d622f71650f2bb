"""
Game settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BoardSettings(BaseSettings):
    """Logical board dimensions."""

    model_config = SettingsConfigDict(env_prefix="DINORUN_BOARD_", extra="ignore")

    width: int = Field(default=750, gt=0)
    height: int = Field(default=250, gt=0)

    # Distance from the bottom edge to the ground line
    ground_margin: int = Field(default=40, ge=0)

    @property
    def ground_y(self) -> int:
        """Y position of the track."""
        return self.height - self.ground_margin


class PhysicsSettings(BaseSettings):
    """Actor kinematics, in board units per tick."""

    model_config = SettingsConfigDict(env_prefix="DINORUN_PHYSICS_", extra="ignore")

    actor_x: int = 50
    gravity: float = Field(default=0.8, gt=0.0)
    jump_velocity: float = Field(default=-17.0, lt=0.0)


class ProgressionSettings(BaseSettings):
    """Scroll speed and spawn pacing."""

    model_config = SettingsConfigDict(env_prefix="DINORUN_PROGRESSION_", extra="ignore")

    base_speed: float = Field(default=8.0, gt=0.0)
    speed_increment: float = Field(default=0.5, ge=0.0)
    score_step: int = Field(default=100, gt=0)

    # Spawn timer (ms)
    spawn_interval_ms: float = Field(default=1500.0, gt=0.0)
    spawn_interval_step_ms: float = Field(default=50.0, ge=0.0)
    spawn_interval_floor_ms: float = Field(default=700.0, gt=0.0)

    flying_speed_bonus: float = Field(default=2.0, gt=0.0)

    # Clouds drift at speed / parallax; one extra cloud per `odds` ticks on average
    cloud_parallax: float = Field(default=4.0, gt=1.0)
    cloud_spawn_odds: int = Field(default=200, gt=1)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="DINORUN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Fixed frame tick
    fps: int = Field(default=60, gt=0)

    # Simulator window
    window_scale: int = Field(default=1, ge=1)
    window_title: str = "DINORUN"

    # Paths
    preferences_path: Path = Field(
        default_factory=lambda: Path.home() / ".dinorun" / "preferences.json"
    )
    assets_path: Optional[Path] = None

    # Nested settings
    board: BoardSettings = Field(default_factory=BoardSettings)
    physics: PhysicsSettings = Field(default_factory=PhysicsSettings)
    progression: ProgressionSettings = Field(default_factory=ProgressionSettings)

    @property
    def frame_ms(self) -> float:
        """Duration of one fixed frame tick in milliseconds."""
        return 1000.0 / self.fps


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
