"""Configuration for DINORUN."""

from .settings import (
    BoardSettings,
    PhysicsSettings,
    ProgressionSettings,
    Settings,
    get_settings,
)

__all__ = [
    "BoardSettings",
    "PhysicsSettings",
    "ProgressionSettings",
    "Settings",
    "get_settings",
]
