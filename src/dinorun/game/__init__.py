"""Game logic for DINORUN. Nothing in here draws, loads files or reads devices."""

from dinorun.game.actor import Actor
from dinorun.game.animation import Animation
from dinorun.game.geometry import Hitbox
from dinorun.game.obstacles import Obstacle, ObstacleKind
from dinorun.game.scenery import Cloud, CloudLayer, ScrollingBackground
from dinorun.game.session import GameSession
from dinorun.game.snapshot import FrameSnapshot, SpriteDraw
from dinorun.game.spawner import SpawnRule, Spawner
from dinorun.game.sprites import SpriteAtlas, SpriteSize

__all__ = [
    "Actor",
    "Animation",
    "Cloud",
    "CloudLayer",
    "FrameSnapshot",
    "GameSession",
    "Hitbox",
    "Obstacle",
    "ObstacleKind",
    "ScrollingBackground",
    "SpawnRule",
    "Spawner",
    "SpriteAtlas",
    "SpriteDraw",
    "SpriteSize",
]
