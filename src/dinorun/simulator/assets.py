"""
Sprite loading for the simulator.

Every required sprite is a PNG named after it, e.g. ``run-1.png`` or
``ground-hazard-small.png``, in one directory.
"""

from pathlib import Path
from typing import Dict, Tuple
import logging

import numpy as np
from numpy.typing import NDArray
import pygame

from dinorun.game.sprites import REQUIRED_SPRITES, SpriteAtlas

logger = logging.getLogger(__name__)

SpriteImages = Dict[str, NDArray[np.uint8]]


def surface_to_rgba(surface: pygame.Surface) -> NDArray[np.uint8]:
    """Convert a pygame surface to a (height, width, 4) uint8 array."""
    rgb = pygame.surfarray.array3d(surface).swapaxes(0, 1)
    # Opaque surfaces report 255 everywhere
    alpha = pygame.surfarray.array_alpha(surface).swapaxes(0, 1)
    return np.dstack((rgb, alpha)).astype(np.uint8)


def load_sprites(assets_path: Path) -> Tuple[SpriteAtlas, SpriteImages]:
    """
    Load every required sprite from a directory.

    Args:
        assets_path: Directory holding one PNG per sprite name

    Returns:
        Atlas built from the image sizes, plus RGBA arrays by name

    Raises:
        FileNotFoundError: If the directory or any sprite file is missing
    """
    assets_path = Path(assets_path)
    if not assets_path.is_dir():
        raise FileNotFoundError(f"Sprite directory not found: {assets_path}")

    images: SpriteImages = {}
    for name in REQUIRED_SPRITES:
        path = assets_path / f"{name}.png"
        if not path.is_file():
            raise FileNotFoundError(f"Missing sprite: {path}")
        images[name] = surface_to_rgba(pygame.image.load(str(path)))
        logger.debug(f"Loaded sprite {name}: {images[name].shape[1]}x{images[name].shape[0]}")

    atlas = SpriteAtlas.from_sizes(
        {name: (image.shape[1], image.shape[0]) for name, image in images.items()}
    )
    atlas.validate()

    logger.info(f"Loaded {len(images)} sprites from {assets_path}")
    return atlas, images
