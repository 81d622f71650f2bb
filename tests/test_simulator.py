import numpy as np
import pygame
import pytest

from dinorun.core.events import EventType
from dinorun.game import sprites
from dinorun.game.sprites import REQUIRED_SPRITES
from dinorun.simulator.assets import load_sprites
from dinorun.simulator.display import SimulatedScreen
from dinorun.simulator.input import translate_event


def key(event_type, key_code):
    return pygame.event.Event(event_type, key=key_code)


def test_jump_keys():
    assert translate_event(key(pygame.KEYDOWN, pygame.K_SPACE)).type == EventType.JUMP
    assert translate_event(key(pygame.KEYDOWN, pygame.K_UP)).type == EventType.JUMP


def test_duck_key_press_and_release():
    assert translate_event(key(pygame.KEYDOWN, pygame.K_DOWN)).type == EventType.DUCK_START
    assert translate_event(key(pygame.KEYUP, pygame.K_DOWN)).type == EventType.DUCK_END


def test_other_keys_ignored():
    assert translate_event(key(pygame.KEYDOWN, pygame.K_a)) is None
    assert translate_event(key(pygame.KEYUP, pygame.K_SPACE)) is None


def test_click_scaled_to_board_units():
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(200, 100), button=1)
    game_event = translate_event(event, scale=2)
    assert game_event.type == EventType.RESTART_CLICK
    assert game_event.data["pos"] == (100, 50)


def test_right_click_ignored():
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=3)
    assert translate_event(event) is None


def test_screen_buffer_roundtrip():
    screen = SimulatedScreen(20, 10)
    frame = np.full((10, 20, 3), 7, dtype=np.uint8)
    screen.set_buffer(frame)
    assert np.array_equal(screen.get_buffer(), frame)

    screen.clear(1, 2, 3)
    assert tuple(screen.get_buffer()[5, 5]) == (1, 2, 3)


def test_screen_renders_scaled_surface():
    screen = SimulatedScreen(20, 10)
    surface = screen.render(scale=3)
    assert surface.get_size() == (60, 30)


def test_missing_assets_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sprites(tmp_path / "nope")


def test_missing_sprite_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Missing sprite"):
        load_sprites(tmp_path)


def test_loads_sprite_directory(tmp_path):
    for i, name in enumerate(REQUIRED_SPRITES):
        surface = pygame.Surface((10 + i, 5 + i), pygame.SRCALPHA)
        surface.fill((200, 0, 0, 128))
        pygame.image.save(surface, str(tmp_path / f"{name}.png"))

    atlas, images = load_sprites(tmp_path)

    assert atlas.width(sprites.RUN_1) == 10
    assert atlas.height(sprites.RUN_1) == 5
    image = images[sprites.RUN_1]
    assert image.shape == (5, 10, 4)
    assert tuple(image[0, 0]) == (200, 0, 0, 128)
