import numpy as np
import pytest

from dinorun.game import sprites
from dinorun.graphics.display import MemoryDisplay
from dinorun.graphics.primitives import draw_image, draw_rect, draw_text, new_buffer, text_width
from dinorun.graphics.renderer import BACKGROUND, INK, FrameRenderer

from conftest import add_hazard_at_actor, start


def render(session, renderer=None):
    renderer = renderer or FrameRenderer(session.atlas)
    buffer = new_buffer(session.board_width, session.board_height)
    renderer.render(session.snapshot(), buffer)
    return buffer


def test_ready_frame(make_session):
    session = make_session()
    buffer = render(session)

    assert buffer.shape == (250, 750, 3)
    assert buffer.dtype == np.uint8
    assert tuple(buffer[0, 0]) == BACKGROUND
    # Track line
    assert tuple(buffer[210, 5]) == INK
    # Actor box
    assert tuple(buffer[200, 60]) == INK


def test_game_over_frame(make_session):
    session = make_session()
    start(session)
    add_hazard_at_actor(session)
    session.update()

    buffer = render(session)

    button = session.restart_button
    assert tuple(buffer[int(button.y), int(button.x)]) == INK


def test_images_replace_placeholder_boxes(make_session):
    session = make_session()
    size = session.atlas.size(sprites.RUN_1)
    image = np.zeros((size.height, size.width, 3), dtype=np.uint8)
    image[:, :] = (1, 2, 3)

    buffer = render(session, FrameRenderer(session.atlas, images={sprites.RUN_1: image}))

    assert tuple(buffer[200, 60]) == (1, 2, 3)


def test_draw_rect_clips():
    buffer = new_buffer(10, 10)
    draw_rect(buffer, -5, -5, 8, 8, (255, 0, 0))
    assert tuple(buffer[0, 0]) == (255, 0, 0)
    assert tuple(buffer[2, 2]) == (255, 0, 0)
    assert tuple(buffer[3, 3]) == (0, 0, 0)


def test_draw_rect_outline():
    buffer = new_buffer(10, 10)
    draw_rect(buffer, 0, 0, 10, 10, (9, 9, 9), filled=False)
    assert tuple(buffer[0, 5]) == (9, 9, 9)
    assert tuple(buffer[5, 5]) == (0, 0, 0)


def test_draw_image_alpha_blend():
    buffer = new_buffer(4, 4, (0, 0, 0))
    image = np.zeros((2, 2, 4), dtype=np.uint8)
    image[0, 0] = (255, 255, 255, 255)
    image[0, 1] = (255, 255, 255, 0)

    draw_image(buffer, image, 0, 0)
    assert tuple(buffer[0, 0]) == (255, 255, 255)
    assert tuple(buffer[0, 1]) == (0, 0, 0)

    # Clipped on the left: only the transparent column lands
    buffer = new_buffer(4, 4, (0, 0, 0))
    draw_image(buffer, image, -1, 0)
    assert tuple(buffer[0, 0]) == (0, 0, 0)


def test_text_width_matches_drawn_width():
    buffer = new_buffer(100, 20)
    assert draw_text(buffer, "HI 00042", 0, 0, (255, 255, 255), 2) == text_width("HI 00042", 2)


def test_memory_display_shows_rendered_frame(make_session):
    session = make_session()
    display = MemoryDisplay(session.board_width, session.board_height)

    display.set_buffer(render(session))

    assert display.frames_shown == 1
    assert tuple(display.get_buffer()[0, 0]) == BACKGROUND


def test_memory_display_rejects_wrong_size():
    display = MemoryDisplay(10, 10)
    with pytest.raises(ValueError):
        display.set_buffer(new_buffer(5, 5))
