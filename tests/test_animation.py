import pytest

from dinorun.game.animation import Animation, advance_frame


def test_frame_switches_only_after_delay():
    assert advance_frame(0, 0.0, 2, 100.0, 100.0) == (0, 0.0)
    assert advance_frame(0, 0.0, 2, 100.0, 101.0) == (1, 101.0)


def test_frame_wraps_around():
    assert advance_frame(1, 0.0, 2, 100.0, 150.0) == (0, 150.0)


def test_animation_cycles_frames():
    anim = Animation(("a", "b"), delay_ms=100.0)
    assert anim.current_frame == "a"

    anim.advance(50.0)
    assert anim.current_frame == "a"

    anim.advance(120.0)
    assert anim.current_frame == "b"

    anim.advance(200.0)
    assert anim.current_frame == "b"

    anim.advance(221.0)
    assert anim.current_frame == "a"


def test_reset():
    anim = Animation(("a", "b"), delay_ms=10.0)
    anim.advance(50.0)
    anim.reset()
    assert anim.frame_index == 0
    assert anim.last_switch_ms == 0.0


def test_empty_animation_rejected():
    with pytest.raises(ValueError):
        Animation((), delay_ms=100.0)
