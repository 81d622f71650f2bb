import pytest
from pydantic import ValidationError

from dinorun.config.settings import BoardSettings, Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.board.width == 750
    assert settings.board.height == 250
    assert settings.board.ground_y == 210
    assert settings.physics.gravity == 0.8
    assert settings.physics.jump_velocity == -17.0
    assert settings.progression.base_speed == 8.0
    assert settings.progression.spawn_interval_ms == 1500
    assert settings.progression.spawn_interval_floor_ms == 700


def test_frame_ms_follows_fps():
    assert Settings(fps=50).frame_ms == 20.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DINORUN_FPS", "30")
    monkeypatch.setenv("DINORUN_BOARD_WIDTH", "800")
    monkeypatch.setenv("DINORUN_PROGRESSION_BASE_SPEED", "10")

    settings = Settings()

    assert settings.fps == 30
    assert settings.board.width == 800
    assert settings.progression.base_speed == 10.0


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        Settings(fps=0)
    with pytest.raises(ValidationError):
        BoardSettings(width=-1)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
