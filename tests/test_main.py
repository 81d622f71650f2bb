import logging

from dinorun.main import setup_logging
from dinorun.simulator.main import build_window, connect_session
from dinorun.core.events import EventType, jump_event, tick_event
from dinorun.core.state import GameState


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "dinorun.log"
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        setup_logging(debug=True, log_file=log_file)
        logging.getLogger("dinorun.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved


def test_connected_session_follows_bus(make_session, bus):
    session = make_session()
    connect_session(session, bus)

    bus.emit(jump_event())
    assert session.state == GameState.PLAYING

    session.actor.snap_to_ground()
    bus.emit(tick_event(0.1, 1))  # 100ms = five 20ms frames
    assert session.score == 5


def test_build_window_without_assets(settings):
    window = build_window(settings)
    assert window.session.state == GameState.READY
    assert window.screen.width == settings.board.width
    assert window.config.fps == settings.fps
    assert window.event_bus.get_history(EventType.STATE_CHANGED) == []
