"""Tests for the logging manager."""

import logging

from connectfour.debug import LOGGER_NAME, DebugLevel, DebugManager, debug
from connectfour.game.engine import MatchEngine
from connectfour.game.grid import Grid
from connectfour.utils import Token


class TestDebugManager:
    def test_level_filtering(self):
        manager = DebugManager(DebugLevel.INFO)
        assert manager.is_enabled_for(DebugLevel.INFO)
        assert not manager.is_enabled_for(DebugLevel.DEBUG)
        assert not manager.is_enabled_for(DebugLevel.NONE)

    def test_component_filtering(self):
        manager = DebugManager(DebugLevel.DEBUG)
        manager.configure(components=["engine"])
        assert manager.is_enabled_for(DebugLevel.DEBUG, "engine")
        assert not manager.is_enabled_for(DebugLevel.DEBUG, "grid")
        assert manager.is_enabled_for(DebugLevel.DEBUG)

    def test_disabled(self):
        manager = DebugManager(DebugLevel.TRACE)
        manager.configure(enabled=False)
        assert not manager.is_enabled_for(DebugLevel.ERROR)

    def test_set_from_string(self):
        manager = DebugManager()
        assert manager.set_from_string("Debug")
        assert manager.level is DebugLevel.DEBUG
        assert not manager.set_from_string("loud")
        assert manager.level is DebugLevel.DEBUG

    def test_timer(self):
        manager = DebugManager()
        manager.start_timer("work")
        elapsed = manager.end_timer("work")
        assert elapsed is not None and elapsed >= 0
        assert manager.end_timer("work") is None

    def test_single_console_handler(self):
        DebugManager()
        DebugManager()
        logger = logging.getLogger(LOGGER_NAME)
        console = [h for h in logger.handlers if getattr(h, "_connectfour_console", False)]
        assert len(console) == 1


class TestEngineLogging:
    def test_rejected_move_logged(self, caplog):
        debug.configure(level=DebugLevel.DEBUG)
        engine = MatchEngine(Grid(6, 7))
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            engine.play_move(9)
        assert "[engine] Rejected move in column 9" in caplog.text

    def test_win_logged_at_info(self, caplog):
        debug.configure(level=DebugLevel.INFO)
        grid = Grid(6, 7)
        for col in range(4):
            grid.drop(col, Token.X)
        engine = MatchEngine(grid)
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            engine.evaluate_status(0, 3)
        assert "wins along ROW" in caplog.text

    def test_log_file(self, tmp_path):
        path = tmp_path / "engine.log"
        debug.configure(level=DebugLevel.DEBUG, log_file=str(path))
        MatchEngine(Grid(6, 7)).play_move(-3)
        debug.configure(log_file="")
        assert "Rejected move in column -3" in path.read_text()
