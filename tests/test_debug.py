"""Tests for the logging manager."""

import logging

from dropfour.debug import DebugLevel, DebugManager, level_from_string


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append((record.levelname, record.getMessage()))


def make_manager(name, monkeypatch):
    monkeypatch.delenv("DROPFOUR_DEBUG", raising=False)
    manager = DebugManager(name)
    handler = ListHandler()
    manager.logger.addHandler(handler)
    return manager, handler


class TestLevels:
    def test_level_from_string(self):
        assert level_from_string("TRACE") == DebugLevel.TRACE
        assert level_from_string(" debug ") == DebugLevel.DEBUG
        assert level_from_string("verbose") is None

    def test_default_is_warning(self, monkeypatch):
        manager, handler = make_manager("dropfour.test.default", monkeypatch)
        assert manager.level == DebugLevel.WARNING
        manager.info("hidden")
        manager.warning("shown")
        assert handler.messages == [("WARNING", "shown")]

    def test_trace_level(self, monkeypatch):
        manager, handler = make_manager("dropfour.test.trace", monkeypatch)
        assert manager.set_from_string("trace")
        manager.trace("deep", "board")
        assert handler.messages == [("TRACE", "[board] deep")]

    def test_none_silences(self, monkeypatch):
        manager, handler = make_manager("dropfour.test.none", monkeypatch)
        manager.configure(level=DebugLevel.NONE)
        manager.error("nothing")
        assert handler.messages == []

    def test_unknown_level_keeps_current(self, monkeypatch):
        manager, _ = make_manager("dropfour.test.unknown", monkeypatch)
        assert not manager.set_from_string("loud")
        assert manager.level == DebugLevel.WARNING

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("DROPFOUR_DEBUG", "debug")
        manager = DebugManager("dropfour.test.env")
        assert manager.level == DebugLevel.DEBUG


class TestComponents:
    def test_component_filter(self, monkeypatch):
        manager, handler = make_manager("dropfour.test.components", monkeypatch)
        manager.configure(level=DebugLevel.INFO, components=["game"])
        manager.info("kept", "game")
        manager.info("dropped", "board")
        manager.info("untagged")
        assert handler.messages == [("INFO", "[game] kept"), ("INFO", "untagged")]


class TestTimers:
    def test_timer_roundtrip(self, monkeypatch):
        manager, _ = make_manager("dropfour.test.timer", monkeypatch)
        manager.start_timer("scan")
        assert manager.end_timer("scan") >= 0.0
        assert manager.end_timer("scan") is None

    def test_log_file(self, monkeypatch, tmp_path):
        manager, _ = make_manager("dropfour.test.file", monkeypatch)
        path = tmp_path / "dropfour.log"
        manager.configure(log_file=str(path))
        manager.error("written", "cli")
        manager.configure(log_file="")
        assert "[cli] written" in path.read_text()


class TestConvenienceMethods:
    def test_level_helpers_are_documented(self):
        for name in ("error", "warning", "info", "debug", "trace"):
            assert getattr(DebugManager, name).__doc__
