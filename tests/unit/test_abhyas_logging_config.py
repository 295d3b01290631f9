"""Unit tests for abhyas.logging_config."""

import logging

from abhyas.logging_config import get_logger, setup_logging


def test_get_logger_namespaced():
    assert get_logger("link.store").name == "abhyas.link.store"


def test_setup_logging_creates_log_directory(tmp_path, monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    log_file = tmp_path / "nested" / "abhyas.log"

    setup_logging("DEBUG", log_file)

    assert log_file.parent.is_dir()
    assert calls["level"] == "DEBUG"
    file_handler, stream_handler = calls["handlers"]
    assert isinstance(file_handler, logging.FileHandler)
    assert stream_handler.level == logging.ERROR
    file_handler.close()


def test_setup_logging_defaults_to_home(abhyas_home, monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    setup_logging()
    assert (abhyas_home / "abhyas.log").exists()
    captured["handlers"][0].close()
