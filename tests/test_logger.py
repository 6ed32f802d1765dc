import logging

from lingo_engine import logger as log_module


def test_log_mode_follows_environment(monkeypatch):
    monkeypatch.setenv("LINGODOTDEV_LOG_MODE", "debug")
    log_module._clear_log_mode_cache()
    logger = log_module.get_logger("lingo_engine.tests.mode")
    assert logger.level == logging.DEBUG

    monkeypatch.setenv("LINGODOTDEV_LOG_MODE", "off")
    log_module._clear_log_mode_cache()
    assert logger.level > logging.CRITICAL
    assert len(logger.handlers) == 1


def test_log_file_handler(monkeypatch, tmp_path):
    log_file = tmp_path / "logs" / "engine.log"
    monkeypatch.setenv("LINGODOTDEV_LOG_MODE", "info")
    monkeypatch.setenv("LINGODOTDEV_LOG_FILE", str(log_file))
    log_module._clear_log_mode_cache()

    logger = log_module.get_logger("lingo_engine.tests.file")
    logger.info("hello from the engine")
    for handler in logger.handlers:
        handler.flush()

    assert "hello from the engine" in log_file.read_text(encoding="utf-8")

    monkeypatch.delenv("LINGODOTDEV_LOG_FILE")
    monkeypatch.setenv("LINGODOTDEV_LOG_MODE", "off")
    log_module._clear_log_mode_cache()
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
