"""Unit tests for mcpinstall.utils.logger."""

import logging
from logging.handlers import RotatingFileHandler

from mcpinstall.utils import logger as logger_module


def test_get_logger_namespace():
    assert logger_module.get_logger("probe").name == "mcpinstall.probe"


def test_configure_logging_writes_rotating_file(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    root = logging.getLogger("mcpinstall")
    saved_handlers = list(root.handlers)
    try:
        logger_module.configure_logging(home=tmp_path / "logs", level="debug", max_bytes=1024, backup_count=1)
        logger_module.configure_logging(home=tmp_path / "other")

        new_handlers = [h for h in root.handlers if h not in saved_handlers]
        assert len(new_handlers) == 1
        handler = new_handlers[0]
        assert isinstance(handler, RotatingFileHandler)
        assert root.level == logging.DEBUG

        logger_module.get_logger("test").info("hello from test")
        handler.flush()
        assert "mcpinstall.test - INFO - hello from test" in (tmp_path / "logs" / "mcpinstall.log").read_text()
        assert not (tmp_path / "other").exists()
    finally:
        for handler in list(root.handlers):
            if handler not in saved_handlers:
                root.removeHandler(handler)
                handler.close()
        root.propagate = True
        root.setLevel(logging.NOTSET)
