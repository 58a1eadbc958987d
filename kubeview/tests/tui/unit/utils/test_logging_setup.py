"""Tests for logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from textual.logging import TextualHandler

from kubeview.utils.logging_setup import resolve_log_level, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("debug", logging.DEBUG),
            (" INFO ", logging.INFO),
            (None, logging.WARNING),
            ("chatty", logging.WARNING),
            (logging.ERROR, logging.ERROR),
        ],
    )
    def test_levels(self, value, expected) -> None:
        assert resolve_log_level(value) == expected


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_handler(self, tmp_path: Path, restore_root_logger) -> None:
        log_file = tmp_path / "logs" / "kubeview.log"
        setup_logging("DEBUG", log_file)
        logging.getLogger("kubeview.test").debug("hello from test")
        for handler in restore_root_logger.handlers:
            handler.flush()
        assert restore_root_logger.level == logging.DEBUG
        assert "hello from test" in log_file.read_text(encoding="utf-8")

    def test_textual_handler_without_file(self, restore_root_logger) -> None:
        setup_logging("INFO")
        assert any(isinstance(h, TextualHandler) for h in restore_root_logger.handlers)
        assert restore_root_logger.level == logging.INFO
