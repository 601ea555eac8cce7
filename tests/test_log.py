"""Tests for logging setup (utils/log.py)."""

from __future__ import annotations

import logging

import pytest

from caesar_cipher.utils.log import setup_logging


class TestSetupLogging:
    def test_default_level_is_warning(self) -> None:
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_verbose_level_is_debug(self) -> None:
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_returns_package_logger(self) -> None:
        assert setup_logging().name == "caesar_cipher"

    def test_replaces_existing_handlers(self) -> None:
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_uses_rich_handler_when_available(self) -> None:
        pytest.importorskip("rich")
        from rich.logging import RichHandler

        setup_logging()
        assert isinstance(logging.getLogger().handlers[0], RichHandler)

    @pytest.mark.usefixtures("hide_rich")
    def test_plain_handler_without_rich(self) -> None:
        setup_logging()
        handler = logging.getLogger().handlers[0]
        assert type(handler) is logging.StreamHandler
        assert handler.formatter is not None
        assert "%(levelname)s" in handler.formatter._fmt  # type: ignore[union-attr]
