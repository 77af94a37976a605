# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

import logging

import pytest

from clidecl.util.logging import ROOT_LOGGER_NAME, Logger, LoggingLevels, LoggingManager, getLogger


@pytest.mark.logging
class TestLogger:
    def test_get_logger_is_library_child(self):
        logger = getLogger("TestLoggerChild")

        assert isinstance(logger, Logger)
        assert logger.name == f"{ROOT_LOGGER_NAME}.TestLoggerChild"
        assert logger.parent is logging.getLogger(ROOT_LOGGER_NAME)

    def test_get_logger_keeps_qualified_names(self):
        assert getLogger(f"{ROOT_LOGGER_NAME}.qualified").name == f"{ROOT_LOGGER_NAME}.qualified"

    def test_get_logger_from_object(self):
        class Thing:
            pass

        assert getLogger(Thing).name == f"{ROOT_LOGGER_NAME}.Thing"
        assert getLogger(Thing()).name == f"{ROOT_LOGGER_NAME}.Thing"

    def test_get_logger_with_parent(self):
        parent = getLogger("TestLoggerParent")
        child = getLogger("child", parent=parent)

        assert child.parent is parent
        assert child.name == f"{ROOT_LOGGER_NAME}.TestLoggerParent.child"

    def test_messages_propagate(self, caplog):
        logger = getLogger("TestLoggerPropagate")

        with caplog.at_level(logging.INFO, logger=ROOT_LOGGER_NAME):
            logger.debug("debug message")
            logger.info("info message")

        assert "debug message" not in caplog.text
        assert "info message" in caplog.text

    def test_is_enabled_for_handlers(self):
        logger = getLogger("TestLoggerHandlers")

        assert logger.isEnabledForTty(logging.CRITICAL)
        assert not logger.isEnabledForFile(logging.CRITICAL)
        assert logger.isEnabledFor(logging.CRITICAL, handler="tty") == logger.isEnabledForTty(logging.CRITICAL)

    def test_invalid_handler(self):
        with pytest.raises(ValueError):
            getLogger("TestLoggerInvalid").isEnabledFor(logging.INFO, handler="invalid")


@pytest.mark.logging
@pytest.mark.logging_manager
class TestLoggingManager:
    def test_singleton(self, logging_manager):
        assert LoggingManager() is logging_manager
        assert logging_manager.initialized

    def test_initialize_twice(self, logging_manager):
        with pytest.raises(RuntimeError):
            logging_manager.initialize()

    def test_handlers(self, logging_manager):
        assert logging_manager.fh is None
        assert logging_manager.ch is not None
        # Under pytest the tty handler is created but left detached
        assert logging_manager.ch not in logging_manager.logger.handlers

    def test_custom_levels(self, logging_manager, monkeypatch):
        levels = LoggingLevels(custom={"clidecl\\.TestManagerCustom": "error", "clidecl\\.TestManager": "debug"})
        monkeypatch.setattr(logging_manager, "config", logging_manager.config.model_copy(update={"levels": levels}))

        custom = logging.getLogger(f"{ROOT_LOGGER_NAME}.TestManagerCustom")
        logging_manager.apply_logging_level(custom)
        other = logging.getLogger(f"{ROOT_LOGGER_NAME}.TestManagerOther")
        logging_manager.apply_logging_level(other)
        unmatched = logging.getLogger(f"{ROOT_LOGGER_NAME}.Unmatched")
        logging_manager.apply_logging_level(unmatched)

        # The longest matching pattern wins
        assert custom.level == logging.ERROR
        assert other.level == logging.DEBUG
        assert unmatched.level == logging.NOTSET
