"""
Unit tests for logging setup.
"""

import logging

from presentation_service.infra.config.logging_config import (
    SERVICE_LOGGERS,
    setup_logging,
)
from presentation_service.infra.config.settings import Settings


def _handlers_named(name):
    return [h for h in logging.getLogger().handlers if h.name == name]


class TestSetupLogging:
    def test_service_loggers_follow_configured_level(self):
        setup_logging(Settings(LOG_LEVEL="DEBUG", LOG_FORMAT="console"))

        for name in ("store.presentation", "manager.slide", "repo.presentation"):
            assert name in SERVICE_LOGGERS
            assert logging.getLogger(name).level == logging.DEBUG

        setup_logging(Settings(LOG_LEVEL="WARNING", LOG_FORMAT="json"))

        assert logging.getLogger("manager.slide").level == logging.WARNING

    def test_sql_engine_is_quiet_unless_echo_is_enabled(self):
        setup_logging(Settings(LOG_LEVEL="DEBUG", DATABASE_ECHO=False))
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

        setup_logging(Settings(LOG_LEVEL="DEBUG", DATABASE_ECHO=True))
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO

    def test_repeated_setup_installs_one_handler(self):
        setup_logging(Settings(LOG_FORMAT="console"))
        setup_logging(Settings(LOG_FORMAT="console"))

        assert len(_handlers_named("presentation_service")) == 1

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(Settings(LOG_LEVEL="chatty"))

        assert logging.getLogger("store.presentation").level == logging.INFO
