"""Settings and bootstrap - tests for env-driven config and wiring."""

import logging

import pytest
from pydantic import ValidationError as SettingsValidationError

from storefront.bootstrap import configure
from storefront.config import Settings, get_settings
from storefront.infrastructure.observability import LOGGER_NAME, JSONFormatter
from storefront.services.order_service import OrderService
from storefront.services.profile_service import ProfileService


@pytest.fixture
def _restore_storefront_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_defaults():
    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_env_prefix_and_level_normalised(monkeypatch):
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", " debug ")
    monkeypatch.setenv("STOREFRONT_LOG_FORMAT", "text")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "text"


def test_unknown_log_format_rejected(monkeypatch):
    monkeypatch.setenv("STOREFRONT_LOG_FORMAT", "xml")
    with pytest.raises(SettingsValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_wires_logging_and_returns_services(_restore_storefront_logger):
    order_service, profile_service = configure(Settings(log_level="ERROR"))
    assert isinstance(order_service, OrderService)
    assert isinstance(profile_service, ProfileService)
    logger = _restore_storefront_logger
    assert logger.level == logging.ERROR
    assert any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers)


def test_configure_twice_keeps_one_handler(_restore_storefront_logger):
    logger = _restore_storefront_logger
    before = len(logger.handlers)
    configure(Settings())
    configure(Settings())
    assert len(logger.handlers) == before + 1
