"""
Tests for settings loading and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from imageservice.config import (
    PACKAGE_LOGGER_NAME,
    ImageServiceSettings,
    PackageLogHandler,
    configure_logging,
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("IMAGE_SERVICE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("IMAGE_SERVICE_LOG_FORMAT", raising=False)
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


def test_default_settings():
    settings = ImageServiceSettings()
    assert settings.LOG_LEVEL == "WARNING"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("IMAGE_SERVICE_LOG_LEVEL", "debug")
    assert ImageServiceSettings().LOG_LEVEL == "DEBUG"


def test_settings_from_env_file(tmp_path):
    (tmp_path / "imageservice.env").write_text("IMAGE_SERVICE_LOG_LEVEL=INFO\n")
    assert ImageServiceSettings().LOG_LEVEL == "INFO"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        ImageServiceSettings(LOG_LEVEL="LOUD")


def test_configure_logging():
    logger = configure_logging(ImageServiceSettings(LOG_LEVEL="DEBUG", LOG_FORMAT="%(message)s"))
    assert logger.name == PACKAGE_LOGGER_NAME
    assert logger.level == logging.DEBUG
    handler = next(h for h in logger.handlers if isinstance(h, PackageLogHandler))
    assert handler.formatter._fmt == "%(message)s"


def test_configure_logging_adds_one_handler():
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    before = len(logger.handlers)
    configure_logging(ImageServiceSettings())
    configure_logging(ImageServiceSettings(LOG_LEVEL="ERROR"))
    assert len(logger.handlers) == before + 1
    assert sum(isinstance(h, PackageLogHandler) for h in logger.handlers) == 1
    assert logger.level == logging.ERROR


if __name__ == "__main__":
    pytest.main()
