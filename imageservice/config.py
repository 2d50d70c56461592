"""
Settings and logging setup for the image service URL builder.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

IMAGE_SERVICE_ENV_FILENAME = "imageservice.env"
PACKAGE_LOGGER_NAME = "imageservice"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ImageServiceSettings(BaseSettings):
    """
    Settings model read from ``IMAGE_SERVICE_*`` environment variables
    or an ``imageservice.env`` file, via `pydantic-settings`.
    """

    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="IMAGE_SERVICE_",
        env_file=IMAGE_SERVICE_ENV_FILENAME,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got '{v}'")
        return level


class PackageLogHandler(logging.StreamHandler):
    """Stream handler installed on the package logger by :func:`configure_logging`."""


def configure_logging(settings: Optional[ImageServiceSettings] = None) -> logging.Logger:
    """
    Apply logging settings to the package logger.

    Only the ``imageservice`` logger is touched; the root logger and its
    handlers are left to the application.

    :param settings: Settings to apply. Loaded from the environment if omitted.
    :type settings: ImageServiceSettings, optional
    :returns: The configured package logger
    :rtype: :class:`logging.Logger`
    """
    if settings is None:
        settings = ImageServiceSettings()

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(settings.LOG_LEVEL)

    handler = next((h for h in logger.handlers if isinstance(h, PackageLogHandler)), None)
    if handler is None:
        handler = PackageLogHandler()
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
    return logger
