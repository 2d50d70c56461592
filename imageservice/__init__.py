"""
Public package interface for the image service URL builder.

An :class:`Image` wraps a source asset URL; chaining transformations on it
produces new images, and ``str(image)`` yields the image service URL.
"""

from __future__ import annotations

import logging

from imageservice.config import ImageServiceSettings, configure_logging
from imageservice.domain.errors import ImageServiceError, InvalidParameter, InvalidSourceUrl
from imageservice.domain.types import (
    Angle,
    Blur,
    Brightness,
    FillValue,
    FocalPoint,
    Format,
    HexCode,
    Quality,
    RoundedCorner,
    Transparent,
)
from imageservice.image import Image
from imageservice.io.url import parse_image_url

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Angle",
    "Blur",
    "Brightness",
    "FillValue",
    "FocalPoint",
    "Format",
    "HexCode",
    "Image",
    "ImageServiceError",
    "ImageServiceSettings",
    "InvalidParameter",
    "InvalidSourceUrl",
    "Quality",
    "RoundedCorner",
    "Transparent",
    "configure_logging",
    "parse_image_url",
]
