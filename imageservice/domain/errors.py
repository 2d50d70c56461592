"""
Exceptions raised by the image service URL builder.
"""

from __future__ import annotations

from typing import Any


class ImageServiceError(Exception):
    """Base class for every error raised by this package."""


class InvalidSourceUrl(ImageServiceError, ValueError):
    """The source URL does not embed a ``{width}x{height}`` path segment."""

    def __init__(self, url: str, reason: str = "Unable to extract dimensions from URL"):
        self.url = url
        super().__init__(f'{reason} "{url}".')


class InvalidParameter(ImageServiceError, ValueError):
    """
    A value type or builder argument is outside of its allowed range.

    :param name: Name of the offending parameter.
    :param bounds: Human readable description of the allowed values.
    :param value: The value that was given.
    """

    def __init__(self, name: str, bounds: str, value: Any):
        self.name = name
        self.bounds = bounds
        self.value = value
        super().__init__(f'{name} must be {bounds}, "{value}" given.')
