"""
Immutable builder compiling image transformations into an image service URL.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from imageservice.domain.errors import InvalidParameter, InvalidSourceUrl
from imageservice.domain.types import (
    FILL_VALUE_TYPES,
    Angle,
    Blur,
    Brightness,
    CropRect,
    FillValue,
    FocalPoint,
    Format,
    Quality,
    RoundedCorner,
)
from imageservice.io.url import parse_image_url

logger = logging.getLogger(__name__)


def _require_type(name: str, value: Any, expected: Any) -> None:
    if not isinstance(value, expected):
        types = expected if isinstance(expected, tuple) else (expected,)
        bounds = "an instance of " + " or ".join(t.__name__ for t in types)
        raise InvalidParameter(name, bounds, value)


def _require_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(name, "an integer", value)


class Image(BaseModel):
    """
    Snapshot of a source asset and the transformations requested for it.

    Every transformation returns a new :class:`Image`; the receiver is never
    modified, so one instance can be shared and transformed freely.

    :Usage example:

     .. code-block:: python

        from imageservice import Format, Image, Quality

        image = Image("https://a.example.com/f/1/1400x900/abc/image.jpg")
        url = image.resize(700, 0).quality(Quality(80)).format(Format.WEBP).to_string()
        # https://a.example.com/f/1/1400x900/abc/image.jpg/m/700x450/filters:format(webp):quality(80)
    """

    url: str = Field(..., description="Source URL of the asset")
    original_width: int = Field(..., gt=0)
    original_height: int = Field(..., gt=0)
    width: Optional[int] = Field(default=None, description="Explicit output width")
    height: Optional[int] = Field(default=None, description="Explicit output height")
    fit_in_enabled: Optional[bool] = None
    crop_rect: Optional[CropRect] = None
    flipped_x: bool = False
    flipped_y: bool = False
    extension: str = ""
    name: str = ""
    # (filter name, encoded argument) pairs, sorted by name
    filters: Tuple[Tuple[str, str], ...] = ()

    model_config = ConfigDict(frozen=True)

    def __init__(self, url: Optional[str] = None, /, **data: Any):
        if url is not None:
            data["url"] = url
        try:
            super().__init__(**data)
        except ValidationError as exc:
            cause = exc.errors()[0].get("ctx", {}).get("error")
            if isinstance(cause, InvalidSourceUrl):
                raise cause from None
            raise

    @model_validator(mode="before")
    def parse_source_url(cls, data: Any) -> Any:
        """Fill the original dimensions, name and extension from the source URL."""
        if not isinstance(data, dict):
            return data
        url = data.get("url")
        if not isinstance(url, str):
            raise InvalidSourceUrl(str(url), "Source URL must be a string, got")
        parts = parse_image_url(url)
        if parts.width is None or parts.height is None:
            logger.warning(f"No dimensions found in source URL {url}")
            raise InvalidSourceUrl(url)
        if parts.width == 0 or parts.height == 0:
            logger.warning(f"Zero dimensions in source URL {url}")
            raise InvalidSourceUrl(url, "Dimensions must be greater than 0 in URL")

        logger.debug(f"Parsed {parts.width}x{parts.height} '{parts.name}.{parts.extension}' from {url}")
        data = dict(data)
        data.setdefault("original_width", parts.width)
        data.setdefault("original_height", parts.height)
        data.setdefault("extension", parts.extension)
        data.setdefault("name", parts.name)
        return data

    def __str__(self) -> str:
        return self.to_string()

    @property
    def effective_width(self) -> int:
        """Output width: the explicit width if set, the original width otherwise."""
        return self.width if self.width is not None else self.original_width

    @property
    def effective_height(self) -> int:
        """Output height: the explicit height if set, the original height otherwise."""
        return self.height if self.height is not None else self.original_height

    def _copy(self, **update: Any) -> "Image":
        return self.model_copy(update=update)

    def _with_filter(self, name: str, value: str) -> "Image":
        filters = dict(self.filters)
        filters[name] = value
        return self._copy(filters=tuple(sorted(filters.items())))

    def blur(self, blur: Blur) -> "Image":
        """Blur the image. A zero radius adds no filter."""
        _require_type("blur", blur, Blur)
        value = blur.to_string()
        if value == "":
            logger.debug("Blur with radius 0 ignored")
            return self._copy()
        return self._with_filter("blur", value)

    def quality(self, quality: Quality) -> "Image":
        _require_type("quality", quality, Quality)
        return self._with_filter("quality", quality.to_string())

    def brightness(self, brightness: Brightness) -> "Image":
        _require_type("brightness", brightness, Brightness)
        return self._with_filter("brightness", brightness.to_string())

    def crop(
        self,
        left: int = 0,
        top: int = 0,
        right: Optional[int] = None,
        bottom: Optional[int] = None,
    ) -> "Image":
        """
        Crop the image to the given rectangle before resizing.

        ``right`` and ``bottom`` default to the original width and height.
        Cropping to the full original bounds removes any previous crop.

        :raises InvalidParameter: If a coordinate is not a non-negative integer.
        """
        if right is None:
            right = self.original_width
        if bottom is None:
            bottom = self.original_height
        for name, value in (("left", left), ("top", top), ("right", right), ("bottom", bottom)):
            _require_int(name, value)

        if (left, top, right, bottom) == (0, 0, self.original_width, self.original_height):
            logger.debug("Crop covers the full image, no crop applied")
            return self._copy(crop_rect=None)
        return self._copy(crop_rect=CropRect(left, top, right, bottom))

    def fit_in(self, width: int, height: int) -> "Image":
        """
        Fit the image within ``width`` x ``height`` without cropping.

        Both dimensions must lie between 0 and the original dimension.
        """
        _require_int("width", width)
        _require_int("height", height)
        if not 0 <= width <= self.original_width:
            raise InvalidParameter("width", f"between 0 and {self.original_width}", width)
        if not 0 <= height <= self.original_height:
            raise InvalidParameter("height", f"between 0 and {self.original_height}", height)
        return self._copy(fit_in_enabled=True, width=width, height=height)

    def fill(self, color: FillValue) -> "Image":
        """Fill the area left by fit-in with a color or transparency."""
        _require_type("fill", color, FILL_VALUE_TYPES)
        return self._with_filter("fill", color.to_string())

    def format(self, format: Format) -> "Image":
        """Convert the output format. The extension follows the new format."""
        _require_type("format", format, Format)
        image = self._with_filter("format", format.value)
        return image._copy(extension=format.value)

    def flip_x(self) -> "Image":
        return self._copy(flipped_x=True)

    def flip_y(self) -> "Image":
        return self._copy(flipped_y=True)

    def focal_point(self, focal_point: FocalPoint) -> "Image":
        _require_type("focal_point", focal_point, FocalPoint)
        return self._with_filter("focal", focal_point.to_string())

    def grayscale(self) -> "Image":
        return self._with_filter("grayscale", "")

    def no_upscale(self) -> "Image":
        """Never scale the image beyond its original size."""
        return self._with_filter("no_upscale", "")

    def resize(self, width: int = 0, height: int = 0) -> "Image":
        """
        Resize the image.

        Passing 0 for one side derives it from the other one, keeping the
        original aspect ratio. The derived side is truncated, not rounded.

        :param width: Target width, or 0 to derive it.
        :type width: int
        :param height: Target height, or 0 to derive it.
        :type height: int
        :returns: New image with both dimensions set
        :rtype: :class:`Image`
        :raises InvalidParameter: If a side is negative or both are 0.
        """
        _require_int("width", width)
        _require_int("height", height)
        if width < 0:
            raise InvalidParameter("width", "greater than or equal to 0", width)
        if height < 0:
            raise InvalidParameter("height", "greater than or equal to 0", height)
        if width == 0 and height == 0:
            raise InvalidParameter("height", "greater than 0 when width is 0", height)

        if width == 0:
            width = self.original_width * height // self.original_height
        elif height == 0:
            height = self.original_height * width // self.original_width
        return self._copy(width=width, height=height)

    def rotate(self, angle: Angle) -> "Image":
        _require_type("angle", angle, Angle)
        return self._with_filter("rotate", str(angle.value))

    def rounded_corners(self, rounded_corner: RoundedCorner) -> "Image":
        _require_type("rounded_corner", rounded_corner, RoundedCorner)
        return self._with_filter("round_corner", rounded_corner.to_string())

    def to_string(self) -> str:
        """
        Serialize the snapshot into the image service URL.

        Without any transformation the source URL is returned unchanged.
        """
        resized = (
            self.width is not None
            or self.height is not None
            or self.flipped_x
            or self.flipped_y
        )
        if not resized and self.fit_in_enabled is None and self.crop_rect is None and not self.filters:
            return self.url

        url = f"{self.url}/m"
        if self.crop_rect is not None:
            url += f"/{self.crop_rect.to_string()}"

        if resized:
            if self.fit_in_enabled:
                url += "/fit-in"
            flip_x = "-" if self.flipped_x else ""
            flip_y = "-" if self.flipped_y else ""
            url += f"/{flip_x}{self.effective_width}x{flip_y}{self.effective_height}"

        if self.filters:
            url += "/filters"
            for name, value in sorted(self.filters):
                url += f":{name}({value})"
        return url
