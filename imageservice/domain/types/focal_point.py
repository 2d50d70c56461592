import re
from typing import Any

from pydantic import Field, model_validator

from imageservice.domain.errors import InvalidParameter
from imageservice.domain.types.base import BaseValue

_FOCAL_POINT_RE = re.compile(r"([0-9]+)x([0-9]+):([0-9]+)x([0-9]+)")


class FocalPoint(BaseValue):
    """
    Region of interest used by the backend when it crops automatically.

    Encoded as ``x1xy1:x2xy2``, e.g. ``719x153:720x154``.
    """

    x1: int = Field(..., ge=0)
    y1: int = Field(..., ge=0)
    x2: int = Field(..., ge=0)
    y2: int = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_corners(self) -> "FocalPoint":
        if self.x2 < self.x1:
            raise InvalidParameter(
                "FocalPoint.x2", f"greater than or equal to x1 ({self.x1})", self.x2
            )
        if self.y2 < self.y1:
            raise InvalidParameter(
                "FocalPoint.y2", f"greater than or equal to y1 ({self.y1})", self.y2
            )
        return self

    @classmethod
    def from_string(cls, value: Any) -> "FocalPoint":
        """
        Parse a focal point from its canonical ``x1xy1:x2xy2`` encoding.

        :param value: Encoded focal point.
        :type value: str
        :returns: Parsed focal point
        :rtype: :class:`FocalPoint`
        :raises InvalidParameter: If the string does not match the format.
        """
        match = _FOCAL_POINT_RE.fullmatch(value) if isinstance(value, str) else None
        if match is None:
            raise InvalidParameter(
                "FocalPoint", 'in the format "x1xy1:x2xy2" (e.g. "719x153:720x154")', value
            )
        return cls(*(int(group) for group in match.groups()))

    def to_string(self) -> str:
        return f"{self.x1}x{self.y1}:{self.x2}x{self.y2}"
