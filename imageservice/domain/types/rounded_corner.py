from typing import Optional

from pydantic import Field

from imageservice.domain.types.base import BaseValue


class RoundedCorner(BaseValue):
    """
    Rounded corners filter argument.

    The corners outside of the radius are painted with the given RGB
    background color, or left transparent.
    """

    radius: int = Field(..., ge=0, description="Corner radius")
    ellipsis: Optional[int] = Field(default=None, ge=0, description="Vertical radius")
    red: int = Field(default=255, ge=0, le=255)
    green: int = Field(default=255, ge=0, le=255)
    blue: int = Field(default=255, ge=0, le=255)
    transparent: bool = False

    def to_string(self) -> str:
        radius = str(self.radius) if self.ellipsis is None else f"{self.radius}|{self.ellipsis}"
        return f"{radius},{self.red},{self.green},{self.blue},{int(self.transparent)}"
