from pydantic import Field

from imageservice.domain.types.base import BaseValue


class CropRect(BaseValue):
    """Sub-region of the original image, applied before any resize."""

    left: int = Field(..., ge=0)
    top: int = Field(..., ge=0)
    right: int = Field(..., ge=0)
    bottom: int = Field(..., ge=0)

    def to_string(self) -> str:
        return f"{self.left}x{self.top}:{self.right}x{self.bottom}"
