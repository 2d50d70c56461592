from pydantic import Field, model_validator

from imageservice.domain.errors import InvalidParameter
from imageservice.domain.types.base import BaseValue


class Blur(BaseValue):
    """
    Gaussian blur filter argument.

    A radius of 0 disables the blur entirely; a sigma can only be given
    together with a non-zero radius.
    """

    radius: int = Field(..., ge=0, le=150, description="Blur radius in pixels")
    sigma: int = Field(default=0, ge=0, le=150, description="Blur sigma")

    @model_validator(mode="after")
    def validate_sigma_requires_radius(self) -> "Blur":
        if self.radius == 0 and self.sigma > 0:
            raise InvalidParameter("Blur.sigma", "0 when the radius is 0", self.sigma)
        return self

    def to_string(self) -> str:
        if self.radius == 0:
            return ""
        if self.sigma == 0:
            return str(self.radius)
        return f"{self.radius}, {self.sigma}"
