from pydantic import Field

from imageservice.domain.types.base import BaseValue


class Brightness(BaseValue):
    value: int = Field(..., ge=-100, le=100, description="Brightness adjustment")

    def to_string(self) -> str:
        return str(self.value)
