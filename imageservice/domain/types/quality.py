from pydantic import Field

from imageservice.domain.types.base import BaseValue


class Quality(BaseValue):
    value: int = Field(..., ge=0, le=100, description="Output quality")

    def to_string(self) -> str:
        return str(self.value)
