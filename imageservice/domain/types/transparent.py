from imageservice.domain.types.base import BaseValue


class Transparent(BaseValue):
    """Marker for a transparent fill."""

    def to_string(self) -> str:
        return "transparent"
