import enum


class Angle(int, enum.Enum):
    """Rotation in degrees."""

    DEG_0 = 0
    DEG_90 = 90
    DEG_180 = 180
    DEG_270 = 270

    def to_string(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return str(self.value)
