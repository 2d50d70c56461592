import enum


class Format(str, enum.Enum):
    WEBP = "webp"
    JPEG = "jpeg"
    PNG = "png"
    AVIF = "avif"

    def to_string(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
