import re

from pydantic import ConfigDict, Field, field_validator

from imageservice.domain.errors import InvalidParameter
from imageservice.domain.types.base import BaseValue

_HEX_CODE_RE = re.compile(r"#?(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})")


class HexCode(BaseValue):
    """Hexadecimal RGB color such as ``#CCC`` or ``FF0000``; case is preserved."""

    value: str = Field(..., description="Color code, optionally prefixed with '#'")

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("value")
    def validate_hex_code(cls, v: str) -> str:
        if not _HEX_CODE_RE.fullmatch(v):
            raise InvalidParameter(
                "HexCode.value", "a 3 or 6 digit hexadecimal color code", v
            )
        return v

    def to_string(self) -> str:
        return self.value.lstrip("#")
