"""
Values accepted by the ``fill`` filter.
"""

from typing import Union

from imageservice.domain.types.hex_code import HexCode
from imageservice.domain.types.transparent import Transparent

FillValue = Union[HexCode, Transparent]

FILL_VALUE_TYPES = (HexCode, Transparent)
