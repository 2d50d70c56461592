from imageservice.domain.types.angle import Angle
from imageservice.domain.types.base import BaseValue
from imageservice.domain.types.blur import Blur
from imageservice.domain.types.brightness import Brightness
from imageservice.domain.types.crop import CropRect
from imageservice.domain.types.fill import FILL_VALUE_TYPES, FillValue
from imageservice.domain.types.focal_point import FocalPoint
from imageservice.domain.types.format import Format
from imageservice.domain.types.hex_code import HexCode
from imageservice.domain.types.quality import Quality
from imageservice.domain.types.rounded_corner import RoundedCorner
from imageservice.domain.types.transparent import Transparent

