"""
Tests for the scalar value types: brightness, quality, colors and enums.
"""

import pytest
from pydantic import ValidationError

from imageservice.domain.errors import ImageServiceError, InvalidParameter
from imageservice.domain.types import (
    Angle,
    BaseValue,
    Brightness,
    Format,
    HexCode,
    Quality,
    Transparent,
)


@pytest.mark.parametrize("value", [-100, -50, 0, 50, 100])
def test_brightness_valid(value):
    assert Brightness(value).to_string() == str(value)


@pytest.mark.parametrize("value", [-101, 101])
def test_brightness_out_of_range(value):
    with pytest.raises(InvalidParameter) as exc_info:
        Brightness(value)
    assert exc_info.value.name == "Brightness.value"
    assert exc_info.value.bounds == "between -100 and 100"


@pytest.mark.parametrize("value", [0, 25, 80, 100])
def test_quality_valid(value):
    assert str(Quality(value)) == str(value)


@pytest.mark.parametrize("value", [-1, 101])
def test_quality_out_of_range(value):
    with pytest.raises(InvalidParameter):
        Quality(value)


def test_quality_is_strict():
    with pytest.raises(InvalidParameter) as exc_info:
        Quality("80")
    assert exc_info.value.name == "Quality.value"
    with pytest.raises(InvalidParameter):
        Quality(True)


def test_invalid_parameter_is_a_value_error():
    with pytest.raises(ValueError):
        Quality(101)
    with pytest.raises(ImageServiceError):
        Quality(101)


def test_values_are_frozen():
    quality = Quality(80)
    with pytest.raises(ValidationError):
        quality.value = 10
    assert quality.value == 80


def test_values_compare_by_value():
    assert Quality(80) == Quality(value=80)
    assert Quality(80) != Quality(81)
    assert Transparent() == Transparent()


@pytest.mark.parametrize(
    "value",
    ["CCCCCC", "#CCCCCC", "cccccc", "CcCcCc", "FFF", "#FFF", "fff", "FF0000", "00FF00", "0000FF"],
)
def test_hex_code_valid(value):
    assert HexCode(value).value == value


@pytest.mark.parametrize(
    "value",
    ["", "   ", "GGGGGG", "FF", "FFFF", "FFFFF", "FFFFFFF", "FF FF FF", "##FFF"],
)
def test_hex_code_invalid(value):
    with pytest.raises(InvalidParameter) as exc_info:
        HexCode(value)
    assert exc_info.value.name == "HexCode.value"


def test_hex_code_is_trimmed():
    hex_code = HexCode("  #ABC  ")
    assert hex_code.value == "#ABC"
    assert hex_code.to_string() == "ABC"


@pytest.mark.parametrize(
    "value, expected",
    [("CCCCCC", "CCCCCC"), ("#CCCCCC", "CCCCCC"), ("FFF", "FFF"), ("#FFF", "FFF"), ("#aBc", "aBc")],
)
def test_hex_code_to_string_strips_hash(value, expected):
    assert HexCode(value).to_string() == expected
    assert str(HexCode(value)) == expected


def test_base_value_is_abstract():
    with pytest.raises(TypeError):
        BaseValue()


def test_transparent_to_string():
    assert Transparent().to_string() == "transparent"
    assert str(Transparent()) == "transparent"


def test_format_values():
    assert [f.value for f in Format] == ["webp", "jpeg", "png", "avif"]
    assert Format.WEBP.to_string() == "webp"
    assert str(Format.AVIF) == "avif"
    assert Format("png") is Format.PNG


def test_format_is_closed():
    with pytest.raises(ValueError):
        Format("gif")


def test_angle_values():
    assert len(Angle) == 4
    assert [a.value for a in Angle] == [0, 90, 180, 270]
    assert Angle.DEG_90.to_string() == "90"
    assert str(Angle.DEG_270) == "270"
    assert Angle(180) is Angle.DEG_180


def test_angle_is_closed():
    with pytest.raises(ValueError):
        Angle(45)


if __name__ == "__main__":
    pytest.main()
