"""color_utils 파싱/변환 테스트"""
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import itertools

import pytest

from color_utils import (
    HSLA,
    RGBA,
    LabA,
    ParseError,
    UnrecognizedColorFormat,
    hsl_to_rgb,
    normalize_color_input,
    parse_color,
    parse_color_to_lab,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
)


def test_normalize_color_input_accepts_rgba_string():
    rgba_value = "rgba(152.8671875, 49.98498715154452, 39.55773711622807, 1)"
    assert normalize_color_input(rgba_value) == "#993228"


def test_normalize_color_input_accepts_plain_hex_without_hash():
    assert normalize_color_input("ff6b5c") == "#FF6B5C"


def test_normalize_color_input_rejects_invalid_string():
    assert normalize_color_input("not-a-color") is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("#F00", RGBA(255, 0, 0, 1.0)),
        ("#ff0000", RGBA(255, 0, 0, 1.0)),
        ("#00FF0000", RGBA(0, 255, 0, 0.0)),
        ("#0000ffff", RGBA(0, 0, 255, 1.0)),
        ("rgb(10, 20, 30)", RGBA(10, 20, 30, 1.0)),
        (" RGBA( 10 , 20 , 30 , 0.5 ) ", RGBA(10, 20, 30, 0.5)),
        ("rgb(100%, 0%, 100%)", RGBA(255, 0, 255, 1.0)),
        ("hsl(120, 100%, 50%)", RGBA(0, 255, 0, 1.0)),
        ("HSLA(0, 100%, 50%, .25)", RGBA(255, 0, 0, 0.25)),
        ("hsl(0, 0%, 100%)", RGBA(255, 255, 255, 1.0)),
        ("Red", RGBA(255, 0, 0, 1.0)),
        ("rebeccapurple", RGBA(0x66, 0x33, 0x99, 1.0)),
    ],
)
def test_parse_color_strings(text, expected):
    assert parse_color(text) == expected


def test_parse_color_short_hex_with_alpha():
    color = parse_color("#F008")
    assert (color.red, color.green, color.blue) == (255, 0, 0)
    assert color.alpha == pytest.approx(0x88 / 255)


@pytest.mark.parametrize(
    "text",
    [
        "not-a-color",
        "#GGG",
        "#12345",
        "rgb(300, 0, 0)",
        "rgb(1, 2)",
        "hsl(10, 50, 50)",
        "rgba(0,0,0,2)",
        "",
        "rgb(1 0, 20, 30)",
        "#F F 0",
        "hsl(120, 5 0%, 50%)",
        "rgb(10, 20, 3 0 )",
    ],
)
def test_parse_color_rejects_bad_strings(text):
    with pytest.raises(ParseError):
        parse_color(text)


def test_parse_error_is_a_format_error():
    with pytest.raises(UnrecognizedColorFormat):
        parse_color("nope")


@pytest.mark.parametrize(
    "value, expected",
    [
        ({"red": 1, "green": 2, "blue": 3}, RGBA(1, 2, 3, 1.0)),
        ({"red": 1, "green": 2, "blue": 3, "alpha": 0.3}, RGBA(1, 2, 3, 0.3)),
        ({"hue": 240, "saturation": 1.0, "lightness": 0.5}, RGBA(0, 0, 255, 1.0)),
        ((4, 5, 6), RGBA(4, 5, 6, 1.0)),
        ([4, 5, 6, 0.5], RGBA(4, 5, 6, 0.5)),
        (HSLA(0.0, 1.0, 0.5, 0.7), RGBA(255, 0, 0, 0.7)),
    ],
)
def test_parse_color_objects(value, expected):
    assert parse_color(value) == expected


@pytest.mark.parametrize("value", [42, None, {"x": 1}, {"red": 300, "green": 0, "blue": 0}, (1, 2), LabA(50, 0, 0)])
def test_parse_color_rejects_unknown_objects(value):
    with pytest.raises(UnrecognizedColorFormat):
        parse_color(value)


def test_rgb_to_hex():
    assert rgb_to_hex(RGBA(255, 107, 92)) == "#FF6B5C"
    assert rgb_to_hex(RGBA(255, 107, 92, 0.5), include_alpha=True) == "#FF6B5C80"


CHANNELS = (0, 1, 37, 128, 200, 254, 255)


@pytest.mark.parametrize("red, green, blue", list(itertools.product(CHANNELS, repeat=3)))
def test_hsl_round_trip(red, green, blue):
    original = RGBA(red, green, blue, 0.42)
    back = hsl_to_rgb(rgb_to_hsl(original))
    assert abs(back.red - red) <= 1
    assert abs(back.green - green) <= 1
    assert abs(back.blue - blue) <= 1
    assert back.alpha == 0.42


def test_rgb_to_hsl_ranges():
    hsl = rgb_to_hsl(RGBA(0, 0, 255))
    assert hsl.hue == pytest.approx(240.0)
    assert hsl.saturation == pytest.approx(1.0)
    assert hsl.lightness == pytest.approx(0.5)


def test_rgb_to_lab_reference_values():
    red = rgb_to_lab(RGBA(255, 0, 0, 0.5))
    assert red.l == pytest.approx(53.24, abs=0.05)
    assert red.a == pytest.approx(80.09, abs=0.05)
    assert red.b == pytest.approx(67.20, abs=0.05)
    assert red.alpha == 0.5

    white = rgb_to_lab(RGBA(255, 255, 255))
    assert white.l == pytest.approx(100.0, abs=0.01)
    assert white.a == pytest.approx(0.0, abs=0.01)
    assert white.b == pytest.approx(0.0, abs=0.01)


def test_parse_color_to_lab_keeps_lab_objects_as_is():
    lab = LabA(50.0, 10.0, -5.0, 0.3)
    assert parse_color_to_lab(lab) is lab
    assert parse_color_to_lab({"l": 50, "a": 10, "b": -5}) == LabA(50.0, 10.0, -5.0, 1.0)


def test_parse_color_to_lab_converts_strings_and_rgb():
    assert parse_color_to_lab("#FF0000") == rgb_to_lab(RGBA(255, 0, 0))
    assert parse_color_to_lab({"red": 255, "green": 0, "blue": 0}) == rgb_to_lab(RGBA(255, 0, 0))


@pytest.mark.parametrize("value", [{"l": "x", "a": 0, "b": 0}, object(), 3.14])
def test_parse_color_to_lab_rejects_unknown(value):
    with pytest.raises(UnrecognizedColorFormat):
        parse_color_to_lab(value)
