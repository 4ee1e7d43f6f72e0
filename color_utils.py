"""색상 파싱/변환 유틸"""
from __future__ import annotations

import colorsys
import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Optional, Tuple, Type, Union

import numpy as np
from skimage import color as skcolor

from color_names import COLOR_NAMES

HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
HEX_SHORT_RE = re.compile(r"^([0-9A-Fa-f]{6})$")
CSS_FUNC_RE = re.compile(r"^(rgba?|hsla?)\s*\(([^)]*)\)$")
NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)(e[+-]?\d+)?$")


class UnrecognizedColorFormat(ValueError):
    """RGBA/HSLA/Lab 어느 형태로도 해석할 수 없는 색상 입력"""


class ParseError(UnrecognizedColorFormat):
    """어떤 색상 문법에도 맞지 않는 문자열"""


@dataclass(frozen=True)
class RGBA:
    red: int
    green: int
    blue: int
    alpha: float = 1.0


@dataclass(frozen=True)
class HSLA:
    hue: float  # 0~360
    saturation: float  # 0~1
    lightness: float  # 0~1
    alpha: float = 1.0


@dataclass(frozen=True)
class LabA:
    l: float  # 0~100
    a: float
    b: float
    alpha: float = 1.0

    def coords(self) -> np.ndarray:
        return np.array([self.l, self.a, self.b], dtype=float)


ColorInput = Union[str, RGBA, HSLA, LabA, Mapping, Sequence]


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _fields(value: Any, names: Tuple[str, ...]) -> Optional[Dict[str, Any]]:
    # dict 키 또는 객체 속성으로 색상 성분을 꺼낸다.
    if isinstance(value, str):
        return None
    if isinstance(value, Mapping):
        if all(name in value for name in names):
            found = {name: value[name] for name in names}
            found["alpha"] = value.get("alpha")
            return found
        return None
    if all(hasattr(value, name) for name in names):
        found = {name: getattr(value, name) for name in names}
        found["alpha"] = getattr(value, "alpha", None)
        return found
    return None


def _alpha(value: Any, error: Type[UnrecognizedColorFormat]) -> float:
    if value is None:
        return 1.0
    if not _is_number(value) or not 0.0 <= value <= 1.0:
        raise error(f"알파 값은 0~1 사이여야 해: {value!r}")
    return float(value)


def _make_rgba(red: Any, green: Any, blue: Any, alpha: Any, error: Type[UnrecognizedColorFormat]) -> RGBA:
    channels = []
    for channel in (red, green, blue):
        if not _is_number(channel) or not 0 <= channel <= 255:
            raise error(f"RGB 범위는 0~255야: {channel!r}")
        channels.append(int(round(channel)))
    return RGBA(channels[0], channels[1], channels[2], _alpha(alpha, error))


def _make_hsla(hue: Any, saturation: Any, lightness: Any, alpha: Any, error: Type[UnrecognizedColorFormat]) -> HSLA:
    if not _is_number(hue):
        raise error(f"색상(hue) 값이 숫자가 아니야: {hue!r}")
    for part in (saturation, lightness):
        if not _is_number(part) or not 0.0 <= part <= 1.0:
            raise error(f"채도/명도는 0~1 사이여야 해: {part!r}")
    return HSLA(float(hue) % 360.0, float(saturation), float(lightness), _alpha(alpha, error))


def _number(token: str, source: str) -> float:
    if not NUMBER_RE.match(token):
        raise ParseError(f"색상 문자열의 숫자를 읽을 수 없어: {source!r}")
    return float(token)


def _rgb_channel(token: str, source: str) -> float:
    if token.endswith("%"):
        return _number(token[:-1], source) * 255.0 / 100.0
    return _number(token, source)


def _alpha_token(token: str, source: str) -> float:
    if token.endswith("%"):
        return _number(token[:-1], source) / 100.0
    return _number(token, source)


def _parse_hex(digits: str) -> RGBA:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "ff"
    r, g, b, a = (int(digits[i : i + 2], 16) for i in (0, 2, 4, 6))
    return RGBA(r, g, b, a / 255.0)


def _parse_css_function(name: str, body: str, source: str) -> RGBA:
    # 토큰 앞뒤 공백만 허용한다. "1 0" 같은 토큰은 숫자 검사에서 걸러진다.
    parts = [p.strip() for p in body.split(",")]
    if len(parts) not in (3, 4):
        raise ParseError(f"{name}() 성분 개수가 맞지 않아: {source!r}")
    alpha = _alpha_token(parts[3], source) if len(parts) == 4 else None

    if name.startswith("rgb"):
        r, g, b = (_rgb_channel(p, source) for p in parts[:3])
        return _make_rgba(r, g, b, alpha, ParseError)

    hue = parts[0][:-3] if parts[0].endswith("deg") else parts[0]
    if not (parts[1].endswith("%") and parts[2].endswith("%")):
        raise ParseError(f"hsl()의 채도/명도는 % 단위여야 해: {source!r}")
    hsla = _make_hsla(
        _number(hue, source),
        _number(parts[1][:-1], source) / 100.0,
        _number(parts[2][:-1], source) / 100.0,
        alpha,
        ParseError,
    )
    return hsl_to_rgb(hsla)


def parse_color_string(s: str) -> RGBA:
    """#RGB(A), #RRGGBB(AA), rgb()/rgba(), hsl()/hsla(), 색상 이름을 RGBA로 파싱한다."""
    candidate = s.strip().lower()
    candidate = COLOR_NAMES.get(candidate, candidate).lower()

    hex_match = HEX_RE.match(candidate)
    if hex_match:
        return _parse_hex(hex_match.group(1))

    func_match = CSS_FUNC_RE.match(candidate)
    if func_match:
        return _parse_css_function(func_match.group(1), func_match.group(2), s)

    raise ParseError(f"알 수 없는 색상 문자열이야: {s!r}")


def parse_color(value: ColorInput) -> RGBA:
    """문자열/객체/시퀀스 형태의 색상을 RGBA로 정규화한다."""
    if isinstance(value, str):
        return parse_color_string(value)
    if isinstance(value, RGBA):
        return _make_rgba(value.red, value.green, value.blue, value.alpha, UnrecognizedColorFormat)
    if isinstance(value, HSLA):
        return hsl_to_rgb(
            _make_hsla(value.hue, value.saturation, value.lightness, value.alpha, UnrecognizedColorFormat)
        )

    rgb = _fields(value, ("red", "green", "blue"))
    if rgb is not None:
        return _make_rgba(rgb["red"], rgb["green"], rgb["blue"], rgb["alpha"], UnrecognizedColorFormat)

    hsl = _fields(value, ("hue", "saturation", "lightness"))
    if hsl is not None:
        return hsl_to_rgb(
            _make_hsla(hsl["hue"], hsl["saturation"], hsl["lightness"], hsl["alpha"], UnrecognizedColorFormat)
        )

    if isinstance(value, Sequence) and len(value) in (3, 4):
        alpha = value[3] if len(value) == 4 else None
        return _make_rgba(value[0], value[1], value[2], alpha, UnrecognizedColorFormat)

    raise UnrecognizedColorFormat(f"인식할 수 없는 색상 형식이야: {value!r}")


def normalize_color_input(s: str) -> Optional[str]:
    """CSS 색상 문자열을 HEX(#RRGGBB) 형태로 정규화한다. 실패하면 None."""

    if not s:
        return None
    candidate = s.strip()
    if not candidate:
        return None
    if HEX_SHORT_RE.match(candidate):
        candidate = f"#{candidate}"
    try:
        return rgb_to_hex(parse_color_string(candidate))
    except ParseError:
        return None


def rgb_to_hex(color: RGBA, include_alpha: bool = False) -> str:
    text = f"#{color.red:02X}{color.green:02X}{color.blue:02X}"
    if include_alpha:
        text += f"{int(round(color.alpha * 255)):02X}"
    return text


def rgb_to_hsl(color: RGBA) -> HSLA:
    h, l, s = colorsys.rgb_to_hls(color.red / 255.0, color.green / 255.0, color.blue / 255.0)
    return HSLA((h * 360.0) % 360.0, s, l, color.alpha)


def hsl_to_rgb(color: HSLA) -> RGBA:
    r, g, b = colorsys.hls_to_rgb((color.hue % 360.0) / 360.0, color.lightness, color.saturation)
    return RGBA(
        int(round(clamp(r, 0.0, 1.0) * 255)),
        int(round(clamp(g, 0.0, 1.0) * 255)),
        int(round(clamp(b, 0.0, 1.0) * 255)),
        color.alpha,
    )


def rgb_to_lab(color: RGBA) -> LabA:
    """sRGB → XYZ(D65) → CIELAB. L은 0~100 범위."""
    arr = np.array([[[color.red / 255.0, color.green / 255.0, color.blue / 255.0]]], dtype=float)
    lab = skcolor.rgb2lab(arr)
    l, a, b = lab[0, 0]
    return LabA(float(l), float(a), float(b), color.alpha)


def parse_color_to_lab(value: ColorInput) -> LabA:
    """어떤 입력이든 LabA로 변환한다. 해석할 수 없으면 예외를 던진다."""
    if isinstance(value, LabA):
        return value

    lab = _fields(value, ("l", "a", "b"))
    if lab is not None:
        for part in (lab["l"], lab["a"], lab["b"]):
            if not _is_number(part):
                raise UnrecognizedColorFormat(f"Lab 성분이 숫자가 아니야: {value!r}")
        return LabA(float(lab["l"]), float(lab["a"]), float(lab["b"]), _alpha(lab["alpha"], UnrecognizedColorFormat))

    return rgb_to_lab(parse_color(value))
