"""두 색상 혼합/블렌드 모드"""
from __future__ import annotations

from color_utils import RGBA, ColorInput, clamp, parse_color


def mix_colors(color1: ColorInput, color2: ColorInput, weight: float = 0.5) -> RGBA:
    """SASS mix()와 같은 방식. weight가 1에 가까울수록 color1 쪽으로 기운다.

    weight > 1 이면 퍼센트(0~100)로 보고 소수로 바꾼다.
    """
    c1 = parse_color(color1)
    c2 = parse_color(color2)
    w = min(weight, 100.0) / 100.0 if weight > 1 else clamp(weight, 0.0, 1.0)

    def _lerp(v1: float, v2: float) -> float:
        return v2 + (v1 - v2) * w

    return RGBA(
        int(round(_lerp(c1.red, c2.red))),
        int(round(_lerp(c1.green, c2.green))),
        int(round(_lerp(c1.blue, c2.blue))),
        round(_lerp(c1.alpha, c2.alpha), 3),
    )


def multiply_colors(color1: ColorInput, color2: ColorInput) -> RGBA:
    """곱하기 모드: 결과가 항상 더 어두워진다."""
    c1 = parse_color(color1)
    c2 = parse_color(color2)
    return RGBA(
        int(round(c1.red * c2.red / 255.0)),
        int(round(c1.green * c2.green / 255.0)),
        int(round(c1.blue * c2.blue / 255.0)),
        min((c1.alpha + c2.alpha) / 2.0, 1.0),
    )


def screen_colors(color1: ColorInput, color2: ColorInput) -> RGBA:
    """스크린 모드: multiply_colors의 반대, 결과가 더 밝아진다."""
    c1 = parse_color(color1)
    c2 = parse_color(color2)

    def _screen(v1: int, v2: int) -> int:
        return int(round((1.0 - (1.0 - v1 / 255.0) * (1.0 - v2 / 255.0)) * 255.0))

    return RGBA(
        _screen(c1.red, c2.red),
        _screen(c1.green, c2.green),
        _screen(c1.blue, c2.blue),
        min((c1.alpha + c2.alpha) / 2.0, 1.0),
    )
