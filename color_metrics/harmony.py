"""색상환 회전 기반 배색(하모니) 생성"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Tuple

from color_utils import HSLA, RGBA, ColorInput, hsl_to_rgb, parse_color, rgb_to_hsl
from config import DEFAULT_HARMONY, LOGGER_NAME, HarmonyConfig

logger = logging.getLogger(LOGGER_NAME)


def rotate_hue(color: ColorInput, degrees: float) -> RGBA:
    """채도/명도/알파는 그대로 두고 색상(hue)만 degrees 만큼 돌린다."""
    hsl = rgb_to_hsl(parse_color(color))
    return hsl_to_rgb(
        HSLA(
            hue=(hsl.hue + degrees) % 360.0,
            saturation=hsl.saturation,
            lightness=hsl.lightness,
            alpha=hsl.alpha,
        )
    )


def _rotations(color: ColorInput, degrees: Tuple[float, ...]) -> list:
    # 첫 번째 원소는 입력 그대로 돌려준다 (정밀도 손실 방지).
    base = parse_color(color)
    return [color] + [rotate_hue(base, d) for d in degrees]


def analogous(color: ColorInput, amount: int | None = None, steps: int | None = None, config: HarmonyConfig | None = None) -> list:
    """유사색: 색상환을 steps 칸으로 나눠 한 칸씩 이동한 amount 개의 색."""
    cfg = config or DEFAULT_HARMONY
    amount = cfg.analogous_amount if amount is None else amount
    steps = cfg.analogous_steps if steps is None else steps
    if steps <= 0:
        raise ValueError(f"steps는 1 이상이어야 해: {steps}")
    if amount <= 0:
        parse_color(color)
        return []
    step = 360.0 / steps
    return _rotations(color, tuple(step * i for i in range(1, amount)))


def complementary(color: ColorInput, config: HarmonyConfig | None = None) -> list:
    """보색: 기준색 + 180°."""
    return _rotations(color, (config or DEFAULT_HARMONY).rotations["complementary"])


def split_complementary(color: ColorInput, config: HarmonyConfig | None = None) -> list:
    return _rotations(color, (config or DEFAULT_HARMONY).rotations["split_complementary"])


def triadic(color: ColorInput, config: HarmonyConfig | None = None) -> list:
    """3등분: 120° 간격."""
    return _rotations(color, (config or DEFAULT_HARMONY).rotations["triadic"])


def tetradic(color: ColorInput, config: HarmonyConfig | None = None) -> list:
    """4등분: 90° 간격."""
    return _rotations(color, (config or DEFAULT_HARMONY).rotations["tetradic"])


SCHEMES: Dict[str, Callable[..., List]] = {
    "analogous": analogous,
    "complementary": complementary,
    "split_complementary": split_complementary,
    "triadic": triadic,
    "tetradic": tetradic,
}


def scheme(color: ColorInput, name: str) -> list:
    try:
        builder = SCHEMES[name.strip().lower().replace("-", "_")]
    except KeyError:
        raise ValueError(f"지원하지 않는 배색 이름이야: {name!r} (가능: {', '.join(SCHEMES)})") from None
    logger.debug("[배색] %s 생성", builder.__name__)
    return builder(color)
