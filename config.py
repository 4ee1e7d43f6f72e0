"""색상 매칭/하모니 전역 설정"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

LOGGER_NAME = "perceptual_color"


@dataclass
class MatchConfig:
    # CIEDE2000 가중치 (k_L, k_C, k_H)
    lightness_weight: float = 0.01
    chroma_weight: float = 1.0
    hue_weight: float = 1.0
    # 명도 항 계산 전에 L을 나누는 값. L(0~100) / 100 과 k_L=0.01 이 짝을 이룬다.
    lightness_scale: float = 100.0


@dataclass
class HarmonyConfig:
    analogous_amount: int = 3
    analogous_steps: int = 12
    rotations: Dict[str, Tuple[float, ...]] = field(
        default_factory=lambda: {
            "complementary": (180.0,),
            "split_complementary": (72.0, 216.0),
            "triadic": (120.0, 240.0),
            "tetradic": (90.0, 180.0, 270.0),
        }
    )


DEFAULT_CONFIG = MatchConfig()
DEFAULT_HARMONY = HarmonyConfig()
