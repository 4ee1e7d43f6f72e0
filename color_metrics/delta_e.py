"""CIEDE2000 계산 래퍼"""
from __future__ import annotations

import numpy as np
from skimage import color as skcolor

from color_utils import LabA
from config import DEFAULT_CONFIG, MatchConfig


def _scaled(lab: np.ndarray, lightness_scale: float) -> np.ndarray:
    out = np.array(lab, dtype=float).reshape(-1, 3)
    out[:, 0] /= lightness_scale
    return out


def delta_e_ciede2000(needle: np.ndarray, straws: np.ndarray, config: MatchConfig | None = None) -> np.ndarray:
    """needle(3,) 과 straws(..., 3) 사이의 CIEDE2000 ΔE 배열을 반환한다.

    L은 lightness_scale로 나눈 뒤 비교한다. 기본값(100, k_L=0.01)이면 명도 차이와
    S_L 모두 0~1 스케일의 L로 계산된다.
    """
    cfg = config or DEFAULT_CONFIG
    straws = np.asarray(straws, dtype=float)
    flat = _scaled(straws, cfg.lightness_scale)
    target = np.broadcast_to(_scaled(needle, cfg.lightness_scale)[0], flat.shape).copy()
    d = skcolor.deltaE_ciede2000(
        target,
        flat,
        kL=cfg.lightness_weight,
        kC=cfg.chroma_weight,
        kH=cfg.hue_weight,
    )
    return np.asarray(d, dtype=float).reshape(straws.shape[:-1])


def delta_e(lab1: LabA, lab2: LabA, config: MatchConfig | None = None) -> float:
    """두 LabA 사이의 CIEDE2000 ΔE 값을 반환한다."""
    return float(delta_e_ciede2000(lab1.coords(), lab2.coords(), config))
