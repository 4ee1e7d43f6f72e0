"""색상 집합(haystack)에서 가장 가깝거나 먼 색 찾기

색상은 모두 CIELAB으로 바꿔 두고 CIEDE2000 ΔE로 비교한다. 결과로는 정규화된
값이 아니라 add()에 넣었던 원래 값을 그대로 돌려준다.

    colors = ColorMatch(["#FF0000", "#FFFF00", "#FF00FF", "#00FFFF", "#00FF00"])
    colors.near("#FF1111")          # ["#FF0000"]
    colors.add("#FF1100")
    colors.near("#FF1111")          # ["#FF1100"]
    colors.flush().add(["#FF0", "#F00"])
    colors.destroy()
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterator, List, Optional, Tuple

import numpy as np

from color_metrics.delta_e import delta_e_ciede2000
from color_utils import ColorInput, LabA, parse_color_to_lab
from config import DEFAULT_CONFIG, LOGGER_NAME, MatchConfig

logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class HaystackEntry:
    lab: LabA
    source: Any


def _is_single_color(value: Any) -> bool:
    # 리스트는 색상 목록, (r, g, b[, a]) 숫자 시퀀스는 색상 하나로 본다.
    if isinstance(value, (str, Mapping)) or not isinstance(value, Sequence):
        return True
    return len(value) > 0 and all(isinstance(v, Real) and not isinstance(v, bool) for v in value)


class ColorMatch:
    def __init__(self, colors: Any = None, config: MatchConfig | None = None):
        self.config = config or DEFAULT_CONFIG
        self.haystack: Optional[List[HaystackEntry]] = []
        self._coords: Optional[np.ndarray] = None
        if colors is not None:
            self.add(colors)

    def _require_haystack(self) -> List[HaystackEntry]:
        if self.haystack is None:
            raise RuntimeError("destroy()된 ColorMatch는 더 이상 쓸 수 없어.")
        return self.haystack

    def _lab_matrix(self) -> np.ndarray:
        if self._coords is None:
            coords = [entry.lab.coords() for entry in self._require_haystack()]
            self._coords = np.array(coords, dtype=float).reshape(-1, 3)
        return self._coords

    def add(self, colors: Any) -> "ColorMatch":
        """색상 하나 또는 색상 목록을 추가한다. 하나라도 실패하면 아무것도 추가하지 않는다."""
        haystack = self._require_haystack()
        batch = [colors] if _is_single_color(colors) else list(colors)
        entries = [HaystackEntry(lab=parse_color_to_lab(color), source=color) for color in batch]
        haystack.extend(entries)
        self._coords = None
        logger.debug("[색상] %d개 추가 → 총 %d개", len(entries), len(haystack))
        return self

    def flush(self) -> "ColorMatch":
        """모든 색상을 비운다."""
        self._require_haystack().clear()
        self._coords = None
        logger.debug("[색상] haystack 비움")
        return self

    def match(self, color: ColorInput, amount: int = 1, farthest: bool = False) -> list:
        """color와의 ΔE 순으로 최대 amount개의 원래 값을 돌려준다.

        전체 정렬 대신 크기 amount의 정렬 버퍼에 끼워 넣는다 (O(n·k)).
        거리가 같으면 먼저 들어온 색이 자리를 지킨다.
        """
        haystack = self._require_haystack()
        needle = parse_color_to_lab(color)
        if amount < 0:
            logger.debug("[색상] 음수 amount=%d → 0으로 보정", amount)
        iterations = min(max(int(amount), 0), len(haystack))
        if iterations == 0:
            return []

        distances = delta_e_ciede2000(needle.coords(), self._lab_matrix(), self.config)

        results: List[Tuple[float, HaystackEntry]] = []
        for distance, straw in zip(distances.tolist(), haystack):
            for i, (held, _) in enumerate(results):
                if (distance > held) if farthest else (distance < held):
                    results.insert(i, (distance, straw))
                    if len(results) > iterations:
                        results.pop()
                    break
            else:
                if len(results) < iterations:
                    results.append((distance, straw))

        logger.debug(
            "[색상] %s 매칭 %d/%d개, ΔE=%s",
            "far" if farthest else "near",
            len(results),
            len(haystack),
            ", ".join(f"{d:.2f}" for d, _ in results),
        )
        return [straw.source for _, straw in results]

    def near(self, color: ColorInput, amount: int = 1) -> list:
        """가장 가까운 색부터 최대 amount개."""
        return self.match(color, amount)

    def far(self, color: ColorInput, amount: int = 1) -> list:
        """가장 먼 색부터 최대 amount개."""
        return self.match(color, amount, farthest=True)

    def destroy(self) -> None:
        """haystack을 해제한다. 이후 호출은 RuntimeError."""
        self.haystack = None
        self._coords = None

    def __len__(self) -> int:
        return len(self._require_haystack())

    def __iter__(self) -> Iterator[Any]:
        return (entry.source for entry in self._require_haystack())

    def __contains__(self, color: Any) -> bool:
        return any(entry.source == color for entry in self._require_haystack())
