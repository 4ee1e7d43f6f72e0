from __future__ import annotations

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from color_metrics.blend import mix_colors, multiply_colors, screen_colors
from color_utils import rgb_to_hex


def test_mix_colors():
    assert rgb_to_hex(mix_colors("#FFFFFF", "#F3F9FA", 0.91)) == "#FEFEFF"
    assert mix_colors("#000000", "#FFFFFF", 50) == mix_colors("#000000", "#FFFFFF", 0.5)


def test_multiply_colors():
    assert rgb_to_hex(multiply_colors("#FF1100", "#88FF00")) == "#881100"


def test_screen_colors():
    assert rgb_to_hex(screen_colors("#FF0000", "#00FF00")) == "#FFFF00"
    result = screen_colors("rgba(0,0,0,0.5)", "#000000")
    assert result.alpha == pytest.approx(0.75)
