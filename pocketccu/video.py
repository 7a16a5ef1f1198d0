"""Video settings: white balance presets, limits and iris calculations."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass


@dataclass(frozen=True)
class WhiteBalancePreset:
    white_balance: int
    tint: int


WHITE_BALANCE_PRESETS: tuple[WhiteBalancePreset, ...] = (
    WhiteBalancePreset(5600, 10),  # bright sunlight
    WhiteBalancePreset(3200, 0),  # incandescent
    WhiteBalancePreset(4000, 15),  # fluorescent
    WhiteBalancePreset(4500, 15),  # mixed light
    WhiteBalancePreset(6500, 10),  # cloud
)

WHITE_BALANCE_MIN = 2500
WHITE_BALANCE_MAX = 10000
WHITE_BALANCE_STEP = 50
TINT_MIN = -50
TINT_MAX = 50
OFF_SPEED_FRAME_RATE_MIN = 5
OFF_SPEED_FRAME_RATE_MAX = 60
SENT_SENSOR_GAIN_BASE = 100
RECEIVED_SENSOR_GAIN_BASE = 200
ISO_VALUES: tuple[int, ...] = (200, 400, 800, 1600)
GAIN_VALUES: tuple[int, ...] = (-6, 0, 6, 12)
SHUTTER_ANGLES: tuple[float, ...] = (
    11.2, 15.0, 22.5, 30.0, 37.5, 45.0, 60.0, 72.0, 75.0, 90.0,
    108.0, 120.0, 144.0, 150.0, 172.8, 180.0, 216.0, 270.0, 324.0, 360.0,
)
SHUTTER_SPEEDS: tuple[int, ...] = (24, 25, 30, 50, 60, 100, 125, 200, 250, 500, 1000, 2000)
SHUTTER_SPEED_MIN = 24
SHUTTER_SPEED_MAX = 2000
SHUTTER_ANGLE_MIN = 5.0
SHUTTER_ANGLE_MAX = 360.0
FILE_FRAME_RATES: tuple[float, ...] = (23.976, 24, 25, 29.97, 30, 50, 59.94, 60)

_SHORT_MIN = -32768
_SHORT_MAX = 32767

_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_leading_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def calculate_iris_av(fnumber_str: str) -> int:
    """Aperture value log2(N^2) of an f-number, truncated; 0 if out of range."""
    fnumber = _parse_leading_float(fnumber_str)
    squared = fnumber * fnumber
    if squared == 0 or math.isnan(squared):
        return 0
    av = math.log2(squared)
    if _SHORT_MIN <= av <= _SHORT_MAX:
        return int(av)
    return 0


def white_balance_preset_index(white_balance: int, tint: int) -> int:
    """Return the index of the preset with these values, or -1."""
    target = WhiteBalancePreset(white_balance, tint)
    for index, preset in enumerate(WHITE_BALANCE_PRESETS):
        if preset == target:
            return index
    return -1