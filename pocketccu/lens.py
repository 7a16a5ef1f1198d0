"""Lens aperture tables and f-stop formatting."""

from __future__ import annotations

import enum

FSTOP_VALUES: tuple[float, ...] = (
    1.2, 1.4, 1.8, 2.0, 2.2, 2.4, 2.6, 2.8, 3.2, 3.5, 3.7, 4.0, 4.5, 4.8, 5.2, 5.6,
    6.2, 6.7, 7.3, 8.0, 8.7, 9.5, 10.0, 11.0, 12.0, 14.0, 15.0, 16.0, 17.0, 19.0, 21.0, 22.0,
)

APERTURE_NUMBERS: tuple[int, ...] = (
    1077, 1988, 3473, 4096, 4659, 5173, 5646, 6084, 6873, 7402, 7731, 8192, 8888, 9269,
    9742, 10180, 10781, 11240, 11746, 12288, 12783, 13303, 13606, 14169, 14684, 15594,
    16002, 16384, 16742, 17399, 17990, 18265,
)

# Formatted f-stop text is held to this many characters.
_MAX_FSTOP_CHARS = 7


class ApertureUnits(enum.IntEnum):
    FSTOPS = 0
    TSTOPS = 1


def index_for_aperture_number(target_number: int) -> int:
    """Return the index of ``target_number`` in the aperture table, or -1.

    Numbers above the largest entry return that largest aperture number itself.
    """
    largest = APERTURE_NUMBERS[-1]
    if target_number > largest:
        return largest
    try:
        return APERTURE_NUMBERS.index(target_number)
    except ValueError:
        return -1


def fstop_string(fstop_value: float, aperture_units: ApertureUnits) -> str:
    """Format an aperture such as "f2.8" or "T4.0"."""
    units = ApertureUnits(aperture_units)
    prefix = "f" if units is ApertureUnits.FSTOPS else "T"
    return prefix + f"{fstop_value:.1f}"[:_MAX_FSTOP_CHARS]