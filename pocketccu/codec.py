"""Recording codec selection and its human-readable description."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class BasicCodec(enum.IntEnum):
    """Codec families understood by the camera control protocol."""

    RAW = 0
    DNXHD = 1
    PRORES = 2
    BRAW = 3


DEFAULT_VARIANT = 0

BRAW_Q0 = 0
BRAW_Q5 = 1
BRAW_3_1 = 2
BRAW_5_1 = 3
BRAW_8_1 = 4
BRAW_12_1 = 5
BRAW_18_1 = 6
BRAW_Q1 = 7
BRAW_Q3 = 8

PRORES_HQ = 0
PRORES_422 = 1
PRORES_LT = 2
PRORES_PROXY = 3
PRORES_444 = 4
PRORES_444XQ = 5

BRAW_BITRATE_VARIANTS = frozenset({BRAW_3_1, BRAW_5_1, BRAW_8_1, BRAW_12_1, BRAW_18_1})

_DESCRIPTIONS: dict[BasicCodec, dict[int, str]] = {
    BasicCodec.DNXHD: {
        0: "DNxHD, LL Raw",
        1: "DNxHD, Raw 3:1",
        2: "DNxHD, Raw 4:1",
    },
    BasicCodec.PRORES: {
        PRORES_HQ: "ProRes HQ",
        PRORES_422: "ProRes 422",
        PRORES_LT: "ProRes LT",
        PRORES_PROXY: "ProRes PXY",
        PRORES_444: "ProRes 444",
        PRORES_444XQ: "ProRes 444XQ",
    },
    BasicCodec.BRAW: {
        BRAW_Q0: "BRAW Q0",
        BRAW_Q5: "BRAW Q5",
        BRAW_3_1: "BRAW 3:1",
        BRAW_5_1: "BRAW 5:1",
        BRAW_8_1: "BRAW 8:1",
        BRAW_12_1: "BRAW 12:1",
        BRAW_18_1: "BRAW 18:1",
        BRAW_Q1: "BRAW Q1",
        BRAW_Q3: "BRAW Q3",
    },
}


@dataclass(frozen=True)
class CodecInfo:
    """A codec family together with its variant byte."""

    basic_codec: BasicCodec = BasicCodec.BRAW
    codec_variant: int = DEFAULT_VARIANT

    def describe(self) -> str:
        """Return a short name such as "BRAW 5:1", or "" when the variant is unknown."""
        if self.basic_codec == BasicCodec.RAW:
            return "RAW"
        return _DESCRIPTIONS.get(BasicCodec(self.basic_codec), {}).get(self.codec_variant, "")

    def is_braw_bitrate(self) -> bool:
        """Whether this is a constant-bitrate (ratio) BRAW setting rather than a quality one."""
        return self.basic_codec == BasicCodec.BRAW and self.codec_variant in BRAW_BITRATE_VARIANTS

    def __str__(self) -> str:
        return self.describe()