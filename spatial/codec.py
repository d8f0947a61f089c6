"""
spikegrid module: spatial/codec.py

3D coordinate <-> single ordered index.

Each component is truncated to 21 bits so the interleaved index fits in 64
bits. Only Morton (Z-order) interleaving exists today; CurveMethod is where
new orderings get added.
"""

from __future__ import annotations
from enum import Enum
from typing import Tuple

from errors import ConfigError
from spatial.bits import compact_bits, spread_bits

INDEX_MASK = (1 << 64) - 1


class CurveMethod(Enum):
    MORTON = "morton"

    @classmethod
    def parse(cls, method: "CurveMethod | str") -> "CurveMethod":
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).lower())
        except ValueError:
            known = ", ".join(m.value for m in cls)
            raise ConfigError(f"Unknown curve method {method!r} (known: {known})") from None


def encode_morton3d(x: int, y: int, z: int) -> int:
    return spread_bits(x) | (spread_bits(y) << 1) | (spread_bits(z) << 2)


def decode_morton3d(index: int) -> Tuple[int, int, int]:
    index &= INDEX_MASK
    return compact_bits(index), compact_bits(index >> 1), compact_bits(index >> 2)


def encode3d(x: int, y: int, z: int, method: CurveMethod | str = CurveMethod.MORTON) -> int:
    """
    Interleave (x, y, z) into one index.

    Bits above the 21st of each component are dropped; callers that care must
    range-check first. Raises ConfigError for an unknown method.
    """
    curve = CurveMethod.parse(method)
    if curve is CurveMethod.MORTON:
        return encode_morton3d(x, y, z)
    raise ConfigError(f"No encoder for curve method {curve.value!r}")


def decode3d(index: int, method: CurveMethod | str = CurveMethod.MORTON) -> Tuple[int, int, int]:
    """Split an index produced by encode3d back into (x, y, z)."""
    curve = CurveMethod.parse(method)
    if curve is CurveMethod.MORTON:
        return decode_morton3d(index)
    raise ConfigError(f"No decoder for curve method {curve.value!r}")
