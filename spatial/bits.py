"""
spikegrid module: spatial/bits.py

Bit interleaving primitives for 3D Morton codes.

spread_bits puts two zero bits after every bit of a 21-bit value, so each
original bit lands on every third position of a 64-bit word. compact_bits
undoes it.
"""

from __future__ import annotations

COMPONENT_BITS = 21
COMPONENT_MASK = (1 << COMPONENT_BITS) - 1  # 0x1fffff
SPREAD_MASK = 0x1249249249249249  # every third bit of a 64-bit word

_SPREAD_PASSES = (
    (32, 0x1F00000000FFFF),
    (16, 0x1F0000FF0000FF),
    (8, 0x100F00F00F00F00F),
    (4, 0x10C30C30C30C30C3),
    (2, SPREAD_MASK),
)

_COMPACT_PASSES = (
    (2, 0x10C30C30C30C30C3),
    (4, 0x100F00F00F00F00F),
    (8, 0x1F0000FF0000FF),
    (16, 0x1F00000000FFFF),
    (32, COMPONENT_MASK),
)


def spread_bits(n: int) -> int:
    n &= COMPONENT_MASK
    for shift, mask in _SPREAD_PASSES:
        n = (n | (n << shift)) & mask
    return n


def compact_bits(n: int) -> int:
    """Inverse of spread_bits: compact_bits(spread_bits(n)) == n & 0x1fffff."""
    n &= SPREAD_MASK
    for shift, mask in _COMPACT_PASSES:
        n = (n ^ (n >> shift)) & mask
    return n
