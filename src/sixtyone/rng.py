"""Deterministic random numbers for dealing.

Both functions must stay bit-compatible with previously recorded seeds:
changing any constant here changes which deck every seed produces.
"""

from __future__ import annotations

from typing import Callable

# Numerical Recipes 32-bit LCG.
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2**32

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619

UINT32_MASK = 0xFFFFFFFF


def create_rng(seed: int) -> Callable[[], float]:
    """Return a generator of floats in [0, 1) driven by a 32-bit LCG.

    The same seed always yields the same infinite sequence.
    """
    state = seed & UINT32_MASK

    def rng() -> float:
        nonlocal state
        state = (LCG_MULTIPLIER * state + LCG_INCREMENT) % LCG_MODULUS
        return state / LCG_MODULUS

    return rng


def _utf16_code_units(text: str):
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def string_to_seed(text: str) -> int:
    """Hash an arbitrary string to an unsigned 32-bit seed (FNV-1a).

    Characters are folded as UTF-16 code units so that seeds containing
    characters outside the BMP hash the same as in the browser client.
    """
    h = FNV_OFFSET_BASIS
    for unit in _utf16_code_units(text):
        h ^= unit
        h = (h * FNV_PRIME) & UINT32_MASK
    return h
