"""Goat interop demo: a horn counter and a 32-bit tripler."""

from .core import (
    UINT32_MAX,
    UINT32_MODULUS,
    Goat,
    UInt32RangeError,
    compute_triple,
    do_math,
)

__all__ = [
    "UINT32_MAX",
    "UINT32_MODULUS",
    "Goat",
    "UInt32RangeError",
    "compute_triple",
    "do_math",
]
