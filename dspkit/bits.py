"""Population count of unsigned integers."""

from __future__ import annotations

__all__ = ["count_bits"]


def count_bits(i: int) -> int:
    """Return the number of set bits in the unsigned integer ``i``."""
    if i < 0:
        raise ValueError(f"count_bits expects an unsigned integer, got {i}")
    return bin(i).count("1")