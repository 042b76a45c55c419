"""Hashing and threshold helpers shared by the trace and span samplers."""

from __future__ import annotations

import math

UINT64_MAX = (1 << 64) - 1
_UINT64_MASK = UINT64_MAX
_KNUTH_FACTOR = 1111111111111111111

__all__ = ["UINT64_MAX", "knuth_hash", "max_id_from_rate"]


def knuth_hash(value: int) -> int:
    """Multiply ``value`` by Knuth's factor, wrapping to an unsigned 64-bit integer.

    The input is first reduced to 64 bits, as an unsigned conversion would do.
    """
    return ((value & _UINT64_MASK) * _KNUTH_FACTOR) & _UINT64_MASK


def max_id_from_rate(rate: float) -> int:
    """Return the largest hashed ID that is kept when sampling at ``rate``.

    ``rate`` must be a finite number in ``[0.0, 1.0]``; otherwise ``ValueError``
    is raised. A rate of exactly 1.0 maps to the largest unsigned 64-bit value.
    """
    rate = float(rate)
    if math.isnan(rate) or not 0.0 <= rate <= 1.0:
        raise ValueError(f"sample rate must be within [0.0, 1.0], got {rate!r}")

    if rate == 1.0:
        return UINT64_MAX

    # float(UINT64_MAX) rounds up to 2**64, but any rate below 1.0 keeps the
    # product at or below the largest 64-bit unsigned value.
    return int(rate * float(UINT64_MAX))