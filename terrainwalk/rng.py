"""32-bit Mersenne Twister with the standard library's distribution rules."""

from __future__ import annotations

import numpy as np

_N = 624
_M = 397
_MASK32 = 0xFFFFFFFF
_UPPER = 0x80000000
_LOWER = 0x7FFFFFFF
_MATRIX_A = 0x9908B0DF


class MersenneTwister:
    """MT19937 generator producing the same stream as the standard engine."""

    def __init__(self, seed: int) -> None:
        state = [seed & _MASK32]
        for i in range(1, _N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        mt = self._state
        for i in range(_N):
            y = (mt[i] & _UPPER) | (mt[(i + 1) % _N] & _LOWER)
            mt[i] = mt[(i + _M) % _N] ^ (y >> 1) ^ (_MATRIX_A if y & 1 else 0)
        self._index = 0

    def next_u32(self) -> int:
        """Next raw 32-bit output."""
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def uniform_int(self, low: int, high: int) -> int:
        """Integer uniformly drawn from the closed range [low, high]."""
        if low > high:
            raise ValueError("low must not exceed high")
        span = high - low
        if span > _MASK32:
            raise ValueError("range wider than 32 bits")
        if span == _MASK32:
            return low + self.next_u32()
        extent = span + 1
        product = self.next_u32() * extent
        remainder = product & _MASK32
        if remainder < extent:
            threshold = (-extent) % extent
            while remainder < threshold:
                product = self.next_u32() * extent
                remainder = product & _MASK32
        return low + (product >> 32)

    def uniform_float(self, low: float, high: float) -> float:
        """Single-precision value uniformly drawn from [low, high)."""
        if low > high:
            raise ValueError("low must not exceed high")
        canonical = np.float32(self.next_u32()) / np.float32(4294967296.0)
        if canonical >= np.float32(1.0):
            canonical = np.nextafter(np.float32(1.0), np.float32(0.0))
        a = np.float32(low)
        b = np.float32(high)
        return float(canonical * (b - a) + a)