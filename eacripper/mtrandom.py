"""The MT19937 Mersenne Twister pseudo-random number generator."""

from __future__ import annotations

from collections.abc import Sequence

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF
_DEFAULT_SEED = 5489


class MersenneTwister:
    """An MT19937 generator with its own state.

    Without a seed the generator seeds itself with 5489 on first use.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._mt = [0] * _N
        self._mti = _N + 1
        if seed is not None:
            self.init_genrand(seed)

    def init_genrand(self, seed: int) -> None:
        """Seed the state from a 32-bit integer."""
        mt = self._mt
        mt[0] = seed & _MASK32
        for i in range(1, _N):
            prev = mt[i - 1]
            mt[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32
        self._mti = _N

    def init_by_array(self, key: Sequence[int]) -> None:
        """Seed the state from a non-empty sequence of 32-bit integers."""
        if not key:
            raise ValueError("seed key must not be empty")
        self.init_genrand(19650218)
        mt = self._mt
        i, j = 1, 0
        for _ in range(max(_N, len(key))):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1664525)) + key[j] + j) & _MASK32
            i += 1
            j += 1
            if i >= _N:
                mt[0] = mt[_N - 1]
                i = 1
            if j >= len(key):
                j = 0
        for _ in range(_N - 1):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1566083941)) - i) & _MASK32
            i += 1
            if i >= _N:
                mt[0] = mt[_N - 1]
                i = 1
        mt[0] = 0x80000000

    def _twist(self) -> None:
        mt = self._mt
        for kk in range(_N):
            y = (mt[kk] & _UPPER_MASK) | (mt[(kk + 1) % _N] & _LOWER_MASK)
            mt[kk] = mt[(kk + _M) % _N] ^ (y >> 1) ^ (_MATRIX_A if y & 1 else 0)
        self._mti = 0

    def genrand_int32(self) -> int:
        """Return a random integer in [0, 0xffffffff]."""
        if self._mti >= _N:
            if self._mti == _N + 1:
                self.init_genrand(_DEFAULT_SEED)
            self._twist()
        y = self._mt[self._mti]
        self._mti += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def genrand_int31(self) -> int:
        """Return a random integer in [0, 0x7fffffff]."""
        return self.genrand_int32() >> 1

    def genrand_real1(self) -> float:
        """Return a random float in [0, 1]."""
        return self.genrand_int32() * (1.0 / 4294967295.0)

    def genrand_real2(self) -> float:
        """Return a random float in [0, 1)."""
        return self.genrand_int32() * (1.0 / 4294967296.0)

    def genrand_real3(self) -> float:
        """Return a random float in (0, 1)."""
        return (self.genrand_int32() + 0.5) * (1.0 / 4294967296.0)

    def genrand_res53(self) -> float:
        """Return a random float in [0, 1) with 53-bit resolution."""
        a = self.genrand_int32() >> 5
        b = self.genrand_int32() >> 6
        return (a * 67108864.0 + b) * (1.0 / 9007199254740992.0)