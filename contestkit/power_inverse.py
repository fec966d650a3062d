"""Modular exponentiation, inverses and factorial-based nCr / nPr."""

from __future__ import annotations

from itertools import accumulate


def fast_power(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    return pow(base, exponent, modulus)


def mod_inverse(value: int, modulus: int) -> int:
    """Inverse of ``value`` modulo the prime ``modulus`` (Fermat's little theorem)."""
    return fast_power(value, modulus - 2, modulus)


class PowerInverse:
    """Precomputed factorials and inverse factorials modulo a prime."""

    def __init__(self, n: int, r: int, modulus: int) -> None:
        if n < 0 or r < 0:
            raise ValueError("n and r must be non-negative")
        self.n = n
        self.r = r
        self.modulus = modulus
        self.fact = list(
            accumulate(range(1, n + 1), lambda acc, i: acc * i % modulus, initial=1 % modulus)
        )
        self.inv = [mod_inverse(f, modulus) for f in self.fact]

    def ncr(self) -> int:
        """Number of combinations of ``r`` items out of ``n``, modulo ``modulus``."""
        if self.r > self.n:
            return 0
        m = self.modulus
        return self.fact[self.n] * self.inv[self.r] % m * self.inv[self.n - self.r] % m

    def npr(self) -> int:
        """Number of ordered arrangements of ``r`` items out of ``n``, modulo ``modulus``."""
        if self.r > self.n:
            return 0
        return self.fact[self.n] * self.inv[self.n - self.r] % self.modulus