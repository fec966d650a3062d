"""Arbitrary-size non-negative integers stored as base-10**9 limbs."""

from __future__ import annotations

from functools import total_ordering
from itertools import zip_longest

BASE = 10**9
WIDTH = 9


def _trim(limbs: list[int]) -> list[int]:
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


@total_ordering
class BigInt:
    """Non-negative integer built from an ``int`` or a decimal string.

    Zero has no limbs. Subtraction below zero raises ``ValueError``.
    """

    __slots__ = ("_limbs",)

    def __init__(self, value: int | str | BigInt = 0) -> None:
        if isinstance(value, BigInt):
            limbs = list(value._limbs)
        elif isinstance(value, str):
            if not value or any(c not in "0123456789" for c in value):
                raise ValueError(f"{value!r} is not a decimal number")
            limbs = [
                int(value[max(0, end - WIDTH):end]) for end in range(len(value), 0, -WIDTH)
            ]
        elif isinstance(value, int):
            if value < 0:
                raise ValueError("BigInt holds non-negative values only")
            limbs = []
            while value:
                value, limb = divmod(value, BASE)
                limbs.append(limb)
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")
        self._limbs = _trim(limbs)

    @classmethod
    def _from_limbs(cls, limbs: list[int]) -> BigInt:
        result = cls()
        result._limbs = _trim(limbs)
        return result

    @staticmethod
    def _coerce(other: object) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int):
            return BigInt(other)
        return None

    def __add__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = []
        carry = 0
        for a, b in zip_longest(self._limbs, rhs._limbs, fillvalue=0):
            carry, limb = divmod(a + b + carry, BASE)
            result.append(limb)
        if carry:
            result.append(carry)
        return self._from_limbs(result)

    __radd__ = __add__

    def __sub__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if self < rhs:
            raise ValueError("underflow")
        result = []
        borrow = 0
        for a, b in zip_longest(self._limbs, rhs._limbs, fillvalue=0):
            diff = a - b - borrow
            borrow = 1 if diff < 0 else 0
            result.append(diff + BASE * borrow)
        return self._from_limbs(result)

    def __mul__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        a, b = self._limbs, rhs._limbs
        if not a or not b:
            return BigInt()
        result = [0] * (len(a) + len(b))
        for i, x in enumerate(a):
            if not x:
                continue
            carry = 0
            for j, y in enumerate(b):
                carry += result[i + j] + x * y
                carry, result[i + j] = divmod(carry, BASE)
            k = i + len(b)
            while carry:
                carry += result[k]
                carry, result[k] = divmod(carry, BASE)
                k += 1
        return self._from_limbs(result)

    __rmul__ = __mul__

    def _divmod_small(self, divisor: int) -> tuple[list[int], int]:
        if divisor == 0:
            raise ZeroDivisionError("division by zero")
        if divisor < 0:
            raise ValueError("divisor must be positive")
        quotient = []
        remainder = 0
        for limb in reversed(self._limbs):
            digit, remainder = divmod(remainder * BASE + limb, divisor)
            quotient.append(digit)
        quotient.reverse()
        return quotient, remainder

    def __floordiv__(self, divisor: int) -> BigInt:
        if not isinstance(divisor, int):
            return NotImplemented
        quotient, _ = self._divmod_small(divisor)
        return self._from_limbs(quotient)

    def __mod__(self, divisor: int) -> BigInt:
        if not isinstance(divisor, int):
            return NotImplemented
        _, remainder = self._divmod_small(divisor)
        return BigInt(remainder)

    def _key(self) -> tuple[int, list[int]]:
        return len(self._limbs), self._limbs[::-1]

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._key() < rhs._key()

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other) if not (isinstance(other, int) and other < 0) else None
        if rhs is None:
            return NotImplemented if not isinstance(other, int) else False
        return self._limbs == rhs._limbs

    def __hash__(self) -> int:
        return hash(tuple(self._limbs))

    def __len__(self) -> int:
        """Number of base-10**9 limbs; 0 for zero."""
        return len(self._limbs)

    def __bool__(self) -> bool:
        return bool(self._limbs)

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * BASE + limb
        return value

    def __str__(self) -> str:
        if not self._limbs:
            return "0"
        top, *rest = reversed(self._limbs)
        return str(top) + "".join(f"{limb:0{WIDTH}d}" for limb in rest)

    def __repr__(self) -> str:
        return f"BigInt('{self}')"