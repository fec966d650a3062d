"""Integers modulo a fixed modulus."""

from __future__ import annotations

from functools import total_ordering

MOD = 10**9 + 7
MINT_MODULUS = 998244353


@total_ordering
class ModInt:
    """A residue modulo ``modulus``; mixes freely with plain ``int`` operands."""

    __slots__ = ("value", "modulus")

    def __init__(self, value: int = 0, modulus: int = MOD) -> None:
        if modulus < 1:
            raise ValueError("modulus must be positive")
        self.modulus = modulus
        self.value = int(value) % modulus

    def _residue(self, other: object) -> int | None:
        if isinstance(other, ModInt):
            if other.modulus != self.modulus:
                raise ValueError("operands have different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.modulus
        return None

    def _new(self, value: int) -> ModInt:
        return ModInt(value, self.modulus)

    def __add__(self, other: object) -> ModInt:
        residue = self._residue(other)
        if residue is None:
            return NotImplemented
        return self._new(self.value + residue)

    def __radd__(self, other: object) -> ModInt:
        return self.__add__(other)

    def __sub__(self, other: object) -> ModInt:
        residue = self._residue(other)
        if residue is None:
            return NotImplemented
        return self._new(self.value - residue)

    def __rsub__(self, other: object) -> ModInt:
        residue = self._residue(other)
        if residue is None:
            return NotImplemented
        return self._new(residue - self.value)

    def __mul__(self, other: object) -> ModInt:
        residue = self._residue(other)
        if residue is None:
            return NotImplemented
        return self._new(self.value * residue)

    def __rmul__(self, other: object) -> ModInt:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> ModInt:
        residue = self._residue(other)
        if residue is None:
            return NotImplemented
        return self * self._new(residue).inverse()

    def __mod__(self, other: object) -> ModInt:
        if isinstance(other, ModInt):
            divisor = other.value
        elif isinstance(other, int):
            divisor = other
        else:
            return NotImplemented
        return self._new(self.value % divisor)

    def __pow__(self, exponent: int | ModInt) -> ModInt:
        return self.power(exponent)

    def __neg__(self) -> ModInt:
        return self._new(-self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            return self.modulus == other.modulus and self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            if other.modulus != self.modulus:
                raise ValueError("operands have different moduli")
            return self.value < other.value
        if isinstance(other, int):
            return self.value < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.value, self.modulus))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"ModInt({self.value}, {self.modulus})"

    def inverse(self) -> ModInt:
        """Multiplicative inverse by Fermat's little theorem (prime modulus)."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self.power(self.modulus - 2)

    def power(self, exponent: int | ModInt) -> ModInt:
        """This residue raised to ``exponent``; negative exponents use the inverse."""
        if isinstance(exponent, ModInt):
            exponent = exponent.value
        if exponent < 0:
            return self.inverse().power(-exponent)
        return self._new(pow(self.value, exponent, self.modulus))