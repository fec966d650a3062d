import pytest

from contestkit.modint import MINT_MODULUS, MOD, ModInt


def test_construction_normalises():
    assert ModInt(-1).value == MOD - 1
    assert ModInt(MOD + 5).value == 5
    assert ModInt(7, MINT_MODULUS).modulus == MINT_MODULUS


@pytest.mark.parametrize("a, b", [(123456789, 987654321), (MOD - 1, MOD - 1), (0, 42)])
def test_arithmetic_matches_integers(a, b):
    x, y = ModInt(a), ModInt(b)
    assert (x + y).value == (a + b) % MOD
    assert (x - y).value == (a - b) % MOD
    assert (x * y).value == a * b % MOD


def test_mixed_int_operands():
    x = ModInt(10)
    assert (x + 5).value == 15
    assert (5 + x).value == 15
    assert (3 - x).value == (3 - 10) % MOD
    assert (4 * x).value == 40


def test_inverse_and_division():
    for a in (1, 2, 12345, MOD - 1):
        x = ModInt(a)
        assert x * x.inverse() == 1
        y = ModInt(987)
        assert (y / x) * x == y


def test_zero_has_no_inverse():
    with pytest.raises(ZeroDivisionError):
        ModInt(0).inverse()
    with pytest.raises(ZeroDivisionError):
        ModInt(5) / 0


def test_power():
    x = ModInt(3, MINT_MODULUS)
    assert (x**100).value == pow(3, 100, MINT_MODULUS)
    assert x.power(ModInt(100, MINT_MODULUS)) == x**100
    assert x**-1 == x.inverse()


def test_mod_operator():
    assert (ModInt(17) % 5).value == 17 % 5
    assert (ModInt(17) % ModInt(5)).value == 17 % 5


def test_mismatched_moduli():
    with pytest.raises(ValueError):
        ModInt(1) + ModInt(1, MINT_MODULUS)
    assert ModInt(1) != ModInt(1, MINT_MODULUS)


def test_ordering_and_conversion():
    values = [ModInt(v) for v in (5, 1, 3)]
    assert [int(v) for v in sorted(values)] == sorted([5, 1, 3])
    assert ModInt(3) < ModInt(5)
    assert ModInt(5) >= 5
    assert str(ModInt(42)) == str(42)
    assert int(ModInt(-2)) == MOD - 2