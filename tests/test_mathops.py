import itertools
import math

import pytest

from ibmsim.mathops import (
    UnknownOperation,
    arithmetic,
    bit_not,
    gcd,
    lcm,
    logic,
    mult_div,
    permutations,
    probability,
    to_int32,
    trig,
)

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


@pytest.mark.parametrize("value", [0, 1, -1, 123456, INT_MAX, INT_MIN])
def test_to_int32_identity_in_range(value):
    assert to_int32(value) == value


@pytest.mark.parametrize("value", [2**31, 2**40 + 5, -(2**33) - 9])
def test_to_int32_wraps_into_range(value):
    wrapped = to_int32(value)
    assert INT_MIN <= wrapped <= INT_MAX
    assert (wrapped - value) % 2**32 == 0


def test_add_overflow_wraps():
    assert arithmetic("add", INT_MAX, 1) == INT_MIN


@pytest.mark.parametrize("a,b", [(7, 5), (-3, 10), (INT_MAX, INT_MAX)])
def test_add_sub_round_trip(a, b):
    total = arithmetic("add", a, b)
    assert arithmetic("sub", total, b) == to_int32(a)
    assert arithmetic("add", b, a) == total


def test_arithmetic_unknown():
    with pytest.raises(UnknownOperation):
        arithmetic("mul", 1, 2)


@pytest.mark.parametrize("a,b", [(12, 10), (-1, 77), (0, 5)])
def test_logic_identities(a, b):
    assert logic("xor", logic("xor", a, b), b) == a
    assert logic("and", a, bit_not(a)) == logic("and", 0, b)
    assert logic("or", a, b) == logic("xor", logic("xor", a, b), logic("and", a, b))


def test_bit_not_involution_and_range():
    for value in (0, 5, -7, INT_MAX, INT_MIN):
        assert bit_not(bit_not(value)) == value
        assert INT_MIN <= bit_not(value) <= INT_MAX


def test_logic_unknown_includes_not():
    with pytest.raises(UnknownOperation):
        logic("not", 1, 2)


def test_div_truncates_toward_zero():
    assert mult_div("div", -7, 2) == -3


@pytest.mark.parametrize("a,b", [(17, 5), (-17, 5), (17, -5), (-17, -5)])
def test_div_mult_relation(a, b):
    q = mult_div("div", a, b)
    remainder = a - mult_div("mult", q, b)
    assert abs(remainder) < abs(b)
    assert remainder == 0 or (remainder > 0) == (a > 0)


def test_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        mult_div("div", 4, 0)


def test_mult_wraps():
    assert INT_MIN <= mult_div("mult", INT_MAX, INT_MAX) <= INT_MAX


def test_mult_div_unknown():
    with pytest.raises(UnknownOperation):
        mult_div("mod", 4, 2)


@pytest.mark.parametrize("choice,func", [(1, math.sin), (2, math.cos), (3, math.tan)])
def test_trig_choices(choice, func):
    assert trig(choice, 0.7) == func(0.7)


def test_trig_unknown():
    with pytest.raises(UnknownOperation):
        trig(4, 1.0)


@pytest.mark.parametrize("a,b", [(48, 18), (17, 5), (100, 75), (9, 9)])
def test_gcd_lcm_properties(a, b):
    g = gcd(a, b)
    assert a % g == 0 and b % g == 0
    assert math.gcd(a, b) == g
    assert g * lcm(a, b) == a * b


def test_gcd_with_zero_returns_other():
    assert gcd(14, 0) == 14
    assert gcd(0, 14) == 14


def test_lcm_of_zeros_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)


def test_probability():
    assert probability(1, 4) == 0.25
    assert probability(5, 0) == 0.0


def test_permutations_swap_order():
    assert list(permutations([1, 2, 3])) == [
        (1, 2, 3),
        (1, 3, 2),
        (2, 1, 3),
        (2, 3, 1),
        (3, 2, 1),
        (3, 1, 2),
    ]


@pytest.mark.parametrize("items", [[4], [1, 2], [5, 6, 7, 8], [1, 1, 2]])
def test_permutations_cover_all(items):
    result = list(permutations(items))
    assert len(result) == math.factorial(len(items))
    assert sorted(result) == sorted(itertools.permutations(items))
    assert result[0] == tuple(items)


def test_permutations_empty():
    assert list(permutations([])) == []