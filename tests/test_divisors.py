import pytest

from solvebook.divisors import (
    amicable_sum,
    non_abundant_sum,
    proper_divisor_sum,
    proper_divisors,
)
from solvebook.primes import sieve


def test_proper_divisors_of_twelve():
    assert proper_divisors(12) == [1, 2, 3, 4, 6]


def test_proper_divisors_of_one_is_empty():
    assert proper_divisors(1) == []
    assert proper_divisor_sum(1) == 0


@pytest.mark.parametrize("number", [0, -5])
def test_proper_divisors_rejects_non_positive(number):
    with pytest.raises(ValueError):
        proper_divisors(number)


@pytest.mark.parametrize("number", range(1, 200))
def test_proper_divisors_divide_and_exclude_number(number):
    divisors = proper_divisors(number)
    assert all(number % d == 0 for d in divisors)
    assert number not in divisors
    assert divisors == sorted(set(divisors))
    assert proper_divisor_sum(number) == sum(divisors)


def test_primes_have_only_one_as_proper_divisor():
    for prime in sieve(200):
        assert proper_divisors(prime) == [1]


def test_amicable_pair_220():
    assert proper_divisor_sum(220) == 284
    assert proper_divisor_sum(284) == 220


def test_perfect_number_is_its_own_divisor_sum():
    assert proper_divisor_sum(28) == 28
    assert proper_divisor_sum(496) == 496


def test_amicable_sum_includes_first_pair():
    assert amicable_sum(300) == 220 + 284


def test_amicable_sum_excludes_pair_crossing_limit():
    assert amicable_sum(284) == 0
    assert amicable_sum(221) == 0


def test_amicable_sum_ignores_perfect_numbers():
    assert amicable_sum(220) == 0


def test_amicable_sum_default():
    assert amicable_sum() == 31626


def test_amicable_sum_small_limits():
    assert amicable_sum(0) == 0
    assert amicable_sum(1) == 0


def test_non_abundant_sum_below_first_expressible():
    # 12 is the smallest abundant number, so 24 is the first sum of two.
    assert non_abundant_sum(23) == sum(range(1, 24))
    assert non_abundant_sum(24) == sum(range(1, 24))


def test_non_abundant_sum_skips_expressible_numbers():
    assert non_abundant_sum(30) == sum(range(1, 31)) - 24 - 30


def test_non_abundant_sum_never_exceeds_triangle():
    for limit in (10, 50, 100):
        assert non_abundant_sum(limit) <= limit * (limit + 1) // 2


def test_non_abundant_sum_zero_and_negative():
    assert non_abundant_sum(0) == 0
    with pytest.raises(ValueError):
        non_abundant_sum(-1)