import pytest

from solvebook.basics import (
    even_fibonacci_sum,
    is_palindrome,
    largest_digit_product,
    largest_palindrome_product,
    largest_pandigital_prime,
    multiples_sum,
    pythagorean_triplet,
    smallest_multiple,
    spiral_diagonal_sum,
    sum_multiples_3_or_5,
    sum_square_difference,
)


def test_multiples_sum_single_multiple():
    assert multiples_sum(7, 8) == 7


def test_multiples_sum_rejects_zero_divisor():
    with pytest.raises(ValueError):
        multiples_sum(0, 10)


def test_sum_multiples_3_or_5_example():
    assert sum_multiples_3_or_5(10) == 23


def test_sum_multiples_counts_fifteen_once():
    assert sum_multiples_3_or_5(16) - sum_multiples_3_or_5(15) == 15


def test_sum_multiples_default_grows():
    assert sum_multiples_3_or_5() > sum_multiples_3_or_5(999)


@pytest.mark.parametrize("even_term", [8, 34, 144])
def test_even_fibonacci_sum_jumps_at_even_terms(even_term):
    assert even_fibonacci_sum(even_term + 1) - even_fibonacci_sum(even_term) == even_term


def test_even_fibonacci_sum_ignores_odd_terms():
    assert even_fibonacci_sum(22) == even_fibonacci_sum(21)


def test_even_fibonacci_sum_default_is_even():
    result = even_fibonacci_sum()
    assert result % 2 == 0
    assert result == even_fibonacci_sum(4000000)


@pytest.mark.parametrize("number, expected", [(9009, True), (906609, True), (9019, False), (12321, True), (12345, False)])
def test_is_palindrome(number, expected):
    assert is_palindrome(number) is expected


def test_largest_palindrome_product_two_digits():
    assert largest_palindrome_product(99) == 9009


def test_largest_palindrome_product_three_digits():
    result = largest_palindrome_product(999)
    assert is_palindrome(result)
    assert result > largest_palindrome_product(99)
    assert any(result % i == 0 and result // i <= 999 for i in range(100, 1000))


def test_largest_palindrome_product_rejects_empty_range():
    with pytest.raises(ValueError):
        largest_palindrome_product(0)


def test_smallest_multiple_example():
    assert smallest_multiple(10) == 2520


def test_smallest_multiple_twenty():
    assert smallest_multiple(20) == 19 * 17 * 16 * 13 * 11 * 9 * 7 * 5


def test_smallest_multiple_is_divisible():
    result = smallest_multiple(15)
    assert all(result % k == 0 for k in range(1, 16))
    assert all(result // p % k != 0 or result // p == 0 for p in (2, 3, 5, 7, 11, 13) for k in [p ** (4 if p == 2 else 2 if p == 3 else 1)])


@pytest.mark.parametrize("limit", [1, 10, 100])
def test_sum_square_difference_identity(limit):
    numbers = range(1, limit + 1)
    assert sum_square_difference(limit) == sum(numbers) ** 2 - sum(n * n for n in numbers)


def test_largest_digit_product_includes_last_window():
    assert largest_digit_product("1119", 1) == 9


def test_largest_digit_product_whole_string():
    assert largest_digit_product("5", 1) == 5


def test_largest_digit_product_all_zero():
    assert largest_digit_product("0000", 2) == 0


def test_largest_digit_product_rejects_long_span():
    with pytest.raises(ValueError):
        largest_digit_product("123", 4)


def test_largest_digit_product_rejects_non_digits():
    with pytest.raises(ValueError):
        largest_digit_product("12a4", 2)


@pytest.mark.parametrize("total", [12, 30, 1000])
def test_pythagorean_triplet_invariants(total):
    a, b, c = pythagorean_triplet(total)
    assert a + b + c == total
    assert a * a + b * b == c * c
    assert min(a, b, c) > 0


def test_pythagorean_triplet_missing():
    with pytest.raises(ValueError):
        pythagorean_triplet(10)


def test_spiral_diagonal_sum_of_one():
    assert spiral_diagonal_sum(1) == 1


@pytest.mark.parametrize("side", [3, 5, 7, 1001])
def test_spiral_diagonal_ring_corners(side):
    ring = spiral_diagonal_sum(side) - spiral_diagonal_sum(side - 2)
    assert ring == 4 * side * side - 6 * (side - 1)


def test_spiral_diagonal_sum_rejects_even():
    with pytest.raises(ValueError):
        spiral_diagonal_sum(4)


def test_largest_pandigital_prime():
    assert largest_pandigital_prime() == 7652413