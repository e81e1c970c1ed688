# solvebook

Small, self-contained solvers for classic programming puzzles: prime sieves,
digit arithmetic, divisor sums, lattice paths, permutations, shortest paths,
string matching and palindromes. Pure Python, no third-party dependencies.

Most puzzle functions take the parameters of the well-known puzzle as their
defaults, so `sum_primes()` sums the primes up to two million and
`nth_prime()` returns the 10001st prime.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `solvebook.primes`

- `sieve(limit)`: every prime up to and including `limit`, ascending.
- `sum_primes(limit=2_000_000)`: sum of the primes not greater than `limit`.
- `nth_prime(n=10001)`: the n-th prime, 2 being the first.
- `largest_prime_factor(number=600851475143)`: largest prime dividing `number`.
- `primes_in_range(start, end)`: primes between `start` and `end` inclusive,
  by a segmented sieve.
- `count_divisors(number)`: number of positive divisors.
- `triangle_numbers_with_divisors(threshold, limit=100000)`: generator of the
  triangle numbers `i*(i+1)/2` for `3 <= i < limit` with more than `threshold`
  divisors.

### `solvebook.basics`

- `multiples_sum(divisor, limit)`, `sum_multiples_3_or_5(limit=1000)`
- `even_fibonacci_sum(limit=4_000_000)`: sum of the even Fibonacci terms below `limit`.
- `is_palindrome(number)`, `largest_palindrome_product(limit=999)`
- `smallest_multiple(n=20)`: least common multiple of 1..n.
- `sum_square_difference(limit=100)`
- `largest_digit_product(digits, span=13)`: greatest product of `span` adjacent
  digits in a digit string.
- `pythagorean_triplet(total=1000)`: `(a, b, c)` with `a + b + c == total`.
- `spiral_diagonal_sum(size=1001)`: sum of both diagonals of an odd-sized number spiral.
- `largest_pandigital_prime()`

### `solvebook.words`

- `number_to_words(number)`: British English spelling of 1..1000,
  e.g. `"one hundred and fifteen"`.
- `letter_count(limit=1000)`: letters (no spaces or hyphens) used to spell 1..limit.

### `solvebook.sundays`

- `is_leap(year)`, `days_in_month(month, year)`
- `Day`: a frozen dataclass of `day`, `month`, `year` and `weekday` (0 is
  Sunday); `Day.next()` returns the following day. `EPOCH` is Monday 1 January 1900.
- `count_month_start_sundays(first_year=1901, last_year=2000)`: months starting
  on a Sunday; years before 1900 raise `ValueError`.

### `solvebook.bigdigits`

- `large_sum_prefix(numbers, digits=10)`: leading digits of the sum of integers
  or decimal strings.
- `power_digit_sum(exponent=1000)`: digit sum of `2 ** exponent`.
- `factorial_digit_sum(n=100)`: digit sum of `n!`.
- `first_fibonacci_with_digits(digits=1000)`: index of the first Fibonacci term
  with that many digits (F1 = F2 = 1).

### `solvebook.grids`

- `parse_grid(text)`: one row of integers per non-blank line.
- `largest_line_product(grid, length=4)`: a `LineProduct(product, values)` for
  the best horizontal, vertical or diagonal run.
- `lattice_paths(n=20)` and `lattice_paths_recursive(n=20)`: right/down paths
  through an n x n grid.

### `solvebook.collatz`

- `CollatzCounter`: `length(number)` gives the chain length from `number` to 1,
  both included; the counter caches lengths and exposes `hits` and `cache_size`.
- `longest_collatz(limit=1_000_000)`: `(start, length)` of the longest chain
  starting below `limit`.

### `solvebook.divisors`

- `proper_divisors(number)`, `proper_divisor_sum(number)`
- `amicable_sum(limit=10000)`: sum of the amicable numbers below `limit`.
- `non_abundant_sum(limit=29000)`: sum of 1..limit not expressible as the sum
  of two abundant numbers.

### `solvebook.combinatorics`

- `distinct_powers(limit=100)`: distinct values of `a**b` for `2 <= a, b <= limit`.
- `digit_power_numbers(power=5, limit=None)`: numbers equal to the sum of the
  `power`-th powers of their digits; the bound is computed when `limit` is None.
- `coin_combinations(target=200, coins=UK_COINS)`: ways to make `target` from the coins.
- `pandigital_products_sum()`
- `smallest_permuted_cube(count=5)`

### `solvebook.triangle`

- `parse_triangle(text)`: one row per non-blank line; row k must hold k values.
- `max_path_sum(rows)`: greatest apex-to-base path sum (0 for an empty triangle).
- `main(argv=None)`: the `solvebook-triangle` command.

### `solvebook.names`

- `parse_names(text)`: comma-separated names, letters only, empty entries dropped.
- `name_score(name)`: A=1 ... Z=26 summed.
- `total_name_scores(text)`: sorted names, position times score, summed.

### `solvebook.permutations`

- `next_permutation(items)`: the next lexicographic arrangement as a list, or
  `None` after the last one.
- `nth_permutation(symbols="0123456789", index=1_000_000)`: the index-th
  (1-based) permutation; a string for string input, a list otherwise.

### `solvebook.cycles`

- `recurring_cycle_length(n)`: cycle length of the decimal 1/n, 0 if it ends.
- `longest_recurring_cycle(limit=1000)`: `(d, length)` for the longest cycle with `d < limit`.
- `quadratic_prime_run(a, b)`: consecutive n from 0 for which `n*n + a*n + b` is prime.
- `best_quadratic(limit=1000)`: `(a, b, run)` with the longest run.

### `solvebook.graphs`

- `shortest_distances(adjacency, source, target=None)`: Dijkstra over
  `(neighbour, cost)` lists; unreachable vertices get `math.inf`.
- `shortest_path(node_count, edges)`: vertices (numbered from 1) of a shortest
  path from 1 to `node_count` over undirected `(a, b, weight)` edges, or `None`.
- `solve_city_routes(text)`: answers route-cost queries between named cities
  given as whitespace-separated text; unreachable cities are reported as
  `UNREACHABLE` (10**15).
- `solve_path_query(text)`: `"n m"` followed by `m` edges `"a b w"`; returns
  the path as space-separated vertices or `"-1"`.

### `solvebook.strings`

- `prefix_function(pattern)`, `find_all(pattern, text)`: every match start,
  overlaps included.
- `decipher(encoded)`: keeps each letter and skips up to its next copy.

### `solvebook.palindromes`

- `next_palindrome(number_text)`: smallest palindrome strictly greater than a
  decimal number of any length, as a string.

## Examples

```python
from solvebook.primes import sum_primes
from solvebook.basics import sum_multiples_3_or_5

print(sum_multiples_3_or_5(1000))
print(sum_primes(2_000_000))
```

```python
from solvebook.strings import find_all

print(find_all("na", "banana"))  # [2, 4]
```

## Command line

The maximum top-to-bottom path sum of a number triangle, one row per line:

```
solvebook-triangle triangle.txt
```

With no file argument the triangle is read from standard input. The result is
printed as `total sum=<value>`.

## What it does not do

`solvebook-triangle` is the only command. The other solvers are library
functions: they return their answers rather than print them, and the graph
solvers take their input as a string rather than reading standard input.