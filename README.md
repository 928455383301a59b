# algodrills

Classic algorithm exercises as plain Python functions. Each one takes ordinary
Python values (lists, tuples, integers, strings) and returns the answer. Invalid
input raises `ValueError` (or `IndexError` for out-of-range queries).

## Installation

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Modules

- `algodrills.game2048`: `Direction` (`RIGHT`, `DOWN`, `LEFT`, `UP`),
  `slide(board, direction)` to tilt a board, merging each pair of equal tiles
  once, and `best_tile(board, moves=5)` for the largest tile reachable after
  exactly that many tilts.
- `algodrills.surveillance`: `min_blind_spots(grid)`, the fewest empty cells
  left unwatched by cameras of kinds 1 to 5 over every orientation. Cells are
  0 (empty), 1-5 (cameras) or 6 (wall).
- `algodrills.dragon_curve`: `curve_points(x, y, direction, generation)` and
  `count_squares(curves)`, the number of unit squares whose four corners all
  lie on some curve.
- `algodrills.chicken`: `min_city_distance(grid, keep)`, the smallest total
  Manhattan distance from homes (1) to their nearest shop (2) when only `keep`
  shops stay open.
- `algodrills.stickers`: `rotate(sticker)` (90 degrees clockwise) and
  `attach_stickers(rows, cols, stickers)`, which places each sticker at the
  first free spot, rotating up to four times, and returns the covered cell
  count.
- `algodrills.sorting`: `merge_sort(values, key=None)` (stable),
  `quick_sort(values)`, `merge_sorted(first, second)`,
  `counting_sort(values)` and `most_frequent(cards)` (smallest value on a tie).
- `algodrills.greedy`: `min_product_sum`, `min_coins`, `max_meetings`,
  `max_rope_weight` and `divide_loot(pirates, treasures)`.
- `algodrills.counting`: `fibonacci_calls`, `stair_numbers` (modulo 10**9),
  `tilings` and `tilings_with_squares` (modulo 10007), `min_ops_to_one`,
  `min_ops_path`, `pinary_numbers`, `sum_ways` and `padovan`.
- `algodrills.optimization`: `longest_increasing`, `max_increasing_sum`,
  `min_paint_cost`, `PrefixSums` with `range_sum(start, end)` (1-based,
  inclusive), `max_consult_profit`, `max_triangle_path` and `max_stair_score`.
- `algodrills.number_theory`: `gcd`, `lcm`, `binomial`,
  `binomial_mod(n, k, modulus=10007)`, `factorize`, `sieve`,
  `primes_between`, `is_prime`, `count_primes`, `kaing_year` (returns `None`
  when the year never occurs) and `divisors`.
- `algodrills.searching`: `lower_bound`, `upper_bound`, `contains`,
  `membership`, `count_occurrences`, `max_cable_length`, `compress` and
  `largest_triple_sum` (returns `None` when there is no such element).
- `algodrills.two_pointers`: `shortest_subarray` (0 when no run reaches the
  target), `membership_scan` and `min_difference_at_least`.
- `algodrills.hashtable`: `string_hash(key, modulus=1000003, base=1000)`,
  `ChainedHashTable` with `insert`, `find` (returns `None` for a missing key),
  `erase`, `in`, `len()` and iteration over keys, and `present_people(records)`
  for logs of `(name, "enter" | "leave")` pairs, returned in reverse dictionary
  order.

## Example

    from algodrills.number_theory import gcd, primes_between
    from algodrills.hashtable import ChainedHashTable

    gcd(12, 18)              # 6
    primes_between(3, 16)    # [3, 5, 7, 11, 13]

    table = ChainedHashTable()
    table.insert("orange", 724)
    table.find("orange")     # 724
    "melon" in table         # False

## What it does not do

The package is a library only. It has no command-line program and does not
read problem input from standard input or print answers; call the functions
from Python and handle input and output yourself.