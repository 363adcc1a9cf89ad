# cpkit

A collection of classic competitive-programming algorithms written as plain
Python functions. Each function takes Python values (lists, tuples, integers,
strings) and returns its answer.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.

## What is inside

- `cpkit.fastio`: `TokenReader` reads characters (`get`, `peek`,
  `read_char`), integers (`read_int`), decimal numbers (`read_float`) and
  words (`read_word`) from a text stream, standard input by default; it is
  false once it has run past the end of the input. `TokenWriter` buffers
  ints, bools (as 1/0), floats, strings and lists or tuples of them, and
  writes them out on `flush` (or on leaving a `with` block); floats get
  `set_precision` digits after the point, 6 by default. `format_fixed`
  formats a number with a fixed count of decimal places.
- `cpkit.treequery`: `Tree` on nodes 1..n with `adjacent(a, b)` and
  `edges_within(nodes)`; `answer_queries` answers a list of queries, where a
  pair asks for adjacency (1/0) and any other node set for its induced edge
  count.
- `cpkit.compress`: `Compressor` maps values to 1-based ranks (`push`,
  `rank`, `value_at`, `len`, `clear`); `max_rectangle_weight` finds the
  heaviest set of weighted points in an x-interval below a y-bound.
- `cpkit.basics`: `count_1324_patterns`, `peak_alternating_sums`,
  `nine_verdict`, `split_average`, `series_winner`.
- `cpkit.intervaldp`: `circular_merge_costs` (minimum and maximum),
  `min_strokes`, `count_arrangements`, `min_cover_cost`, `max_merged_value`,
  `max_merged_value_fast`.
- `cpkit.treedp`: `max_party_rating`, `min_balance_operations`,
  `connected_black_counts`, `expected_operations`.
- `cpkit.placement`: `min_total_distance` assigns mice to capacitated holes
  on a line; it returns -1 when the holes cannot take every mouse.
- `cpkit.digitdp`: `count_beautiful`, `count_windy`,
  `count_two_digit_numbers`.
- `cpkit.matrix`: `Matrix`, a square matrix with products reduced modulo
  1e9+7, `Matrix.identity` and `power`; `fibonacci` and `count_paths`
  (paths across a 3-by-m field with blocked stretches).
- `cpkit.modular`: `linear_inverses`, `lucas_binomial`, and `discrete_log`
  (baby-step giant-step, returning `None` when no solution is found).
- `cpkit.euclid`: `ext_gcd`, `weighted_inverse_sum`,
  `solve_linear_diophantine` (returns `None` when there is no integer
  solution).
- `cpkit.seating`: `seating_count`.
- `cpkit.closure`: `transitive_closure` of a 0/1 adjacency matrix.
- `cpkit.sieve`: `count_primes_in_range`, `count_non_divisible`,
  `min_coprime_subset` (returns `None` when no subset of size up to 8 has
  gcd 1).
- `cpkit.mobius`: `mobius_prefix`, `count_coprime_pairs`,
  `count_coprime_pairs_in_box`, `lcm_pair_sum`, `count_prime_gcd_pairs`,
  `energy_sum`.
- `cpkit.shortest`: `dijkstra` on a directed graph with non-negative
  weights; unreachable nodes get `UNREACHABLE`.
- `cpkit.components`: `vertex_biconnected`, `edge_biconnected`,
  `strongly_connected` and `scc_listing` (components ordered by their
  smallest vertex).

Invalid input, such as a node number outside 1..n or a negative edge
weight, raises `ValueError`.

## Example

```python
from cpkit.matrix import fibonacci
from cpkit.shortest import dijkstra

print(fibonacci(10))  # 55
print(dijkstra(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)], 1))  # [0, 4, 5]
```

## What the package does not do

There are no command-line programs. Nothing reads a problem's input format
from standard input and prints the answer; to do that, parse the input
yourself (for example with `TokenReader`) and pass the values to the
functions above.

## Running the tests

```
pip install .[test]
pytest
```