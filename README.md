# cpkit

A library of classic competitive-programming algorithms and data structures.
Each algorithm is a plain function or a small class. Inputs are ordinary Python
lists, tuples and strings, and results come back as values.

## Installation

```
pip install cpkit
```

To run the test suite:

```
pip install "cpkit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpkit.number_theory` | `sieve`, `bitwise_sieve`, `segmented_sieve`, `least_prime_factors`, `factorize`, `count_divisors`, `divisor_sum_queries`, `factorial_prime_exponent`, `to_base_digits` |
| `cpkit.modular` | `MOD`, `power_mod`, `mod_inverse_prime`, `extended_gcd`, `mod_inverse`, `discrete_log`, `binomial`, `binomial_recursive`, `BinomialTable` |
| `cpkit.hashing` | `polynomial_hash`, `count_distinct_substrings` |
| `cpkit.disjoint_set` | `DisjointSet`, `best_minimum_by_length` |
| `cpkit.segment_tree` | `SegmentTree`, `LazySegmentTree` |
| `cpkit.fenwick` | `FenwickTree`, `distinct_in_ranges`, `count_candy_distributions` |
| `cpkit.suffix_array` | `suffix_array`, `lcp_array` |
| `cpkit.trie` | `Trie` |
| `cpkit.sliding_window` | `min_of_window_maxima`, `next_greater`, `count_pairs_in_ranges` |
| `cpkit.ordered_set` | `OrderedSet` with `order_of_key` and `find_by_order` |
| `cpkit.combinatorial` | `max_subset_sum_mod`, `cheapest_cover`, `next_permutation`, `permutations_in_order`, `xor_sum_of_subsets`, `coprime_shift_count`, `first_player_wins`, `min_elevator_rides` |
| `cpkit.ranges` | `min_paint_strokes`, `StarSky`, `min_palindrome_sum_changes`, `capped_interval_cost`, `ternary_search_max` |
| `cpkit.string_matching` | `prefix_function`, `find_occurrences`, `palindrome_radii` |
| `cpkit.knapsack` | `knapsack`, `knapsack_recursive`, `knapsack_items`, `knapsack_large_capacity`, `subset_sum_closest` |
| `cpkit.coin_dp` | `coin_change_ways`, `coin_change_min`, `max_subarray_sum` |
| `cpkit.digit_dp` | `count_divisible_digit_sum`, `count_distinct_equals_max` |
| `cpkit.broken_profile` | `min_light_toggles` |
| `cpkit.big_multiply` | `multiply`, `multiply_reversed` |
| `cpkit.tree_heights` | `tree_heights` |
| `cpkit.subsequences` | `lcs_length`, `lcs_length_recursive`, `all_lcs`, `longest_common_substring`, `longest_consecutive_run`, `lis`, `lis_tails`, `lis_length` |
| `cpkit.interval_dp` | `longest_palindromic_subsequence`, `matrix_chain_cost`, `min_palindrome_cuts`, `schedule_talks` |
| `cpkit.traversal` | `is_bipartite`, `find_bridges`, `find_directed_cycle`, `find_undirected_cycle`, `find_simple_cycle`, `strongly_connected_components`, `condensation`, `topological_sort` |
| `cpkit.shortest_paths` | `dijkstra`, `floyd_warshall`, `shortest_subsequence` |
| `cpkit.spanning` | `kruskal` |
| `cpkit.matching` | `max_bipartite_matching`, `min_cover_cells` |
| `cpkit.trees` | `LowestCommonAncestor`, `euler_tour` |

## Examples

```python
from cpkit.number_theory import sieve
from cpkit.modular import power_mod, extended_gcd
from cpkit.ordered_set import OrderedSet
from cpkit.spanning import kruskal
from cpkit.big_multiply import multiply

sieve(20)                      # [2, 3, 5, 7, 11, 13, 17, 19]
power_mod(2, 10, 1_000_000_007)  # 1024
extended_gcd(30, 12)           # (g, x, y) with 30*x + 12*y == g == 6

s = OrderedSet([10, 30, 33, 3, 5])
s.order_of_key(7)              # 2 elements are smaller than 7
s.find_by_order(3)             # 30

edges = [(1, 2, 10), (1, 3, 8), (1, 4, 3), (1, 5, 25),
         (2, 3, 6), (3, 4, 7), (4, 5, 1)]
total, tree = kruskal(5, edges)
total                          # 17
tree                           # the chosen (u, v, weight) edges

multiply("125", "53")          # "6625"
```

## Conventions

Graph functions take a node count and a list of edges. Nodes are numbered as
each function's docstring states, mostly `1..n`.

Where a search finds nothing, for example a cycle search on an acyclic graph
or `discrete_log` with no solution, the function returns `None` or an empty
result. Invalid input raises `ValueError` or `IndexError`. A few functions
also raise `ValueError` when the problem has no answer at all:
`topological_sort` on a graph with a cycle, and `cheapest_cover` when no
selection of nodes covers every node.

## What this package does not do

cpkit is a library only. It has no command-line programs and reads no input
files; every algorithm is called from Python with its data passed as
arguments.