# algocraft

A collection of classic algorithms written in plain Python. It has no runtime
dependencies beyond the standard library.

## Installation

```
pip install algocraft
```

To run the test suite:

```
pip install "algocraft[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algocraft.sorting` | `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` — each returns a new sorted list |
| `algocraft.graph_traversal` | `build_adjacency`, `bfs`, `dfs` |
| `algocraft.cycles` | `DirectedGraph` (`add_edge`, `has_cycle`), `has_directed_cycle`, `undirected_adjacency`, `has_undirected_cycle_bfs`, `has_undirected_cycle_dfs` |
| `algocraft.spanning_trees` | `DisjointSet` (`find`, `union`), `kruskal_mst`, `prim_mst` |
| `algocraft.shortest_paths` | `a_star`, `bellman_ford` (raises `NegativeCycleError`), `dijkstra`, `floyd_warshall` |
| `algocraft.trees` | `Node`, and the generators `preorder`, `inorder`, `postorder` |
| `algocraft.knapsack` | `Item`, `fractional_knapsack`, `knapsack_01`, `knapsack_01_compact` |
| `algocraft.geometry` | `Point`, `closest_pair` |
| `algocraft.string_matching` | `naive_search`, `kmp_search`, `boyer_moore_search`, `rabin_karp_search`, plus the table builders `build_lps`, `build_bad_char`, `build_good_suffix` |
| `algocraft.suffix_array` | `build_suffix_array`, `search` |
| `algocraft.huffman` | `HuffmanNode`, `build_huffman_tree`, `build_codes`, `encode`, `decode` |
| `algocraft.matrices` | `matrix_add`, `strassen` (square matrices whose size is a power of two) |
| `algocraft.karatsuba` | `make_equal_length`, `add_bit_strings`, `multiply` |
| `algocraft.dynamic` | `lcs_length`, `is_subsequence`, `brute_force_lcs`, `matrix_chain_order`, `max_subarray`, `is_subset_sum` |
| `algocraft.backtracking` | `graph_coloring`, `solve_n_queens`, `render_board` |
| `algocraft.tsp` | `solve_tsp` (Held–Karp) |
| `algocraft.smart_calc` | `SymbolTable` (`to_decimal`, `from_decimal`, `max_base`), `read_symbols`, `evaluate_instruction`, `CalculatorError`, `main` |

Weighted adjacency lists hold `(weight, neighbour)` pairs and weighted edge
lists hold `(u, v, weight)` triples. `dijkstra` and `bellman_ford` return a
list of distances with `None` for unreachable vertices; `a_star` returns
`None` when the goal cannot be reached. `floyd_warshall` takes a square matrix
with `math.inf` for missing edges and returns a new matrix.

## Examples

String searching returns the start index of every match:

```python
from algocraft.string_matching import kmp_search

kmp_search("abababab", "abab")   # [0, 2, 4]
```

Longest common subsequence:

```python
from algocraft.dynamic import lcs_length, brute_force_lcs

lcs_length("AGGTAB", "GXTXAYB")       # 4
brute_force_lcs("AGGTAB", "GXTXAYB")  # "GTAB"
```

Karatsuba multiplication of bit strings:

```python
from algocraft.karatsuba import multiply

multiply("1100", "1010")   # 120
multiply("111", "111")     # 49
```

Huffman round trip:

```python
from algocraft.huffman import build_huffman_tree, build_codes, encode, decode

root = build_huffman_tree("abracadabra")
codes = build_codes(root)
bits = encode("abracadabra", codes)
decode(bits, root)   # "abracadabra"
```

## Custom-base calculator

`algocraft-calc` adds and subtracts numbers written with your own digit
symbols.

The symbols file holds, on its first line, single-character digits separated
by whitespace, in order of value:

```
0 1 2 3 4 5 6 7 8 9 A B C D E F
```

Each line of the instructions file is `OPERATION NUM1 NUM2 BASE`, where the
operation is `ADD` or `SUBTRACT` and the base lies between 1 and the number of
symbols:

```
ADD 1F 1 16
SUBTRACT 101 1 2
```

Run it with:

```
algocraft-calc symbols.txt instructions.txt
```

Each valid line prints its result in the same base (`20` and `100` for the
lines above); blank lines are skipped, and invalid lines, unknown digits,
digits too large for the base and negative differences are reported on
standard error and skipped. A missing or malformed symbols file ends the run
with exit status 1.

The same work is available from Python through `read_symbols` and
`evaluate_instruction`, which raise `CalculatorError` for anything the
command would report.

## What it does not do

Apart from `algocraft-calc`, everything here is a library function working on
Python values in memory. There are no commands for the graph, sorting or
string algorithms, and nothing reads graphs, matrices or texts from files or
standard input.