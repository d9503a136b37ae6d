# succinctkit

Space-efficient data structures for graph algorithms that work within a
tight memory budget. The package is pure Python and has no runtime
dependencies.

## Modules

### `succinctkit.rankselect`

- `RankStructure(bits)` splits a bit sequence into 8-bit segments and
  answers `rank(k)` from lookup tables. `rank(k)` is the number of set bits
  among the first `k` bits, with `k` running from 1 to `len(structure)`.
  `set_before(segment)` gives the number of set bits in all earlier
  segments. `block(index)` returns one 8-bit segment, lowest bit first.
- `RankSelect(bits)` adds `select(k)`, which is the 1-based position of the
  `k`-th set bit.
- `SimpleRankSelect(bits)` gives the same `rank` and `select` from fully
  precomputed lists.

Queries outside the valid range raise `IndexError`.

### `succinctkit.linkedlist`

`CyclicIndexList(size)` is a cyclic doubly linked list over `0 .. size-1`.
It stores only the relative links between elements.

- `get()` removes and returns the current element.
- `remove(idx)` removes `idx` and returns the element that follows it. If
  `idx` was the last element, it returns `idx` itself.
- `is_empty()` tells whether any elements are left.

`get` and `remove` on an empty list raise `IndexError`.

### `succinctkit.simpletrail`

`SimpleTrail` is an ordered list of arcs `(u, k)`. It supports:

- `add_arc`
- `insert_sub_trail(sub_trail, idx)` and `push_back_sub_trail(sub_trail)`
- `first_index_of(arc)`, which raises `ValueError` if the arc is absent
- `outgoing_from(u)`, which returns the first arc leaving `u`, or `None`
- `len()` and iteration

### `succinctkit.staticspacestorage`

`StaticSpaceStorage(bits)` packs integers of fixed, individual widths into
64-bit words. In the bit pattern, each set bit starts an entry, and the
clear bits after it are that entry's bits. An entry may be at most 63 bits
wide.

- `make_bit_vector(sizes)` builds the pattern from a list of widths.
- `get(i)` reads entry `i`.
- `insert(i, value)` writes entry `i`. It raises `ValueError` if the value
  does not fit the entry's width.

### `succinctkit.segmentstack`

These are segmented stacks for space-efficient depth-first search. Entries
are `Pair(head, tail)` tuples. `pop()` returns a `Pair`, or a `PopStatus`
value:

- `RESTORE` when a dropped segment has to be rebuilt.
- `NO_MORE_NODES` when the stack is exhausted.

`BasicSegmentStack(segment_size)` keeps a single trailer. It provides:

- `push`
- `drop_all`
- `save_trailer`
- `is_aligned`
- `is_empty`

`ExtendedSegmentStack(size, graph, color)` keeps a stack of trailers, a
segment table, approximate edge indices for small vertices and exact ones
for big vertices.

- The `graph` object must provide `order()` and `degree(u)`.
- `color` is any mutable sequence of ints.

Besides `push`, `pop` and `is_aligned`, it offers:

- `is_in_top_segment(u, restoring)`
- `outgoing_edge(u)`
- `restore_trailer()`
- `top_trailer()`
- `recolor_low(value)`
- `approximate_edge(u, k)`
- `retrieve_edge(u, f)`

### `succinctkit.dyck`

Dyck words are read with a set bit as an opening parenthesis.

- `match_naive(word, idx)` finds the matching parenthesis by a linear scan.
  If there is no partner, it returns `idx`.
- `DyckMatchingStructure(word).match(idx)` does the same for a fixed word.

### `succinctkit.simpletrailstructure` and `succinctkit.trailstructure`

`SimpleTrailStructure(degree)` and `TrailStructure(degree)` keep the arc
bookkeeping for a single vertex while Euler partitions are built. Both
offer:

- `leave()` and `enter(i)`, which return the arc left by, or `None`.
- `matched(idx)` and `marry(i, o)`.
- `starting_arc()` and `has_starting_arc()`.
- `is_black()`, `is_grey()` and `is_even()`.

`TrailStructure` also has:

- `is_ending_arc(i)`.
- `matched_naive(idx)`.
- The read-only properties `degree`, `last_closed`, `dyck_start`,
  `in_and_out` and `matched_flags`.

Its `matched` answers for paired arcs only once the vertex is black.
Before that it raises `RuntimeError`; use `matched_naive` at any time.

## Example

```python
from succinctkit.rankselect import RankSelect
from succinctkit.staticspacestorage import StaticSpaceStorage, make_bit_vector

rs = RankSelect([1, 0, 1, 1, 0, 0, 1])
rs.rank(4)    # 3 bits set among the first four
rs.select(2)  # position (1-based) of the second set bit: 3

store = StaticSpaceStorage(make_bit_vector([3, 5, 8]))
store.insert(1, 17)
store.get(1)  # 17
```

## What this package does not do

The package provides building blocks only. It does not include:

- graph classes;
- depth-first or breadth-first search drivers;
- an Euler-trail builder that walks a whole graph.

The segment stacks and trail structures are meant to be driven by such
code, which you supply yourself. There is no command-line tool.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```