# sparkmatch

Pairing algorithms for matching people up, plus a few supporting pieces:
result and record types for a matching service, and a small thread pool.
Pure Python, no third-party dependencies.

## Algorithms

| Class | Module | Problem | Complexity |
|-------|--------|---------|------------|
| `GaleShapley` | `sparkmatch.gale_shapley` | Stable matching between two equal-sized groups (group A proposes) | O(n²) |
| `HopcroftKarp` | `sparkmatch.hopcroft_karp` | Maximum-cardinality bipartite matching | O(E·√V) |
| `Hungarian` | `sparkmatch.hungarian` | Maximum-total-score square assignment | O(n³) |
| `Blossom` | `sparkmatch.blossom` | Maximum-cardinality matching on a general graph | O(V³) |

In every matching result, `-1` marks a person left unmatched.

### Stable matching

```python
from sparkmatch.gale_shapley import GaleShapley

men = [[0, 1], [0, 1]]      # each row: preferred partners, best first
women = [[1, 0], [0, 1]]

gs = GaleShapley(men, women)
gs.run()
print(gs.matching_a)   # [1, 0]
print(gs.matching_b)   # [1, 0]
print(gs.is_stable())  # True
```

Each preference list must be a permutation of the other group's indices and
both groups must be the same size; otherwise the constructor raises
`ValueError`. `run()` recomputes from scratch and may be called again.
`matching` is an alias for `matching_a`. Calling `is_stable()` before `run()`
raises `RuntimeError`.

### Maximum bipartite matching

```python
from sparkmatch.hopcroft_karp import HopcroftKarp

hk = HopcroftKarp(3, 2)          # 3 left vertices, 2 right vertices
hk.add_compatible_pair(0, 0)
hk.add_compatible_pair(1, 0)
hk.add_compatible_pair(1, 1)
hk.add_compatible_pair(2, 1)
print(hk.max_matching())  # 2
print(hk.matching)        # matching[a] = b, or -1
```

`add_compatible_pair()` raises `IndexError` for a vertex out of range.

### Optimal assignment

```python
from sparkmatch.hungarian import Hungarian

h = Hungarian([[1, 10], [10, 1]])
h.solve()
print(h.max_score)   # 20
print(h.assignment)  # [1, 0]
```

The score matrix must be square and non-empty (`ValueError` otherwise).
The assignment maximises the total score.

### General graph matching

```python
from sparkmatch.blossom import Blossom

b = Blossom(3)
b.add_compatible_pair(0, 1)
b.add_compatible_pair(1, 2)
b.add_compatible_pair(0, 2)
print(b.max_matching())  # 1
print(b.matching)        # symmetric: matching[i] = j and matching[j] = i
```

Edges are undirected. `add_compatible_pair()` raises `IndexError` for a
vertex out of range and `ValueError` for a self-pair.

## Supporting modules

### `sparkmatch.db_types`

- `DbErrc`, an enum of error categories: `OK`, `NOT_FOUND`, `CONFLICT`,
  `UNAUTHORIZED`, `INVALID_INPUT`, `INTERNAL_ERROR`.
- `DbError`, a dataclass holding a `code` and a `message`.
- `db_ok(result)`, `db_value(result)` and `db_error(result)` for results that
  hold either a value or a `DbError`. `db_value` raises `ValueError` on an
  error and `db_error` raises `ValueError` on a value.
- Dataclass records: `RegisteredUser`, `LoginResult`, `UserSummary`,
  `UserProfile`, `UserListResult`, `UpdateFields`, `QuestionnaireAnswer`,
  `QuestionnaireSubmission`, `CompatibilityScore`, `Event`,
  `EventParticipant`, `EventRegistration`, `CreateEventInput`,
  `AlgorithmRunRecord`, `PersistRunInput`, `Match`, `Message`, `MessagePage`.

```python
from sparkmatch.db_types import DbErrc, DbError, db_ok, db_error

result = DbError(DbErrc.NOT_FOUND, "user not found")
print(db_ok(result))           # False
print(db_error(result).code)   # DbErrc.NOT_FOUND
```

### `sparkmatch.thread_pool`

`ThreadPool(thread_count=0)` starts a fixed number of worker threads
(`0` means one per CPU). `submit(fn, *args, **kwargs)` returns a
`concurrent.futures.Future`; `enqueue(task)` queues a callable taking no
arguments; `size()` and `pending()` report the worker count and the queue
length. `shutdown()` refuses new tasks, lets the workers finish what is
queued, and joins them; after that, `enqueue()` and `submit()` raise
`RuntimeError`. The pool is also a context manager that shuts down on exit.

```python
from sparkmatch.thread_pool import ThreadPool

with ThreadPool(4) as pool:
    future = pool.submit(pow, 6, 2)
    print(future.result())  # 36
```

## What this package does not do

There is no database access, no HTTP service and no command-line program.
`sparkmatch.db_types` only defines the records and result helpers; storing
and loading them, and serving matches over a network, are left to the
application that uses this package.

## Running the tests

```
pip install -e ".[test]"
pytest
```