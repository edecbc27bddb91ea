# querychain

Lazy, chainable query operations over any Python iterable.

`querychain.query.Query` wraps an iterable. Nothing runs until the query is
iterated. Each operation returns a new `Query`, so steps chain together.
Every iteration starts again from the source. A query built over a list, a
string or another query can therefore be consumed any number of times. A
query built over a one-shot iterator or generator can be consumed only once.

## Installation

```
pip install querychain
```

## Usage

```python
from querychain.query import Query

fruits = ["apple", "passionfruit", "banana", "mango",
          "orange", "blueberry", "grape", "strawberry"]

Query(fruits).where(lambda f: len(f) > 6).results()
# ['passionfruit', 'blueberry', 'strawberry']

Query([[1, 2, 3], [4, 5, 6, 7]]).select_many(Query).results()
# [1, 2, 3, 4, 5, 6, 7]

Query([59, 82, 70, 56, 92, 98, 85]).skip(3).take(2).results()
# [56, 92]

Query([1, 2, 3]).union(Query([2, 4, 5, 1])).results()
# [1, 2, 3, 4, 5]

Query([1, 2, 3, 4, 5]).zip(["one", "two", "three"], lambda a, b: (a, b)).results()
# [(1, 'one'), (2, 'two'), (3, 'three')]
```

## Operations

| Method | What it does |
| --- | --- |
| `where(predicate)` / `where_indexed(predicate)` | Keeps the items for which the predicate is true. The indexed form receives `(index, item)`, where the index is the item's position in the source. |
| `select_many(selector)` / `select_many_indexed(selector)` | Maps each item to an iterable and flattens the results. The indexed form receives `(index, item)`. |
| `select_many_by(selector, result_selector)` / `select_many_by_indexed(selector, result_selector)` | Flattens in the same way, then yields `result_selector(inner_item, outer_item)` for each result. |
| `skip(count)` | Drops the first `count` items. A negative count drops nothing. |
| `skip_while(predicate)` / `skip_while_indexed(predicate)` | Drops leading items while the predicate holds. Once the predicate returns false, it is not called again. |
| `take(count)` | Yields at most the first `count` items. A negative count yields nothing. |
| `take_while(predicate)` / `take_while_indexed(predicate)` | Yields leading items while the predicate holds and stops at the first failure. |
| `union(other)` | Yields the items of both sequences without duplicates, in order of first appearance. Items must be hashable. |
| `zip(other, result_selector)` | Combines items pairwise and stops at the end of the shorter sequence. |
| `results()` | Collects the items into a list. |

`other` may be any iterable, including another `Query`. A `Query` is itself
iterable, so it works with `for` loops, `list()` and any function that takes
an iterable.

## What it does not do

The package provides only the operations listed above. It has no ordering,
grouping, joining, aggregation or element-access operations, such as sorting,
grouping by key, counting, summing, or taking the first or last item. For
these, use Python's built-ins and `itertools` on a `Query` or on its
`results()`.

## Running the tests

```
pip install -e ".[test]"
pytest
```