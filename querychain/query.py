"""Lazy, re-iterable query chains over arbitrary iterables."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Any


class _Deferred:
    """An iterable that rebuilds its iterator from a factory on every pass."""

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Iterator[Any]]) -> None:
        self._factory = factory

    def __iter__(self) -> Iterator[Any]:
        return self._factory()


class Query:
    """A lazily evaluated sequence of items that can be iterated many times.

    Each operator returns a new ``Query``; no work is done until the query is
    iterated. Iterating a query starts again from its source, so a query built
    over a re-iterable source (a list, a string, another query) can be
    consumed any number of times.
    """

    def __init__(self, source: Iterable[Any]) -> None:
        self._source = source

    def __iter__(self) -> Iterator[Any]:
        return iter(self._source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"

    @classmethod
    def _lazy(cls, factory: Callable[[], Iterator[Any]]) -> "Query":
        return cls(_Deferred(factory))

    def results(self) -> list[Any]:
        """Iterate the query and collect its items into a list."""
        return list(self)

    # Projection -----------------------------------------------------------

    def select_many(self, selector: Callable[[Any], Iterable[Any]]) -> "Query":
        """Map each item to an iterable and flatten the results."""

        def run() -> Iterator[Any]:
            for outer in self:
                yield from selector(outer)

        return self._lazy(run)

    def select_many_indexed(
        self, selector: Callable[[int, Any], Iterable[Any]]
    ) -> "Query":
        """Like :meth:`select_many`, with the item's zero-based index passed first."""

        def run() -> Iterator[Any]:
            for index, outer in enumerate(self):
                yield from selector(index, outer)

        return self._lazy(run)

    def select_many_by(
        self,
        selector: Callable[[Any], Iterable[Any]],
        result_selector: Callable[[Any, Any], Any],
    ) -> "Query":
        """Flatten as :meth:`select_many`, then map each ``(inner, outer)`` pair."""

        def run() -> Iterator[Any]:
            for outer in self:
                for inner in selector(outer):
                    yield result_selector(inner, outer)

        return self._lazy(run)

    def select_many_by_indexed(
        self,
        selector: Callable[[int, Any], Iterable[Any]],
        result_selector: Callable[[Any, Any], Any],
    ) -> "Query":
        """Like :meth:`select_many_by`, with the outer index passed to ``selector``."""

        def run() -> Iterator[Any]:
            for index, outer in enumerate(self):
                for inner in selector(index, outer):
                    yield result_selector(inner, outer)

        return self._lazy(run)

    # Partitioning ---------------------------------------------------------

    def skip(self, count: int) -> "Query":
        """Bypass the first ``count`` items and yield the rest."""
        start = max(count, 0)
        return self._lazy(lambda: islice(self, start, None))

    def skip_while(self, predicate: Callable[[Any], bool]) -> "Query":
        """Skip items while ``predicate`` holds, then yield everything after.

        The predicate is not called again once it has returned false.
        """

        def run() -> Iterator[Any]:
            items = iter(self)
            for item in items:
                if not predicate(item):
                    yield item
                    break
            yield from items

        return self._lazy(run)

    def skip_while_indexed(self, predicate: Callable[[int, Any], bool]) -> "Query":
        """Like :meth:`skip_while`, with the item's index passed first."""

        def run() -> Iterator[Any]:
            items = iter(self)
            for index, item in enumerate(items):
                if not predicate(index, item):
                    yield item
                    break
            yield from items

        return self._lazy(run)

    def take(self, count: int) -> "Query":
        """Yield at most the first ``count`` items."""
        stop = max(count, 0)
        return self._lazy(lambda: islice(self, stop))

    def take_while(self, predicate: Callable[[Any], bool]) -> "Query":
        """Yield items while ``predicate`` holds and stop at the first failure."""

        def run() -> Iterator[Any]:
            for item in self:
                if not predicate(item):
                    return
                yield item

        return self._lazy(run)

    def take_while_indexed(self, predicate: Callable[[int, Any], bool]) -> "Query":
        """Like :meth:`take_while`, with the item's index passed first."""

        def run() -> Iterator[Any]:
            for index, item in enumerate(self):
                if not predicate(index, item):
                    return
                yield item

        return self._lazy(run)

    # Sets -----------------------------------------------------------------

    def union(self, other: Iterable[Any]) -> "Query":
        """Yield the distinct items of this query followed by new ones of ``other``.

        Items must be hashable.
        """

        def run() -> Iterator[Any]:
            seen: set[Any] = set()
            for source in (self, other):
                for item in source:
                    if item not in seen:
                        seen.add(item)
                        yield item

        return self._lazy(run)

    # Filtering ------------------------------------------------------------

    def where(self, predicate: Callable[[Any], bool]) -> "Query":
        """Yield only the items for which ``predicate`` returns true."""
        return self._lazy(lambda: (item for item in self if predicate(item)))

    def where_indexed(self, predicate: Callable[[int, Any], bool]) -> "Query":
        """Like :meth:`where`, with each item's index in the source passed first."""
        return self._lazy(
            lambda: (item for index, item in enumerate(self) if predicate(index, item))
        )

    # Combining ------------------------------------------------------------

    def zip(
        self, other: Iterable[Any], result_selector: Callable[[Any, Any], Any]
    ) -> "Query":
        """Combine corresponding items; stop at the end of the shorter sequence."""
        return self._lazy(
            lambda: (result_selector(a, b) for a, b in zip(self, other))
        )