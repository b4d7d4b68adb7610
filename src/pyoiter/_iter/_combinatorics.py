from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from .._numeric import is_nan, to_positive_integer
from .._protocol import check_iterables, close_iterator, get_iterator, is_multi_iterable
from ._common import CommonMethods

if TYPE_CHECKING:
    from ._main import Iter


class BaseCombinatorics[T](CommonMethods[T]):
    """Combinatorial generators.

    Generating requires traversing the data more than once, so each method materializes it when called.
    """

    __slots__ = ()

    def product(self, *others: Iterable[Any]) -> Iter[tuple[Any, ...]]:
        """Computes the Cartesian product with other iterables.

        This is the declarative equivalent of nested for-loops: the rightmost iterable advances fastest.

        Multi-iterable inputs are traversed again for each outer value, others are collected into a tuple first.

        Args:
            *others (Iterable[Any]): Other iterables to compute the Cartesian product with.

        Returns:
            Iter[tuple[Any, ...]]: An iterable of tuples containing elements from the Cartesian product.

        Raises:
            NotIterableError: If one of **others** is not iterable.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2).product([3, 4]).to_list()
        [(1, 3), (1, 4), (2, 3), (2, 4)]
        >>> po.Iter("ab").product().to_list()
        [('ab',)]

        ```
        """
        check_iterables(*others)
        pools = [
            it if is_multi_iterable(it) else tuple(it) for it in (self, *others)
        ]

        def _product() -> Iterator[tuple[Any, ...]]:
            result: list[Any] = [None] * len(pools)

            def _fill(idx: int) -> Iterator[tuple[Any, ...]]:
                if idx >= len(pools):
                    yield tuple(result)
                    return
                iterator = get_iterator(pools[idx])
                try:
                    for value in iterator:
                        result[idx] = value
                        yield from _fill(idx + 1)
                finally:
                    close_iterator(iterator)

            yield from _fill(0)

        return self._lazy(_product)

    def permutations(self, r: int | None = None) -> Iter[tuple[T, ...]]:
        """Return successive r-length permutations of elements.

        Elements are picked by position, without repetition, in depth-first order over their original order.

        Args:
            r (int | None): Length of each permutation, clamped to the number of elements. Defaults to all elements.

        Returns:
            Iter[tuple[T, ...]]: An iterable of permutations.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2, 3).permutations(2).to_list()
        [(1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2)]
        >>> po.Iter("a", "b").permutations().to_list()
        [('a', 'b'), ('b', 'a')]

        ```
        """
        pool = tuple(self)
        size = to_positive_integer(r)
        length = len(pool) if is_nan(size) else min(size, len(pool))

        def _permutations() -> Iterator[tuple[T, ...]]:
            return itertools.permutations(pool, length)

        return self._lazy(_permutations)

    def combinations(self, r: int) -> Iter[tuple[T, ...]]:
        """Return r-length subsequences of elements, in lexicographic order of their positions.

        Args:
            r (int): Length of each combination.

        Returns:
            Iter[tuple[T, ...]]: An iterable of combinations, empty if **r** exceeds the number of elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2, 3).combinations(2).to_list()
        [(1, 2), (1, 3), (2, 3)]
        >>> po.Iter(1, 2).combinations(3).to_list()
        []

        ```
        """
        pool = tuple(self)
        length = to_positive_integer(r)

        def _combinations() -> Iterator[tuple[T, ...]]:
            if is_nan(length) or length > len(pool):
                return iter(())
            return itertools.combinations(pool, length)

        return self._lazy(_combinations)
