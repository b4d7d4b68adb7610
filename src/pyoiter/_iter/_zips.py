from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, overload

from .._protocol import check_iterables, close_all_iterators, close_iterator, get_iterator
from ._common import MISSING, CommonMethods

if TYPE_CHECKING:
    from ._main import Iter


class BaseZip[T](CommonMethods[T]):
    __slots__ = ()

    def _iterators(self, *others: Iterable[Any]) -> list[Iterator[Any]]:
        check_iterables(*others)
        return [get_iterator(it) for it in (self, *others)]

    @overload
    def zip[T1](self, iter1: Iterable[T1], /) -> Iter[tuple[T, T1]]: ...
    @overload
    def zip[T1, T2](
        self, iter1: Iterable[T1], iter2: Iterable[T2], /
    ) -> Iter[tuple[T, T1, T2]]: ...
    @overload
    def zip(self, *others: Iterable[Any]) -> Iter[tuple[Any, ...]]: ...
    def zip(self, *others: Iterable[Any]) -> Iter[tuple[Any, ...]]:
        """Yields n-length tuples, where n is the number of iterables, this one included.

        The i-th element in every tuple comes from the i-th iterable.

        This stops as soon as any iterable is exhausted, and every participating iterator is then closed.

        The iterators are requested immediately, the values are produced lazily.

        Args:
            *others (Iterable[Any]): Other iterables to zip with.

        Returns:
            Iter[tuple[Any, ...]]: An `Iter` of tuples.

        Raises:
            NotIterableError: If one of **others** is not iterable.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2).zip([10, 20]).to_list()
        [(1, 10), (2, 20)]
        >>> po.Iter("a", "b").zip([1, 2, 3]).to_list()
        [('a', 1), ('b', 2)]

        ```
        """
        iterators = self._iterators(*others)

        def _zip() -> Iterator[tuple[Any, ...]]:
            try:
                while True:
                    values: list[Any] = []
                    for it in iterators:
                        value = next(it, MISSING)
                        if value is MISSING:
                            return
                        values.append(value)
                    yield tuple(values)
            finally:
                close_all_iterators(*iterators)

        return self._lazy(_zip)

    def longest_zip(
        self, *others: Iterable[Any], fillvalue: Any = None
    ) -> Iter[tuple[Any, ...]]:
        """Yields tuples like `Iter.zip`, until the longest iterable is exhausted.

        Exhausted iterables contribute **fillvalue** for the remaining steps, and are not pulled again.

        Args:
            *others (Iterable[Any]): Other iterables to zip with.
            fillvalue (Any): Placeholder for exhausted iterables. Defaults to `None`.

        Returns:
            Iter[tuple[Any, ...]]: An `Iter` of tuples.

        Raises:
            NotIterableError: If one of **others** is not iterable.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2, 3).longest_zip([10]).to_list()
        [(1, 10), (2, None), (3, None)]
        >>> po.Iter(1).longest_zip("ab", fillvalue=0).to_list()
        [(1, 'a'), (0, 'b')]

        ```
        """
        iterators = self._iterators(*others)

        def _longest_zip() -> Iterator[tuple[Any, ...]]:
            finished = [False] * len(iterators)
            remaining = len(iterators)
            try:
                while True:
                    values: list[Any] = []
                    for idx, it in enumerate(iterators):
                        value = MISSING if finished[idx] else next(it, MISSING)
                        if value is MISSING:
                            if not finished[idx]:
                                finished[idx] = True
                                remaining -= 1
                            value = fillvalue
                        values.append(value)
                    if not remaining:
                        return
                    yield tuple(values)
            finally:
                close_all_iterators(*iterators)

        return self._lazy(_longest_zip)

    def enumerate(self, start: int = 0) -> Iter[tuple[int, T]]:
        """Pair each value with a counter, starting at **start**.

        This is `Iter.count(start).zip(self)`, so **start** is truncated to an integer, and falls back to 0 if it has no usable value.

        Args:
            start (int): First index. Defaults to 0.

        Returns:
            Iter[tuple[int, T]]: An `Iter` of `(index, value)` tuples.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter("a", "b").enumerate(1.76).to_list()
        [(1, 'a'), (2, 'b')]
        >>> po.Iter("a", "b").enumerate(float("nan")).to_list()
        [(0, 'a'), (1, 'b')]

        ```
        """
        from ._main import Iter

        return Iter.count(start).zip(self)

    def chain(self, *others: Iterable[T]) -> Iter[T]:
        """Yield the values of this iterable, then of each of **others**, in order.

        The next iterable is not pulled before the previous one is exhausted.

        Args:
            *others (Iterable[T]): Iterables to concatenate.

        Returns:
            Iter[T]: The concatenated values.

        Raises:
            NotIterableError: If one of **others** is not iterable.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2).chain([3], (4, 5)).to_list()
        [1, 2, 3, 4, 5]

        ```
        """
        iterators = self._iterators(*others)

        def _chain() -> Iterator[T]:
            try:
                yield from itertools.chain(*iterators)
            finally:
                close_all_iterators(*iterators)

        return self._lazy(_chain)

    def compress(self, selectors: Iterable[Any]) -> Iter[T]:
        """Keep the values whose paired selector is truthy.

        Stops at the shorter of the two, like `Iter.zip`.

        Args:
            selectors (Iterable[Any]): Truthy or falsy values paired with this iterable.

        Returns:
            Iter[T]: The selected values.

        Raises:
            NotIterableError: If **selectors** is not iterable.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.from_("ABCDEF").compress([1, 0, 1, 0, 1, 1]).to_list()
        ['A', 'C', 'E', 'F']

        ```
        """
        zipped = get_iterator(self.zip(selectors))

        def _compress() -> Iterator[T]:
            try:
                for value, selected in zipped:
                    if selected:
                        yield value
            finally:
                close_iterator(zipped)

        return self._lazy(_compress)

    def _zip_with(
        self,
        zipper: Callable[..., Iter[tuple[Any, ...]]],
        args: tuple[Any, ...],
    ) -> Iter[Any]:
        if not args or not callable(args[-1]):
            return zipper(*args)
        func = args[-1]
        zipped = get_iterator(zipper(*args[:-1]))

        def _zip_map() -> Iterator[Any]:
            try:
                for values in zipped:
                    yield func(*values)
            finally:
                close_iterator(zipped)

        return self._lazy(_zip_map)

    def zip_map(self, *args: Any) -> Iter[Any]:
        """Zip with the given iterables, and spread each tuple into a function.

        If the last argument is callable, it receives one positional argument per zipped iterable and its results are yielded.

        Otherwise, this behaves exactly like `Iter.zip`.

        Args:
            *args (Any): Iterables to zip with, optionally followed by the function.

        Returns:
            Iter[Any]: The function results, or the zipped tuples.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2, 3).zip_map([10, 20], lambda x, y: x + y).to_list()
        [11, 22]
        >>> po.Iter(1, 2).zip_map([3, 4]).to_list()
        [(1, 3), (2, 4)]

        ```
        """
        return self._zip_with(self.zip, args)

    def longest_zip_map(self, *args: Any, fillvalue: Any = None) -> Iter[Any]:
        """Like `Iter.zip_map`, but zipping with `Iter.longest_zip`.

        Args:
            *args (Any): Iterables to zip with, optionally followed by the function.
            fillvalue (Any): Placeholder for exhausted iterables. Defaults to `None`.

        Returns:
            Iter[Any]: The function results, or the zipped tuples.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1).longest_zip_map([1, 2], [1, 2, 3], lambda x, y, z: z).to_list()
        [1, 2, 3]
        >>> po.Iter(1).longest_zip_map([5, 6], lambda x, y: x + y, fillvalue=0).to_list()
        [6, 6]

        ```
        """

        def _longest_zip(*others: Iterable[Any]) -> Iter[tuple[Any, ...]]:
            return self.longest_zip(*others, fillvalue=fillvalue)

        return self._zip_with(_longest_zip, args)
