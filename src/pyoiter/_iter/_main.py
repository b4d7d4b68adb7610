from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator

from .. import _protocol
from .._errors import check_callable
from .._numeric import integer_or, to_integer, to_positive_integer
from ._combinatorics import BaseCombinatorics
from ._filters import BaseFilter
from ._maps import BaseMap
from ._zips import BaseZip


class Iter[T](BaseZip[T], BaseFilter[T], BaseMap[T], BaseCombinatorics[T]):
    """A lazy `Iterable` wrapper, providing a fluent set of composable transformations.

    - An `Iterable` is any object capable of returning its members one at a time, permitting it to be iterated over in a for-loop.
    - An `Iterator` is an object representing a stream of data; returned by calling `iter()` on an `Iterable`.
    - Once an `Iterator` is exhausted, it cannot be reused or reset.

    An `Iter` holds a single way of obtaining an `Iterator`, and every `iter()` call on it goes through it:

    - The standard constructor wraps unpacked values, and always hands out the same `Iterator` over them: it is single-use.
    - `Iter.from_` delegates to any `Iterable`, and is as reusable as its source.
    - `Iter.from_generator` calls a factory, usually a generator function, for each traversal.

    Methods never mutate the instance, they return a new `Iter`.

    Combinators request the iterators of their sources when called, and pull from them only when their own values are requested.

    When a combinator stops, whether exhausted, failing, or closed by its consumer, it closes the iterators it pulls from.

    Args:
        *values (T): The values to iterate over.
    """

    __slots__ = ()

    def __init__(self, *values: T) -> None:
        iterator = iter(values)

        def _values() -> Iterator[T]:
            return iterator

        self._factory = _values

    @staticmethod
    def from_[U](iterable: Iterable[U]) -> Iter[U]:
        """Wrap any `Iterable`, delegating each iterator request to it.

        A `list` source gives a reusable `Iter`, a generator source a single-use one.

        Args:
            iterable (Iterable[U]): The source to wrap.

        Returns:
            Iter[U]: A new Iter instance over the source.

        Raises:
            NotIterableError: If **iterable** is not iterable.

        Example:
        ```python
        >>> import pyoiter as po
        >>> it = po.Iter.from_([1, 2])
        >>> it.to_list(), it.to_list()
        ([1, 2], [1, 2])
        >>> it = po.Iter.from_(x for x in [1, 2])
        >>> it.to_list(), it.to_list()
        ([1, 2], [])

        ```
        """
        _protocol.check_iterables(iterable)

        def _from() -> Iterator[U]:
            return iter(iterable)

        return Iter.from_generator(_from)

    @staticmethod
    def from_generator[U](factory: Callable[[], Iterator[U]]) -> Iter[U]:
        """Wrap a factory called each time an iterator is requested.

        Args:
            factory (Callable[[], Iterator[U]]): A zero-argument callable returning a fresh iterator, typically a generator function.

        Returns:
            Iter[U]: A new Iter instance over the produced iterators.

        Raises:
            NotCallableError: If **factory** is not callable.

        Example:
        ```python
        >>> import pyoiter as po
        >>> def squares():
        ...     for x in range(3):
        ...         yield x * x
        >>> it = po.Iter.from_generator(squares)
        >>> it.to_list(), it.to_list()
        ([0, 1, 4], [0, 1, 4])

        ```
        """
        check_callable(factory)
        instance: Iter[U] = Iter.__new__(Iter)
        instance._factory = factory
        return instance

    is_iterable = staticmethod(_protocol.is_iterable)
    is_iterator = staticmethod(_protocol.is_iterator)
    is_multi_iterable = staticmethod(_protocol.is_multi_iterable)
    is_closable = staticmethod(_protocol.is_closable)
    get_iterator = staticmethod(_protocol.get_iterator)
    close_iterator = staticmethod(_protocol.close_iterator)
    close_all_iterators = staticmethod(_protocol.close_all_iterators)

    @staticmethod
    def range(
        start: int | float,
        end: int | float | None = None,
        step: int | float | None = None,
    ) -> Iter[int]:
        """Create an `Iter` of evenly spaced integers, from **start** up to **end** excluded.

        With a single argument, counts from 0 up to it.

        Every bound is truncated to an integer.

        The step defaults to 1 or -1 depending on the direction, a zero step does the same.

        Args:
            start (int | float): First value, or the end if **end** is omitted.
            end (int | float | None): Excluded bound. Defaults to None.
            step (int | float | None): Difference between consecutive values. Defaults to None.

        Returns:
            Iter[int]: A reusable iterator of integers.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.range(4).to_list()
        [0, 1, 2, 3]
        >>> po.Iter.range(5, 0).to_list()
        [5, 4, 3, 2, 1]
        >>> po.Iter.range(0, 10, 3.9).to_list()
        [0, 3, 6, 9]
        >>> po.Iter.range(0, 3, 0).to_list()
        [0, 1, 2]

        ```
        """

        def _range() -> Iterator[int]:
            current, stop = to_integer(start), to_integer(end)
            if end is None:
                current, stop = 0, current
            default = 1 if current < stop else -1
            increment = integer_or(step, default)
            if increment > 0:
                while current < stop:
                    yield current
                    current += increment
            else:
                while current > stop:
                    yield current
                    current += increment

        return Iter.from_generator(_range)

    @staticmethod
    def count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iterator` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use `Iter.take()` or `Iter.take_while()` to limit the number of items taken.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.count(10, 2).take(3).to_list()
        [10, 12, 14]
        >>> po.Iter.count(3, -1).take(3).to_list()
        [3, 2, 1]

        ```
        """

        def _count() -> Iterator[int]:
            current = integer_or(start, 0)
            increment = integer_or(step, 1)
            while True:
                yield current
                current += increment

        return Iter.from_generator(_count)

    @staticmethod
    def cycle[U](iterable: Iterable[U]) -> Iter[U]:
        """Yield the values of **iterable**, then repeat them indefinitely.

        The values are buffered as they are produced, so an infinite source is never repeated.

        **Warning** ⚠️
            This creates an infinite iterator, unless the source is empty.

        Args:
            iterable (Iterable[U]): The source to repeat.

        Returns:
            Iter[U]: An iterator cycling through the values.

        Raises:
            NotIterableError: If **iterable** is not iterable.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.cycle([1, 2]).take(5).to_list()
        [1, 2, 1, 2, 1]

        ```
        """
        iterator = _protocol.get_iterator(iterable)

        def _cycle() -> Iterator[U]:
            saved: list[U] = []
            try:
                for value in iterator:
                    yield value
                    saved.append(value)
            finally:
                _protocol.close_iterator(iterator)
            if not saved:
                return
            while True:
                yield from saved

        return Iter.from_generator(_cycle)

    @staticmethod
    def repeat[U](value: U, times: int | float = math.inf) -> Iter[U]:
        """Yield **value** a given number of times, or forever.

        Args:
            value (U): The value to repeat.
            times (int | float): Number of repetitions, see `to_positive_integer`. Defaults to infinity.

        Returns:
            Iter[U]: An iterator of the repeated value.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.repeat("x", 3).to_list()
        ['x', 'x', 'x']
        >>> po.Iter.repeat("x").take(2).to_list()
        ['x', 'x']

        ```
        """

        def _repeat() -> Iterator[U]:
            remaining = to_positive_integer(times)
            while remaining > 0:
                yield value
                remaining -= 1

        return Iter.from_generator(_repeat)
