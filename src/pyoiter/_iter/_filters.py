from __future__ import annotations

import itertools
import math
import sys
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

import cytoolz as cz
import more_itertools as mit

from .._errors import check_callable
from .._numeric import is_nan, to_positive_integer
from .._protocol import close_iterator, get_iterator
from ._common import CommonMethods

if TYPE_CHECKING:
    from ._main import Iter


class BaseFilter[T](CommonMethods[T]):
    __slots__ = ()

    def take(self, n: int | float = math.inf) -> Iter[T]:
        """Yield the first n elements, or fewer if the underlying iterator ends sooner.

        **n** goes through `to_positive_integer`: negative values take nothing, and the value following the last one taken is never pulled.

        Args:
            n (int | float): Number of elements to take. Defaults to infinity.

        Returns:
            Iter[T]: An iterable of the first n items.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.count().take(3).to_list()
        [0, 1, 2]
        >>> po.Iter(1, 2).take(5).to_list()
        [1, 2]
        >>> po.Iter(1, 2).take(-1).to_list()
        []

        ```
        """
        iterator = get_iterator(self)

        def _take() -> Iterator[T]:
            count = to_positive_integer(n)
            try:
                if is_nan(count):
                    return
                # islice bounds are limited to sys.maxsize
                if count > sys.maxsize:
                    yield from iterator
                else:
                    yield from cz.itertoolz.take(count, iterator)
            finally:
                close_iterator(iterator)

        return self._lazy(_take)

    def take_while(self, predicate: Callable[[T], Any] = bool) -> Iter[T]:
        """Take items while predicate holds.

        The first failing item, and everything after it, are discarded.

        Args:
            predicate (Callable[[T], Any]): Function to evaluate each item. Defaults to `bool`.

        Returns:
            Iter[T]: An iterable of the items taken while the predicate is true.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2, 0, 3).take_while(lambda x: x > 0).to_list()
        [1, 2]

        ```
        """
        check_callable(predicate)
        iterator = get_iterator(self)

        def _take_while() -> Iterator[T]:
            try:
                yield from itertools.takewhile(predicate, iterator)
            finally:
                close_iterator(iterator)

        return self._lazy(_take_while)

    def drop(self, n: int | float = math.inf) -> Iter[T]:
        """Drop the first n elements and yield the rest.

        Args:
            n (int | float): Number of elements to drop. Defaults to infinity.

        Returns:
            Iter[T]: An iterable of the items after the first n ones.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2, 3).drop(1).to_list()
        [2, 3]
        >>> po.Iter(1, 2, 3).drop().to_list()
        []

        ```
        """
        iterator = get_iterator(self)

        def _drop() -> Iterator[T]:
            count = to_positive_integer(n)
            try:
                if is_nan(count):
                    yield from iterator
                elif count > sys.maxsize:
                    mit.consume(iterator)
                else:
                    yield from cz.itertoolz.drop(count, iterator)
            finally:
                close_iterator(iterator)

        return self._lazy(_drop)

    def drop_while(self, predicate: Callable[[T], Any] = bool) -> Iter[T]:
        """Drop items while predicate holds.

        The first failing item is yielded, then all the remaining ones, without calling the predicate anymore.

        Args:
            predicate (Callable[[T], Any]): Function to evaluate each item. Defaults to `bool`.

        Returns:
            Iter[T]: An iterable of the items after skipping those for which the predicate is true.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2, 0, 3).drop_while(lambda x: x > 0).to_list()
        [0, 3]

        ```
        """
        check_callable(predicate)
        iterator = get_iterator(self)

        def _drop_while() -> Iterator[T]:
            try:
                yield from itertools.dropwhile(predicate, iterator)
            finally:
                close_iterator(iterator)

        return self._lazy(_drop_while)

    def filter(self, predicate: Callable[[T], Any] = bool) -> Iter[T]:
        """Yield only the elements for which the predicate is truthy.

        Args:
            predicate (Callable[[T], Any]): Function to evaluate each item. Defaults to `bool`.

        Returns:
            Iter[T]: An iterable of the items that satisfy the predicate.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2, 3).filter(lambda x: x > 1).to_list()
        [2, 3]
        >>> po.Iter(0, "", "a", None).filter().to_list()
        ['a']

        ```
        """
        check_callable(predicate)
        iterator = get_iterator(self)

        def _filter() -> Iterator[T]:
            try:
                for value in iterator:
                    if predicate(value):
                        yield value
            finally:
                close_iterator(iterator)

        return self._lazy(_filter)

    def filter_false(self, predicate: Callable[[T], Any] = bool) -> Iter[T]:
        """Return elements for which the predicate is falsy.

        Args:
            predicate (Callable[[T], Any]): Function to evaluate each item. Defaults to `bool`.

        Returns:
            Iter[T]: An iterable of the items that do not satisfy the predicate.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2, 3).filter_false(lambda x: x > 1).to_list()
        [1]

        ```
        """
        check_callable(predicate)
        iterator = get_iterator(self)

        def _filter_false() -> Iterator[T]:
            try:
                yield from itertools.filterfalse(predicate, iterator)
            finally:
                close_iterator(iterator)

        return self._lazy(_filter_false)
