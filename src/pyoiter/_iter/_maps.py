from __future__ import annotations

import itertools
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

import cytoolz as cz

from .._errors import check_callable
from .._protocol import close_iterator, get_iterator
from .._types import Group
from ._common import CommonMethods

if TYPE_CHECKING:
    from ._main import Iter


class BaseMap[T](CommonMethods[T]):
    __slots__ = ()

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply a function to each element.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2).map(lambda x: x + 1).to_list()
        [2, 3]

        ```
        """
        check_callable(func)
        iterator = get_iterator(self)

        def _map() -> Iterator[R]:
            try:
                for value in iterator:
                    yield func(value)
            finally:
                close_iterator(iterator)

        return self._lazy(_map)

    def spread_map[R](self: BaseMap[Iterable[Any]], func: Callable[..., R]) -> Iter[R]:
        """Apply a function to each element, spreading it as positional arguments.

        Each element must itself be iterable, typically a tuple.

        Args:
            func (Callable[..., R]): Function receiving the unpacked elements.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Raises:
            NotCallableError: If **func** is not callable.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter((1, 2), (3, 4)).spread_map(lambda a, b: a * b).to_list()
        [2, 12]

        ```
        """
        check_callable(func)
        iterator = get_iterator(self)

        def _spread_map() -> Iterator[R]:
            try:
                for values in iterator:
                    yield func(*values)
            finally:
                close_iterator(iterator)

        return self._lazy(_spread_map)

    def accumulate(self, func: Callable[[T, T], T] = operator.add) -> Iter[T]:
        """Return cumulative application of binary op provided by the function.

        The first element is yielded unchanged, there is no initial value.

        Args:
            func (Callable[[T, T], T]): A binary function to apply cumulatively. Defaults to addition.

        Returns:
            Iter[T]: A new Iterable wrapper with accumulated results.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2, 3).accumulate().to_list()
        [1, 3, 6]
        >>> po.Iter(1, 5, 2).accumulate(max).to_list()
        [1, 5, 5]

        ```
        """
        check_callable(func)
        iterator = get_iterator(self)

        def _accumulate() -> Iterator[T]:
            try:
                yield from cz.itertoolz.accumulate(func, iterator)
            finally:
                close_iterator(iterator)

        return self._lazy(_accumulate)

    def group_by[K](
        self, key: Callable[[T], K] = cz.functoolz.identity
    ) -> Iter[Group[K, T]]:
        """Group consecutive elements sharing the same key.

        A new group starts each time the key differs from the previous one, so equal keys separated by another one produce distinct groups.

        Args:
            key (Callable[[T], K]): Function computing the key of each element. Defaults to the identity.

        Returns:
            Iter[Group[K, T]]: An iterator of `(key, values)` groups.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.from_("AAABBA").group_by().to_list()
        [('A', ['A', 'A', 'A']), ('B', ['B', 'B']), ('A', ['A'])]
        >>> po.Iter(1, 3, 2, 4).group_by(lambda x: x % 2).map(lambda g: g.values).to_list()
        [[1, 3], [2, 4]]

        ```
        """
        check_callable(key)
        iterator = get_iterator(self)

        def _group_by() -> Iterator[Group[K, T]]:
            try:
                yield from (
                    Group(k, list(g)) for k, g in itertools.groupby(iterator, key)
                )
            finally:
                close_iterator(iterator)

        return self._lazy(_group_by)
