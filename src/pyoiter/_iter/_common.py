from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Concatenate

import more_itertools as mit

from .._core import Pipeable, get_config

if TYPE_CHECKING:
    from ._main import Iter


MISSING: Any = object()
"""Exhaustion marker for `next(iterator, MISSING)` calls."""


class CommonMethods[T](Pipeable, Iterable[T]):
    _factory: Callable[[], Iterator[T]]

    __slots__ = ("_factory",)

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._factory)})"

    def _lazy[U](self, factory: Callable[[], Iterator[U]]) -> Iter[U]:
        from ._main import Iter

        return Iter.from_generator(factory)

    def to_list(self) -> list[T]:
        """Collect the remaining values into a `list`.

        This is a terminal operation.

        Returns:
            list[T]: The produced values, in order.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.range(4).to_list()
        [0, 1, 2, 3]
        >>> it = po.Iter(1, 2)
        >>> it.to_list(), it.to_list()
        ([1, 2], [])

        ```
        """
        return list(self)

    def collect[C: Collection[Any]](
        self, factory: Callable[[Iterable[T]], C] = tuple
    ) -> C:
        """Collect the values into a collection built by **factory**.

        Args:
            factory (Callable[[Iterable[T]], C]): The collection constructor. Defaults to `tuple`.

        Returns:
            C: The collected values.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.from_("abca").collect(set) == {"a", "b", "c"}
        True

        ```
        """
        return factory(self)

    def length(self) -> int:
        """Consume the values and count them.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.range(10).filter(lambda x: x % 3 == 0).length()
        4

        ```
        """
        return mit.ilen(self)

    def for_each[**P](
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Consume the values by applying a function to each of them.

        Args:
            func (Callable[Concatenate[T, P], Any]): Function to apply to each element.
            *args (P.args): Positional arguments for the function.
            **kwargs (P.kwargs): Keyword arguments for the function.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(1, 2, 3).for_each(lambda x, sep: print(x, x * 2, sep=sep), sep=":")
        1:2
        2:4
        3:6

        ```
        """
        for value in self:
            func(value, *args, **kwargs)
